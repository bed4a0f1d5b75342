# src/chirpy/services/__init__.py
"""Business logic services for the Chirpy application."""

from .post_service import submit_post, to_post_out
from .profanity import clean_profane

__all__ = ["clean_profane", "submit_post", "to_post_out"]
