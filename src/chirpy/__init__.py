"""Chirpy: short posts and email/password accounts persisted in one JSON snapshot."""

__version__ = "0.1.0"
