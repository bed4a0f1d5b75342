"""Version 1 API endpoints."""

from .endpoints import auth_router, posts_router, users_router, webhooks_router

__all__ = ["auth_router", "posts_router", "users_router", "webhooks_router"]
