"""Application layer - business logic services.

This layer contains application services that orchestrate domain operations.
Services are independent of HTTP/FastAPI and can be tested in isolation.
"""

from .exceptions import BlogAPIError, PostNotFoundError, PostValidationError
from .services.post_service import PostService

__all__ = [
    "BlogAPIError",
    "PostNotFoundError",
    "PostValidationError",
    "PostService",
]
