# Repository Pattern Implementation
"""
Repositories abstract database operations.
Each entity has its own repository.

Usage:
    repo = PostRepository(db)
    post = repo.get(post_id)
"""
from .base import Repository, ConnectionProtocol
from .post_repository import PostRepository, UPDATABLE_FIELDS

__all__ = [
    "Repository",
    "ConnectionProtocol",
    "PostRepository",
    "UPDATABLE_FIELDS",
]
