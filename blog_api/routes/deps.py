"""Shared dependencies for post routes.

Factory functions for creating services with their repositories.
"""
from ..application.services import PostService
from ..infrastructure.repositories import PostRepository


def get_post_service(db) -> PostService:
    """Create PostService with repositories."""
    return PostService(
        post_repository=PostRepository(db)
    )
