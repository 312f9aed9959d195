"""HTTP routes package.

- posts: blog post CRUD endpoints
"""
from fastapi import APIRouter

from . import posts

router = APIRouter()

router.include_router(posts.router)

__all__ = ["router"]
