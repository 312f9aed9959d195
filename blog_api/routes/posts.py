"""Post routes - list, fetch, create, update and delete blog posts."""
from fastapi import APIRouter, Response
from pydantic import BaseModel, Field

from .. import database
from .deps import get_post_service

router = APIRouter()


class AuthorInput(BaseModel):
    firstName: str = Field(min_length=1)
    lastName: str = Field(min_length=1)


class PostCreate(BaseModel):
    author: AuthorInput
    title: str = Field(min_length=1)
    content: str


class PostUpdate(BaseModel):
    id: str | None = None
    title: str | None = Field(default=None, min_length=1)
    content: str | None = Field(default=None, min_length=1)


@router.get("/posts")
def list_posts():
    """Get all blog posts."""
    db = database.create_connection()
    try:
        service = get_post_service(db)
        return {"posts": service.list_posts()}
    finally:
        db.close()


@router.get("/posts/{post_id}")
def get_post(post_id: str):
    """Get a single blog post."""
    db = database.create_connection()
    try:
        service = get_post_service(db)
        return service.get_post(post_id)
    finally:
        db.close()


@router.post("/posts", status_code=201)
def create_post(data: PostCreate):
    """Create a blog post. The store assigns id and created."""
    db = database.create_connection()
    try:
        service = get_post_service(db)
        return service.create_post(data.model_dump())
    finally:
        db.close()


@router.put("/posts/{post_id}", status_code=204)
def update_post(post_id: str, data: PostUpdate):
    """Update title and/or content. The body must repeat the path id."""
    db = database.create_connection()
    try:
        service = get_post_service(db)
        service.update_post(post_id, data.model_dump(exclude_none=True))
        return Response(status_code=204)
    finally:
        db.close()


@router.delete("/posts/{post_id}", status_code=204)
def delete_post(post_id: str):
    """Delete a blog post."""
    db = database.create_connection()
    try:
        service = get_post_service(db)
        service.delete_post(post_id)
        return Response(status_code=204)
    finally:
        db.close()
