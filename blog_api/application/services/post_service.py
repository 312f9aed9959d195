"""Post service - blog post management.

Sits between the HTTP routes and PostRepository. Validates incoming
data, turns missing rows into PostNotFoundError and serializes posts
into their JSON shape.
"""
from typing import Dict, List

import structlog

from ..exceptions import PostNotFoundError, PostValidationError
from ...infrastructure.repositories import PostRepository, UPDATABLE_FIELDS

log = structlog.get_logger()

REQUIRED_FIELDS = ("title", "content", "author")
REQUIRED_AUTHOR_FIELDS = ("firstName", "lastName")


class PostService:
    """Service for managing blog posts.

    Responsibilities:
    - List, fetch, create, update and delete posts
    - Check required fields on create
    - Check that the body id matches the path id on update
    """

    def __init__(self, post_repository: PostRepository):
        self.post_repo = post_repository

    # ========================================================================
    # Queries
    # ========================================================================

    def list_posts(self) -> List[Dict]:
        """Get all posts, serialized."""
        return [self.serialize(post) for post in self.post_repo.list()]

    def get_post(self, post_id: str) -> Dict:
        """Get one post, serialized.

        Raises:
            PostNotFoundError: No post with this id
        """
        post = self.post_repo.get(post_id)
        if not post:
            raise PostNotFoundError(post_id)
        return self.serialize(post)

    # ========================================================================
    # Commands
    # ========================================================================

    def create_post(self, data: Dict) -> Dict:
        """Create a post from request data.

        Args:
            data: Dict with author{firstName, lastName}, title, content

        Returns:
            Serialized post including its new id and created timestamp

        Raises:
            PostValidationError: A required field is missing or empty
        """
        self._require_fields(data)

        post = self.post_repo.create(
            author=data["author"],
            title=data["title"],
            content=data["content"]
        )
        log.info("post_created", post_id=post["id"])
        return self.serialize(post)

    def update_post(self, post_id: str, data: Dict) -> None:
        """Update title and/or content of a post.

        Args:
            post_id: Id from the request path
            data: Request body, must repeat the id

        Raises:
            PostValidationError: Body id missing or different from path id,
                or title/content sent as an empty string
            PostNotFoundError: No post with this id
        """
        body_id = data.get("id")
        if not body_id or body_id != post_id:
            raise PostValidationError(
                f"Request path id ({post_id}) and request body id ({body_id}) must match"
            )

        fields = {k: data[k] for k in UPDATABLE_FIELDS if data.get(k) is not None}
        for field, value in fields.items():
            if value == "":
                raise PostValidationError(f"Missing `{field}` in request body")

        if not self.post_repo.update(post_id, fields):
            raise PostNotFoundError(post_id)
        log.info("post_updated", post_id=post_id, fields=sorted(fields))

    def delete_post(self, post_id: str) -> None:
        """Delete a post.

        Raises:
            PostNotFoundError: No post with this id
        """
        if not self.post_repo.delete(post_id):
            raise PostNotFoundError(post_id)
        log.info("post_deleted", post_id=post_id)

    # ========================================================================
    # Helpers
    # ========================================================================

    @staticmethod
    def serialize(post: Dict) -> Dict:
        """Convert a stored post into its JSON shape."""
        created = post["created"]
        return {
            "id": post["id"],
            "author": {
                "firstName": post["author"]["firstName"],
                "lastName": post["author"]["lastName"],
            },
            "title": post["title"],
            "content": post["content"],
            "created": created.isoformat() if hasattr(created, "isoformat") else created,
        }

    @staticmethod
    def _require_fields(data: Dict) -> None:
        for field in REQUIRED_FIELDS:
            if field not in data or data[field] in (None, ""):
                raise PostValidationError(f"Missing `{field}` in request body")

        author = data["author"]
        if not isinstance(author, dict):
            raise PostValidationError("`author` must be an object")
        for field in REQUIRED_AUTHOR_FIELDS:
            if not author.get(field):
                raise PostValidationError(f"Missing `author.{field}` in request body")
