"""Errors raised by the application layer.

Each error carries the HTTP status the API answers with. Exception
handlers in ``blog_api.main`` turn them into ``{"detail": ...}`` JSON.
"""


class BlogAPIError(Exception):
    """Base class for expected API errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PostValidationError(BlogAPIError):
    """Request body is missing a required field or is inconsistent."""

    status_code = 400


class PostNotFoundError(BlogAPIError):
    """No post exists with the requested id."""

    status_code = 404

    def __init__(self, post_id: str):
        super().__init__(f"Post not found: {post_id}")
        self.post_id = post_id
