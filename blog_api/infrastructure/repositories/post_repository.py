"""Post repository - persistence for blog posts.

Posts are stored in a single table. The author is flattened into
``author_first_name`` / ``author_last_name`` columns and rebuilt into
a nested dict on the way out.
"""
import uuid
from datetime import datetime, timezone
from typing import Optional, List, Dict, Iterable

from .base import Repository

# Fields a PUT may change. Everything else is fixed at creation.
UPDATABLE_FIELDS = ("title", "content")


class PostRepository(Repository):
    """Repository for blog posts.

    Examples:
        >>> repo = PostRepository(db)
        >>> post = repo.create({"firstName": "Ada", "lastName": "Lovelace"}, "Notes", "...")
        >>> repo.update(post["id"], {"title": "Notes, revised"})
        True
        >>> repo.delete(post["id"])
        True
    """

    def list(self) -> List[Dict]:
        """Get all posts in creation order."""
        cursor = self._execute(
            "SELECT * FROM posts ORDER BY created, rowid"
        )
        return [self._row_to_post(row) for row in cursor.fetchall()]

    def get(self, post_id: str) -> Optional[Dict]:
        """Get post by ID.

        Args:
            post_id: Post UUID

        Returns:
            Post dict or None if it does not exist
        """
        cursor = self._execute(
            "SELECT * FROM posts WHERE id = ?",
            (post_id,)
        )
        row = cursor.fetchone()
        return self._row_to_post(row) if row else None

    def create(self, author: Dict, title: str, content: str) -> Dict:
        """Create a new post.

        Args:
            author: Dict with firstName and lastName
            title: Post title
            content: Post body

        Returns:
            The stored post including its new id and created timestamp
        """
        post = {
            "id": str(uuid.uuid4()),
            "author": {
                "firstName": author["firstName"],
                "lastName": author["lastName"],
            },
            "title": title,
            "content": content,
            "created": datetime.now(timezone.utc),
        }
        self._execute(
            """INSERT INTO posts
               (id, author_first_name, author_last_name, title, content, created)
               VALUES (?, ?, ?, ?, ?, ?)""",
            self._post_to_params(post)
        )
        self._commit()
        return post

    def insert_many(self, posts: Iterable[Dict]) -> List[str]:
        """Insert several posts in one transaction.

        Args:
            posts: Dicts with author, title and content

        Returns:
            New post ids, in input order
        """
        rows = []
        ids = []
        for data in posts:
            post = {
                "id": str(uuid.uuid4()),
                "author": data["author"],
                "title": data["title"],
                "content": data["content"],
                "created": datetime.now(timezone.utc),
            }
            rows.append(self._post_to_params(post))
            ids.append(post["id"])

        self._execute_many(
            """INSERT INTO posts
               (id, author_first_name, author_last_name, title, content, created)
               VALUES (?, ?, ?, ?, ?, ?)""",
            rows
        )
        self._commit()
        return ids

    def update(self, post_id: str, fields: Dict) -> bool:
        """Apply a partial update to title and/or content.

        Keys other than title and content are ignored. The update is a
        single statement, so overlapping writers are last-write-wins.

        Args:
            post_id: Post UUID
            fields: New values

        Returns:
            True if the post exists
        """
        changes = {k: fields[k] for k in UPDATABLE_FIELDS if fields.get(k) is not None}
        if not changes:
            return self.exists(post_id)

        assignments = ", ".join(f"{column} = ?" for column in changes)
        cursor = self._execute(
            f"UPDATE posts SET {assignments} WHERE id = ?",
            (*changes.values(), post_id)
        )
        self._commit()
        return cursor.rowcount > 0

    def delete(self, post_id: str) -> bool:
        """Delete post.

        Returns:
            True if the post existed and was deleted
        """
        cursor = self._execute(
            "DELETE FROM posts WHERE id = ?",
            (post_id,)
        )
        self._commit()
        return cursor.rowcount > 0

    def delete_all(self) -> int:
        """Delete every post.

        Returns:
            Number of posts deleted
        """
        cursor = self._execute("DELETE FROM posts")
        self._commit()
        return cursor.rowcount

    def exists(self, post_id: str) -> bool:
        """Check if post exists."""
        cursor = self._execute(
            "SELECT 1 FROM posts WHERE id = ?",
            (post_id,)
        )
        return cursor.fetchone() is not None

    def count(self) -> int:
        """Count stored posts."""
        cursor = self._execute("SELECT COUNT(*) FROM posts")
        return cursor.fetchone()[0]

    @staticmethod
    def _post_to_params(post: Dict) -> tuple:
        return (
            post["id"],
            post["author"]["firstName"],
            post["author"]["lastName"],
            post["title"],
            post["content"],
            post["created"],
        )

    @staticmethod
    def _row_to_post(row) -> Dict:
        data = dict(row)
        return {
            "id": data["id"],
            "author": {
                "firstName": data["author_first_name"],
                "lastName": data["author_last_name"],
            },
            "title": data["title"],
            "content": data["content"],
            "created": data["created"],
        }
