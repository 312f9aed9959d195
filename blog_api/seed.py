"""Fake blog data for tests and local development."""
import argparse

import structlog
from faker import Faker

from . import database
from .config import SEED_POST_COUNT
from .infrastructure.repositories import PostRepository

fake = Faker()

log = structlog.get_logger()


def generate_post_data() -> dict:
    """Build one fake post payload (no id, no created)."""
    return {
        "author": {
            "firstName": fake.first_name(),
            "lastName": fake.last_name(),
        },
        "title": fake.sentence(),
        "content": fake.text(),
    }


def seed_posts(connection, count: int = SEED_POST_COUNT) -> list[str]:
    """Insert ``count`` fake posts and return their ids."""
    log.info("seeding_posts", count=count)
    return PostRepository(connection).insert_many(
        generate_post_data() for _ in range(count)
    )


def main(argv=None) -> int:
    """Command line entry point for scripts/seed_posts.py."""
    parser = argparse.ArgumentParser(
        description='Fill the blog database with fake posts'
    )
    parser.add_argument(
        '--count',
        type=int,
        default=SEED_POST_COUNT,
        help='Number of posts to create (default: %(default)s)'
    )
    parser.add_argument(
        '--database',
        default=None,
        help='Database path or sqlite:/// URL (default: DATABASE_URL)'
    )
    parser.add_argument(
        '--drop',
        action='store_true',
        help='Delete existing posts before seeding'
    )

    args = parser.parse_args(argv)

    if args.database:
        database.use_database(args.database)
    database.init_db()

    conn = database.get_db()
    try:
        if args.drop:
            removed = PostRepository(conn).delete_all()
            log.warning("posts_dropped", count=removed)
        ids = seed_posts(conn, args.count)
    finally:
        database.close_db()

    print(f"Created {len(ids)} posts in {database.DATABASE_PATH}")
    return 0
