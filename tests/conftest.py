"""Test configuration and fixtures for the Blog API.

This module provides isolated test environments:
- Temporary database (SQLite) per test
- Ten seeded fake posts, like the data a real deployment starts with
- Database teardown after every test
"""
import os
import sys
from pathlib import Path
from typing import Generator, Dict, List

import pytest
from fastapi.testclient import TestClient

# Ensure blog_api is importable
sys.path.insert(0, str(Path(__file__).parent.parent))

# Set test environment BEFORE importing blog_api modules
os.environ.setdefault("LOG_LEVEL", "warning")


@pytest.fixture(scope="function")
def isolated_environment(tmp_path: Path) -> Dict:
    """Create completely isolated environment for a single test.

    Returns:
        Dict with paths: db_path, base_dir
    """
    return {
        "db_path": tmp_path / "test-blog.db",
        "base_dir": tmp_path,
    }


@pytest.fixture(scope="function")
def patched_config(isolated_environment: Dict):
    """Monkey-patch database location to use the isolated directory."""
    import blog_api.database as db_module

    original = db_module.DATABASE_PATH
    db_module.close_db()
    db_module.DATABASE_PATH = isolated_environment["db_path"]

    yield isolated_environment

    db_module.close_db()
    db_module.DATABASE_PATH = original


@pytest.fixture(scope="function")
def fresh_database(patched_config: Dict):
    """Initialize fresh database with schema for each test.

    The posts table is dropped again after the test.
    """
    from blog_api.database import init_db, tear_down_db

    init_db()

    yield patched_config["db_path"]

    tear_down_db()


@pytest.fixture(scope="function")
def db_connection(fresh_database: Path):
    """Direct database connection for arranging and checking state."""
    from blog_api.database import create_connection

    conn = create_connection()
    yield conn
    conn.close()


@pytest.fixture(scope="function")
def post_repo(db_connection):
    """PostRepository on the test database."""
    from blog_api.infrastructure.repositories import PostRepository

    return PostRepository(db_connection)


@pytest.fixture(scope="function")
def client(fresh_database: Path) -> Generator[TestClient, None, None]:
    """Create test client with fresh isolated environment.

    Usage:
        def test_something(client):
            response = client.get("/posts")
            assert response.status_code == 200
    """
    from blog_api.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def seeded_posts(db_connection) -> List[str]:
    """Insert ten fake posts and return their ids."""
    from blog_api.seed import seed_posts

    return seed_posts(db_connection, 10)


@pytest.fixture(scope="function")
def new_post_payload() -> Dict:
    """Valid POST /posts body."""
    from blog_api.seed import generate_post_data

    return generate_post_data()
