"""Application configuration and constants."""
import os
from pathlib import Path

# Directory paths
BASE_DIR = Path(__file__).resolve().parent.parent


def database_path(url: str) -> Path:
    """Turn DATABASE_URL style values into a filesystem path.

    Accepts a bare path or a ``sqlite:///`` URL.
    """
    if url.startswith("sqlite:///"):
        url = url[len("sqlite:///"):]
    return Path(url)


# Database configuration
# Set via environment variables DATABASE_URL / TEST_DATABASE_URL
DATABASE_URL = os.environ.get("DATABASE_URL", str(BASE_DIR / "blog.db"))
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", str(BASE_DIR / "test-blog.db"))

# Server configuration
HOST = os.environ.get("HOST", "127.0.0.1")
PORT = int(os.environ.get("PORT", "8080"))

# Logging configuration (debug, info, warning, error)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "info")
REQUEST_ID_HEADER = "X-Request-ID"

# Number of fake posts created by the seed tooling
SEED_POST_COUNT = int(os.environ.get("SEED_POST_COUNT", "10"))
