#!/usr/bin/env python3
"""
Seed the blog database with fake posts.

Usage:
    python scripts/seed_posts.py                 - add 10 posts to DATABASE_URL
    python scripts/seed_posts.py --count 50
    python scripts/seed_posts.py --database /tmp/blog.db --drop
"""
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from blog_api.logging_config import configure_logging
from blog_api.seed import main


if __name__ == "__main__":
    configure_logging()
    sys.exit(main())
