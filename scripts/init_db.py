"""
Database initialization script.

Run this script to create the tables and seed the default plans.

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from app.core.config import settings
from app.core.logger import setup_logger
from app.db.init_db import init_db

if __name__ == "__main__":
    setup_logger(level=settings.LOG_LEVEL, log_file=settings.LOG_FILE)
    print("=" * 50)
    print("Workout Database Initialization")
    print("=" * 50)
    print()

    try:
        init_db()
        print()
        print("=" * 50)
        print("SUCCESS: Database initialized!")
        print("=" * 50)
        sys.exit(0)

    except Exception as e:
        print()
        print("=" * 50)
        print("ERROR: Database initialization failed!")
        print(f"Details: {e}")
        print("=" * 50)
        sys.exit(1)
