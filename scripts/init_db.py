"""
Database initialization script.

Creates the tables directly from the models (no migrations).

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.core.logging import setup_logging
from app.db.init_db import init_db

if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    print("=" * 50)
    print("Consistency OS Database Initialization")
    print("=" * 50)
    print()

    try:
        init_db()
        print()
        print("SUCCESS: Database initialized!")
        sys.exit(0)

    except SQLAlchemyError as e:
        print()
        print("ERROR: Database initialization failed!")
        print(f"Details: {e}")
        sys.exit(1)
