"""Check the database connection and which tables exist.

Usage:
    python scripts/check_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env file
from dotenv import load_dotenv

load_dotenv()

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.db.session import engine

EXPECTED_TABLES = ["users", "daily_checkins", "training_sessions", "revoked_tokens"]

print("=" * 60)
print("Testing database connection")
print("=" * 60)
print(f"Database: {settings.DATABASE_URL.rsplit('@', 1)[-1]}")  # Hide credentials
print()

try:
    existing = set(inspect(engine).get_table_names())
    print("✓ Connection successful!")
    for table in EXPECTED_TABLES:
        if table in existing:
            print(f"✓ '{table}' table exists")
        else:
            print(f"✗ '{table}' table does not exist - run migrations")

except SQLAlchemyError as e:
    print(f"✗ Connection failed: {e}")
    sys.exit(1)

print("=" * 60)
