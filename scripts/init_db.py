#!/usr/bin/env python3
"""
Create the catalog tables directly, without Alembic.

Handy for a throwaway SQLite database in development. Use
`alembic upgrade head` for anything that has to be migrated later.
"""

import sys
from pathlib import Path

# Ensure project root is on sys.path when running as a script
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from app.config import get_settings
from app.database import create_tables


def main() -> None:
    create_tables()
    print(f"DB initialized: {get_settings().database_url}")


if __name__ == "__main__":
    main()
