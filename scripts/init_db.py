#!/usr/bin/env python3
"""
Schema Setup Script

Creates any missing tables (users, institutions, faculties, courses,
applications, admissions) on the configured database.
Usage: python scripts/init_db.py
"""
import sys
sys.path.insert(0, '.')

from app.core.logging import setup_logging
from app.db.database import get_engine, init_db
from app.db.tables import metadata


def main():
    setup_logging()
    init_db(get_engine())
    print("Tables:")
    for name in metadata.tables:
        print(f"   - {name}")


if __name__ == "__main__":
    main()
