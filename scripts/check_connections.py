#!/usr/bin/env python3
"""
Connection Check Script

Run this to verify the database is reachable.
Usage: python scripts/check_connections.py
"""
import sys
sys.path.insert(0, '.')

from sqlalchemy.engine import make_url

from app.core.config import get_settings
from app.db.database import test_database_connection


def main():
    settings = get_settings()
    print("=" * 50)
    print("CAREER GUIDANCE API - CONNECTION CHECK")
    print("=" * 50)

    print("\n[1] Checking database...")
    print(f"    URL: {make_url(settings.sqlalchemy_url).render_as_string(hide_password=True)}")
    if test_database_connection():
        print("    ✅ Database: CONNECTED")
    else:
        print("    ❌ Database: FAILED")

    print("\n[2] Checking upload directory...")
    print(f"    Path: {settings.upload_dir} (max {settings.max_upload_mb}MB per file)")

    print("\n" + "=" * 50)
    print("Connection check complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
