"""
Database Migration
Creates the Satlogix schema on the database named by DATABASE_URL,
or prints the DDL for it

Usage:
    python migrate_database.py            # create missing tables
    python migrate_database.py --sql      # print CREATE statements only
    python migrate_database.py --sql --url postgresql://localhost/satlogix
"""

import argparse

from sqlalchemy import create_mock_engine, inspect

from satlogix.config.settings import settings
from satlogix.config.database import Base, create_db_engine, normalize_database_url
import satlogix.models  # noqa: F401


def print_schema_sql(url: str):
    """Print the DDL of every table for the dialect of url"""
    mock_engine = None

    def dump(sql, *multiparams, **params):
        print(str(sql.compile(dialect=mock_engine.dialect)).strip() + ";\n")

    mock_engine = create_mock_engine(normalize_database_url(url), dump)
    Base.metadata.create_all(mock_engine, checkfirst=False)


def run_migration(url: str):
    """Create the tables that do not exist yet"""
    engine = create_db_engine(url)

    print("🔧 Starting database migration...")

    try:
        existing = set(inspect(engine).get_table_names())
        missing = [t for t in Base.metadata.sorted_tables if t.name not in existing]

        for table in missing:
            print(f"  → Creating table {table.name}...")
        Base.metadata.create_all(bind=engine)

        if missing:
            print("✅ Migration completed successfully!")
        else:
            print("✅ Schema already up to date")

    except Exception as e:
        print(f"❌ Migration failed: {str(e)}")
        raise
    finally:
        engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create or print the Satlogix schema")
    parser.add_argument("--sql", action="store_true", help="print the DDL instead of executing it")
    parser.add_argument("--url", default=settings.DATABASE_URL, help="database URL (defaults to DATABASE_URL)")
    args = parser.parse_args()

    if args.sql:
        print_schema_sql(args.url)
    else:
        print("=" * 60)
        print("DATABASE MIGRATION - SATLOGIX")
        print("=" * 60)
        run_migration(args.url)
