#!/usr/bin/env python3
"""
Legacy data normalisation for SQLite databases.
Upper-cases user roles and status columns and renames the old ACCEPTED
mentorship request status to APPROVED. Safe to run more than once.
"""
import os
import shutil
import sqlite3
import sys
from datetime import datetime

# Tables whose status column must hold upper-case values
STATUS_TABLES = ('startup', 'mentor_application', 'mentorship_request',
                 'mentorship_relationship', 'scheduled_call', 'funding_opportunity',
                 'funding_application')


def backup_database(db_path):
    backup_path = f"{db_path}.backup_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
    shutil.copy2(db_path, backup_path)
    print(f"Database backed up to: {backup_path}")
    return backup_path


def migrate_database(db_path='starthub.db'):
    """
    Normalise legacy role and status values in place.

    Returns:
        dict: rows changed per table, or None when the database does not exist
    """
    if not os.path.exists(db_path):
        print(f"Database {db_path} does not exist. No migration needed.")
        return None

    backup_path = backup_database(db_path)

    conn = sqlite3.connect(db_path)
    cursor = conn.cursor()
    changes = {}

    try:
        cursor.execute("SELECT name FROM sqlite_master WHERE type='table'")
        tables = {row[0] for row in cursor.fetchall()}

        if 'user' in tables:
            cursor.execute('UPDATE "user" SET role = UPPER(role) WHERE role != UPPER(role)')
            changes['user'] = cursor.rowcount

        for table in STATUS_TABLES:
            if table not in tables:
                continue
            cursor.execute(f"UPDATE {table} SET status = UPPER(status) WHERE status != UPPER(status)")
            changes[table] = cursor.rowcount

        if 'mentorship_request' in tables:
            cursor.execute("UPDATE mentorship_request SET status = 'APPROVED' WHERE status = 'ACCEPTED'")
            changes['mentorship_request'] = changes.get('mentorship_request', 0) + cursor.rowcount

        conn.commit()

        total = sum(changes.values())
        if total == 0:
            print("Database is already up to date!")
        else:
            for table, count in changes.items():
                if count:
                    print(f"   - {table}: {count} rows normalised")
            print("Migration completed successfully!")
        return changes

    except Exception as e:
        conn.rollback()
        print(f"Migration failed: {e}")
        print(f"Original database kept at backup: {backup_path}")
        raise

    finally:
        conn.close()


if __name__ == "__main__":
    migrate_database(sys.argv[1] if len(sys.argv) > 1 else 'starthub.db')
