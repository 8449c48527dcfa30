from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


def isoformat(value):
    """Serialize an optional datetime for JSON responses."""
    return value.isoformat() if value else None
