import json
from datetime import datetime, timezone
from flask import request
from services.errors import BadRequest

def get_json_body():
    """Request JSON body, empty dict when absent or malformed"""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}

def require_fields(data, *fields):
    """Raise BadRequest naming every missing or blank field"""
    missing = [f for f in fields if data.get(f) in (None, '')]
    if missing:
        raise BadRequest(f"Missing required fields: {', '.join(missing)}")

def parse_datetime(value, field='date'):
    """Parse an ISO 8601 timestamp into a naive UTC datetime"""
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            # fromisoformat before 3.11 does not accept a trailing Z
            parsed = datetime.fromisoformat(str(value).strip().replace('Z', '+00:00'))
        except ValueError:
            raise BadRequest(f"Invalid {field}: expected an ISO 8601 timestamp")

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed

def parse_int(value, field, default=None, minimum=None):
    """Parse an integer form/query value"""
    if value in (None, ''):
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise BadRequest(f"Invalid {field}: expected an integer")
    if minimum is not None and number < minimum:
        raise BadRequest(f"Invalid {field}: must be at least {minimum}")
    return number

def dump_json_list(value):
    """Store list input as a JSON list string; a bare string becomes a one item list"""
    if value in (None, ''):
        return None
    if isinstance(value, (list, tuple)):
        return json.dumps(list(value))
    try:
        decoded = json.loads(value)
    except (TypeError, ValueError):
        decoded = None
    if isinstance(decoded, list):
        return json.dumps(decoded)
    return json.dumps([str(value)])
