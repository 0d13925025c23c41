from datetime import date, datetime, timezone
from urllib.parse import urlsplit, urlunsplit


def redact_uri(uri: str) -> str:
    """Hide the password part of a connection string for logging"""
    try:
        parts = urlsplit(uri)
    except ValueError:
        return "<invalid uri>"
    if not parts.password:
        return uri
    netloc = parts.netloc.replace(f":{parts.password}@", ":***@", 1)
    return urlunsplit(parts._replace(netloc=netloc))


def as_datetime(value):
    """Coerce ISO strings and dates into a naive UTC datetime (BSON has no date type)"""
    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip())
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return value
