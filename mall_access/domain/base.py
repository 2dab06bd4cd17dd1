from datetime import UTC, datetime


def utcnow() -> datetime:
    """Naive UTC timestamp; every DateTime column stores naive UTC."""
    return datetime.now(UTC).replace(tzinfo=None)
