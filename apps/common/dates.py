from datetime import datetime, timezone


def as_utc(value: datetime) -> datetime:
    """Dates of birth are UTC; the store keeps them without a zone, so naive values are read as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
