from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so they compare with stored timestamps."""
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


def resolve_now(now: datetime | None) -> datetime:
    return as_utc(now) if now is not None else utc_now()
