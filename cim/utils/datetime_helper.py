"""Date and time helpers (UTC)"""
from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Current time as an aware UTC datetime"""
    return datetime.now(timezone.utc)


def format_iso_utc(dt: datetime) -> str:
    """
    ISO-8601 with a trailing ``Z``.

    Naive datetimes are taken to be UTC already.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def epoch_millis(dt: Optional[datetime] = None) -> int:
    return int((dt or utc_now()).timestamp() * 1000)


def dated_filename(prefix: str, extension: str = "csv", dt: Optional[datetime] = None) -> str:
    """e.g. ``ideas-export-2025-10-14.csv``"""
    stamp = (dt or utc_now()).date().isoformat()
    return f"{prefix}-{stamp}.{extension}"
