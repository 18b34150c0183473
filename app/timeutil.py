from datetime import datetime, timezone


def now_iso() -> str:
    """UTC timestamp for response bodies, e.g. 2025-08-30T04:12:09.123456+00:00."""
    return datetime.now(timezone.utc).isoformat()
