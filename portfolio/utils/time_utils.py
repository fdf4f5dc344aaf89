from datetime import datetime


def utc_now() -> datetime:
    """Naive UTC now at millisecond precision, matching what BSON dates round-trip."""
    now = datetime.utcnow()
    return now.replace(microsecond=now.microsecond // 1000 * 1000)
