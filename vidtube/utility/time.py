from datetime import datetime, UTC


def utc_now() -> datetime:
    # columns are naive UTC timestamps
    return datetime.now(UTC).replace(tzinfo=None)
