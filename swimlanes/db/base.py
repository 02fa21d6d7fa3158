from datetime import datetime, timezone

from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow() -> datetime:
    # SQLite has no timezone storage; keep everything naive UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)
