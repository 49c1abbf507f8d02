import uuid
from datetime import datetime, timezone


def new_text_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
