"""Server-side session store.

Sessions live in the ``sessions`` table next to users and feedback, so they
survive restarts. Expiry is fixed at creation and never extended.
"""

import logging
import secrets
from datetime import timedelta

from sqlalchemy.orm import Session

from feedback_service.models.database import utcnow
from feedback_service.models.session import SessionRecord
from feedback_service.models.user import User

logger = logging.getLogger(__name__)


def create_session(db: Session, user: User, max_age_seconds: int) -> str:
    """Bind a fresh opaque token to ``user`` and return it."""
    now = utcnow()
    record = SessionRecord(
        token=secrets.token_urlsafe(32),
        user_id=user.id,
        username=user.username,
        created_at=now,
        expires_at=now + timedelta(seconds=max_age_seconds),
    )
    db.add(record)
    db.commit()
    return record.token


def get_session(db: Session, token: str | None) -> SessionRecord | None:
    if not token:
        return None

    record = db.get(SessionRecord, token)
    if record is None:
        return None

    if record.expires_at <= utcnow():
        db.delete(record)
        db.commit()
        return None

    return record


def destroy_session(db: Session, token: str | None) -> None:
    if not token:
        return
    deleted = db.query(SessionRecord).filter(SessionRecord.token == token).delete(synchronize_session=False)
    db.commit()
    if deleted:
        logger.info("Session destroyed")


def purge_expired_sessions(db: Session) -> int:
    removed = (
        db.query(SessionRecord)
        .filter(SessionRecord.expires_at <= utcnow())
        .delete(synchronize_session=False)
    )
    db.commit()
    return removed
