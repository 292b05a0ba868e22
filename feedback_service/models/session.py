# feedback_service/models/session.py
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from feedback_service.models.database import Base, utcnow


class SessionRecord(Base):
    """Server-side login session, looked up by the opaque cookie value."""

    __tablename__ = "sessions"

    token = Column(String(64), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    username = Column(String(50), nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    expires_at = Column(DateTime, index=True, nullable=False)
