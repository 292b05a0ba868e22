from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from feedback_service.models.database import Base, utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)  # werkzeug hash, never plaintext
    created_at = Column(DateTime, default=utcnow, nullable=False)

    # One user → many feedbacks
    feedbacks = relationship("Feedback", back_populates="owner")
