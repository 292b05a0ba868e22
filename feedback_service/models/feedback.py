# feedback_service/models/feedback.py
from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from feedback_service.models.database import Base, utcnow


class Feedback(Base):
    __tablename__ = "feedbacks"
    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_feedbacks_rating_range"),
        CheckConstraint("length(comment) > 0", name="ck_feedbacks_comment_not_empty"),
    )

    id = Column(Integer, primary_key=True, index=True)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=False)
    created_at = Column(DateTime, default=utcnow, index=True, nullable=False)

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    # Copied from the session at submit time; not kept in sync with users.username
    username = Column(String(50), nullable=False)

    # Many feedbacks → one owner (User)
    owner = relationship("User", back_populates="feedbacks")
