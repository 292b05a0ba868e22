import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from feedback_service.core.auth import require_session
from feedback_service.models.database import get_db
from feedback_service.models.feedback import Feedback
from feedback_service.models.session import SessionRecord
from feedback_service.schemas import FeedbackOut, FeedbackRequest

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["feedback"])


# --- submit feedback (signed-in users only) ---
@router.post("/feedback")
def submit_feedback(
    data: FeedbackRequest,
    current: SessionRecord = Depends(require_session),
    db: Session = Depends(get_db),
):
    feedback = Feedback(
        user_id=current.user_id,
        username=current.username,
        rating=data.rating,
        comment=data.comment,
    )
    db.add(feedback)
    db.commit()

    logger.info("Feedback %s stored for %s", feedback.id, current.username)
    return {"success": True, "message": "Feedback submitted successfully"}


# --- list all feedback, newest first (public) ---
@router.get("/feedbacks", response_model=list[FeedbackOut])
def list_feedbacks(db: Session = Depends(get_db)):
    return (
        db.query(Feedback)
        .order_by(Feedback.created_at.desc(), Feedback.id.desc())
        .all()
    )
