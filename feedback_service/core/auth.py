# feedback_service/core/auth.py
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from feedback_service.core.config import Settings
from feedback_service.core.exceptions import NotAuthenticatedError
from feedback_service.models.database import get_db
from feedback_service.models.session import SessionRecord
from feedback_service.services.sessions import get_session


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


# --- helper: current session from the cookie, or None when anonymous ---
def get_current_session(
    request: Request,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> SessionRecord | None:
    token = request.cookies.get(settings.session_cookie_name)
    return get_session(db, token)


# --- auth gate for protected API routes ---
def require_session(
    current: SessionRecord | None = Depends(get_current_session),
) -> SessionRecord:
    if current is None:
        raise NotAuthenticatedError()
    return current
