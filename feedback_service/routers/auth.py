import logging

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from feedback_service.core.auth import get_app_settings, get_current_session
from feedback_service.core.config import Settings
from feedback_service.core.exceptions import DuplicateUserError, InvalidCredentialsError
from feedback_service.core.security import hash_password, verify_password
from feedback_service.models.database import get_db
from feedback_service.models.session import SessionRecord
from feedback_service.models.user import User
from feedback_service.schemas import AuthStatus, LoginRequest, SignupRequest
from feedback_service.services.sessions import create_session, destroy_session

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["auth"])


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    # fixed lifetime, the cookie is not renewed on activity
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_max_age_seconds,
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
    )


@router.post("/signup")
def signup(
    data: SignupRequest,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    # Check if user exists (username or email)
    existing_user = (
        db.query(User)
        .filter(or_(User.username == data.username, User.email == data.email))
        .first()
    )
    if existing_user:
        raise DuplicateUserError()

    new_user = User(
        username=data.username,
        email=data.email,
        password=hash_password(data.password, settings.password_hash_method),
    )
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        # a concurrent signup took the username or email first
        db.rollback()
        raise DuplicateUserError()

    logger.info("User created: %s", new_user.username)

    # drop whatever session the client was holding before
    destroy_session(db, request.cookies.get(settings.session_cookie_name))

    token = create_session(db, new_user, settings.session_max_age_seconds)
    set_session_cookie(response, token, settings)
    return {"success": True, "message": "User created successfully"}


@router.post("/login")
def login(
    data: LoginRequest,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    user = db.query(User).filter(User.email == data.email).first()

    if not user or not verify_password(user.password, data.password):
        logger.info("Failed login attempt")
        raise InvalidCredentialsError()

    # drop whatever session the client was holding before
    destroy_session(db, request.cookies.get(settings.session_cookie_name))

    token = create_session(db, user, settings.session_max_age_seconds)
    set_session_cookie(response, token, settings)
    logger.info("User logged in: %s", user.username)
    return {"success": True, "message": "Login successful"}


@router.post("/logout")
def logout(
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    destroy_session(db, request.cookies.get(settings.session_cookie_name))
    response.delete_cookie(settings.session_cookie_name)
    return {"success": True}


@router.get("/auth/status", response_model=AuthStatus, response_model_exclude_none=True)
def auth_status(current: SessionRecord | None = Depends(get_current_session)):
    if current is None:
        return AuthStatus(authenticated=False)
    return AuthStatus(authenticated=True, username=current.username)
