from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from feedback_service.core.auth import get_current_session
from feedback_service.models.session import SessionRecord

router = APIRouter(tags=["pages"])
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


# Page routes redirect instead of returning JSON errors
@router.get("/", response_class=HTMLResponse)
def home(request: Request, current: SessionRecord | None = Depends(get_current_session)):
    if current:
        return RedirectResponse(url="/dashboard", status_code=303)
    return templates.TemplateResponse(request, "index.html")


@router.get("/signup", response_class=HTMLResponse)
def signup_page(request: Request):
    return templates.TemplateResponse(request, "signup.html")


@router.get("/login", response_class=HTMLResponse)
def login_page(request: Request):
    return templates.TemplateResponse(request, "login.html")


@router.get("/dashboard", response_class=HTMLResponse)
def dashboard(request: Request, current: SessionRecord | None = Depends(get_current_session)):
    if not current:
        return RedirectResponse(url="/login", status_code=303)
    return templates.TemplateResponse(request, "dashboard.html", {"username": current.username})
