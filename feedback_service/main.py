import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from feedback_service.core.config import Settings, get_settings
from feedback_service.core.exceptions import ServiceError
from feedback_service.core.logging import configure_logging
from feedback_service.models.database import Database
# register every table on Base.metadata before create_all runs
from feedback_service.models import feedback as feedback_model, session as session_model, user as user_model  # noqa: F401
from feedback_service.routers import auth, feedback, pages
from feedback_service.services.sessions import purge_expired_sessions

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    db: Database = app.state.db

    # Tables are created once, before any request is served
    db.create_all()
    with db.SessionLocal() as session:
        removed = purge_expired_sessions(session)
    logger.info("Store ready (%d expired sessions purged)", removed)

    yield

    db.dispose()
    logger.info("Store closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_title, lifespan=lifespan)
    app.state.settings = settings
    app.state.db = Database(settings.database_url)

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content={"error": "Invalid request", "detail": jsonable_errors(exc)},
        )

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Server error"})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Server error"})

    # include our routers
    app.include_router(auth.router)
    app.include_router(feedback.router)
    app.include_router(pages.router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    # ctx may hold exception objects that JSONResponse cannot encode
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("feedback_service.main:app", host="0.0.0.0", port=8000)
