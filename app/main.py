import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware
from fastapi.exceptions import RequestValidationError
from typing import Optional

from app.exceptions.handlers import (
    application_exception_handler,
    record_store_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    generic_exception_handler
)
from app.exceptions.errors import ApplicationException, RecordStoreError
from app.api.v1.routes import auth_router, workout_router, exercise_router, goal_router
from app.core.config import settings
from app.core.logger import get_logger
from app.storage import RecordStore, create_record_store

logger = get_logger("fittrack-backend")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 FastAPI app is starting...")
    try:
        if getattr(app.state, "record_store", None) is None:
            app.state.record_store = create_record_store(settings)
        await app.state.record_store.initialize()
        logger.info(f"Record store ready ({type(app.state.record_store).__name__}).")
    except Exception as e:
        logger.error(f"Failed to initialize application: {e}")
        raise e

    yield

    await app.state.record_store.close()
    logger.info("🛑 FastAPI app is shutting down...")


def create_app(record_store: Optional[RecordStore] = None) -> FastAPI:
    """Build the application. A preconfigured store replaces the one from settings."""
    app = FastAPI(
        title="FitTrack Backend",
        version="1.0.0",
        lifespan=lifespan,
        description="""
        FitTrack API for logging workouts, tracking goals and browsing exercises.

        ## Sessions

        Every visitor gets a guest identity on first contact, kept in a signed
        session cookie. Registering turns the guest into an account and carries
        its workouts and goals over.
        """
    )
    app.state.record_store = record_store

    origins = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.SESSION_SECRET,
        session_cookie=settings.SESSION_COOKIE,
        max_age=settings.SESSION_MAX_AGE,
        same_site="lax",
        https_only=not settings.IS_DEVELOPMENT,
    )

    app.include_router(auth_router, prefix="/api/v1")
    app.include_router(workout_router, prefix="/api/v1")
    app.include_router(exercise_router, prefix="/api/v1")
    app.include_router(goal_router, prefix="/api/v1")

    @app.get("/", include_in_schema=False)
    async def root():
        return {
            "message": "FitTrack Backend API",
            "docs": "/docs",
            "development_mode": settings.IS_DEVELOPMENT,
            "version": "1.0.0"
        }

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "healthy", "storage": settings.STORAGE_BACKEND}

    app.add_exception_handler(ApplicationException, application_exception_handler)
    app.add_exception_handler(RecordStoreError, record_store_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
        limit_concurrency=20,
        timeout_keep_alive=30
    )
