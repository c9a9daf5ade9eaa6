from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.exceptions.errors import ApplicationException, PersistenceFailure, RecordStoreError
from app.core.logger import get_logger

logger = get_logger("exception_handlers")


async def application_exception_handler(request: Request, exc: ApplicationException):
    if exc.status_code >= 500:
        logger.error(f"Application error on {request.url.path}: {exc.message}")
    else:
        logger.warning(f"Application error on {request.url.path}: {exc.message}")
    return exc.to_response()


async def record_store_exception_handler(request: Request, exc: RecordStoreError):
    logger.error(f"Record store error on {request.url.path}: {exc}")
    return PersistenceFailure().to_response()


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail}
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.error(f"Validation error on {request.url.path}: {exc.errors()}")

    errors = []
    for error in exc.errors():
        errors.append({
            "type": error.get("type"),
            "loc": error.get("loc"),
            "msg": error.get("msg"),
        })

    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request data", "detail": errors}
    )


async def generic_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error: {repr(exc)}")
    return JSONResponse(
        status_code=500,
        content={"error": "An unexpected error occurred"}
    )
