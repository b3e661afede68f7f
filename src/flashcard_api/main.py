"""FastAPI application entry point."""

import ddtrace.auto  # noqa: F401  isort: skip

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from flashcard_api.logging import setup_logging
from flashcard_api.response_models import ErrorResponse
from flashcard_api.routes import card_sets_router, media_router, transcribe_router

logger = setup_logging()

app = FastAPI(title="Flashcard API")
app.include_router(card_sets_router)
app.include_router(media_router)
app.include_router(transcribe_router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Renders every HTTP error as an ErrorResponse."""
    body = ErrorResponse(
        message=str(exc.detail),
        alt_messages=getattr(exc, "alt_messages", []),
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(by_alias=True),
        headers=exc.headers,
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Renders malformed input as a 400 ErrorResponse listing each problem."""
    alt_messages = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    logger.info(
        "Rejected invalid request",
        extra={"path": request.url.path, "errors": alt_messages},
    )
    body = ErrorResponse(message="Invalid request", alt_messages=alt_messages)
    return JSONResponse(status_code=400, content=body.model_dump(by_alias=True))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Renders any unexpected failure as a 500 ErrorResponse."""
    logger.exception(
        "Unhandled error while processing request",
        extra={"path": request.url.path, "method": request.method},
    )
    body = ErrorResponse(message="Internal server error")
    return JSONResponse(status_code=500, content=body.model_dump(by_alias=True))
