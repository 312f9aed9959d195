"""Blog API - FastAPI Entry Point."""
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .application.exceptions import BlogAPIError
from .config import REQUEST_ID_HEADER
from .database import init_db, close_db
from .logging_config import configure_logging
from .middleware import RequestLogMiddleware

# Import routers
from .routes import router as posts_router

configure_logging()

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: runs before the application starts accepting requests
    init_db()
    log.info("app_started")
    yield
    # Shutdown: release the connection used for schema setup
    close_db()
    log.info("app_stopped")


app = FastAPI(title="Blog API", lifespan=lifespan)

# Add middleware
app.add_middleware(RequestLogMiddleware)

# Include routers
app.include_router(posts_router)


def _describe_validation_error(exc: RequestValidationError) -> str:
    """Turn the first pydantic error into a client-facing message."""
    errors = exc.errors()
    if not errors:
        return "Invalid request body"

    error = errors[0]
    if error.get("type") == "json_invalid":
        return "Request body is not valid JSON"

    loc = [str(part) for part in error.get("loc", ()) if part != "body"]
    if not loc:
        return "Invalid request body"

    field = ".".join(loc)
    if error.get("type") == "missing":
        return f"Missing `{field}` in request body"
    if error.get("type") == "string_too_short":
        return f"Missing `{field}` in request body"
    return f"Invalid `{field}`: {error.get('msg')}"


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are client errors (400), not 422."""
    message = _describe_validation_error(exc)
    log.warning("request_invalid", path=request.url.path, detail=message)
    return JSONResponse(status_code=400, content={"detail": message})


@app.exception_handler(BlogAPIError)
async def blog_api_error_handler(request: Request, exc: BlogAPIError):
    log.warning(
        "request_failed",
        path=request.url.path,
        status=exc.status_code,
        detail=exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    log.error("request_crashed", path=request.url.path, exc_info=exc)
    response = JSONResponse(status_code=500, content={"detail": "Internal server error"})
    request_id = structlog.contextvars.get_contextvars().get("request_id")
    if request_id:
        response.headers[REQUEST_ID_HEADER] = request_id
    return response
