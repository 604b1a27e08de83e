"""FastAPI application entrypoint. No business logic; only wiring, startup and error mapping."""

from dotenv import load_dotenv

load_dotenv()

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import router as api_router
from app.core.config import settings
from app.core.database import SessionLocal, init_db
from app.core.errors import AppError, InvalidRequestError, ServerError
from app.schemas.auth import ErrorResponse
from app.services.admin_seed import seed_admin
from app.services.sessions import SessionStore, purge_loop

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

_HTTP_ERROR_CODES = {404: "not_found", 405: "method_not_allowed"}

# Upper bound on how long an expired session can linger before the sweep removes it.
SESSION_PURGE_INTERVAL_SECONDS = 300


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Create tables and run admin provisioning (each if enabled) before serving.

    With SESSION_TTL_SECONDS set, a background task sweeps expired sessions and
    is cancelled on shutdown.
    """
    if settings.DB_AUTO_CREATE:
        init_db()
    db = SessionLocal()
    try:
        seed_admin(db, settings)
    finally:
        db.close()
    purge_task = None
    if settings.SESSION_TTL_SECONDS:
        interval = min(settings.SESSION_TTL_SECONDS, SESSION_PURGE_INTERVAL_SECONDS)
        purge_task = asyncio.create_task(purge_loop(app.state.session_store, interval))
    logger.info("Storefront API started (env=%s)", settings.APP_ENV)
    yield
    if purge_task is not None:
        purge_task.cancel()
    logger.info("Storefront API stopped; %s in-memory sessions discarded", len(app.state.session_store))


app = FastAPI(
    title="Storefront API",
    version="0.1.0",
    docs_url="/docs" if settings.APP_ENV == "dev" else None,
    redoc_url="/redoc" if settings.APP_ENV == "dev" else None,
    lifespan=lifespan,
)

# Sessions live for the lifetime of this app object.
app.state.session_store = SessionStore(ttl_seconds=settings.SESSION_TTL_SECONDS)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(status_code: int, code: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=code).model_dump(),
        headers=headers,
    )


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Map expected failures to their status and code. The message stays server-side."""
    if isinstance(exc, ServerError):
        logger.error("Server error on %s %s: %s", request.method, request.url.path, exc.message)
    return _error_response(exc.status_code, exc.code)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Routing errors (unknown path, wrong method) in the same {"error": code} shape."""
    code = _HTTP_ERROR_CODES.get(exc.status_code, "http_error")
    return _error_response(exc.status_code, code, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON or wrongly typed fields."""
    return _error_response(InvalidRequestError.status_code, InvalidRequestError.code)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Unexpected failures: full traceback to the log, only a generic code to the client."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return _error_response(ServerError.status_code, ServerError.code)


app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "Storefront API"}
