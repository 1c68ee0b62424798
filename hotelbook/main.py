"""FastAPI application entrypoint. No business logic; only wiring, error mapping and lifecycle."""

from dotenv import load_dotenv

load_dotenv()

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from hotelbook.api.v1 import router as v1_router
from hotelbook.core.config import settings
from hotelbook.core.database import engine
from hotelbook.core.errors import HotelBookError, InternalError, ValidationError

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Own the store handle: the engine is created at import, disposed on shutdown."""
    logger.info("Hotelbook API starting", extra={"environment": settings.APP_ENV})
    yield
    engine.dispose()
    logger.info("Hotelbook API stopped; database engine disposed")


def _error_response(error: HotelBookError) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content={
            "success": False,
            "status": error.status_code,
            "message": error.message,
        },
        headers={"WWW-Authenticate": "Bearer"} if error.status_code == 401 else None,
    )


async def handle_app_error(request: Request, exc: HotelBookError) -> JSONResponse:
    return _error_response(exc)


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed input as 400 with the first offending field."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg', 'invalid value')}" if location else first.get("msg")
    else:
        message = None
    return _error_response(ValidationError(message or "Invalid input."))


async def handle_store_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Store failures are logged in full but reported to clients without detail."""
    logger.exception(
        "Database error",
        extra={"path": request.url.path, "method": request.method},
    )
    return _error_response(InternalError())


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Runs in the server error middleware, which re-raises so the server logs the traceback."""
    return _error_response(InternalError())


app = FastAPI(
    title="Hotelbook API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(HotelBookError, handle_app_error)
app.add_exception_handler(RequestValidationError, handle_request_validation)
app.add_exception_handler(SQLAlchemyError, handle_store_error)
app.add_exception_handler(Exception, handle_unexpected_error)

app.include_router(v1_router, prefix=settings.API_PREFIX)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "Hotelbook API"}
