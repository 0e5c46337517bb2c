"""FastAPI application entry point."""

import uuid
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from fridgebud import __version__
from fridgebud.config import settings
from fridgebud.logging_config import LoggingContext, configure_logging, get_logger
from fridgebud.routers import catalog_router, meals_router, voice_router

# Configure logging on module load
configure_logging(settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info("Starting FridgeBud API")
    if not settings.llm_enabled:
        logger.warning("OPENAI_API_KEY not set, voice parsing uses the keyword parser only")

    yield

    logger.info("Shutting down FridgeBud API")


app = FastAPI(
    title="FridgeBud API",
    description="Meal suggestions and voice inventory updates from what is already at home",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Tag log records with a request id and the calling household."""
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:12]
    with LoggingContext(
        request_id=request_id,
        household_code=request.headers.get("X-Household-Code"),
    ):
        response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


app.include_router(meals_router)
app.include_router(voice_router)
app.include_router(catalog_router)


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "service": "fridgebud-api"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "FridgeBud API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }
