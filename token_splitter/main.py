"""FastAPI app entry: config, logging, health, and the split route."""

from contextlib import asynccontextmanager
from typing import Any, Callable

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from token_splitter.config.chunking.static import resolve_chunking_config
from token_splitter.config.logging import configure_logging, get_logger
from token_splitter.config.settings import Settings, get_settings
from token_splitter.controllers.routes.split import get_tokenizer_factory
from token_splitter.controllers.routes.split import router as split_router
from token_splitter.resources.tokenizer.health import ping_tokenizer
from token_splitter.services.chunking.tokenizer import Tokenizer

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: config and logging. The tokenizer loads lazily on first use."""
    settings = get_settings()
    configure_logging()
    logger.info("Application starting", extra={"app_name": settings.app_name, "environment": settings.environment})
    yield
    logger.info("Shutdown complete")


app = FastAPI(
    title="Token Splitter",
    description="Split text into token-bounded chunks for embedding",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(split_router)


@app.get("/health")
async def health() -> dict[str, Any]:
    """Liveness: service is up. Does not check the tokenizer."""
    return {"status": "ok"}


@app.get("/ready")
def ready(
    settings: Settings = Depends(get_settings),
    tokenizer_factory: Callable[[str], Tokenizer] = Depends(get_tokenizer_factory),
):
    """Readiness: the default profile's encoding loads and round-trips text."""
    try:
        config = resolve_chunking_config(settings.chunking_profile)
    except ValueError:
        logger.warning("Configured chunking profile not found", extra={"profile": settings.chunking_profile})
        body = {
            "status": "degraded",
            "tokenizer": {"ok": False, "encoding": None, "error": "unknown_profile"},
        }
        return JSONResponse(content=body, status_code=503)
    tokenizer = ping_tokenizer(tokenizer_factory, config.encoding)
    ok = tokenizer.get("ok", False)
    body = {
        "status": "ok" if ok else "degraded",
        "tokenizer": {"ok": ok, "encoding": config.encoding, "error": tokenizer.get("error")},
    }
    return JSONResponse(content=body, status_code=200 if ok else 503)


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Centralized error handling: log, then answer without leaking internals."""
    logger.exception("Unhandled error", extra={"error": type(exc).__name__})
    return JSONResponse(
        content={"detail": "An internal error occurred."},
        status_code=500,
    )
