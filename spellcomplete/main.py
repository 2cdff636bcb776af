"""
Main FastAPI application for the spell-check and completion service.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from spellcomplete.config import settings
from spellcomplete.routes import health, spellcheck
from spellcomplete.middleware.logging import RequestLoggingMiddleware
from spellcomplete.utils.logger import get_logger

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Loads dictionaries on startup.
    """
    logger.info("Starting spell-check service")
    logger.info(f"Environment: {'DEBUG' if settings.DEBUG else 'PRODUCTION'}")
    logger.info(f"Log level: {settings.LOG_LEVEL}")

    # Dictionaries are optional - the engine degrades to empty results
    if settings.SPELLCHECK_ENABLED:
        from spellcomplete.services.spellcheck import initialize_spellcheck
        if await run_in_threadpool(initialize_spellcheck):
            logger.info("Spell-check dictionaries ready")
        else:
            logger.warning("Spell-check dictionaries failed to load (running degraded)")
    else:
        logger.info("Spell-check disabled via configuration")

    yield

    logger.info("Shutting down spell-check service")


app = FastAPI(
    title="Spell-check and Completion Service",
    description="Bilingual (English/Spanish) spell-checking, word completion and caret-safe rewriting",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(health.router, tags=["Health"])
app.include_router(spellcheck.router)


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint pointing to docs."""
    return {
        "message": "Spell-check and Completion Service",
        "docs": "/docs",
        "health": "/health"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "spellcomplete.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower()
    )
