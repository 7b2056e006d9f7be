"""
FastAPI backend for the trading journal.

Provides RESTful endpoints for:
- Logging, browsing, editing and deleting trades
- Dashboard statistics
- Pattern analysis (sweet spots / danger zones) and AI coach insights
- The strategy/notes document with debounced autosave
"""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tradejournal.api.dependencies import get_autosave, get_trade_repository
from tradejournal.api.routers import dashboard, patterns, strategy, trades
from tradejournal.core.logger import get_logger

logger = get_logger(__name__)


def _resolve(app: FastAPI, dependency):
    return app.dependency_overrides.get(dependency, dependency)()


@asynccontextmanager
async def lifespan(app: FastAPI):
    repository = _resolve(app, get_trade_repository)
    await asyncio.to_thread(repository.fetch)
    if repository.error:
        logger.error(f"Initial trade fetch failed: {repository.error}")
    yield
    # only an editor that was actually opened can hold a pending save
    if get_autosave not in app.dependency_overrides and not get_autosave.cache_info().currsize:
        return
    autosave = _resolve(app, get_autosave)
    if autosave.pending:
        logger.info("Flushing pending strategy autosave before shutdown")
        await autosave.flush()


app = FastAPI(
    title="Trade Journal API",
    description="Trade logging, statistics and pattern analysis for a personal trading journal",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure this with your frontend URL in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(trades.router, prefix="/api/trades", tags=["Trades"])
app.include_router(dashboard.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(patterns.router, prefix="/api/patterns", tags=["Patterns"])
app.include_router(strategy.router, prefix="/api/strategy", tags=["Strategy"])


@app.get("/")
async def root():
    """Root endpoint - API status."""
    return {
        "status": "running",
        "service": "Trade Journal API",
        "version": "1.0.0",
        "docs": "/docs",
    }


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "trade-journal-api"}


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler."""
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "detail": str(exc)},
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8084, log_level="error")
