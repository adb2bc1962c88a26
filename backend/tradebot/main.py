"""
TradeBot Backend - FastAPI Application

Main entry point for the signal engine API.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tradebot.core.config import settings
from tradebot.core.logging import setup_logging
from tradebot.api.v1 import router as api_v1_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")

    yield

    # Shutdown
    logger.info("Shutting down...")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    TradeBot Signal Engine API

    ## Architecture
    - **Indicator Engine**: RSI, MACD, Bollinger Bands, SMA, EMA (pure NumPy)
    - **Signal Generator**: Weighted voting into BUY / SELL / HOLD with confidence
    - **Risk Assessor**: Volatility-based LOW / MEDIUM / HIGH classification

    ## Core Principles
    - Deterministic: identical input, identical output
    - Never fails on degenerate input; returns a safe fallback instead
    - No trade execution
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
    }


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "TradeBot Signal Engine API",
        "docs": "/docs",
        "health": "/health",
    }
