"""
StockPredict Backend - FastAPI Application

Main entry point for the backend API.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stockpredict.core.config import settings
from stockpredict.api.v1 import router as api_v1_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")

    from stockpredict.db.database import init_db, close_db
    await init_db()

    from stockpredict.services.data_ingestion import get_data_ingestion_service
    data_service = get_data_ingestion_service()
    logger.info(f"Market data sources: {', '.join(data_service.source_names)}")

    yield

    # Shutdown
    logger.info("Shutting down...")
    await data_service.close()
    await close_db()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    StockPredict Stock Trend Prediction API

    ## Architecture
    - **Data Ingestion**: Fetches quotes and daily closes (Yahoo Finance, Alpha Vantage)
    - **Indicator Engine**: SMA/EMA, MACD, RSI, Bollinger Bands, momentum (pure Python/NumPy)
    - **Signal Scorer**: Fixed-weight bullish/bearish vote
    - **Resolver**: UP/DOWN call with volatility-adjusted confidence (55-88%)
    - **History**: Stored predictions with live P&L tracking

    ## Core Principles
    - Deterministic for any series of 20+ closes
    - Confidence is a heuristic score, not a probability of success
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware - allow both frontend ports
cors_origins = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]
# Add any additional origins from settings
if settings.allowed_origins:
    cors_origins.extend([o for o in settings.allowed_origins if o not in cors_origins])

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
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
        "message": "StockPredict Backend API",
        "docs": "/docs",
        "health": "/health",
    }
