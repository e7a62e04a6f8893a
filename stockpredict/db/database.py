"""
Database connection and session management.

Uses SQLite with aiosqlite for async support.
"""

import os
import logging
from datetime import datetime
from typing import AsyncGenerator, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from stockpredict.db.models import Base, PredictionRecord
from stockpredict.core.config import settings
from stockpredict.schemas.prediction import PredictionResult

logger = logging.getLogger(__name__)

# Default location: <project>/data/stockpredict.db
DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "data")

SQLITE_PATH = settings.sqlite_path or os.path.join(DATA_DIR, "stockpredict.db")
DATABASE_URL = f"sqlite+aiosqlite:///{SQLITE_PATH}"


def create_sqlite_engine(url: str = DATABASE_URL) -> AsyncEngine:
    """
    Async SQLite engine sharing one connection.

    Pass "sqlite+aiosqlite://" for a private in-memory database.
    """
    return create_async_engine(
        url,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Records stay readable after commit for building responses
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


engine = create_sqlite_engine()
AsyncSessionLocal = create_session_factory(engine)


async def init_db(bind: Optional[AsyncEngine] = None) -> None:
    """Create the history tables if missing. Runs at startup."""
    bind = bind or engine
    try:
        if bind is engine:
            os.makedirs(os.path.dirname(SQLITE_PATH) or ".", exist_ok=True)
        async with bind.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(f"History database ready: {bind.url}")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise


async def close_db() -> None:
    """Dispose the shared connection. Runs at shutdown."""
    await engine.dispose()
    logger.info("Database connections closed")


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Request-scoped session for FastAPI Depends().

    Commits when the route returns, rolls back if it raised.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


# CRUD helper functions

def profit_loss_percent(search_price: float, current_price: float) -> float:
    """Percent move from the price at prediction time."""
    return (current_price - search_price) / search_price * 100


async def add_prediction(
    session: AsyncSession, result: PredictionResult, user_id: str = "default"
) -> PredictionRecord:
    """Record a prediction in the user's history."""
    record = PredictionRecord(
        user_id=user_id,
        ticker=result.ticker,
        direction=result.direction.value,
        confidence=result.confidence,
        search_price=result.current_price,
        search_change=result.change,
        current_price=result.current_price,
        current_profit_loss=0.0,
        searched_at=result.predicted_at,
    )
    session.add(record)
    await session.flush()
    return record


async def get_prediction_history(
    session: AsyncSession, user_id: str = "default", limit: Optional[int] = None
) -> Sequence[PredictionRecord]:
    """Get a user's predictions, newest first."""
    query = (
        select(PredictionRecord)
        .where(PredictionRecord.user_id == user_id)
        .order_by(PredictionRecord.searched_at.desc())
    )
    if limit:
        query = query.limit(limit)

    result = await session.execute(query)
    return result.scalars().all()


async def get_prediction(
    session: AsyncSession, record_id: str, user_id: Optional[str] = None
) -> Optional[PredictionRecord]:
    """Get one history entry by id, optionally restricted to its owner."""
    query = select(PredictionRecord).where(PredictionRecord.id == record_id)
    if user_id is not None:
        query = query.where(PredictionRecord.user_id == user_id)

    result = await session.execute(query)
    return result.scalar_one_or_none()


async def update_current_price(
    session: AsyncSession, record: PredictionRecord, current_price: float
) -> PredictionRecord:
    """Store the latest price and P&L for a history entry."""
    record.current_price = current_price
    record.current_profit_loss = profit_loss_percent(record.search_price, current_price)
    record.updated_at = datetime.utcnow()
    await session.flush()
    return record


async def delete_prediction(
    session: AsyncSession, record_id: str, user_id: str = "default"
) -> bool:
    """Delete one of a user's history entries. False if the user has no such entry."""
    record = await get_prediction(session, record_id, user_id)
    if record is None:
        return False
    await session.delete(record)
    await session.flush()
    return True
