"""
SQLAlchemy models for StockPredict database.

Uses SQLite for local persistence of prediction history.
"""

import uuid
from datetime import datetime

from sqlalchemy import (
    Column,
    String,
    Float,
    Integer,
    DateTime,
    Index,
)
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class PredictionRecord(Base):
    """
    A prediction a user asked for, with the price at the time.
    current_price is refreshed later to track how the call played out.
    """
    __tablename__ = "prediction_history"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(50), nullable=False, default="default", index=True)
    ticker = Column(String(12), nullable=False, index=True)

    # Engine output
    direction = Column(String(4), nullable=False)  # UP, DOWN
    confidence = Column(Integer, nullable=False)

    # Quote at prediction time
    search_price = Column(Float, nullable=False)
    search_change = Column(Float, nullable=False, default=0.0)

    # Latest observed price and P&L percent against search_price
    current_price = Column(Float, nullable=True)
    current_profit_loss = Column(Float, nullable=True)

    searched_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, nullable=True)

    __table_args__ = (
        Index("ix_history_user_searched", "user_id", "searched_at"),
    )
