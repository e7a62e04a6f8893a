"""
Database module for StockPredict.

Provides SQLite database connection and models.
"""

from stockpredict.db.database import get_db, init_db, AsyncSessionLocal
from stockpredict.db.models import Base, PredictionRecord

__all__ = [
    "get_db",
    "init_db",
    "AsyncSessionLocal",
    "Base",
    "PredictionRecord",
]
