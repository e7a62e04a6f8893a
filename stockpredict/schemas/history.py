"""
CONTRACT 3: Prediction History

Stored predictions and how they played out since.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, computed_field

from stockpredict.schemas.prediction import Direction


class HistoryEntry(BaseModel):
    """One stored prediction."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    ticker: str
    direction: Direction
    confidence: int
    search_price: float
    search_change: float
    current_price: Optional[float] = None
    current_profit_loss: Optional[float] = None
    searched_at: datetime
    updated_at: Optional[datetime] = None

    @computed_field
    @property
    def prediction_correct(self) -> Optional[bool]:
        """Whether the price moved the predicted way. None until it moves."""
        if self.current_price is None or self.current_price == self.search_price:
            return None
        went_up = self.current_price > self.search_price
        return went_up == (self.direction == Direction.UP)


class HistoryResponse(BaseModel):
    entries: list[HistoryEntry]
    count: int


class RefreshResult(BaseModel):
    """Outcome of a history price refresh."""

    updated: int
    failed: int
    entries: list[HistoryEntry]
