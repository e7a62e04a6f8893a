"""
Prediction Service Implementation

Data retrieval -> boundary validation -> engine -> result.
The engine itself never touches the network.
"""

import logging
import random
from datetime import datetime
from typing import Optional

from stockpredict.schemas.prediction import PredictionRequest, PredictionResult
from stockpredict.services.data_ingestion import (
    DataIngestionServiceInterface,
    get_data_ingestion_service,
)
from stockpredict.services.data_ingestion.stock_list import normalize_ticker
from stockpredict.services.prediction.interface import PredictionServiceInterface
from stockpredict.services.prediction.resolver import resolve
from stockpredict.services.prediction.validation import build_price_series

logger = logging.getLogger(__name__)


class PredictionService(PredictionServiceInterface):
    """
    Prediction Service.

    Raises MalformedInputError for bad tickers or price data and
    DataUnavailableError when no source has the ticker.
    """

    def __init__(
        self,
        data_service: Optional[DataIngestionServiceInterface] = None,
        rng: Optional[random.Random] = None,
    ):
        self._data_service = data_service or get_data_ingestion_service()
        self._rng = rng or random.Random()

    @property
    def name(self) -> str:
        return "PredictionService"

    async def execute(self, input_data: PredictionRequest) -> PredictionResult:
        ticker = normalize_ticker(input_data.ticker)

        stock = await self._data_service.execute(ticker)
        series = build_price_series(stock.history, ticker)

        prediction = resolve(series, self._rng)
        if prediction.is_fallback:
            logger.info(
                f"Only {len(series)} closes for {ticker}; using low-data fallback"
            )

        logger.info(
            f"Predicted {ticker}: {prediction.direction.value} "
            f"({prediction.confidence}% confidence)"
        )

        return PredictionResult(
            ticker=ticker,
            direction=prediction.direction,
            confidence=prediction.confidence,
            is_fallback=prediction.is_fallback,
            current_price=stock.current_price,
            change=stock.change,
            change_percent=stock.change_percent,
            history=stock.history,
            predicted_at=datetime.utcnow(),
        )

    async def health_check(self) -> bool:
        return await self._data_service.health_check()


# Singleton instance
_service_instance: Optional[PredictionService] = None


def get_prediction_service() -> PredictionService:
    """Get or create prediction service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = PredictionService()
    return _service_instance
