"""
Prediction API Endpoints

Directional UP/DOWN call with confidence for a ticker.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from stockpredict.db.database import get_db, add_prediction
from stockpredict.schemas.prediction import PredictionRequest, PredictionResult
from stockpredict.services.base import DataUnavailableError, MalformedInputError
from stockpredict.services.prediction import (
    PredictionServiceInterface,
    get_prediction_service,
)

logger = logging.getLogger(__name__)

router = APIRouter()


async def _predict(
    request: PredictionRequest,
    service: PredictionServiceInterface,
    db: AsyncSession,
) -> PredictionResult:
    try:
        result = await service.execute(request)
    except MalformedInputError as e:
        raise HTTPException(
            status_code=e.status_code, detail={"message": e.message, **e.details}
        )
    except DataUnavailableError as e:
        # RateLimitError included (429)
        logger.warning(f"Prediction for {request.ticker} failed: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.message)

    if request.save:
        await add_prediction(db, result, request.user_id)

    return result


@router.post("", response_model=PredictionResult)
async def predict(
    request: PredictionRequest,
    service: PredictionServiceInterface = Depends(get_prediction_service),
    db: AsyncSession = Depends(get_db),
):
    """
    Predict the next-day direction of a ticker.

    Below 20 days of history the call is a coin flip at 55% confidence
    (`is_fallback` is set).

    NOTE: This is a technical-analysis heuristic, not financial advice.
    """
    return await _predict(request, service, db)


@router.get("/{ticker}", response_model=PredictionResult)
async def predict_ticker(
    ticker: str,
    save: bool = False,
    service: PredictionServiceInterface = Depends(get_prediction_service),
    db: AsyncSession = Depends(get_db),
):
    """Predict without a request body; not saved to history by default."""
    return await _predict(PredictionRequest(ticker=ticker, save=save), service, db)
