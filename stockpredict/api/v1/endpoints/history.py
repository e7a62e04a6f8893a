"""
History API Endpoints

Stored predictions and their performance since.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from stockpredict.db.database import get_db, get_prediction_history, delete_prediction
from stockpredict.schemas.history import HistoryEntry, HistoryResponse, RefreshResult
from stockpredict.services.data_ingestion import (
    DataIngestionServiceInterface,
    get_data_ingestion_service,
)
from stockpredict.services.history import refresh_history_prices

router = APIRouter()


@router.get("", response_model=HistoryResponse)
async def list_history(
    user_id: str = "default",
    limit: int = Query(default=50, ge=1, le=500),
    db: AsyncSession = Depends(get_db),
):
    """Get a user's predictions, newest first."""
    records = await get_prediction_history(db, user_id, limit)
    entries = [HistoryEntry.model_validate(r) for r in records]
    return HistoryResponse(entries=entries, count=len(entries))


@router.post("/refresh", response_model=RefreshResult)
async def refresh_history(
    user_id: str = "default",
    db: AsyncSession = Depends(get_db),
    data_service: DataIngestionServiceInterface = Depends(get_data_ingestion_service),
):
    """
    Re-quote every ticker in the history and update current P&L.

    Quotes are fetched in small batches to respect provider rate limits,
    so large histories take a while.
    """
    updated, failed = await refresh_history_prices(db, data_service, user_id)
    records = await get_prediction_history(db, user_id)
    return RefreshResult(
        updated=updated,
        failed=failed,
        entries=[HistoryEntry.model_validate(r) for r in records],
    )


@router.delete("/{record_id}")
async def delete_history_entry(
    record_id: str,
    user_id: str = "default",
    db: AsyncSession = Depends(get_db),
):
    """Delete one history entry owned by `user_id`."""
    if not await delete_prediction(db, record_id, user_id):
        raise HTTPException(status_code=404, detail=f"History entry {record_id} not found")
    return {"deleted": record_id}
