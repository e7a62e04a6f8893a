"""
Stock API Endpoints

Ticker search and quotes.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from stockpredict.schemas.market import Quote, StockInfo
from stockpredict.services.base import MalformedInputError
from stockpredict.services.data_ingestion import (
    DataIngestionServiceInterface,
    get_data_ingestion_service,
)
from stockpredict.services.data_ingestion.stock_list import (
    search_stocks,
    get_popular_stocks,
    normalize_ticker,
)

router = APIRouter()


@router.get("/search", response_model=list[StockInfo])
async def search(
    q: str = Query(default="", max_length=20),
    limit: int = Query(default=15, ge=1, le=50),
):
    """
    Search tickers.

    Any ticker in valid format is returned first, followed by catalogue
    matches. An empty query returns popular stocks.
    """
    return search_stocks(q, limit)


@router.get("/popular", response_model=list[StockInfo])
async def popular():
    """Popular stocks for default display."""
    return get_popular_stocks()


@router.get("/quote/{ticker}", response_model=Quote)
async def get_quote(
    ticker: str,
    data_service: DataIngestionServiceInterface = Depends(get_data_ingestion_service),
):
    """Current price, change and percent change for a ticker."""
    try:
        ticker = normalize_ticker(ticker)
    except MalformedInputError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    quote = await data_service.get_quote(ticker)
    if quote is None:
        raise HTTPException(status_code=404, detail=f"Quote not found for {ticker}")

    return quote
