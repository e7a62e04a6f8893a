"""
Data Ingestion Service

CONTRACT:
    Input:  ticker symbol
    Output: StockData

RESPONSIBILITIES:
    - Fetch daily closes and quotes from Yahoo Finance
    - Fetch from Alpha Vantage when an API key is configured
    - Fall back across sources, surface DataUnavailableError when all fail
    - Batch quote refreshes to respect rate limits
    - Ticker format validation and search
"""

from stockpredict.services.data_ingestion.interface import DataIngestionServiceInterface
from stockpredict.services.data_ingestion.service import (
    DataIngestionService,
    DataSource,
    get_data_ingestion_service,
)

__all__ = [
    "DataIngestionServiceInterface",
    "DataIngestionService",
    "DataSource",
    "get_data_ingestion_service",
]
