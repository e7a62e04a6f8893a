"""
History Price Refresh

Re-quotes every ticker in a user's history and updates current price and P&L.
Quotes are fetched in small batches to stay under provider rate limits.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from stockpredict.db.database import get_prediction_history, update_current_price
from stockpredict.services.data_ingestion import DataIngestionServiceInterface

logger = logging.getLogger(__name__)


async def refresh_history_prices(
    session: AsyncSession,
    data_service: DataIngestionServiceInterface,
    user_id: str = "default",
) -> tuple[int, int]:
    """
    Refresh current prices for a user's history.

    Returns:
        (updated, failed) entry counts
    """
    records = await get_prediction_history(session, user_id)
    if not records:
        return 0, 0

    quotes = await data_service.get_quotes([r.ticker for r in records])

    updated = 0
    failed = 0
    for record in records:
        quote = quotes.get(record.ticker)
        if quote is None or quote.current_price <= 0:
            logger.warning(f"No valid price data for {record.ticker}")
            failed += 1
            continue

        await update_current_price(session, record, quote.current_price)
        updated += 1

    logger.info(f"History refresh for {user_id}: {updated} updated, {failed} failed")
    return updated, failed
