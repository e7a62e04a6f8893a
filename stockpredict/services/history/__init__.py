"""
History Service

Tracks how stored predictions played out by refreshing their prices.
"""

from stockpredict.services.history.service import refresh_history_prices

__all__ = ["refresh_history_prices"]
