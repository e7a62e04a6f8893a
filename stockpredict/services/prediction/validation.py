"""
Boundary validation for price data entering the engine.
"""

from typing import Iterable, Union

from pydantic import ValidationError

from stockpredict.schemas.market import PricePoint, PriceSeries
from stockpredict.services.base import MalformedInputError


def build_price_series(
    points: Iterable[Union[PricePoint, dict]], ticker: str = ""
) -> PriceSeries:
    """
    Validate provider closes into a PriceSeries.

    Raises:
        MalformedInputError: On non-positive prices or unordered/duplicate dates
    """
    raw = [p.model_dump() if isinstance(p, PricePoint) else p for p in points]
    try:
        return PriceSeries(points=raw)
    except ValidationError as e:
        raise MalformedInputError(
            "PredictionService",
            f"Malformed price history{f' for {ticker}' if ticker else ''}",
            details={"errors": [err["msg"] for err in e.errors()]},
        ) from e
