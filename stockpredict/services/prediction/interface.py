"""
Prediction Service Interface

Defines the contract for the prediction layer.
"""

from abc import abstractmethod

from stockpredict.services.base import BaseService
from stockpredict.schemas.prediction import PredictionRequest, PredictionResult


class PredictionServiceInterface(BaseService[PredictionRequest, PredictionResult]):
    """
    Prediction Service Contract.

    INPUT: PredictionRequest
        - ticker: symbol to predict

    OUTPUT: PredictionResult
        - direction, confidence from the engine
        - current_price, change, change_percent, history carried through
          from data retrieval unchanged
    """

    @property
    def name(self) -> str:
        return "PredictionService"

    @abstractmethod
    async def execute(self, input_data: PredictionRequest) -> PredictionResult:
        """Fetch data for the ticker and predict its next move."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        pass
