"""
Base Service Interface

Every service takes one validated input model and returns one output model.
Failures surface as ServiceError subclasses; the API layer maps each one to
an HTTP status through `status_code`.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class BaseService(ABC, Generic[InputT, OutputT]):
    """Async service with a single entry point and a health probe."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Service name used in logs and error messages."""
        pass

    @abstractmethod
    async def execute(self, input_data: InputT) -> OutputT:
        """
        Run the service.

        Raises:
            ServiceError: If the input is rejected or no result can be produced
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """True when the service can take requests."""
        pass


class ServiceError(Exception):
    """Base exception for service errors."""

    status_code = 500

    def __init__(self, service_name: str, message: str, details: dict = None):
        self.service_name = service_name
        self.message = message
        self.details = details or {}
        super().__init__(f"[{service_name}] {message}")


class MalformedInputError(ServiceError):
    """Input failed a precondition (bad ticker, bad prices, unordered dates)."""

    status_code = 422


class InsufficientHistoryError(ServiceError):
    """Not enough closes to compute anything."""

    status_code = 422


class DataUnavailableError(ServiceError):
    """No market data source could serve the request."""

    status_code = 404


class RateLimitError(DataUnavailableError):
    """A provider throttled the request."""

    status_code = 429
