"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Base use case for orchestrating domain services.

    Use cases take a request model and return a response model; the
    interface layer only ever talks to use cases.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
