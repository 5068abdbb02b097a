"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Base for post use cases: one request model in, one response out."""

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
