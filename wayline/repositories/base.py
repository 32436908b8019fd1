from abc import ABC, abstractmethod
from typing import Any, List, Sequence, Tuple

from wayline.models.route import SegmentResult

QueryParams = List[Tuple[str, str]]


class BaseTransport(ABC):
    """Fetches and parses JSON documents over HTTP."""

    @abstractmethod
    async def get_json(self, url: str, params: Sequence[Tuple[str, str]]) -> Any:
        """GET ``url`` with the given (repeatable) query parameters and return the parsed body."""
        pass


class BaseDirectionsRepository(ABC):
    """Base class for directions providers."""

    @abstractmethod
    async def fetch_segment(self, params: QueryParams, index: int = 0) -> SegmentResult:
        """Request one route segment and convert the provider response."""
        pass
