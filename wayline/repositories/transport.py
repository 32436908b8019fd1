from typing import Any, Sequence, Tuple
import logging
import aiohttp

from wayline.repositories.base import BaseTransport

logger = logging.getLogger(__name__)


class AiohttpTransport(BaseTransport):
    def __init__(self, timeout: float | None = None):
        self.timeout = aiohttp.ClientTimeout(total=timeout)

    async def get_json(self, url: str, params: Sequence[Tuple[str, str]]) -> Any:
        """GET ``url`` and decode the JSON body whatever its content type."""
        logger.debug(f"GET {url} with {len(params)} query parameters")
        async with aiohttp.ClientSession(timeout=self.timeout) as session:
            async with session.get(url, params=list(params)) as response:
                response.raise_for_status()
                return await response.json(content_type=None)
