from functools import lru_cache

from wayline.core.settings import get_settings
from wayline.repositories.base import BaseTransport
from wayline.repositories.transport import AiohttpTransport


@lru_cache()
def get_transport() -> BaseTransport:
    """Get the shared HTTP transport."""
    return AiohttpTransport(timeout=get_settings().REQUEST_TIMEOUT_SECONDS)
