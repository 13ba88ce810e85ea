"""HTTP client for the MyLife Companion API."""

from .client import MyLifeClient
from .errors import MyLifeApiError, MyLifeNotFoundError

__all__ = ["MyLifeApiError", "MyLifeClient", "MyLifeNotFoundError"]
