"""
Middleware modules for the MyLife Companion server.

This package contains custom middleware for request/response logging and tracing.
"""

from .logfire_middleware import LogfireMiddleware

__all__ = ["LogfireMiddleware"]
