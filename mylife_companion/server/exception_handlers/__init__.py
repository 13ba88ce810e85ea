"""
Exception handlers for the MyLife Companion server.

This package contains the handlers that map errors to JSON responses and a
setup function to register them with the FastAPI application.
"""

from .global_handler import setup_exception_handlers

__all__ = ["setup_exception_handlers"]
