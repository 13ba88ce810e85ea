"""
MyLife Companion Server Package.

This package contains the web server implementation for the MyLife Companion API.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration and constants.
    services: Dependencies and domain logic shared by several routers.
    exception_handlers: Error-to-response mapping.
    middleware: Request logging and tracing.
"""
