"""
Health Check Endpoints.

This module provides basic system status endpoints (health, version, status)
used for monitoring and deployment verification.
"""

from fastapi import APIRouter

from mylife_companion import __version__
from mylife_companion.server.core import constant

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Check the operational status of the API server.",
    response_description="Status object.",
)
async def health_check():
    """
    Health check endpoint.

    Returns a simple status indicator to confirm the server is running and reachable.
    """
    return {"status": "ok"}


@router.get(
    "/version",
    summary="Get Version",
    description="Retrieve version information for the API server.",
    response_description="Version object.",
)
async def version():
    """
    Get API version.

    Returns the package version and the supported schema version.
    """
    return {"version": __version__, "schema_version": constant.SCHEMA_VERSION}


@router.get(
    f"{constant.API_PREFIX}/status",
    summary="Server Status",
    description="Liveness message kept for the web client.",
)
async def server_status():
    return {"message": "Server is running!"}
