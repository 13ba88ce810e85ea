"""
Avatar upload storage.

Avatars are written to the configured upload directory under a
``<epoch milliseconds>-<original name>`` file name and served back as static
files.
"""

from __future__ import annotations

import re
import time
from pathlib import Path

from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

from mylife_companion.core.logging_config import get_logger

logger = get_logger(__name__)

_CHUNK_SIZE = 64 * 1024
_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


class AvatarRejectedError(ValueError):
    """Raised when an uploaded avatar is not an acceptable image."""

    def __init__(self, message: str, *, too_large: bool = False) -> None:
        super().__init__(message)
        self.too_large = too_large


def avatar_file_name(original_name: str, now_ms: int | None = None) -> str:
    """Build the stored file name for an upload, stripping path parts and odd characters."""
    base = Path(original_name or "avatar").name
    safe = _UNSAFE_CHARS.sub("_", base).strip("._") or "avatar"
    stamp = now_ms if now_ms is not None else int(time.time() * 1000)
    return f"{stamp}-{safe}"


async def save_avatar(upload: UploadFile, directory: str, max_bytes: int) -> str:
    """
    Validate and store an uploaded avatar image.

    Args:
        upload: Multipart file from the request
        directory: Destination directory, created when missing
        max_bytes: Largest accepted file size

    Returns:
        The stored file name

    Raises:
        AvatarRejectedError: If the upload is not an image or is too large
    """
    content_type = upload.content_type or ""
    if not content_type.startswith("image/"):
        raise AvatarRejectedError("Only image files are allowed!")

    data = bytearray()
    while True:
        chunk = await upload.read(_CHUNK_SIZE)
        if not chunk:
            break
        data.extend(chunk)
        if len(data) > max_bytes:
            raise AvatarRejectedError("File too large! Maximum size is 5MB.", too_large=True)

    file_name = avatar_file_name(upload.filename or "avatar")
    target_dir = Path(directory)
    await run_in_threadpool(target_dir.mkdir, parents=True, exist_ok=True)
    await run_in_threadpool((target_dir / file_name).write_bytes, bytes(data))
    logger.info(f"Stored avatar {file_name} ({len(data)} bytes)")
    return file_name
