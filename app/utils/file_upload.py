"""
File Upload Utility - Image uploads for profile pictures and institution logos.

Supported formats (by declared MIME type, content is not sniffed):
- JPEG (image/jpeg, image/jpg)
- PNG (image/png)
- GIF (image/gif)

Accepted files are written to <upload_dir>/<unix-ms-timestamp>_<filename>
and the resulting path string is what gets stored in the database.
"""

import os
import re
import time
from contextlib import contextmanager
from typing import Optional
from fastapi import UploadFile

from app.core.config import get_settings
from app.core.errors import FileTypeError, FileTooLargeError, ValidationError
from app.core.logging import get_logger

logger = get_logger("uploads")

ALLOWED_MIME_PATTERN = re.compile(r"jpeg|jpg|png|gif")
INVALID_TYPE_MESSAGE = "Invalid file type. Only JPEG, PNG, and GIF are allowed."


def has_file(file: Optional[UploadFile]) -> bool:
    """True when the multipart field actually carried a file."""
    return file is not None and bool(file.filename)


def validate_image(file: UploadFile) -> None:
    """
    Check the declared MIME type against the allow-list.

    Raises:
        FileTypeError when the type is missing or not an allowed image type
    """
    if not ALLOWED_MIME_PATTERN.search(file.content_type or ""):
        raise FileTypeError(INVALID_TYPE_MESSAGE)


def build_stored_name(filename: str, now_ms: int = None) -> str:
    """<unix-ms-timestamp>_<original filename>, stripped of any directory part."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    base = os.path.basename(filename.replace("\\", "/"))
    if not base:
        raise ValidationError("No filename provided")
    return f"{now_ms}_{base}"


def save_upload(file: UploadFile) -> str:
    """
    Write an already validated upload to disk.

    Reads the spooled file directly so it can be called from plain `def`
    handlers running in the threadpool.

    Returns:
        The stored path, e.g. "uploads/1718000000000_avatar.png"

    Raises:
        FileTooLargeError above the configured size ceiling
    """
    settings = get_settings()
    max_bytes = settings.max_upload_mb * 1024 * 1024

    file.file.seek(0)
    content = file.file.read()
    if len(content) > max_bytes:
        raise FileTooLargeError(f"File too large. Maximum size: {settings.max_upload_mb}MB")

    os.makedirs(settings.upload_dir, exist_ok=True)
    now_ms = int(time.time() * 1000)
    while True:
        path = os.path.join(settings.upload_dir, build_stored_name(file.filename, now_ms))
        try:
            # never overwrite an upload another row already points at
            with open(path, "xb") as out:
                out.write(content)
            break
        except FileExistsError:
            now_ms += 1

    logger.info("Stored upload %s (%d bytes)", path, len(content))
    return path


def discard_upload(path: Optional[str]) -> None:
    """Remove a stored upload whose database row never made it."""
    if not path:
        return
    try:
        os.remove(path)
        logger.info("Discarded upload %s", path)
    except FileNotFoundError:
        pass


@contextmanager
def discard_on_error(path: Optional[str]):
    """Remove the stored upload again if the block raises."""
    try:
        yield
    except Exception:
        discard_upload(path)
        raise
