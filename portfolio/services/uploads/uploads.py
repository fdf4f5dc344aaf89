"""
Project image uploads stored on the local filesystem.

Images live under ``UPLOAD_ROOT/PROJECT_SUBDIR`` and are referenced by URL
(``/uploads/projects/<name>``). Removal is best-effort: callers get a bool,
never an exception.
"""
import asyncio
import random
import time
from pathlib import Path
from typing import Optional

from fastapi import UploadFile

from config import upload_config
from portfolio.utils.errors import ValidationFailedError
from portfolio.utils.logger_utils import logger


def _upload_root() -> Path:
    return Path(upload_config["UPLOAD_ROOT"])


def has_upload(image: Optional[UploadFile]) -> bool:
    """Browsers send an empty, unnamed part when no file was chosen."""
    return image is not None and bool(image.filename)


def _validate_image_type(image: UploadFile) -> str:
    allowed = upload_config["ALLOWED_EXTENSIONS"]
    ext = Path(image.filename or "").suffix.lower()
    subtype = (image.content_type or "").rsplit("/", 1)[-1].lower()
    if ext.lstrip(".") not in allowed or subtype not in allowed:
        raise ValidationFailedError("Only image files are allowed")
    return ext


def _stored_name(ext: str) -> str:
    return f"{int(time.time() * 1000)}-{random.randint(0, 10**9 - 1)}{ext}"


async def save_project_image(image: UploadFile) -> str:
    """Validate and store an uploaded image, returning its public URL."""
    ext = _validate_image_type(image)

    limit = upload_config["MAX_UPLOAD_BYTES"]
    data = await image.read(limit + 1)
    if len(data) > limit:
        raise ValidationFailedError(f"Image exceeds the {limit // (1024 * 1024)}MB upload limit")

    directory = _upload_root() / upload_config["PROJECT_SUBDIR"]
    directory.mkdir(parents=True, exist_ok=True)
    name = _stored_name(ext)
    await asyncio.to_thread((directory / name).write_bytes, data)
    logger.info(f"Stored project image {name} ({len(data)} bytes)")
    return f"{upload_config['URL_PREFIX']}/{upload_config['PROJECT_SUBDIR']}/{name}"


def image_path_for_url(image_url: Optional[str]) -> Optional[Path]:
    """Map an ``/uploads/...`` URL back to a path inside the upload root."""
    prefix = upload_config["URL_PREFIX"].rstrip("/") + "/"
    if not image_url or not image_url.startswith(prefix):
        return None
    root = _upload_root().resolve()
    path = (root / image_url[len(prefix):]).resolve()
    if root not in path.parents:
        logger.warning(f"Refusing to resolve image outside upload root: {image_url}")
        return None
    return path


def remove_uploaded_image(image_url: Optional[str]) -> bool:
    """Delete the file behind ``image_url``; True only if a file was removed."""
    path = image_path_for_url(image_url)
    if path is None:
        return False
    try:
        path.unlink()
        logger.info(f"Removed project image {path.name}")
        return True
    except FileNotFoundError:
        logger.warning(f"Project image already missing: {path}")
        return False
    except OSError as e:
        logger.warning(f"Could not remove project image {path}: {e}")
        return False
