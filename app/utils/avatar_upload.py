"""
Avatar upload handling for contact create/update.

avatar_upload is a FastAPI dependency: it reads the optional "avatarFile" multipart
field and validates type, size and image content. Nothing is written to disk until
save_avatar is called, so a request rejected later leaves no file behind.
"""
import logging
import os
import uuid
from dataclasses import dataclass
from io import BytesIO
from typing import Optional

from fastapi import File, UploadFile
from PIL import Image

from app.core.config import settings
from app.core.exceptions import BadRequest

logger = logging.getLogger(__name__)

AVATAR_FIELD = "avatarFile"

ALLOWED_AVATAR_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"}

# Pillow format name -> stored file extension
ALLOWED_IMAGE_FORMATS = {
    "JPEG": ".jpg",
    "PNG": ".png",
    "GIF": ".gif",
    "WEBP": ".webp",
}


@dataclass
class AvatarFile:
    """An uploaded avatar that passed validation, held in memory."""
    content: bytes
    content_type: str
    extension: str


def _too_large(filename: str, size: int) -> BadRequest:
    logger.warning(f"Rejected avatar {filename!r}: {size} bytes")
    return BadRequest(f"avatarFile must be at most {settings.MAX_AVATAR_SIZE} bytes.")


def validate_avatar(filename: str, content_type: Optional[str], content: bytes) -> AvatarFile:
    """Check MIME type, size and that the bytes decode as an allowed image format."""
    if content_type not in ALLOWED_AVATAR_TYPES:
        logger.warning(f"Rejected avatar {filename!r}: content type {content_type}")
        raise BadRequest("avatarFile must be an image (JPEG, PNG, GIF, WebP).")

    if len(content) > settings.MAX_AVATAR_SIZE:
        raise _too_large(filename, len(content))

    try:
        with Image.open(BytesIO(content)) as img:
            img.verify()
            image_format = img.format
    except Exception as e:
        logger.warning(f"Rejected avatar {filename!r}: not a readable image ({e})")
        raise BadRequest("avatarFile is not a valid image.") from e

    if image_format not in ALLOWED_IMAGE_FORMATS:
        logger.warning(f"Rejected avatar {filename!r}: image format {image_format}")
        raise BadRequest("avatarFile must be an image (JPEG, PNG, GIF, WebP).")

    return AvatarFile(
        content=content,
        content_type=content_type,
        extension=ALLOWED_IMAGE_FORMATS[image_format],
    )


async def avatar_upload(
    avatar_file: Optional[UploadFile] = File(
        None,
        alias=AVATAR_FIELD,
        description="Contact avatar image (JPEG, PNG, GIF, WebP).",
    ),
) -> Optional[AvatarFile]:
    """Dependency: validated avatar, or None when no file was sent."""
    if avatar_file is None or not avatar_file.filename:
        return None
    if avatar_file.size is not None and avatar_file.size > settings.MAX_AVATAR_SIZE:
        raise _too_large(avatar_file.filename, avatar_file.size)
    # One byte past the limit is enough to tell an oversized file apart
    content = await avatar_file.read(settings.MAX_AVATAR_SIZE + 1)
    return validate_avatar(avatar_file.filename, avatar_file.content_type, content)


def save_avatar(avatar: AvatarFile) -> str:
    """Write the avatar under the public avatar dir and return its public path."""
    os.makedirs(settings.avatar_dir, exist_ok=True)
    filename = f"avatar-{uuid.uuid4().hex}{avatar.extension}"
    with open(os.path.join(settings.avatar_dir, filename), "wb") as f:
        f.write(avatar.content)
    return f"{settings.avatar_url_prefix}/{filename}"


def discard_avatar(path: Optional[str]) -> None:
    """Remove a previously saved avatar file. Paths outside the avatar dir are ignored."""
    prefix = settings.avatar_url_prefix + "/"
    if not path or not path.startswith(prefix):
        return
    filename = os.path.basename(path[len(prefix):])
    if not filename:
        return
    try:
        os.remove(os.path.join(settings.avatar_dir, filename))
    except FileNotFoundError:
        logger.info(f"Avatar already gone: {path}")
    except OSError as e:
        logger.warning(f"Could not remove avatar {path}: {e}")
