"""Reading a local image file into an inline vCard photo payload."""
from __future__ import annotations

import base64
import logging
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from PIL import Image, UnidentifiedImageError

from .config import MAX_PHOTO_SIZE_BYTES
from .model import Photo
from .validation import MSG_PHOTO_SIZE, MSG_PHOTO_TYPE, validate_photo_file

logger = logging.getLogger("vcard_builder")

MSG_UNREADABLE = "The photo could not be read and was left out."

# What Pillow raises for files it recognises but cannot decode
_BROKEN_IMAGE_ERRORS = (OSError, SyntaxError, ValueError, struct.error)


@dataclass(frozen=True)
class PhotoLoaded:
    """Photo read and encoded; attach it to the record."""

    photo: Photo


@dataclass(frozen=True)
class PhotoRejected:
    """Wrong type or too large. A validation error the user has to fix."""

    reason: str


@dataclass(frozen=True)
class PhotoUnreadable:
    """Missing, unreadable or corrupt file. The card is built without a photo."""

    reason: str


PhotoResult = Union[PhotoLoaded, PhotoRejected, PhotoUnreadable]


def load_photo(path: Path) -> PhotoResult:
    """
    Load an image for embedding.

    The format comes from Pillow rather than the file extension. The image is
    verified and fully decoded before its bytes are encoded, so a truncated
    or damaged file never ends up in the card.
    """
    path = Path(path)
    try:
        size = path.stat().st_size
        if size > MAX_PHOTO_SIZE_BYTES:
            logger.warning("Photo %s rejected: %d bytes", path, size)
            return PhotoRejected(MSG_PHOTO_SIZE)

        with Image.open(path) as img:
            subtype = img.format
            error = validate_photo_file(Image.MIME.get(subtype), size)
            if error:
                logger.warning("Photo %s rejected: %s", path, error)
                return PhotoRejected(error)
            img.verify()

        # verify() leaves the image unusable; reopen to decode the pixel data
        with Image.open(path) as img:
            img.load()
        data = path.read_bytes()
    except UnidentifiedImageError:
        logger.warning("Photo %s rejected: not a recognised image", path)
        return PhotoRejected(MSG_PHOTO_TYPE)
    except _BROKEN_IMAGE_ERRORS as e:
        logger.warning("Photo %s could not be read: %s", path, e)
        return PhotoUnreadable(MSG_UNREADABLE)

    encoded = base64.b64encode(data).decode("ascii")
    logger.debug("Loaded %s photo (%d bytes)", subtype, size)
    return PhotoLoaded(Photo(base64=encoded, mime_subtype=subtype))
