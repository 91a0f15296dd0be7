"""
pipelines/photos.py

Photo handling for profile pictures and greetings.
Converts uploads to RGB, shrinks them so the longest side is at most MAX_SIDE,
and encodes them as JPEG data URIs that fit inside a storage slot.
"""

import base64
import logging
from io import BytesIO
from typing import Optional

from PIL import Image, ImageOps, UnidentifiedImageError

logger = logging.getLogger(__name__)

MAX_SIDE: int = 256
JPEG_QUALITY: int = 85


def prepare_photo(image: Image.Image, max_side: int = MAX_SIDE) -> Image.Image:
    """
    Normalise a PIL image for storage.

    Steps:
      1. Apply the EXIF orientation so phone photos are upright.
      2. Convert to RGB (handles RGBA, palette and grayscale uploads).
      3. Shrink so the longest side is *max_side*, preserving aspect ratio.
    """
    image = ImageOps.exif_transpose(image)
    if image.mode != "RGB":
        logger.debug("Converting photo from mode=%s to RGB.", image.mode)
        image = image.convert("RGB")

    original_size = image.size
    if max(original_size) > max_side:
        image = image.copy()
        image.thumbnail((max_side, max_side), Image.LANCZOS)
        logger.debug("Resized photo from %s to %s.", original_size, image.size)
    return image


def to_data_uri(image: Image.Image) -> str:
    buf = BytesIO()
    image.save(buf, format="JPEG", quality=JPEG_QUALITY)
    encoded = base64.b64encode(buf.getvalue()).decode("ascii")
    return f"data:image/jpeg;base64,{encoded}"


def photo_data_uri(data: bytes, max_side: int = MAX_SIDE) -> Optional[str]:
    """
    Turn uploaded bytes into a JPEG data URI, or ``None`` if they are not an image.
    """
    try:
        with Image.open(BytesIO(data)) as img:
            img.load()
            return to_data_uri(prepare_photo(img, max_side=max_side))
    except (UnidentifiedImageError, OSError) as exc:
        logger.warning("Could not read uploaded photo: %s", exc)
        return None
