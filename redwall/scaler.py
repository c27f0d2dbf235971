"""Crop and scale an image to fill a screen, encoded as JPEG."""

from __future__ import annotations

import io

from PIL import Image

JPEG_QUALITY = 75


def crop_box(image_width, image_height, screen_width, screen_height):
    """Return the centred (left, top, right, bottom) box with the screen's aspect ratio."""
    if image_width * screen_height > image_height * screen_width:
        crop = image_height * screen_width // screen_height
        offset = (image_width - crop) // 2
        return (offset, 0, offset + crop, image_height)
    crop = image_width * screen_height // screen_width
    offset = (image_height - crop) // 2
    return (0, offset, image_width, offset + crop)


def scale(screen_width: int, screen_height: int, data: bytes) -> bytes:
    """Decode a JPEG or PNG, crop it to fill the screen and return JPEG bytes."""
    if screen_width <= 0 or screen_height <= 0:
        raise ValueError(f"invalid screen size {screen_width}x{screen_height}")
    with Image.open(io.BytesIO(data), formats=("JPEG", "PNG")) as source:
        box = crop_box(source.width, source.height, screen_width, screen_height)
        rgba = source.convert("RGBA")
    # Transparent pixels become black, as with premultiplied colour.
    flat = Image.new("RGB", rgba.size, (0, 0, 0))
    flat.paste(rgba, mask=rgba.getchannel("A"))
    scaled = flat.resize((screen_width, screen_height), Image.Resampling.BICUBIC, box=box)
    buffer = io.BytesIO()
    scaled.save(buffer, format="JPEG", quality=JPEG_QUALITY)
    return buffer.getvalue()