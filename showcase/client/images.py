import asyncio
import base64
import mimetypes
import os

from showcase.client.errors import ValidationError
from showcase.models.models.collections import ALLOWED_IMAGE_TYPES, MAX_IMAGE_SIZE, ImageUpload

INVALID_TYPE_MESSAGE = "Please select a valid image file (JPEG, PNG, WebP, or GIF)"
TOO_LARGE_MESSAGE = "Image file is too large. Maximum size is 5MB"


def validate_image(upload: ImageUpload) -> ImageUpload:
    """
    Check MIME type and size of an image before it is accepted by a form.

    Raises:
        ValidationError: disallowed type, empty file, or more than 5MB.
    """
    if upload.content_type.lower() not in ALLOWED_IMAGE_TYPES:
        raise ValidationError(INVALID_TYPE_MESSAGE)
    if upload.size == 0:
        raise ValidationError("Image file is empty")
    if upload.size > MAX_IMAGE_SIZE:
        raise ValidationError(TOO_LARGE_MESSAGE)
    return upload


def guess_content_type(filename: str) -> str:
    content_type, _ = mimetypes.guess_type(filename)
    if content_type is None and filename.lower().endswith(".webp"):
        content_type = "image/webp"
    return content_type or "application/octet-stream"


def load_image(path: str) -> ImageUpload:
    """Read an image from disk; the MIME type is guessed from the file name."""
    path = os.path.expanduser(path)
    if not os.path.isfile(path):
        raise ValidationError(f"Image file not found: {path}")
    with open(path, "rb") as f:
        content = f.read()
    return ImageUpload(
        filename=os.path.basename(path),
        content_type=guess_content_type(path),
        content=content,
    )


def encode_data_url(upload: ImageUpload) -> str:
    encoded = base64.b64encode(upload.content).decode("ascii")
    return f"data:{upload.content_type};base64,{encoded}"


async def generate_preview(upload: ImageUpload) -> str:
    """Base64 ``data:`` URL of the image, encoded off the event loop."""
    return await asyncio.to_thread(encode_data_url, upload)
