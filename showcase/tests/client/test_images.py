import base64

import pytest

from showcase.client.errors import ValidationError
from showcase.client.images import (
    encode_data_url,
    generate_preview,
    guess_content_type,
    load_image,
    validate_image,
)
from showcase.models.models.collections import MAX_IMAGE_SIZE, ImageUpload


class TestValidateImage:
    @pytest.mark.parametrize("content_type", ["image/jpeg", "image/png", "image/webp", "IMAGE/GIF"])
    def test_allowed_types(self, content_type, png_bytes):
        upload = ImageUpload(filename="x", content_type=content_type, content=png_bytes)
        assert validate_image(upload) is upload

    @pytest.mark.parametrize("content_type", ["image/svg+xml", "application/pdf", "text/plain"])
    def test_disallowed_types(self, content_type, png_bytes):
        upload = ImageUpload(filename="x", content_type=content_type, content=png_bytes)
        with pytest.raises(ValidationError, match="valid image file"):
            validate_image(upload)

    def test_exactly_max_size_is_accepted(self):
        upload = ImageUpload(filename="x.jpg", content_type="image/jpeg", content=b"\x00" * MAX_IMAGE_SIZE)
        validate_image(upload)

    def test_one_byte_over_is_rejected(self):
        upload = ImageUpload(
            filename="x.jpg", content_type="image/jpeg", content=b"\x00" * (MAX_IMAGE_SIZE + 1)
        )
        with pytest.raises(ValidationError, match="Maximum size is 5MB"):
            validate_image(upload)

    def test_empty_file_is_rejected(self):
        upload = ImageUpload(filename="x.png", content_type="image/png", content=b"")
        with pytest.raises(ValidationError, match="empty"):
            validate_image(upload)


class TestLoadImage:
    def test_reads_file_and_guesses_type(self, tmp_path, png_bytes):
        path = tmp_path / "still.png"
        path.write_bytes(png_bytes)

        upload = load_image(str(path))

        assert upload.filename == "still.png"
        assert upload.content_type == "image/png"
        assert upload.content == png_bytes

    def test_missing_file(self, tmp_path):
        with pytest.raises(ValidationError, match="not found"):
            load_image(str(tmp_path / "nope.jpg"))

    @pytest.mark.parametrize(
        "filename, expected",
        [("a.webp", "image/webp"), ("a.JPG", "image/jpeg"), ("a.unknownext", "application/octet-stream")],
    )
    def test_guess_content_type(self, filename, expected):
        assert guess_content_type(filename) == expected


class TestPreview:
    def test_encode_data_url(self):
        upload = ImageUpload(filename="a.gif", content_type="image/gif", content=b"GIF89a")
        assert encode_data_url(upload) == "data:image/gif;base64," + base64.b64encode(b"GIF89a").decode()

    @pytest.mark.asyncio
    async def test_generate_preview(self, png_bytes):
        upload = ImageUpload(filename="a.png", content_type="image/png", content=png_bytes)
        preview = await generate_preview(upload)
        assert base64.b64decode(preview.split(",", 1)[1]) == png_bytes
