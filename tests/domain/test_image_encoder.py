"""Unit tests for turning uploads into data URIs."""

import base64

import pytest

from workshop.domain.exceptions import ValidationError
from workshop.domain.service.image_encoder import encode_image, sniff_mime_type

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16
JPEG = b"\xff\xd8\xff\xe0" + b"\x00" * 16


class TestSniffMimeType:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (PNG, "image/png"),
            (JPEG, "image/jpeg"),
            (b"GIF89a....", "image/gif"),
            (b"RIFF\x00\x00\x00\x00WEBPVP8 ", "image/webp"),
            (b'<?xml version="1.0"?><svg xmlns="http://www.w3.org/2000/svg"/>', "image/svg+xml"),
        ],
    )
    def test_known_formats(self, raw, expected):
        assert sniff_mime_type(raw) == expected

    def test_unknown_bytes(self):
        assert sniff_mime_type(b"hello world") is None


class TestEncodeImage:

    def test_produces_data_uri(self):
        uri = encode_image(PNG, filename="chair.png")
        prefix = "data:image/png;base64,"
        assert uri.startswith(prefix)
        assert base64.b64decode(uri[len(prefix):]) == PNG

    def test_content_wins_over_extension(self):
        assert encode_image(JPEG, filename="photo.png").startswith("data:image/jpeg;")

    def test_falls_back_to_extension(self):
        assert encode_image(b"\x00\x01", filename="icon.ico").startswith("data:image/")

    def test_explicit_mime_type(self):
        assert encode_image(b"\x00", mime_type="image/avif").startswith("data:image/avif;")

    def test_empty_rejected(self):
        with pytest.raises(ValidationError, match="empty"):
            encode_image(b"", filename="chair.png")

    def test_non_image_rejected(self):
        with pytest.raises(ValidationError, match="not a recognised image"):
            encode_image(b"just text", filename="notes.txt")
