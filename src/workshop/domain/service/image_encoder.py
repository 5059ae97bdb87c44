"""Turn uploaded image bytes into a self-contained ``data:`` URI.

The URI is stored verbatim in the product's ``image`` field, so the
catalog never needs separate file hosting.
"""

from __future__ import annotations

import base64
import mimetypes

from workshop.domain.exceptions import ValidationError

# Leading bytes of the formats browsers render in an <img> tag.
_SIGNATURES: list[tuple[bytes, str]] = [
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"BM", "image/bmp"),
]


def sniff_mime_type(raw: bytes) -> str | None:
    """Guess an image MIME type from its first bytes."""
    for signature, mime_type in _SIGNATURES:
        if raw.startswith(signature):
            return mime_type
    if raw[:4] == b"RIFF" and raw[8:12] == b"WEBP":
        return "image/webp"
    head = raw[:256].lstrip().lower()
    if head.startswith(b"<svg") or (head.startswith(b"<?xml") and b"<svg" in head):
        return "image/svg+xml"
    return None


def encode_image(
    raw: bytes,
    filename: str | None = None,
    mime_type: str | None = None,
) -> str:
    """Encode *raw* image bytes as ``data:<mime>;base64,<payload>``.

    The MIME type comes from *mime_type* if given, else from the content,
    else from the file extension. Raises ValidationError for empty input
    or anything that is not an image.
    """
    if not raw:
        raise ValidationError("Image file is empty")

    resolved = mime_type or sniff_mime_type(raw)
    if resolved is None and filename:
        resolved, _ = mimetypes.guess_type(filename)
    if resolved is None or not resolved.startswith("image/"):
        label = filename or "upload"
        raise ValidationError(f"'{label}' is not a recognised image")

    payload = base64.b64encode(raw).decode("ascii")
    return f"data:{resolved};base64,{payload}"
