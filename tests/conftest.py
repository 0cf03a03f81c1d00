from collections.abc import Callable

import pytest

from rosterscan.extraction.models import ImagePayload

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 32


@pytest.fixture()
def png_bytes() -> bytes:
    """Bytes with a valid PNG signature."""
    return PNG_BYTES


@pytest.fixture()
def jpeg_bytes() -> bytes:
    """Bytes with a valid JPEG signature."""
    return JPEG_BYTES


@pytest.fixture()
def image_payload() -> ImagePayload:
    return ImagePayload(data=PNG_BYTES, mime_type="image/png", name="roster.png")


@pytest.fixture()
def make_images() -> Callable[[int], list[ImagePayload]]:
    """Factory for N distinct PNG payloads named page1.png, page2.png, ..."""

    def _make(count: int) -> list[ImagePayload]:
        return [
            ImagePayload(data=PNG_BYTES, mime_type="image/png", name=f"page{i + 1}.png")
            for i in range(count)
        ]

    return _make
