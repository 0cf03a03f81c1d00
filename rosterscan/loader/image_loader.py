import mimetypes
from collections.abc import Iterable
from pathlib import Path

from rosterscan.extraction.models import ImagePayload
from rosterscan.loader.exceptions import EmptyImageError, UnsupportedImageError

ALLOWED_MIME_TYPES = frozenset({
    "image/jpeg",
    "image/png",
    "image/webp",
    "image/heic",
    "image/heif",
})

_SUFFIX_MIME_TYPES = {
    ".heic": "image/heic",
    ".heif": "image/heif",
    ".webp": "image/webp",
}


def looks_like_image(content: bytes) -> bool:
    if content.startswith(b"\xff\xd8\xff"):  # JPEG
        return True
    if content.startswith(b"\x89PNG\r\n\x1a\n"):  # PNG
        return True
    if content[:4] == b"RIFF" and content[8:12] == b"WEBP":
        return True
    if len(content) >= 12 and content[4:8] == b"ftyp":  # HEIC/HEIF family
        brand = content[8:12]
        return brand in {b"heic", b"heix", b"hevc", b"hevx", b"mif1", b"msf1"}
    return False


def guess_mime_type(path: Path) -> str | None:
    suffix = path.suffix.lower()
    if suffix in _SUFFIX_MIME_TYPES:
        return _SUFFIX_MIME_TYPES[suffix]
    mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type


class ImageLoader:
    """Reads image files from disk into ImagePayloads."""

    def load(self, path: Path) -> ImagePayload:
        """Read one image file.

        Raises:
            FileNotFoundError: if the file does not exist.
            UnsupportedImageError: if the type or content is not a supported image.
            EmptyImageError: if the file is empty.
        """
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        mime_type = guess_mime_type(path)
        if mime_type not in ALLOWED_MIME_TYPES:
            raise UnsupportedImageError(f"Unsupported media type for {path.name}: {mime_type}")
        content = path.read_bytes()
        if not content:
            raise EmptyImageError(f"Image is empty: {path.name}")
        if not looks_like_image(content):
            raise UnsupportedImageError(
                f"{path.name} does not look like a valid supported image"
            )
        return ImagePayload(data=content, mime_type=mime_type, name=path.name)

    def load_many(self, paths: Iterable[Path]) -> list[ImagePayload]:
        return [self.load(path) for path in paths]
