from dataclasses import dataclass, field

CellValue = str | int | float | bool
ExtractedRow = dict[str, CellValue]


@dataclass(frozen=True)
class ImagePayload:
    """One submitted image: raw bytes plus its media type."""

    data: bytes
    mime_type: str
    name: str = ""


@dataclass(frozen=True)
class ExtractionResult:
    """Sanitized rows extracted from a single image."""

    rows: list[ExtractedRow] = field(default_factory=list)
    headers: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Dataset:
    """Batch-level aggregate of all images, re-indexed from 1."""

    rows: list[ExtractedRow] = field(default_factory=list)
    headers: list[str] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "Dataset":
        return cls(rows=[], headers=[])

    @property
    def is_empty(self) -> bool:
        return not self.rows
