from dataclasses import dataclass, field
from typing import Literal

from rosterscan.extraction.models import Dataset

ProcessingStatus = Literal["idle", "processing", "success", "error"]

DEFAULT_FILE_NAME = "extracted_data"


@dataclass(frozen=True)
class SessionState:
    """Snapshot of one session. Replaced wholesale on every transition."""

    status: ProcessingStatus = "idle"
    dataset: Dataset = field(default_factory=Dataset.empty)
    error: str | None = None
    file_name: str = DEFAULT_FILE_NAME
    image_count: int = 0
