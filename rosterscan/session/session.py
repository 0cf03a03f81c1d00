"""Top-level owner of batch state: idle -> processing -> success | error."""

from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path, PurePath

from rosterscan.batch.aggregator import BatchAggregator
from rosterscan.batch.exceptions import CapacityExceededError
from rosterscan.export.clipboard import BaseClipboard, copy_to_clipboard
from rosterscan.export.spreadsheet import BaseSpreadsheetWriter, export_spreadsheet
from rosterscan.extraction.models import Dataset, ImagePayload
from rosterscan.logging.logger import Log
from rosterscan.session.state import DEFAULT_FILE_NAME, SessionState

FALLBACK_ERROR_MESSAGE = "Failed to process images. Please try again."


def batch_file_name(images: Sequence[ImagePayload]) -> str:
    """Derive the output base name from the first image name and the batch size."""
    if not images:
        return DEFAULT_FILE_NAME
    base_name = PurePath(images[0].name).stem or DEFAULT_FILE_NAME
    if len(images) > 1:
        return f"{base_name}_batch_{len(images)}"
    return base_name


class ExtractionSession:
    """Holds the current SessionState and drives the pipeline around it."""

    def __init__(self, aggregator: BatchAggregator) -> None:
        self._aggregator = aggregator
        self._state = SessionState()

    @property
    def state(self) -> SessionState:
        return self._state

    async def submit(self, images: Sequence[ImagePayload]) -> SessionState:
        """Run one batch and return the resulting state.

        An empty submission leaves the state untouched.
        """
        if not images:
            return self._state

        try:
            self._aggregator.check_capacity(len(images))
        except CapacityExceededError as exc:
            Log.error(str(exc))
            self._state = replace(self._state, status="error", error=str(exc))
            return self._state

        self._state = SessionState(
            status="processing",
            file_name=batch_file_name(images),
            image_count=len(images),
        )
        try:
            dataset = await self._aggregator.run(images)
        except Exception as exc:
            Log.error(f"Batch processing failed: {exc}")
            self._state = replace(
                self._state,
                status="error",
                dataset=Dataset.empty(),
                error=str(exc) or FALLBACK_ERROR_MESSAGE,
            )
            return self._state

        self._state = replace(self._state, status="success", dataset=dataset, error=None)
        return self._state

    def export(self, writer: BaseSpreadsheetWriter) -> Path | None:
        dataset = self._state.dataset
        return export_spreadsheet(
            dataset.rows,
            dataset.headers,
            f"{self._state.file_name}_processed",
            writer,
        )

    def copy(self, clipboard: BaseClipboard) -> bool:
        dataset = self._state.dataset
        return copy_to_clipboard(dataset.rows, dataset.headers, clipboard)

    def reset(self) -> SessionState:
        self._state = replace(SessionState(), file_name=self._state.file_name)
        return self._state
