from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence

import pyperclip

from rosterscan.export.exceptions import ClipboardWriteError
from rosterscan.export.tsv import to_tsv
from rosterscan.logging.logger import Log


class BaseClipboard(ABC):
    """Contract for platform clipboard adapters."""

    @abstractmethod
    def write_text(self, text: str) -> None:
        """Place text on the clipboard.

        Raises:
            ClipboardWriteError: if the platform clipboard is unavailable.
        """


class PyperclipClipboard(BaseClipboard):
    """Clipboard adapter backed by pyperclip."""

    def write_text(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardWriteError(f"Clipboard unavailable: {exc}") from exc


def copy_to_clipboard(
    rows: Sequence[Mapping[str, object]],
    headers: Sequence[str],
    clipboard: BaseClipboard,
) -> bool:
    """Copy rows as TSV. Failures are logged and reported as False, never raised."""
    if not rows:
        return False
    try:
        clipboard.write_text(to_tsv(rows, headers))
    except ClipboardWriteError as exc:
        Log.error(f"Failed to copy to clipboard: {exc}")
        return False
    Log.info(f"Copied {len(rows)} rows to clipboard")
    return True
