class ExportError(Exception):
    """Raised when writing a dataset to an external sink fails."""


class ClipboardWriteError(ExportError):
    """Raised when the platform clipboard rejects a write."""
