class BatchError(Exception):
    """Base exception for batch-level failures."""


class CapacityExceededError(BatchError):
    """Raised when more images are submitted than one batch allows."""

    def __init__(self, limit: int, submitted: int) -> None:
        super().__init__(f"Please upload a maximum of {limit} images at a time.")
        self.limit = limit
        self.submitted = submitted
