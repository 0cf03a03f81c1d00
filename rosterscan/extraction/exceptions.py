class ExtractionError(Exception):
    """Raised when extracting rows from an image fails."""


class EmptyResponseError(ExtractionError):
    """Raised when the vision model call succeeds but returns no text."""


class MalformedResponseError(ExtractionError):
    """Raised when the model response cannot be parsed as JSON."""


class UnexpectedShapeError(ExtractionError):
    """Raised when the parsed response is not an array of objects."""


class ExtractionNetworkError(ExtractionError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
