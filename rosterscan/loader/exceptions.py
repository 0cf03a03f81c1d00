class ImageLoadError(Exception):
    """Base exception for image loading failures."""


class UnsupportedImageError(ImageLoadError):
    """Raised when a file is not a supported image type."""


class EmptyImageError(ImageLoadError):
    """Raised when an image file has no content."""
