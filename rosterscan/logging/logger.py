import logging
import sys
from typing import TextIO


class Log:
    """Centralized logging for the "rosterscan" logger."""

    _logger: logging.Logger = logging.getLogger("rosterscan")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and point the single stream handler at stream.

        Log lines go to stdout unless another stream is given. Calling this
        again re-targets the existing handler instead of adding a second one.
        """
        cls._logger.setLevel(log_level.upper())
        target = stream if stream is not None else sys.stdout
        for handler in cls._logger.handlers:
            if isinstance(handler, logging.StreamHandler):
                handler.setStream(target)
                return
        handler = logging.StreamHandler(target)
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
        )
        cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Log progress of a batch or an export."""
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        """Log a failure that ends the current batch or command."""
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a recoverable problem, such as a failed clipboard write."""
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log prompts and raw model responses."""
        cls._logger.debug(message, extra=kwargs)
