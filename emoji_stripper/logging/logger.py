import logging
import sys


class Log:
    """Diagnostics for the emoji_stripper logger; stdout stays reserved for output.

    Keyword arguments become attributes on the LogRecord (``path=``,
    ``size_bytes=``...) so handlers and filters can use them without
    parsing the message.
    """

    _logger: logging.Logger = logging.getLogger("emoji_stripper")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level and attach a single stderr handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **fields: object) -> None:
        cls._logger.info(message, extra=fields)

    @classmethod
    def warning(cls, message: str, **fields: object) -> None:
        cls._logger.warning(message, extra=fields)

    @classmethod
    def debug(cls, message: str, **fields: object) -> None:
        cls._logger.debug(message, extra=fields)
