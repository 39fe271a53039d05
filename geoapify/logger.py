import logging
import sys
from pathlib import Path
from typing import Optional, Union


class CustomFormatter(logging.Formatter):
    """Formats INFO records concisely and everything else in detail.

    Detailed records carry the logger name and line number, which is what
    makes retry warnings traceable to a call site.
    """

    detailed_format = (
        "| %(levelname)-8s | %(asctime)s | %(name)s:%(lineno)d | %(message)s"
    )
    concise_format = "| %(levelname)-8s | %(asctime)s | %(message)s"

    def __init__(self, datefmt: str = "%H:%M:%S"):
        super().__init__(datefmt=datefmt)
        self._concise = logging.Formatter(self.concise_format, datefmt=datefmt)
        self._detailed = logging.Formatter(self.detailed_format, datefmt=datefmt)

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno == logging.INFO:
            return self._concise.format(record)
        return self._detailed.format(record)


def setup_logging(
    level: int = logging.INFO,
    stream: bool = True,
    log_file: Optional[Union[str, Path]] = None,
    logger_name: str = "geoapify",
) -> logging.Logger:
    """Attaches handlers to the library logger.

    The library never calls this itself; applications opt in.

    Args:
        level (int): Minimum log level to process (default: INFO).
        stream (bool): If True, logs are written to stdout.
        log_file (str | Path, optional): Also append logs to this file.
        logger_name (str): Logger to configure ("" for the root logger).

    Returns:
        logging.Logger: The configured logger.
    """
    logger = logging.getLogger(logger_name)

    # Clear any existing handlers to prevent duplicate logs
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = CustomFormatter()

    if stream:
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode="a", encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.setLevel(level)

    # Quieten noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logger.debug(f"Logging configured with level: {logging.getLevelName(level)}")
    return logger
