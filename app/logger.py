import logging
import sys
from typing import Optional

loggerInitialized = False


def setup_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    date_format: Optional[str] = None,
    log_file: Optional[str] = None,
) -> None:
    """
    Setup the root logger with console handler and optional file handler.

    Args:
        level: Logging level (default: logging.INFO)
        format_string: Custom format string for log messages
        date_format: Custom date format string
        log_file: Path of a file to append log records to, None for console only
    """
    global loggerInitialized
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    if date_format is None:
        date_format = "%Y-%m-%d %H:%M:%S"

    formatter = logging.Formatter(fmt=format_string, datefmt=date_format)

    handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove any existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in handlers:
        root_logger.addHandler(handler)
    loggerInitialized = True


def parse_level(name: str) -> int:
    """
    Convert a level name such as "debug" or "INFO" to a logging level.

    Unknown names fall back to logging.INFO.
    """
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Logger name (usually __name__ of the module)

    Returns:
        Configured logger instance
    """
    global loggerInitialized
    if loggerInitialized:
        return logging.getLogger(name)
    else:
        raise SystemError("Initialize logger before use!")
