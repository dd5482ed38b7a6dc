# qops/logger.py
import logging
from logging import Logger
from typing import Optional


def set_logger(
    logger_name: str,
    level: int = logging.WARNING,
    file: Optional[str] = None,
    fmt: str = "[%(asctime)s.%(msecs)03d] %(name)s (%(levelname)s) - %(message)s",
) -> Logger:
    """Configures a named logger with a single stream or file handler.

    Calling it again for the same name replaces the previous handler, so
    repeated benchmark runs do not duplicate output.

    Args:
        logger_name: Name for the logger object, e.g. ``"qops.operations"``.
        level: Logger output level.
        file: File to write the log to; stderr when None.
        fmt: Logger output format.

    Returns:
        The configured logger object.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    logger.propagate = False
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handler: logging.StreamHandler
    if file is None:
        handler = logging.StreamHandler()
    else:
        handler = logging.FileHandler(file)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    return logger
