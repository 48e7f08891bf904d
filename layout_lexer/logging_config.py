"""Logging setup for the ``layout_lexer`` logger namespace.

The library only emits DEBUG records (skipped lines, discarded comments,
short reads) and installs no handlers on import. Applications that want to
see them call ``setup_logging`` once.
"""
import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "layout_lexer"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'

# marks handlers installed here so a second call replaces only those
_OWNED = '_layout_lexer_handler'


def _owned_handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    setattr(handler, _OWNED, True)
    return handler


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None,
                  stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Route ``layout_lexer`` log records to a console stream and optionally a file.

    Args:
        level: Threshold for the package logger and its handlers.
        log_file: Optional path; the file is truncated on each setup.
        stream: Console sink, stdout when omitted.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in [h for h in logger.handlers if getattr(h, _OWNED, False)]:
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_owned_handler(
        logging.StreamHandler(sys.stdout if stream is None else stream), level))
    if log_file:
        logger.addHandler(_owned_handler(
            logging.FileHandler(log_file, mode='w', encoding='utf-8'), level))

    logger.debug("Logging configured at level %s", logging.getLevelName(level))
    return logger
