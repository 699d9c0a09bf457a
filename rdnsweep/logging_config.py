"""
Logging setup for rdnsweep
"""

import logging
import sys


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure the rdnsweep logger.

    Log records go to stderr only; stdout is reserved for results.

    Args:
        verbose: Log at DEBUG instead of WARNING

    Returns:
        The package logger
    """
    log_level = logging.DEBUG if verbose else logging.WARNING

    logger = logging.getLogger('rdnsweep')
    logger.setLevel(log_level)
    logger.handlers.clear()
    logger.propagate = False

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    handler.setLevel(log_level)
    logger.addHandler(handler)

    # Keep library loggers out of the debug stream
    logging.getLogger('dns').setLevel(logging.WARNING)

    return logger
