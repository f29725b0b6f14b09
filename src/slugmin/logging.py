# src/slugmin/logging.py
import logging
import sys

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.INFO


def get_logger(
    name: str = "slugmin", verbose: bool = False, quiet: bool = False
) -> logging.Logger:
    """Return ``name``'s logger with a single stderr handler attached."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(_resolve_level(verbose, quiet))
    return logger
