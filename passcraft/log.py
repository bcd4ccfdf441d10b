"""
passcraft logging helpers.

Library modules log through get_logger(); CLI output uses rich.print and is
not routed through logging.
"""

import logging
from typing import Optional


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under 'passcraft'."""
    return logging.getLogger(f"passcraft.{name}")


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configure the passcraft root logger.

    Args:
        level: Logging level (default INFO)
        log_file: Optional file path for file logging
    """
    logger = logging.getLogger("passcraft")
    logger.setLevel(level)

    fmt = logging.Formatter("%(asctime)s [%(name)s] %(levelname)s: %(message)s")

    handler = logging.StreamHandler()
    handler.setFormatter(fmt)
    logger.addHandler(handler)

    if log_file:
        fh = logging.FileHandler(log_file)
        fh.setFormatter(fmt)
        logger.addHandler(fh)
