"""Centralized logging infrastructure.

Usage:
    ```python
    from checkpoint_api.infrastructure.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Application started")
    ```
"""

from .config import (
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
    setup_logging_configuration,
)
from .factory import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "generate_correlation_id",
    "get_correlation_id",
    "get_logger",
    "reset_correlation_id",
    "set_correlation_id",
    "setup_logging_configuration",
]
