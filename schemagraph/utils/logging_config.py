"""
Centralized logging configuration for the application.
"""

import logging
import sys
from typing import Optional

from .config import AppConfig


def setup_logging(config: Optional[AppConfig] = None, level: Optional[str] = None) -> None:
    """
    Setup centralized logging configuration.

    Log records go to stderr; stdout is reserved for command output.

    Args:
        config: AppConfig instance, uses default if None
        level: Explicit level name overriding the configured one
    """
    if config is None:
        from .config import config as default_config
        config = default_config

    level_name = (level or config.log_level).upper()

    # Configure root logger
    logging.basicConfig(level=getattr(logging, level_name),
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                        handlers=[logging.StreamHandler(sys.stderr)],
                        force=level is not None)

    if level is not None:
        # Loggers handed out by get_logger carry their own level
        for name, logger in logging.root.manager.loggerDict.items():
            if name.startswith('schemagraph') and isinstance(logger, logging.Logger):
                logger.setLevel(getattr(logging, level_name))


def get_logger(name: str, config: Optional[AppConfig] = None) -> logging.Logger:
    """
    Get a logger with proper configuration.

    Args:
        name: Logger name (usually __name__)
        config: AppConfig instance, uses default if None

    Returns:
        Configured logger instance
    """
    if config is None:
        from .config import config as default_config
        config = default_config

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, config.log_level.upper()))
    return logger
