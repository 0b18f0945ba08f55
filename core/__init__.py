"""
=====================================
Core infrastructure for sqlbuilder.
=====================================

Modules:
    config: Configuration management from environment variables
    logger: Logging configuration helpers

Example:
    >>> from core.config import config
    >>> from core.logger import get_logger
    >>> 
    >>> logger = get_logger(__name__)
    >>> logger.info(f"Default flavor is {config.default_flavor}")
"""

__version__ = "0.1.0"
__all__ = ['get_logger', 'setup_logging', 'config', 'Config']

from core.config import Config, config
from core.logger import get_logger, setup_logging
