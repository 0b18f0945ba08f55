"""
====================================
Logging configuration for sqlbuilder.
====================================

The sqlbuilder package only emits log records through module loggers; it
never installs handlers on import. Applications that want to see those
records call setup_logging() once at startup.

Example:
    >>> from core.logger import get_logger, setup_logging
    >>> 
    >>> setup_logging(log_level='DEBUG', log_file='sqlbuilder.log')
    >>> logger = get_logger(__name__)
    >>> logger.debug("Statement built")
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from core.config import config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Get a logger instance for the specified module.
    
    Args:
        name: Logger name (typically __name__ of calling module)
        level: Optional logging level override (DEBUG/INFO/WARNING/ERROR/CRITICAL)
        
    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    
    if level:
        logger.setLevel(getattr(logging, level.upper()))
    
    return logger


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    log_dir: Optional[str] = None,
    console_output: bool = True
) -> None:
    """Configure the root logger with console and/or file handlers.
    
    Unset arguments fall back to core.config. Existing root handlers are
    removed first, so calling this again replaces the previous setup.
    
    Args:
        log_level: Logging level (DEBUG/INFO/WARNING/ERROR/CRITICAL)
        log_file: Optional log file name (e.g., 'sqlbuilder.log')
        log_dir: Optional log directory path
        console_output: If True, output to console (stdout)
        
    Example:
        >>> setup_logging(log_level='DEBUG', console_output=True)
    """
    level = getattr(logging, (log_level or config.log_level).upper())
    log_file = log_file or config.log_file
    
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    
    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)
    
    if log_file:
        log_path = Path(log_dir) if log_dir else config.log_dir
        log_path.mkdir(parents=True, exist_ok=True)
        
        file_handler = logging.FileHandler(log_path / log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
