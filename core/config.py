"""
==========================================
Configuration management for sqlbuilder.
==========================================

Loads configuration from environment variables (.env file) and provides
a centralized Config singleton for library-wide access.

Settings:
- SQLBUILDER_FLAVOR: default SQL flavor used by builders created without one
- SQLBUILDER_LOG_LEVEL: level applied by core.logger.setup_logging()
- SQLBUILDER_LOG_FILE: optional log file name
- SQLBUILDER_LOG_DIR: directory for the log file (defaults to 'logs')

Example:
    >>> from core.config import config
    >>> 
    >>> print(f"Default flavor: {config.default_flavor}")
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)


@dataclass
class BuilderConfig:
    """Statement builder settings.
    
    Attributes:
        default_flavor: Name of the flavor used when a builder is created
            without an explicit one (resolved lazily by sqlbuilder.flavor)
    """
    
    default_flavor: str


@dataclass
class LoggingConfig:
    """Logging settings.
    
    Attributes:
        level: Logging level name (DEBUG/INFO/WARNING/ERROR/CRITICAL)
        log_file: Optional log file name
        log_dir: Directory the log file is written to
    """
    
    level: str
    log_file: Optional[str]
    log_dir: Path


class Config:
    """Centralized configuration manager.
    
    Attributes:
        builder: BuilderConfig instance with statement builder settings
        logging: LoggingConfig instance with logging settings
    
    Example:
        >>> config = Config()
        >>> config.default_flavor
        'mysql'
    """
    
    def __init__(self):
        """Initialize configuration from environment variables."""
        self.builder = BuilderConfig(
            default_flavor=os.getenv('SQLBUILDER_FLAVOR', 'mysql')
        )
        
        self.logging = LoggingConfig(
            level=os.getenv('SQLBUILDER_LOG_LEVEL', 'WARNING'),
            log_file=os.getenv('SQLBUILDER_LOG_FILE') or None,
            log_dir=Path(os.getenv('SQLBUILDER_LOG_DIR', 'logs'))
        )
    
    @property
    def default_flavor(self) -> str:
        """Get the configured default flavor name."""
        return self.builder.default_flavor
    
    @property
    def log_level(self) -> str:
        """Get the configured logging level name."""
        return self.logging.level
    
    @property
    def log_file(self) -> Optional[str]:
        """Get the configured log file name, if any."""
        return self.logging.log_file
    
    @property
    def log_dir(self) -> Path:
        """Get the configured log directory."""
        return self.logging.log_dir


# Global configuration instance
config = Config()
