"""
Centralized Configuration Module

All application constants, logging configuration, and settings.
Import from here instead of hardcoding values.
"""

import os
import logging
from pathlib import Path
from typing import Optional, Tuple
from dotenv import load_dotenv

# ============================================================================
# Load default .env at module import time
# ============================================================================
load_dotenv()

# Initialize logger for this module
logger = logging.getLogger(__name__)


# ============================================================================
# Environment Loading
# ============================================================================

def load_environment(env_file: Optional[str] = None):
    """
    Load environment variables from .env file.

    Args:
        env_file: Optional path to .env file. If None, uses default .env
    """
    if env_file:
        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path, override=True)
            logger.info(f"Loaded environment from: {env_file}")
        else:
            logger.warning(f"Environment file not found: {env_file}")
    else:
        # Reload default .env
        load_dotenv(override=True)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# ============================================================================
# Application Constants
# ============================================================================

class AppConfig:
    """Application-wide configuration constants"""

    APP_NAME = "idracctl"
    APP_VERSION = "1.0.0"
    APP_DESCRIPTION = "Command-line client for the iDRAC out-of-band management interface"


class ClientConfig:
    """
    Device client configuration.

    Values are read when an instance is created so a reloaded environment
    is picked up.
    """

    def __init__(self,
                 verify_tls: Optional[bool] = None,
                 connect_timeout: Optional[float] = None,
                 read_timeout: Optional[float] = None,
                 credentials_dir: Optional[str] = None,
                 console_file: Optional[str] = None):
        self.verify_tls = _env_flag("IDRAC_VERIFY_TLS") if verify_tls is None else verify_tls
        self.connect_timeout = float(os.getenv("IDRAC_CONNECT_TIMEOUT", "5")) if connect_timeout is None else connect_timeout
        self.read_timeout = float(os.getenv("IDRAC_READ_TIMEOUT", "5")) if read_timeout is None else read_timeout
        self.credentials_dir = credentials_dir or os.getenv("IDRAC_CREDENTIALS_DIR", ".")
        self.console_file = console_file or os.getenv("IDRAC_CONSOLE_FILE", "viewer.jnlp")

    @property
    def timeout(self) -> Tuple[float, float]:
        """(connect, read) timeout tuple for requests"""
        return (self.connect_timeout, self.read_timeout)


# ============================================================================
# Logging Configuration
# ============================================================================

class LogConfig:
    """Logging configuration"""

    # Log Level (a CLI stays quiet unless asked)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()

    # Log Format
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    # Detailed format with file/line
    DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"

    # File Logging
    LOG_FILE = os.getenv("LOG_FILE")  # Optional
    LOG_FILE_MAX_BYTES = int(os.getenv("LOG_FILE_MAX_BYTES", "10485760"))  # 10MB
    LOG_FILE_BACKUP_COUNT = int(os.getenv("LOG_FILE_BACKUP_COUNT", "5"))


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """
    Configure application logging.

    Args:
        verbose: Enable verbose (DEBUG) logging
        log_file: Optional log file path
    """
    if verbose:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, LogConfig.LOG_LEVEL, logging.WARNING)

    log_format = LogConfig.DETAILED_FORMAT if verbose else LogConfig.LOG_FORMAT

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=LogConfig.LOG_DATE_FORMAT
    )

    if log_file or LogConfig.LOG_FILE:
        from logging.handlers import RotatingFileHandler

        file_path = log_file or LogConfig.LOG_FILE
        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=LogConfig.LOG_FILE_MAX_BYTES,
            backupCount=LogConfig.LOG_FILE_BACKUP_COUNT
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(log_format, LogConfig.LOG_DATE_FORMAT))
        logging.getLogger().addHandler(file_handler)
        logger.info(f"Logging to file: {file_path}")

    # Suppress noisy loggers
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    logger.debug(f"Logging configured: level={logging.getLevelName(log_level)}")


# ============================================================================
# Export commonly used configs
# ============================================================================

__all__ = [
    'AppConfig',
    'ClientConfig',
    'LogConfig',
    'load_environment',
    'setup_logging',
]
