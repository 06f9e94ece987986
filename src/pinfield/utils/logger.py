"""
Logging configuration for the pin field package.
"""
import sys

from loguru import logger as _logger

from pinfield.config.settings import settings


def setup_logging():
    """Configure console and rotating file sinks for the application."""
    settings.ensure_directories()

    # Remove default logger
    _logger.remove()

    # Console logging
    _logger.add(
        sys.stderr,
        level=settings.LOG_LEVEL,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        colorize=True
    )

    # File logging
    log_file = settings.LOG_DIR / settings.LOG_FILE
    _logger.add(
        log_file,
        level=settings.LOG_LEVEL,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        rotation=settings.LOG_MAX_SIZE,
        retention=settings.LOG_BACKUP_COUNT,
        compression="gz"
    )

    _logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    _logger.info(f"Log directory: {settings.LOG_DIR}")


# Export the shared logger; sinks are installed by setup_logging()
logger = _logger
