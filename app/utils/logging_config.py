"""
Logging configuration for the Movie API.

Console logging always, plus a rotating log file when LOG_FILE is set.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional

from app.api.config import get_log_file, get_log_level

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    log_dir: str = "logs",
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5
) -> logging.Logger:
    """
    Replace the root logger's handlers with a console handler and, if
    log_file is given, a RotatingFileHandler under log_dir.
    
    Returns:
        The configured root logger
    """
    log_level = getattr(logging, level.upper())
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(
            log_path / log_file,
            maxBytes=max_bytes,
            backupCount=backup_count
        ))
    
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    
    # SQL echo is opt-in through DatabaseManager(echo=True)
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
    
    if log_file:
        root_logger.info("Logging to file: %s", Path(log_dir) / log_file)
    return root_logger


def configure_api_logging(debug: bool = False) -> logging.Logger:
    """
    Configure logging for the API from LOG_LEVEL and LOG_FILE.
    
    Args:
        debug: Force debug logging (default: False)
    """
    return setup_logging(
        level="DEBUG" if debug else get_log_level(),
        log_file=get_log_file(),
    )
