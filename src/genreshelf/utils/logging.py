"""
Logging configuration for genreshelf
"""
import logging
import sys
from pathlib import Path


def setup_logging(log_level='INFO', logs_dir=None):
    """Setup structured logging for the application"""

    # Create logs directory if it doesn't exist
    logs_dir = Path(logs_dir) if logs_dir else Path.cwd() / 'logs'
    logs_dir.mkdir(parents=True, exist_ok=True)

    # Configure logging format
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Setup root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Clear existing handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # File handler
    file_handler = logging.FileHandler(logs_dir / 'genreshelf.log')
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    # Reduce noise from some libraries
    logging.getLogger('werkzeug').setLevel(logging.WARNING)
    logging.getLogger('pymongo').setLevel(logging.WARNING)

    return root_logger


def get_logger(name):
    """Get a logger for a specific module"""
    return logging.getLogger(name)
