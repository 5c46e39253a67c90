"""Utility functions for compose-executor."""
import logging
from pathlib import Path
from typing import Optional, Union

from .config import default_log_dir

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def get_log_file(log_dir: Optional[Union[str, Path]] = None) -> Path:
    """Return the log file path, creating its directory."""
    log_dir = Path(log_dir) if log_dir else default_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / 'compose-executor.log'


def setup_logging(debug=False, log_dir=None):
    """Set up logging configuration."""
    log_level = logging.DEBUG if debug else logging.INFO
    log_file = get_log_file(log_dir)

    # Configure root logger
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler() if debug else logging.NullHandler()
        ]
    )
