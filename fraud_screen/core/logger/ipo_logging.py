# Path: fraud_screen/core/logger/ipo_logging.py
"""
IPO-Aware Logging for fraud_screen

Input-Process-Output separated logging for fraud-risk screening.

This module sets up logging with separate files for:
- INPUT layer (payload loaders, manual overrides, CLI)
- PROCESS layer (validation, M-Score screening)
- OUTPUT layer (report generator, formatters)
- Full activity (everything combined)

The scoring functions in mscore/score_engine.py never log; the screener
that wraps them logs on the PROCESS layer.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


# Log file per layer; None means "no layer filter"
LOG_FILES: dict[str, Optional[str]] = {
    'full_activity.log': None,
    'input_activity.log': 'input',
    'process_activity.log': 'process',
    'output_activity.log': 'output',
}

LOG_FORMAT = '[%(asctime)s] [%(levelname)s] %(name)s - %(message)s'
CONSOLE_FORMAT = '[%(levelname)s] %(name)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class IPOFilter(logging.Filter):
    """Filter logs by IPO layer prefix."""

    def __init__(self, layer: str):
        """
        Initialize filter for specific IPO layer.

        Args:
            layer: 'input', 'process', or 'output'
        """
        super().__init__()
        self.layer = layer

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter records by logger name prefix."""
        return record.name == self.layer or record.name.startswith(f'{self.layer}.')


def _resolve_level(log_level: str) -> int:
    """
    Convert a level name to its numeric value.

    Raises:
        ValueError: If the name is not a standard logging level
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")
    return level


def setup_ipo_logging(
    log_dir: Optional[Path] = None,
    log_level: str = 'INFO',
    console_output: bool = True
) -> None:
    """
    Set up IPO-aware logging for fraud_screen.

    Creates separate log files for:
    - input_activity.log (INPUT layer)
    - process_activity.log (PROCESS layer)
    - output_activity.log (OUTPUT layer)
    - full_activity.log (all activities combined)

    When log_dir is None no files are written and only the console
    handler (if enabled) is installed.

    Args:
        log_dir: Directory for log files, or None
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: Whether to also output to console

    Example:
        setup_ipo_logging(
            log_dir=Path('/var/log/fraud_screen'),
            log_level='INFO',
            console_output=True
        )
    """
    level = _resolve_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Close and drop handlers from a previous setup
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

        for filename, layer in LOG_FILES.items():
            handler = logging.FileHandler(log_dir / filename, encoding='utf-8')
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(formatter)
            if layer is not None:
                handler.addFilter(IPOFilter(layer))
            root_logger.addHandler(handler)

    if console_output:
        # stderr keeps stdout free for the report itself
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)


def get_input_logger(name: str) -> logging.Logger:
    """
    Get logger for INPUT layer.

    Args:
        name: Logger name (e.g., 'financial_data_loader')

    Returns:
        Logger configured for INPUT layer
    """
    return logging.getLogger(f'input.{name}')


def get_process_logger(name: str) -> logging.Logger:
    """
    Get logger for PROCESS layer.

    Args:
        name: Logger name (e.g., 'screening')

    Returns:
        Logger configured for PROCESS layer
    """
    return logging.getLogger(f'process.{name}')


def get_output_logger(name: str) -> logging.Logger:
    """
    Get logger for OUTPUT layer.

    Args:
        name: Logger name (e.g., 'report_generator')

    Returns:
        Logger configured for OUTPUT layer
    """
    return logging.getLogger(f'output.{name}')


__all__ = [
    'LOG_FILES',
    'IPOFilter',
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
