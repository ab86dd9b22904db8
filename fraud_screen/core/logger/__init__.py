# Path: fraud_screen/core/logger/__init__.py
"""
fraud_screen Logger Package

IPO-aware logging for the M-Score screening system.

Provides separate log streams for:
- INPUT layer (payload loaders, CLI arguments)
- PROCESS layer (validation, screening)
- OUTPUT layer (reports, file writers)
"""

from .ipo_logging import (
    LOG_FILES,
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'LOG_FILES',
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
