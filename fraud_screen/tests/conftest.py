# Path: fraud_screen/tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for fraud_screen

Provides common test fixtures used across all test modules.
"""

import json
import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

# Add fraud_screen and the fixture helpers to path for imports
FRAUD_SCREEN_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(FRAUD_SCREEN_ROOT))
sys.path.insert(0, str(Path(__file__).parent / 'fixtures'))

from sample_data import (
    create_financial_data,
    create_flat_payload,
    create_extraction_envelope,
)


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars():
    """Provide mock environment variables for testing."""
    env_vars = {
        'FRAUD_SCREEN_ENVIRONMENT': 'test',
        'FRAUD_SCREEN_DEBUG': 'true',

        # Logging
        'FRAUD_SCREEN_LOG_DIR': '/tmp/fraud_screen_test/logs',
        'FRAUD_SCREEN_LOG_LEVEL': 'DEBUG',
        'FRAUD_SCREEN_LOG_CONSOLE': 'false',

        # Engine
        'FRAUD_SCREEN_FORMULA_VARIANT': 'canonical',
        'FRAUD_SCREEN_DIVISION_POLICY': 'neutral',

        # Intake
        'FRAUD_SCREEN_HIGH_CONFIDENCE_THRESHOLD': '80',
        'FRAUD_SCREEN_MEDIUM_CONFIDENCE_THRESHOLD': '40',

        # Output
        'FRAUD_SCREEN_REPORTS_DIR': '/tmp/fraud_screen_test/reports',
        'FRAUD_SCREEN_OUTPUT_CSV': 'yes',
        'FRAUD_SCREEN_JSON_INDENT': '4',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ==============================================================================
# SAMPLE DATA FIXTURES
# ==============================================================================

@pytest.fixture
def reference_data():
    """Two-period record with known M-Score results."""
    return create_financial_data()


@pytest.fixture
def flat_payload():
    """Flat snake_case payload matching reference_data."""
    return create_flat_payload()


@pytest.fixture
def extraction_envelope():
    """camelCase extraction envelope matching reference_data."""
    return create_extraction_envelope()


@pytest.fixture
def payload_file(temp_dir, flat_payload):
    """Write the flat payload to a JSON file."""
    path = temp_dir / 'payload.json'
    with open(path, 'w') as f:
        json.dump(flat_payload, f, indent=2)
    return path


# ==============================================================================
# MOCK FIXTURES
# ==============================================================================

@pytest.fixture
def mock_config():
    """Create a mock ConfigLoader for testing."""
    from constants import DivisionPolicy, FormulaVariant

    config = MagicMock()
    config.get.side_effect = lambda key, default=None: {
        'environment': 'test',
        'debug': True,
        'log_dir': None,
        'log_level': 'INFO',
        'log_console': False,
        'formula_variant': FormulaVariant.SIMPLIFIED,
        'division_policy': DivisionPolicy.RAISE,
        'high_confidence_threshold': 75.0,
        'medium_confidence_threshold': 50.0,
        'reports_dir': None,
        'output_text': True,
        'output_json': True,
        'output_csv': False,
        'json_indent': 2,
    }.get(key, default)
    return config


# ==============================================================================
# UTILITY FIXTURES
# ==============================================================================

@pytest.fixture
def capture_logs():
    """Capture log output for testing."""
    import logging
    from io import StringIO

    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)

    root_logger = logging.getLogger()
    previous_level = root_logger.level
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(handler)

    yield log_capture

    root_logger.removeHandler(handler)
    root_logger.setLevel(previous_level)


@pytest.fixture
def reset_singletons():
    """Reset any singleton instances between tests."""
    from config_loader import ConfigLoader
    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False
