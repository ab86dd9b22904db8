# Path: fraud_screen/config_loader.py
"""
Configuration Loader for fraud_screen

Loads configuration from .env file for the M-Score screening system.
Singleton pattern ensures consistent configuration across all components.

The Beneish model parameters are NOT configurable; only the surrounding
behaviour (formula variant, division policy, paths, output) is.
"""

import os
from typing import Optional, Any
from pathlib import Path
from dotenv import load_dotenv

from constants import (
    FormulaVariant,
    DivisionPolicy,
    CONFIDENCE_HIGH_MIN,
    CONFIDENCE_MEDIUM_MIN,
)


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

# Logging Defaults
DEFAULT_LOG_LEVEL: str = 'INFO'

# Engine Defaults
DEFAULT_FORMULA_VARIANT: str = FormulaVariant.SIMPLIFIED.value
DEFAULT_DIVISION_POLICY: str = DivisionPolicy.RAISE.value

# Output Defaults
DEFAULT_JSON_INDENT: int = 2


class ConfigLoader:
    """
    Singleton configuration loader for fraud_screen.

    Loads configuration from environment variables with validation,
    type conversion, and sensible defaults.

    Example:
        config = ConfigLoader()
        reports_dir = config.get('reports_dir')  # Returns Path or None
        variant = config.get('formula_variant')  # Returns FormulaVariant
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads .env file
        and validates all configuration on first instantiation.
        """
        if ConfigLoader._initialized:
            return

        # fraud_screen/config_loader.py -> .env is in same directory
        current_file = Path(__file__).resolve()
        project_root = current_file.parent
        env_path = project_root / '.env'

        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load and validate all configuration from environment.

        Returns:
            Dictionary of validated configuration values with proper types

        Raises:
            ValueError: If a configured enum value is not recognised
        """
        config = {
            # ================================================================
            # ENVIRONMENT & DEBUG
            # ================================================================
            'environment': self._get_env('FRAUD_SCREEN_ENVIRONMENT', 'development'),
            'debug': self._get_bool('FRAUD_SCREEN_DEBUG', False),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path('FRAUD_SCREEN_LOG_DIR'),
            'log_level': self._get_env('FRAUD_SCREEN_LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_console': self._get_bool('FRAUD_SCREEN_LOG_CONSOLE', True),

            # ================================================================
            # ENGINE CONFIGURATION
            # ================================================================
            'formula_variant': self._get_enum(
                'FRAUD_SCREEN_FORMULA_VARIANT', FormulaVariant,
                DEFAULT_FORMULA_VARIANT,
            ),
            'division_policy': self._get_enum(
                'FRAUD_SCREEN_DIVISION_POLICY', DivisionPolicy,
                DEFAULT_DIVISION_POLICY,
            ),

            # ================================================================
            # INTAKE CONFIGURATION
            # ================================================================
            'high_confidence_threshold': self._get_float(
                'FRAUD_SCREEN_HIGH_CONFIDENCE_THRESHOLD', CONFIDENCE_HIGH_MIN
            ),
            'medium_confidence_threshold': self._get_float(
                'FRAUD_SCREEN_MEDIUM_CONFIDENCE_THRESHOLD', CONFIDENCE_MEDIUM_MIN
            ),

            # ================================================================
            # OUTPUT CONFIGURATION
            # ================================================================
            'reports_dir': self._get_path('FRAUD_SCREEN_REPORTS_DIR'),
            'output_text': self._get_bool('FRAUD_SCREEN_OUTPUT_TEXT', True),
            'output_json': self._get_bool('FRAUD_SCREEN_OUTPUT_JSON', True),
            'output_csv': self._get_bool('FRAUD_SCREEN_OUTPUT_CSV', False),
            'json_indent': self._get_int('FRAUD_SCREEN_JSON_INDENT', DEFAULT_JSON_INDENT),
        }

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self._config.get(key, default)

    def _get_path(self, key: str, required: bool = False) -> Optional[Path]:
        """
        Get path from environment variable.

        Args:
            key: Environment variable name
            required: If True, raise error when missing

        Returns:
            Path object or None

        Raises:
            ValueError: If required and missing
        """
        value = os.getenv(key)

        if value is None:
            if required:
                raise ValueError(f"Required path not configured: {key}")
            return None

        # Handle variable interpolation
        if '${' in value:
            value = os.path.expandvars(value)

        return Path(value)

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(key, default)

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def _get_float(self, key: str, default: float) -> float:
        """Get float environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError:
            return default

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def _get_enum(self, key: str, enum_class, default: str):
        """
        Get enum member from environment variable.

        Unlike the numeric getters, an unrecognised value is an error:
        silently falling back would change how scores are computed.

        Raises:
            ValueError: If the value is not a member of enum_class
        """
        value = os.getenv(key, default).strip().lower()
        try:
            return enum_class(value)
        except ValueError:
            allowed = ', '.join(m.value for m in enum_class)
            raise ValueError(
                f"Invalid value for {key}: '{value}' (expected one of: {allowed})"
            ) from None

    def __repr__(self) -> str:
        """String representation showing key settings."""
        return (
            f"ConfigLoader("
            f"environment={self._config.get('environment')}, "
            f"formula_variant={self._config.get('formula_variant').value})"
        )


__all__ = ['ConfigLoader']
