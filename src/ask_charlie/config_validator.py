"""
Configuration validation utilities.

Helpers for reading environment variables with placeholder detection
and typed parsing.
"""
import os
import warnings
from typing import Optional

from .exceptions import ConfigurationError


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get optional environment variable.

    :param key: Environment variable name
    :param default: Default value if not set
    :return: Environment variable value or default
    """
    value = os.getenv(key, default)

    if value and _is_placeholder(value):
        # Warn but don't fail for optional configs
        warnings.warn(
            f"{key} appears to be a placeholder. Using default or None.",
            UserWarning
        )
        return default

    return value


def get_int_env(key: str, default: int) -> int:
    """
    Get integer environment variable.

    :raises: ConfigurationError if the value is not an integer
    """
    value = get_optional_env(key)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"{key} must be an integer, got '{value}'")


def get_float_env(key: str, default: float) -> float:
    """
    Get float environment variable.

    :raises: ConfigurationError if the value is not a number
    """
    value = get_optional_env(key)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        raise ConfigurationError(f"{key} must be a number, got '{value}'")


def _is_placeholder(value: str) -> bool:
    """Check if value is a placeholder."""
    if not value:
        return False

    placeholder_patterns = [
        "your_",
        "placeholder",
        "replace_me",
        "changeme",
    ]

    value_lower = value.lower()
    return any(pattern in value_lower for pattern in placeholder_patterns)


def validate_path(path: str, path_name: str, must_exist: bool = False) -> str:
    """
    Validate file path.

    :param path: Path to validate
    :param path_name: Name of the path (for error messages)
    :param must_exist: Whether path must exist
    :return: Validated path
    :raises: ConfigurationError if invalid
    """
    if not path:
        raise ConfigurationError(f"{path_name} is required.")

    if must_exist and not os.path.exists(path):
        raise ConfigurationError(
            f"{path_name} does not exist: {path}\n"
            f"Please check the path and ensure the file exists."
        )

    return path
