"""Configuration utilities for infrastructure layer."""

import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from nutricalc.domain.energy_profile.core.value_objects.unit_system import (
    UnitSystem,
)

_VALID_LOG_FORMATS = ("console", "json")


def load_environment(env_path: Optional[Union[str, Path]] = None) -> bool:
    """
    Load variables from a .env file into the process environment.

    Existing environment variables win over values in the file.

    Args:
        env_path: Path to the .env file, defaults to ./.env

    Returns:
        True if a file was found and loaded
    """
    path = Path(env_path) if env_path is not None else Path.cwd() / ".env"
    if not path.exists():
        return False
    return load_dotenv(path, override=False)


def get_default_unit_system() -> UnitSystem:
    """
    Get unit system used when a form does not specify one.

    Returns:
        UnitSystem from NUTRICALC_DEFAULT_UNIT_SYSTEM, defaults to metric
    """
    code = os.getenv("NUTRICALC_DEFAULT_UNIT_SYSTEM", "metric")
    # Unknown value - graceful fallback to metric
    return UnitSystem.from_code(code) or UnitSystem.METRIC


def get_log_level() -> str:
    """
    Get log level name.

    Returns:
        Upper-case level from NUTRICALC_LOG_LEVEL, defaults to "INFO"
    """
    return os.getenv("NUTRICALC_LOG_LEVEL", "INFO").strip().upper()


def get_log_format() -> str:
    """
    Get log renderer name.

    Returns:
        "console" or "json" from NUTRICALC_LOG_FORMAT, defaults to "console"
    """
    fmt = os.getenv("NUTRICALC_LOG_FORMAT", "console").strip().lower()
    if fmt not in _VALID_LOG_FORMATS:
        return "console"
    return fmt
