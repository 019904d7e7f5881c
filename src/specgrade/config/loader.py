"""Configuration loader for SpecGrade.

Loads a YAML (or JSON) configuration file and returns a validated
SpecGradeConfig instance. Uses module-level caching so each file is only
parsed once per process.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from specgrade.config.models import SpecGradeConfig
from specgrade.domain.errors import ConfigurationError

# Module-level cache
_config_cache: dict[str, SpecGradeConfig] = {}

# Default config template, shipped inside the package
DEFAULT_CONFIG_PATH = Path(__file__).parent / "specgrade_default.yaml"

# Looked up in the working directory when no path is given
CONFIG_FILE_NAMES: tuple[str, ...] = ("specgrade.yaml", "specgrade.yml")


def find_config_file(directory: Optional[Path] = None) -> Optional[Path]:
    """Return the first ``specgrade.yaml``/``.yml`` in *directory* (cwd by default)."""
    base = directory or Path.cwd()
    for name in CONFIG_FILE_NAMES:
        candidate = base / name
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Optional[Path] = None) -> SpecGradeConfig:
    """Load and validate a SpecGrade config file.

    Parameters
    ----------
    path : Path | None
        Path to a config file. If ``None``, ``specgrade.yaml`` or
        ``specgrade.yml`` in the working directory is used when present,
        otherwise the built-in defaults are returned.

    Returns
    -------
    SpecGradeConfig
        Validated configuration instance.

    Raises
    ------
    ConfigurationError
        If the file does not exist, cannot be parsed or does not match
        the expected schema.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            return SpecGradeConfig()

    config_path = Path(path)
    cache_key = str(config_path.resolve())

    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not config_path.is_file():
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to read config file {config_path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")

    try:
        config = SpecGradeConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid config file {config_path}:\n{exc}") from exc

    _config_cache[cache_key] = config
    return config


def merge_overrides(config: SpecGradeConfig, **overrides: Any) -> SpecGradeConfig:
    """Return *config* with command-line overrides applied.

    ``None`` and empty values leave the file's setting in place.
    """
    update = {k: v for k, v in overrides.items() if v not in (None, "", [], ())}
    if not update:
        return config
    try:
        return SpecGradeConfig.model_validate({**config.model_dump(), **update})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid option:\n{exc}") from exc


def clear_cache() -> None:
    """Clear the config cache — useful for testing."""
    _config_cache.clear()
