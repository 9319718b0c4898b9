"""Load AnalyzerConfig from YAML."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from jpack_analyzer.analyzer.models import AnalyzerConfig
from jpack_analyzer.errors import ConfigError

_PATH_FIELDS = (
    "output_directory_modules",
    "output_directory_automatic_jars",
    "output_directory_classpath_jars",
)


def load_config(path: Path) -> AnalyzerConfig:
    """Parse a YAML config file. Relative directories resolve against its location."""
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"could not read config {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config {path} must be a mapping")

    try:
        config = AnalyzerConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"invalid config {path}: {e}") from e

    updates = {}
    for name in _PATH_FIELDS:
        value = getattr(config, name)
        if value is not None and not value.is_absolute():
            updates[name] = path.parent / value
    return config.model_copy(update=updates)
