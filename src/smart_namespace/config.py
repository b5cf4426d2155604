"""Configuration loading for smart-namespace.

Configuration sources are merged in priority order:
    1. Defaults (defined in NamespaceConfig)
    2. Global config (~/.smart-namespace.toml)
    3. Project config (./smart-namespace.toml)
    4. Explicit config file
    5. Environment variables (SMART_NAMESPACE_* prefix)
    6. Overrides passed as kwargs (typically CLI flags)

Example:
    >>> config = load_config(verbose=True, info_width=60)
    >>> config.verbosity
    'verbose'
    >>> config.info_width
    60
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError
from .naming.tokens import SEPARATOR

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "SMART_NAMESPACE_"
CONFIG_FILENAME = "smart-namespace.toml"


@dataclass(frozen=True)
class NamespaceConfig:
    """Settings for the diagnostic dump and the command line.

    Attributes:
        input_separator: Separator accepted in names typed on the command
            line; normalized to ``::`` before tokenizing
        info_width: Width of the ruler framing the diagnostic dump
        info_label_width: Column width of the dump's labels
        verbosity: Logging verbosity level
    """

    input_separator: str = SEPARATOR
    info_width: int = 95
    info_label_width: int = 11
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.input_separator or self.input_separator.isalnum():
            raise InvalidConfigError(
                "input_separator", self.input_separator, "must be non-empty punctuation"
            )
        if self.info_width < 10:
            raise InvalidConfigError("info_width", self.info_width, "must be at least 10")
        if self.info_label_width < 1:
            raise InvalidConfigError(
                "info_label_width", self.info_label_width, "must be at least 1"
            )
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )

    def normalize_name(self, name: str) -> str:
        """Rewrite a name typed with ``input_separator`` into canonical form."""
        if self.input_separator == SEPARATOR:
            return name
        return name.replace(self.input_separator, SEPARATOR)


DEFAULT_CONFIG = NamespaceConfig()


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> NamespaceConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); ``verbose``
            and ``quiet`` booleans map onto ``verbosity``

    Returns:
        Validated NamespaceConfig instance

    Raises:
        ConfigurationError: If a config file is missing or unreadable
        InvalidConfigError: If a value is out of range
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / f".{CONFIG_FILENAME}"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / CONFIG_FILENAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}", source=config_file)
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"
    merged.update(overrides)

    try:
        return NamespaceConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from SMART_NAMESPACE_* environment variables.

    Returns:
        Dict of field_name -> parsed_value for any variables found.
    """
    type_hints = get_type_hints(NamespaceConfig)
    result: dict[str, Any] = {}

    for field_name in NamespaceConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        if type_hints.get(field_name) is int:
            try:
                result[field_name] = int(env_value)
            except ValueError:
                raise InvalidConfigError(field_name, env_value, f"{env_key} must be an integer")
        else:
            result[field_name] = env_value

    return result


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file, accepting either top-level keys or a [smart-namespace] table.

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        # Fallback to tomli for Python 3.9-3.10
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}", source=path)

    section = data.get("smart-namespace")
    if isinstance(section, dict):
        return dict(section)
    return data
