"""Configuration loading and management for Concentration Insight.

Configuration sources are merged in priority order:
    1. Defaults (defined in MetricsConfig)
    2. Global config (~/.concentration-insight.toml)
    3. Project config (./concentration-insight.toml)
    4. Explicit config file
    5. Environment variables (CONCENTRATION_* prefix)
    6. Keyword overrides

Example:
    >>> config = load_config(liveness_parts=4)
    >>> config.liveness_parts
    4
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Literal, Optional, get_args, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError
from .logging_config import get_logger

logger = get_logger(__name__)

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "CONCENTRATION_"
CONFIG_FILENAME = "concentration-insight.toml"


@dataclass(frozen=True)
class MetricsConfig:
    """Options applied when computing a metrics summary.

    Attributes:
        gini_bias_correction: Scale Gini by n/(n-1) for sample data
        hhi_reject_negative: Refuse negative amounts in HHI, as Gini does
        liveness_parts: Liveness threshold is total / liveness_parts
        verbosity: Logging verbosity level
    """

    gini_bias_correction: bool = False
    hhi_reject_negative: bool = False
    liveness_parts: int = 3
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for name in ("gini_bias_correction", "hhi_reject_negative"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise InvalidConfigError(name, value, "must be true or false")

        if isinstance(self.liveness_parts, bool) or not isinstance(self.liveness_parts, int):
            raise InvalidConfigError("liveness_parts", self.liveness_parts, "must be an integer")
        if self.liveness_parts < 1:
            raise InvalidConfigError("liveness_parts", self.liveness_parts, "must be at least 1")

        if self.verbosity not in get_args(Verbosity):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "must be one of quiet, normal, verbose"
            )

    @property
    def verbose(self) -> bool:
        return self.verbosity == "verbose"

    @property
    def quiet(self) -> bool:
        return self.verbosity == "quiet"


DEFAULT_CONFIG = MetricsConfig()


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> MetricsConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides; ``verbose=True`` and ``quiet=True``
            are accepted as shorthands for ``verbosity``

    Returns:
        Validated MetricsConfig instance

    Raises:
        ConfigurationError: If a config file is missing, unreadable, or has
            unknown keys
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
        config_file = Path(config_file)
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides.pop("verbose"):
            overrides["verbosity"] = "verbose"
    if "quiet" in overrides:
        if overrides.pop("quiet"):
            overrides["verbosity"] = "quiet"

    merged.update(overrides)

    known = {f.name for f in fields(MetricsConfig)}
    unknown = sorted(set(merged) - known)
    if unknown:
        raise ConfigurationError(
            f"Unknown configuration keys: {', '.join(unknown)}",
            details={"allowed": ", ".join(sorted(known))},
        )

    logger.debug(f"Resolved configuration: {merged}")
    return MetricsConfig(**merged)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from CONCENTRATION_* environment variables.

    Supported environment variables:
        CONCENTRATION_GINI_BIAS_CORRECTION: bool (true/false/1/0)
        CONCENTRATION_HHI_REJECT_NEGATIVE: bool
        CONCENTRATION_LIVENESS_PARTS: int
        CONCENTRATION_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any CONCENTRATION_* vars found.
    """
    type_hints = get_type_hints(MetricsConfig)

    result: dict[str, Any] = {}

    for f in fields(MetricsConfig):
        env_key = f"{ENV_PREFIX}{f.name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            result[f.name] = _parse_env_value(env_value, type_hints[f.name])
        except ValueError as e:
            raise InvalidConfigError(f.name, env_value, f"{env_key}: {e}") from e

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    if type_hint is bool:
        lower = value.strip().lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    # Strings, including Literal types like Verbosity
    return value


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(
            f"Invalid config file '{path}'", details={"reason": str(e)}
        ) from e
