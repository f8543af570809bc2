"""Engine configuration defaults and YAML configuration files."""
from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional, Union

import yaml

from prosestyle.models import LintConfig, normalize_config_keys
from prosestyle.registry import CheckRegistry

logger = logging.getLogger(__name__)

DEFAULT_MAX_ERRORS = 100


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read or has the wrong shape."""


def default_config(registry: Optional[CheckRegistry] = None) -> LintConfig:
    """Return the default configuration.

    With a registry, checks registered with ``enabled=False`` start disabled;
    every other check is enabled.
    """

    checks = registry.default_checks_map() if registry is not None else {}
    return LintConfig(max_errors=DEFAULT_MAX_ERRORS, checks=checks)


def _check_value_types(kwargs: dict, config_path: Path) -> None:
    # YAML booleans only; a quoted 'false' would otherwise leave a check enabled.
    max_errors = kwargs.get("max_errors", 0)
    if isinstance(max_errors, bool) or not isinstance(max_errors, int):
        raise ConfigError(f"'maxErrors' in {config_path} must be an integer, got {max_errors!r}")

    for check_id, enabled in kwargs.get("checks", {}).items():
        if not isinstance(enabled, bool):
            raise ConfigError(
                f"'checks.{check_id}' in {config_path} must be true or false, got {enabled!r}"
            )


def load_config(path: Union[str, Path], base: Optional[LintConfig] = None) -> LintConfig:
    """Load a YAML configuration file and merge it over ``base``.

    The file holds a mapping using the host persistence keys::

        maxErrors: 50
        checks:
          weasel_words.very: false
        severityOverrides:
          redundancy.misc: error

    Top-level keys replace the corresponding values of ``base``; the ``checks``
    and ``severityOverrides`` mappings are not merged key by key.
    """

    config_path = Path(path)
    try:
        with open(config_path, "r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration file {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if data is None:
        logger.info("Configuration file %s is empty; using defaults", config_path)
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file {config_path} must contain a mapping")

    for key in ("checks", "severityOverrides", "severity_overrides"):
        if key in data and not isinstance(data[key], (dict, type(None))):
            raise ConfigError(f"'{key}' in {config_path} must be a mapping")

    try:
        kwargs = normalize_config_keys(data)
    except ValueError as exc:
        raise ConfigError(f"{config_path}: {exc}") from exc

    _check_value_types(kwargs, config_path)

    try:
        if base is None:
            return LintConfig(**kwargs)
        return replace(base, **kwargs)
    except ValueError as exc:
        raise ConfigError(f"{config_path}: {exc}") from exc
