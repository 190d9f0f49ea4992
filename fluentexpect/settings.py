"""
Settings for assertion rendering and logging.

Settings can be built in code or loaded from a YAML file whose top-level
``expect`` mapping holds the fields of :class:`ExpectSettings`:

    expect:
      max_value_length: 200
      max_depth: 3
      log_level: DEBUG

Loading never raises for bad input; problems are reported through a
:class:`ValidationResult`, the same way a malformed file would be.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class ExpectSettings:
    """
    Process-wide rendering and logging options.

    Attributes:
        max_value_length: Rendered values longer than this are truncated
        max_depth: Nesting depth shown for containers (None for unlimited)
        log_level: Level applied to the ``fluentexpect`` logger, if set
    """
    max_value_length: int = 100
    max_depth: int | None = None
    log_level: str | None = None


@dataclass
class SettingsError:
    """A single problem found while validating settings."""
    path: str
    message: str
    value: Any = None

    def __str__(self) -> str:
        text = f"{self.path}: {self.message}"
        if self.value is not None:
            text += f" (got {self.value!r})"
        return text


@dataclass
class ValidationResult:
    """Outcome of validating a settings document."""
    errors: list[SettingsError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(self, path: str, message: str, value: Any = None) -> None:
        self.errors.append(SettingsError(path, message, value))

    def __str__(self) -> str:
        if self.is_valid:
            return "Settings are valid"
        lines = [f"Settings validation failed with {len(self.errors)} error(s):"]
        lines.extend(f"  {e}" for e in self.errors)
        return "\n".join(lines)


_current = ExpectSettings()


def get_settings() -> ExpectSettings:
    """Return the settings currently in effect."""
    return _current


def configure(settings: ExpectSettings | None = None, **overrides: Any) -> ExpectSettings:
    """
    Replace the process-wide settings.

    Values go through the same validation as a settings file, so
    ``configure(log_level="debug")`` behaves like ``log_level: debug``.

    Args:
        settings: Base settings (defaults to a fresh ExpectSettings)
        **overrides: Individual fields to override on top of ``settings``

    Returns:
        The settings now in effect

    Raises:
        TypeError: If an override names an unknown setting
        ValueError: If a value fails validation
    """
    global _current

    base = settings or ExpectSettings()
    known = {f.name for f in fields(ExpectSettings)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"Unknown setting(s): {', '.join(sorted(unknown))}")

    values = {f.name: getattr(base, f.name) for f in fields(ExpectSettings)}
    values.update(overrides)

    result = ValidationResult()
    validated = _validate_section(values, result)
    if validated is None:
        raise ValueError(str(result))

    _current = validated
    if _current.log_level:
        logging.getLogger("fluentexpect").setLevel(_current.log_level)
    logger.info(f"Settings applied: {_current}")
    return _current


def load_settings(path: str | Path) -> tuple[ExpectSettings | None, ValidationResult]:
    """
    Load and validate settings from a YAML file.

    Args:
        path: Path to the YAML settings file

    Returns:
        Tuple of (ExpectSettings or None, ValidationResult).
        If validation fails, the settings will be None.
    """
    path = Path(path)

    if not path.exists():
        result = ValidationResult()
        result.add_error(str(path), "File not found")
        return None, result

    with open(path) as f:
        text = f.read()

    return _parse_settings(text, source=str(path))


def validate_settings_yaml(yaml_string: str) -> tuple[ExpectSettings | None, ValidationResult]:
    """Validate settings from a YAML string."""
    return _parse_settings(yaml_string, source="yaml")


def _parse_settings(text: str, source: str) -> tuple[ExpectSettings | None, ValidationResult]:
    result = ValidationResult()

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        result.add_error(source, f"Invalid YAML syntax: {e}")
        return None, result

    if data is None:
        return ExpectSettings(), result

    if not isinstance(data, dict):
        result.add_error(source, "Content must be a YAML object", value=type(data).__name__)
        return None, result

    section = data.get("expect", {})
    if section is None:
        section = {}
    if not isinstance(section, dict):
        result.add_error("expect", "Must be a mapping", value=type(section).__name__)
        return None, result

    return _validate_section(section, result), result


def _validate_section(section: dict[str, Any], result: ValidationResult) -> ExpectSettings | None:
    """Check and normalise raw setting values, recording problems in ``result``."""
    known = {f.name for f in fields(ExpectSettings)}
    for key in section:
        if key not in known:
            result.add_error(f"expect.{key}", "Unknown setting")

    max_value_length = section.get("max_value_length", 100)
    if isinstance(max_value_length, bool) or not isinstance(max_value_length, int) or max_value_length < 4:
        result.add_error(
            "expect.max_value_length",
            "Must be an integer of at least 4",
            value=max_value_length,
        )

    max_depth = section.get("max_depth")
    if max_depth is not None and (
        isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 1
    ):
        result.add_error("expect.max_depth", "Must be a positive integer", value=max_depth)

    log_level = section.get("log_level")
    if log_level is not None:
        if not isinstance(log_level, str) or log_level.upper() not in _LOG_LEVELS:
            result.add_error(
                "expect.log_level",
                f"Must be one of: {', '.join(sorted(_LOG_LEVELS))}",
                value=log_level,
            )
        else:
            log_level = log_level.upper()

    if not result.is_valid:
        return None

    return ExpectSettings(
        max_value_length=max_value_length,
        max_depth=max_depth,
        log_level=log_level,
    )
