"""Shared data models used across the linter, its checks and the CLI."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional

SEVERITIES = ("suggestion", "warning", "error")


def validate_severity(severity: str) -> str:
    if severity not in SEVERITIES:
        raise ValueError(
            f"Unknown severity {severity!r}; expected one of {', '.join(SEVERITIES)}"
        )
    return severity


@dataclass(frozen=True)
class Finding:
    """A single stylistic issue located by a half-open ``[start, end)`` range.

    ``line`` and ``column`` stay ``None`` until the engine enriches the finding.
    """

    check_id: str
    message: str
    start: int
    end: int
    severity: str = "warning"
    replacements: tuple[str, ...] = ()
    source: Optional[str] = None
    source_url: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None
    extent: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "extent", self.end - self.start)
        object.__setattr__(self, "replacements", tuple(self.replacements))

    def as_dict(self) -> dict:
        return {
            "check_id": self.check_id,
            "message": self.message,
            "line": self.line,
            "column": self.column,
            "start": self.start,
            "end": self.end,
            "extent": self.extent,
            "severity": self.severity,
            "replacements": list(self.replacements),
            "source": self.source,
            "source_url": self.source_url,
        }


CheckFunction = Callable[[str], list[Finding]]


@dataclass(frozen=True)
class MatchOptions:
    """Options accepted by the pattern-matching primitives."""

    ignore_case: bool = False
    require_padding: bool = True
    severity: str = "warning"
    replacements: tuple[str, ...] = ()
    source: Optional[str] = None
    source_url: Optional[str] = None

    def __post_init__(self) -> None:
        validate_severity(self.severity)
        object.__setattr__(self, "replacements", tuple(self.replacements))


@dataclass(frozen=True)
class CheckMetadata:
    id: str
    name: str
    category: str
    severity: str
    description: str = ""
    enabled: bool = True
    source: Optional[str] = None
    source_url: Optional[str] = None

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "enabled": self.enabled,
            "severity": self.severity,
            "source": self.source,
            "source_url": self.source_url,
        }


@dataclass
class CheckCategory:
    id: str
    name: str
    description: str
    checks: list[CheckMetadata] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "checks": [check.as_dict() for check in self.checks],
        }


@dataclass(frozen=True)
class LintConfig:
    """Engine configuration.

    A check missing from ``checks`` is enabled; only an explicit ``False``
    disables it. ``max_errors`` is taken as given, so a value of zero or less
    simply yields no findings.
    """

    max_errors: int = 100
    checks: Mapping[str, bool] = field(default_factory=dict)
    severity_overrides: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "checks", dict(self.checks))
        object.__setattr__(self, "severity_overrides", dict(self.severity_overrides))
        for severity in self.severity_overrides.values():
            validate_severity(severity)

    @classmethod
    def from_dict(cls, data: Mapping) -> "LintConfig":
        """Build a config from the host persistence shape.

        Accepts ``maxErrors``/``severityOverrides`` as well as their snake_case
        spellings. Missing keys fall back to the defaults.
        """

        return cls(**normalize_config_keys(data))

    def as_dict(self) -> dict:
        return {
            "maxErrors": self.max_errors,
            "checks": dict(self.checks),
            "severityOverrides": dict(self.severity_overrides),
        }


_CONFIG_KEYS = {
    "maxErrors": "max_errors",
    "max_errors": "max_errors",
    "checks": "checks",
    "severityOverrides": "severity_overrides",
    "severity_overrides": "severity_overrides",
}


def normalize_config_keys(data: Mapping) -> dict:
    kwargs: dict = {}
    for key, value in data.items():
        if key not in _CONFIG_KEYS:
            raise ValueError(f"Unknown configuration key: {key}")
        if value is None:
            continue
        kwargs[_CONFIG_KEYS[key]] = value
    return kwargs


@dataclass(frozen=True)
class LintResult:
    errors: tuple[Finding, ...]
    total_checks: int
    enabled_checks: int
    execution_time: float

    def as_dict(self) -> dict:
        return {
            "total_checks": self.total_checks,
            "enabled_checks": self.enabled_checks,
            "execution_time": self.execution_time,
            "items": [finding.as_dict() for finding in self.errors],
        }


@dataclass(frozen=True)
class CheckResult:
    """Findings and timing for one executed check."""

    check_id: str
    errors: tuple[Finding, ...]
    execution_time: float

    def as_dict(self) -> dict:
        return {
            "check_id": self.check_id,
            "count": len(self.errors),
            "execution_time": self.execution_time,
        }


@dataclass(frozen=True)
class DetailedLintResult:
    result: LintResult
    check_results: tuple[CheckResult, ...]
