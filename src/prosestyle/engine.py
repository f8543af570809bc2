"""Lint engine: runs enabled checks and assembles an ordered result."""
from __future__ import annotations

import logging
import time
from dataclasses import replace
from typing import Iterator

from prosestyle.models import (
    CheckFunction,
    CheckResult,
    DetailedLintResult,
    Finding,
    LintConfig,
    LintResult,
    normalize_config_keys,
)
from prosestyle.registry import CheckRegistry
from prosestyle.utils import line_and_column

logger = logging.getLogger(__name__)


class ProselintEngine:
    """Runs the registry's enabled checks against a text.

    Checks execute in registry order. Once the findings gathered so far reach
    ``config.max_errors`` the remaining checks are not run at all, so with a
    saturated document the earlier checks decide what gets reported.
    """

    def __init__(self, registry: CheckRegistry, config: LintConfig | None = None):
        self._registry = registry
        self._config = config if config is not None else LintConfig()

    def lint(self, text: str) -> LintResult:
        return self.lint_with_details(text).result

    def lint_with_details(self, text: str) -> DetailedLintResult:
        """Lint ``text`` and also report each executed check's findings and timing."""

        started = time.perf_counter()
        config = self._config
        enabled = self._registry.get_enabled_checks(config.checks)
        errors: list[Finding] = []
        check_results: list[CheckResult] = []

        for check_id, check_function in self._runnable(enabled):
            if len(errors) >= config.max_errors:
                logger.debug(
                    "Error budget of %d reached; skipping remaining checks", config.max_errors
                )
                break

            check_started = time.perf_counter()
            check_errors: list[Finding] = []

            try:
                raw_findings = check_function(text)
                for finding in raw_findings:
                    check_errors.append(self._enrich(text, check_id, finding))
            except Exception:
                logger.warning("Error executing check %s", check_id, exc_info=True)
                check_errors = []

            errors.extend(check_errors)
            check_results.append(
                CheckResult(
                    check_id=check_id,
                    errors=tuple(check_errors),
                    execution_time=time.perf_counter() - check_started,
                )
            )

        errors.sort(key=lambda finding: (finding.line, finding.column))
        limit = max(config.max_errors, 0)

        result = LintResult(
            errors=tuple(errors[:limit]),
            total_checks=self._registry.get_check_count(),
            enabled_checks=len(enabled),
            execution_time=time.perf_counter() - started,
        )
        logger.debug(
            "Linted %d characters with %d checks: %d finding(s) in %.4fs",
            len(text),
            len(check_results),
            len(result.errors),
            result.execution_time,
        )
        return DetailedLintResult(result=result, check_results=tuple(check_results))

    def _runnable(self, enabled: list[str]) -> Iterator[tuple[str, CheckFunction]]:
        for check_id in enabled:
            check_function = self._registry.get_check(check_id)
            metadata = self._registry.get_check_metadata(check_id)
            if check_function is None or metadata is None:
                continue
            yield check_id, check_function

    def _enrich(self, text: str, check_id: str, finding: Finding) -> Finding:
        line, column = line_and_column(text, finding.start)
        severity = self._config.severity_overrides.get(check_id) or finding.severity
        return replace(finding, line=line, column=column, severity=severity)

    def update_config(self, **changes) -> None:
        """Shallow-merge ``changes`` into the current configuration.

        Keys may be given in camelCase (``maxErrors``) or snake_case. Unknown
        keys raise ``ValueError``. ``checks`` and ``severity_overrides``
        replace the previous mappings rather than being merged into them.
        """

        self._config = replace(self._config, **normalize_config_keys(changes))

    def get_config(self) -> LintConfig:
        return replace(self._config)

    def get_registry(self) -> CheckRegistry:
        return self._registry
