from __future__ import annotations

import logging

import pytest

from prosestyle.engine import ProselintEngine
from prosestyle.models import Finding, LintConfig
from prosestyle.registry import CheckRegistry


def _finding_at(check_id, start, end, severity="warning"):
    return Finding(check_id=check_id, message=check_id, start=start, end=end, severity=severity)


def _word_check(check_id, word, severity="warning", calls=None):
    def check(text):
        if calls is not None:
            calls.append(check_id)
        findings = []
        position = text.find(word)
        while position != -1:
            findings.append(_finding_at(check_id, position, position + len(word), severity))
            position = text.find(word, position + 1)
        return findings

    return check


def _registry(*checks):
    registry = CheckRegistry()
    for check_id, function in checks:
        registry.register_check(
            check_id, function, name=check_id, category="demo", severity="warning"
        )
    return registry


def test_lint_empty_text_yields_nothing():
    engine = ProselintEngine(_registry(("demo.very", _word_check("demo.very", "very"))))

    result = engine.lint("")

    assert result.errors == ()
    assert result.total_checks == 1
    assert result.enabled_checks == 1
    assert result.execution_time >= 0


def test_lint_enriches_line_and_column():
    engine = ProselintEngine(_registry(("demo.very", _word_check("demo.very", "very"))))

    result = engine.lint("Fine.\nIt is very good.")

    assert len(result.errors) == 1
    finding = result.errors[0]
    assert (finding.line, finding.column) == (2, 7)
    assert (finding.start, finding.end, finding.extent) == (12, 16, 4)


def test_lint_sorts_across_checks():
    registry = _registry(
        ("demo.late", _word_check("demo.late", "late")),
        ("demo.early", _word_check("demo.early", "early")),
    )
    engine = ProselintEngine(registry)

    result = engine.lint("early\nlate early")

    positions = [(f.line, f.column) for f in result.errors]
    assert positions == sorted(positions)
    assert [f.check_id for f in result.errors] == ["demo.early", "demo.late", "demo.early"]


def test_sort_is_stable_for_equal_positions():
    registry = _registry(
        ("demo.first", lambda text: [_finding_at("demo.first", 0, 1)]),
        ("demo.second", lambda text: [_finding_at("demo.second", 0, 2)]),
    )

    result = ProselintEngine(registry).lint("ab")

    assert [f.check_id for f in result.errors] == ["demo.first", "demo.second"]


def test_lint_is_deterministic():
    registry = _registry(
        ("demo.a", _word_check("demo.a", "a")),
        ("demo.b", _word_check("demo.b", "b")),
    )
    engine = ProselintEngine(registry)
    text = "a b a\nb a"

    assert engine.lint(text).errors == engine.lint(text).errors


def test_disabled_checks_do_not_run():
    calls: list[str] = []
    registry = _registry(
        ("demo.on", _word_check("demo.on", "x", calls=calls)),
        ("demo.off", _word_check("demo.off", "x", calls=calls)),
    )
    engine = ProselintEngine(registry, LintConfig(checks={"demo.off": False}))

    result = engine.lint("x")

    assert calls == ["demo.on"]
    assert {f.check_id for f in result.errors} == {"demo.on"}
    assert result.enabled_checks == 1
    assert result.total_checks == 2


def test_budget_stops_running_later_checks():
    calls: list[str] = []
    registry = _registry(
        ("demo.first", _word_check("demo.first", "x", calls=calls)),
        ("demo.second", _word_check("demo.second", "x", calls=calls)),
    )
    engine = ProselintEngine(registry, LintConfig(max_errors=2))

    result = engine.lint("x x x")

    assert calls == ["demo.first"]
    assert len(result.errors) == 2
    assert all(f.check_id == "demo.first" for f in result.errors)


@pytest.mark.parametrize("max_errors", [0, -3])
def test_non_positive_budget_yields_no_findings(max_errors):
    calls: list[str] = []
    registry = _registry(("demo.x", _word_check("demo.x", "x", calls=calls)))
    engine = ProselintEngine(registry, LintConfig(max_errors=max_errors))

    result = engine.lint("x x")

    assert result.errors == ()
    assert calls == []


def test_severity_overrides_apply_by_check_id():
    registry = _registry(
        ("demo.a", _word_check("demo.a", "a", severity="suggestion")),
        ("demo.b", _word_check("demo.b", "b", severity="suggestion")),
    )
    engine = ProselintEngine(registry, LintConfig(severity_overrides={"demo.a": "error"}))

    result = engine.lint("a b")

    severities = {f.check_id: f.severity for f in result.errors}
    assert severities == {"demo.a": "error", "demo.b": "suggestion"}


def test_failing_check_is_logged_and_isolated(caplog):
    def boom(text):
        raise RuntimeError("kaboom")

    registry = _registry(
        ("demo.boom", boom),
        ("demo.x", _word_check("demo.x", "x")),
    )
    engine = ProselintEngine(registry)

    with caplog.at_level(logging.WARNING, logger="prosestyle.engine"):
        detailed = engine.lint_with_details("x")

    assert [f.check_id for f in detailed.result.errors] == ["demo.x"]
    assert "demo.boom" in caplog.text
    assert any(record.exc_info for record in caplog.records)
    boom_result = next(r for r in detailed.check_results if r.check_id == "demo.boom")
    assert boom_result.errors == ()


def test_unknown_config_ids_are_ignored():
    registry = _registry(("demo.x", _word_check("demo.x", "x")))
    engine = ProselintEngine(registry, LintConfig(checks={"ghost.check": True}))

    result = engine.lint("x")

    assert len(result.errors) == 1
    assert result.enabled_checks == 1


def test_unregistered_check_is_not_run_even_if_enabled():
    calls: list[str] = []
    registry = _registry(("demo.x", _word_check("demo.x", "x", calls=calls)))
    engine = ProselintEngine(registry, LintConfig(checks={"demo.x": True}))

    registry.unregister_check("demo.x")

    assert engine.lint("x").errors == ()
    assert calls == []


def test_lint_with_details_reports_each_check():
    registry = _registry(
        ("demo.a", _word_check("demo.a", "a")),
        ("demo.b", _word_check("demo.b", "b")),
    )
    engine = ProselintEngine(registry)

    detailed = engine.lint_with_details("a a b")

    counts = {result.check_id: len(result.errors) for result in detailed.check_results}
    assert counts == {"demo.a": 2, "demo.b": 1}
    assert len(detailed.result.errors) == 3
    assert detailed.result.total_checks == detailed.result.enabled_checks == 2
    assert all(result.errors[0].line == 1 for result in detailed.check_results)


def test_update_config_merges_shallowly():
    engine = ProselintEngine(
        CheckRegistry(),
        LintConfig(max_errors=5, checks={"a": False}, severity_overrides={"a": "error"}),
    )

    engine.update_config(max_errors=10)
    assert engine.get_config() == LintConfig(
        max_errors=10, checks={"a": False}, severity_overrides={"a": "error"}
    )

    engine.update_config(checks={"b": False})
    assert engine.get_config().checks == {"b": False}
    assert engine.get_config().severity_overrides == {"a": "error"}


def test_update_config_rejects_unknown_keys():
    engine = ProselintEngine(CheckRegistry())

    with pytest.raises(ValueError, match="max_warnings"):
        engine.update_config(max_warnings=3)


def test_update_config_accepts_camel_case_keys():
    engine = ProselintEngine(CheckRegistry(), LintConfig(max_errors=5))

    engine.update_config(**{"maxErrors": 7, "severityOverrides": {"a": "error"}})

    assert engine.get_config().max_errors == 7
    assert engine.get_config().severity_overrides == {"a": "error"}


def test_get_config_returns_a_copy():
    engine = ProselintEngine(CheckRegistry(), LintConfig(checks={"a": True}))

    config = engine.get_config()
    config.checks["a"] = False

    assert engine.get_config().checks == {"a": True}


def test_get_registry_returns_the_registry():
    registry = CheckRegistry()

    assert ProselintEngine(registry).get_registry() is registry


def test_default_config_when_none_given():
    assert ProselintEngine(CheckRegistry()).get_config() == LintConfig()
