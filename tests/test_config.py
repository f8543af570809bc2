from __future__ import annotations

import textwrap

import pytest

from prosestyle.checks import register_all_checks
from prosestyle.config import DEFAULT_MAX_ERRORS, ConfigError, default_config, load_config
from prosestyle.models import LintConfig
from prosestyle.registry import CheckRegistry


def _write(tmp_path, content, name="prosestyle.yaml"):
    path = tmp_path / name
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


def test_default_config_without_registry():
    config = default_config()

    assert config.max_errors == DEFAULT_MAX_ERRORS == 100
    assert config.checks == {}
    assert config.severity_overrides == {}


def test_default_config_uses_registration_defaults():
    registry = register_all_checks(CheckRegistry())

    config = default_config(registry)

    assert config.checks["passive_voice.advanced"] is False
    assert config.checks["weasel_words.very"] is True
    assert len(config.checks) == registry.get_check_count()


def test_load_config_reads_camel_case_keys(tmp_path):
    path = _write(
        tmp_path,
        """
        maxErrors: 25
        checks:
          weasel_words.very: false
        severityOverrides:
          redundancy.misc: error
        """,
    )

    config = load_config(path)

    assert config == LintConfig(
        max_errors=25,
        checks={"weasel_words.very": False},
        severity_overrides={"redundancy.misc": "error"},
    )


def test_load_config_merges_over_base(tmp_path):
    path = _write(tmp_path, "max_errors: 7\n")
    base = LintConfig(checks={"a": False}, severity_overrides={"a": "error"})

    config = load_config(path, base=base)

    assert config.max_errors == 7
    assert config.checks == {"a": False}
    assert config.severity_overrides == {"a": "error"}


def test_load_config_empty_file_gives_defaults(tmp_path):
    path = _write(tmp_path, "")

    assert load_config(path) == LintConfig()


def test_load_config_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="Cannot read"):
        load_config(tmp_path / "missing.yaml")


def test_load_config_invalid_yaml(tmp_path):
    path = _write(tmp_path, "checks: [unclosed\n")

    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(path)


def test_load_config_requires_mapping(tmp_path):
    path = _write(tmp_path, "- one\n- two\n")

    with pytest.raises(ConfigError, match="must contain a mapping"):
        load_config(path)


def test_load_config_requires_mapping_for_checks(tmp_path):
    path = _write(tmp_path, "checks: [weasel_words.very]\n")

    with pytest.raises(ConfigError, match="'checks'"):
        load_config(path)


def test_load_config_rejects_unknown_keys(tmp_path):
    path = _write(tmp_path, "maxWarnings: 3\n")

    with pytest.raises(ConfigError, match="maxWarnings"):
        load_config(path)


def test_load_config_rejects_unknown_severity(tmp_path):
    path = _write(
        tmp_path,
        """
        severityOverrides:
          redundancy.misc: fatal
        """,
    )

    with pytest.raises(ConfigError):
        load_config(path)


def test_config_error_is_a_value_error():
    assert issubclass(ConfigError, ValueError)


def test_lint_config_round_trips_host_shape():
    data = {"maxErrors": 3, "checks": {"x": False}, "severityOverrides": {"x": "warning"}}

    config = LintConfig.from_dict(data)

    assert config.max_errors == 3
    assert config.as_dict() == data


def test_lint_config_copies_mappings():
    checks = {"x": True}

    config = LintConfig(checks=checks)
    checks["x"] = False

    assert config.checks == {"x": True}


def test_load_config_rejects_non_integer_max_errors(tmp_path):
    path = _write(tmp_path, "maxErrors: ten\n")

    with pytest.raises(ConfigError, match="must be an integer"):
        load_config(path)


def test_load_config_rejects_boolean_max_errors(tmp_path):
    path = _write(tmp_path, "maxErrors: true\n")

    with pytest.raises(ConfigError, match="must be an integer"):
        load_config(path)


def test_load_config_rejects_quoted_check_flags(tmp_path):
    path = _write(
        tmp_path,
        """
        checks:
          weasel_words.very: 'false'
        """,
    )

    with pytest.raises(ConfigError, match="weasel_words.very"):
        load_config(path)
