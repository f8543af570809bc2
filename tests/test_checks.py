from __future__ import annotations

import pytest

from prosestyle.checks import (
    register_all_checks,
    register_misc_checks,
    register_social_awareness_checks,
    register_style_checks,
    register_typography_spelling_checks,
)
from prosestyle.checks.passive_voice import check_passive_voice, is_likely_passive
from prosestyle.config import default_config
from prosestyle.engine import ProselintEngine
from prosestyle.models import LintConfig
from prosestyle.registry import CheckRegistry


@pytest.fixture
def registry():
    return register_all_checks(CheckRegistry())


@pytest.fixture
def engine(registry):
    return ProselintEngine(registry, default_config(registry))


def _of(result, check_id):
    return [finding for finding in result.errors if finding.check_id == check_id]


def _matched(text, findings):
    return [text[finding.start:finding.end] for finding in findings]


def test_register_all_checks_registers_every_family(registry):
    assert registry.get_check_count() == 39
    assert [category.id for category in registry.get_all_categories()] == [
        "weasel_words",
        "redundancy",
        "hedging",
        "cliches",
        "passive_voice",
        "typography",
        "spelling",
        "consistency",
        "misc",
        "social_awareness",
    ]


@pytest.mark.parametrize(
    "register, category",
    [
        (register_style_checks, "cliches"),
        (register_typography_spelling_checks, "typography"),
        (register_misc_checks, "misc"),
        (register_social_awareness_checks, "social_awareness"),
    ],
)
def test_family_registration_is_independent(register, category):
    registry = CheckRegistry()

    register(registry)

    assert registry.get_checks_by_category(category)
    assert registry.get_check_count() < 39


def test_advanced_passive_voice_starts_disabled(registry):
    assert registry.get_check_metadata("passive_voice.advanced").enabled is False
    assert "passive_voice.advanced" not in registry.get_enabled_checks(
        registry.default_checks_map()
    )


def test_quoted_very_is_exempt(engine):
    text = 'He said "very good" but it was very bad.'

    findings = _of(engine.lint(text), "weasel_words.very")

    assert len(findings) == 1
    assert findings[0].start == text.rindex("very")
    assert findings[0].severity == "warning"


def test_repeated_very(engine):
    findings = _of(engine.lint("This is very very good."), "weasel_words.very")

    assert [(f.start, f.end) for f in findings] == [(8, 12), (13, 17)]


def test_redundant_phrase(engine):
    text = "We need advance planning for this."

    findings = _of(engine.lint(text), "redundancy.misc")

    assert len(findings) == 1
    assert _matched(text, findings) == ["advance planning"]
    assert findings[0].extent == len("advance planning")


def test_ras_syndrome(engine):
    text = "ATM machine and PIN number"

    findings = _of(engine.lint(text), "redundancy.ras_syndrome")

    assert _matched(text, findings) == ["ATM machine", "PIN number"]


def test_weasel_words_and_there_is(engine):
    text = "There are various reasons."
    result = engine.lint(text)

    assert _matched(text, _of(result, "weasel_words.misc")) == ["various"]
    there_is = _of(result, "weasel_words.there_is")
    assert _matched(text, there_is) == ["There are"]
    assert there_is[0].severity == "suggestion"


def test_hedging_and_cliches(engine):
    text = "I think that we should think outside the box."
    result = engine.lint(text)

    assert _matched(text, _of(result, "hedging.misc")) == ["I think that"]
    assert _matched(text, _of(result, "cliches.misc")) == ["think outside the box"]


def test_passive_voice_construction(engine):
    text = "The ball was thrown by the boy."

    findings = _of(engine.lint(text), "passive_voice.construction")

    assert _matched(text, findings) == ["was thrown"]
    assert "was thrown" in findings[0].message


@pytest.mark.parametrize("text", ["She is happy.", "He was tired.", "They are here."])
def test_passive_voice_skips_adjectives(text):
    assert check_passive_voice(text) == []


def test_is_likely_passive():
    assert is_likely_passive("was written")
    assert not is_likely_passive("was tired")


def test_advanced_passive_voice_when_enabled(registry):
    engine = ProselintEngine(registry, LintConfig(checks={"passive_voice.advanced": True}))
    text = "He got caught and got dressed."

    findings = _of(engine.lint(text), "passive_voice.advanced")

    assert _matched(text, findings) == ["got caught"]


def test_typography_dashes(engine):
    text = "Wait---what? The war lasted 1939-1945, see pages 10-20."
    result = engine.lint(text)

    three = _of(result, "typography.dashes.three_hyphens")
    assert _matched(text, three) == ["---"]
    assert three[0].replacements == ("—",)

    years = _of(result, "typography.dashes.year_range")
    assert years[0].replacements == ("1939–1945",)

    numbers = _of(result, "typography.dashes.number_range")
    assert _matched(text, numbers) == ["10-20"]
    assert numbers[0].replacements == ("10–20",)


def test_typography_symbols(engine):
    text = "Copyright (C) 2024 Acme(TM). The room is 3 x 4 metres... roughly."
    result = engine.lint(text)

    copyright = _of(result, "typography.symbols.copyright")
    assert copyright[0].message.startswith("(C) is an alphabetic approximation")
    assert copyright[0].replacements == ("©",)
    assert _of(result, "typography.symbols.trademark")[0].replacements == ("™",)
    assert _of(result, "typography.symbols.multiplication")[0].replacements == ("3 × 4",)
    assert _of(result, "typography.ellipsis")[0].replacements == ("…",)


def test_spelling_checks(engine):
    text = "I recieve teh mail, which is not accessable to the distributer."
    result = engine.lint(text)

    assert _matched(text, _of(result, "spelling.misspellings")) == ["recieve"]
    assert _matched(text, _of(result, "spelling.typos")) == ["teh"]
    assert _matched(text, _of(result, "spelling.able_ible")) == ["accessable"]
    assert _matched(text, _of(result, "spelling.er_or")) == ["distributer"]


def test_consistent_spelling(engine):
    text = "The color was fine. The colour was odd. Another color."

    findings = _of(engine.lint(text), "consistency.spelling")

    assert _matched(text, findings) == ["colour"]
    assert findings[0].replacements == ("color",)


def test_misc_capitalization(engine):
    text = "We met in march to admire mother nature. I love Winter."
    findings = _of(engine.lint(text), "misc.capitalization")

    assert sorted(_matched(text, findings)) == ["Winter", "march", "mother nature"]
    replacements = {text[f.start:f.end]: f.replacements for f in findings}
    assert replacements["mother nature"] == ("Mother Nature",)
    assert replacements["Winter"] == ("winter",)


def test_misc_capitalization_allows_may_be(engine):
    assert _of(engine.lint("It may be late."), "misc.capitalization") == []


def test_misc_preferred_forms(engine):
    text = "Apples, pears, etc. are prior to lunch."

    findings = _of(engine.lint(text), "misc.preferred_forms")

    assert _matched(text, findings) == ["etc.", "prior to"]
    assert findings[0].replacements == ("and so on",)


def test_misc_phrasal_adjectives(engine):
    text = "A well known author with a highly-regarded book."
    result = engine.lint(text)

    hyphen = _of(result, "misc.phrasal_adjectives")
    assert _matched(text, hyphen) == ["well known"]
    assert hyphen[0].replacements == ("well-known",)
    assert _matched(text, _of(result, "misc.phrasal_adjectives.ly")) == ["highly-"]


def test_misc_pretension_and_illogic(engine):
    text = "We utilize synergy. I could care less."
    result = engine.lint(text)

    assert _matched(text, _of(result, "misc.pretension")) == ["utilize", "synergy"]
    illogic = _of(result, "misc.illogic")
    assert illogic[0].replacements == ("couldn't care less",)
    assert illogic[0].severity == "warning"


def test_misc_scare_quotes(engine):
    text = "Here the 'take-home message' is clear."

    findings = _of(engine.lint(text), "misc.scare_quotes")

    assert len(findings) == 1
    assert findings[0].start == text.index("the")


def test_misc_apologizing_and_metadiscourse(engine):
    text = "Unfortunately, we lost. As mentioned before, we tried."
    result = engine.lint(text)

    assert _matched(text, _of(result, "misc.apologizing")) == ["Unfortunately,"]
    assert _matched(text, _of(result, "misc.metadiscourse")) == ["As mentioned before"]


def test_social_awareness(engine):
    text = "The chairman said the n-word is offensive, as is gay agenda."
    result = engine.lint(text)

    sexism = _of(result, "social_awareness.sexism")
    assert sexism[0].message == "Gender bias. Use 'chair' instead of 'chairman'."
    assert sexism[0].replacements == ("chair",)
    assert _matched(text, _of(result, "social_awareness.nword")) == ["the n-word"]
    offensive = _of(result, "social_awareness.lgbtq.offensive")
    assert offensive[0].severity == "error"


def test_lgbtq_terms(engine):
    text = "They discussed sexual preference."

    findings = _of(engine.lint(text), "social_awareness.lgbtq.terms")

    assert findings[0].replacements == ("sexual orientation",)


def test_every_finding_uses_a_registered_id(registry):
    checks = {check_id: True for check_id in registry.get_all_check_ids()}
    engine = ProselintEngine(registry, LintConfig(max_errors=1000, checks=checks))
    text = (
        "There are very many issues. ATM machine. I think that it was written --- badly "
        "in 1990-1995... The chairman could care less. I recieve the color and colour."
    )

    result = engine.lint(text)

    assert result.errors
    assert all(registry.has_check(finding.check_id) for finding in result.errors)


def test_disabling_a_check_hides_all_its_findings(registry):
    engine = ProselintEngine(registry, LintConfig(checks={"misc.illogic": False}))

    result = engine.lint("I could care less. We preplan everything.")

    assert _of(result, "misc.illogic") == []


@pytest.mark.parametrize(
    "text",
    [
        "very good--really (c) 1999-2005 and 3 x 4...",
        'He said "very good" but it\'s very bad; the \'take-home message\' --- ATM machine',
        "Unfortunately, we utilize synergy. There are many color and colour chairman",
        "I could care less --- the n-word is offensive. He got caught etc.",
        "",
    ],
)
def test_every_finding_has_valid_offsets(registry, text):
    checks = {check_id: True for check_id in registry.get_all_check_ids()}
    engine = ProselintEngine(registry, LintConfig(max_errors=10000, checks=checks))

    for finding in engine.lint(text).errors:
        assert 0 <= finding.start < finding.end <= len(text), finding
        assert finding.extent == finding.end - finding.start
        assert finding.line >= 1 and finding.column >= 1
