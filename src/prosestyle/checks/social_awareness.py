"""Biased, outdated or offensive language."""
from __future__ import annotations

import re

from prosestyle.matching import existence_check, preferred_forms_check, regex_check
from prosestyle.models import Finding, MatchOptions
from prosestyle.registry import CheckRegistry

GARNER = "Garner's Modern American Usage"
GLAAD = "GLAAD Media Reference Guide"

GENDERED_TERMS = {
    "anchorman": "anchor",
    "anchorwoman": "anchor",
    "anchorperson": "anchor",
    "chairman": "chair",
    "chairwoman": "chair",
    "chairperson": "chair",
    "draftman": "drafter",
    "draftwoman": "drafter",
    "draftperson": "drafter",
    "ombudsman": "ombuds",
    "ombudswoman": "ombuds",
    "ombudsperson": "ombuds",
    "tribesman": "tribe member",
    "tribeswoman": "tribe member",
    "tribesperson": "tribe member",
    "policeman": "police officer",
    "policewoman": "police officer",
    "policeperson": "police officer",
    "fireman": "firefighter",
    "firewoman": "firefighter",
    "fireperson": "firefighter",
    "mailman": "mail carrier",
    "mailwoman": "mail carrier",
    "mailperson": "mail carrier",
    "poetess": "poet",
    "authoress": "author",
    "waitress": "waiter",
    "comedienne": "comedian",
    "confidante": "confidant",
    "executrix": "executor",
    "prosecutrix": "prosecutor",
    "testatrix": "testator",
    "man and wife": "husband and wife",
    "chairmen and chairs": "chairs",
    "men and girls": "men and women",
    "lady lawyer": "lawyer",
    "woman doctor": "doctor",
    "female booksalesman": "bookseller",
    "female airman": "air pilot",
    "woman scientist": "scientist",
    "women scientists": "scientists",
    "herstory": "history",
    "womyn": "women",
}

LGBTQ_TERMS = {
    "homosexual man": "gay man",
    "homosexual men": "gay men",
    "homosexual woman": "lesbian",
    "homosexual women": "lesbians",
    "homosexual people": "gay people",
    "homosexual couple": "gay couple",
    "sexual preference": "sexual orientation",
    "admitted homosexual": "openly gay",
    "avowed homosexual": "openly gay",
    "special rights": "equal rights",
}

OFFENSIVE_TERMS = [
    "faggot",
    "dyke",
    "sodomite",
    "homosexual agenda",
    "gay agenda",
    "transvestite",
    "homosexual lifestyle",
    "gay lifestyle",
]


def _grouped(mapping: dict[str, str]) -> list[tuple[str, list[str]]]:
    """Invert a ``variant -> preferred`` table into escaped variant groups."""

    groups: dict[str, list[str]] = {}
    for variant, preferred in mapping.items():
        groups.setdefault(preferred, []).append(re.escape(variant))
    return list(groups.items())


def check_sexism(text: str) -> list[Finding]:
    return preferred_forms_check(
        text,
        _grouped(GENDERED_TERMS),
        "social_awareness.sexism",
        "Gender bias. Use '{}' instead of '{}'.",
        MatchOptions(ignore_case=True, severity="warning", source=GARNER),
    )


def check_lgbtq_terms(text: str) -> list[Finding]:
    return preferred_forms_check(
        text,
        _grouped(LGBTQ_TERMS),
        "social_awareness.lgbtq.terms",
        "Possibly offensive term. Consider using '{}' instead of '{}'.",
        MatchOptions(ignore_case=True, severity="warning", source=GLAAD),
    )


def check_lgbtq_offensive(text: str) -> list[Finding]:
    return existence_check(
        text,
        OFFENSIVE_TERMS,
        "social_awareness.lgbtq.offensive",
        "Offensive term. Remove it or consider the context.",
        MatchOptions(ignore_case=True, severity="error", source=GLAAD),
    )


def check_nword(text: str) -> list[Finding]:
    return regex_check(
        text,
        [r"\bthe n-?word\b"],
        "social_awareness.nword",
        "Take responsibility for the words you want to say.",
        MatchOptions(ignore_case=True, severity="warning", source="proselint"),
    )


def register(registry: CheckRegistry) -> None:
    registry.register_check(
        "social_awareness.sexism",
        check_sexism,
        name="Gender-Neutral Language",
        description="Flag gendered language that could be made more inclusive.",
        category="social_awareness",
        severity="warning",
        source=GARNER,
    )
    registry.register_check(
        "social_awareness.lgbtq.terms",
        check_lgbtq_terms,
        name="LGBTQ+ Inclusive Language",
        description="Flag outdated LGBTQ+ terminology and suggest current terms.",
        category="social_awareness",
        severity="warning",
        source=GLAAD,
    )
    registry.register_check(
        "social_awareness.lgbtq.offensive",
        check_lgbtq_offensive,
        name="LGBTQ+ Offensive Terms",
        description="Flag clearly offensive LGBTQ+ terminology.",
        category="social_awareness",
        severity="error",
        source=GLAAD,
    )
    registry.register_check(
        "social_awareness.nword",
        check_nword,
        name="Race/Ethnicity Sensitivity",
        description="Flag euphemistic references to offensive racial language.",
        category="social_awareness",
        severity="warning",
        source="proselint",
    )
