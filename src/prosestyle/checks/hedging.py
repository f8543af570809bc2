"""Hedging language and filler words."""
from __future__ import annotations

from prosestyle.matching import existence_check
from prosestyle.models import Finding, MatchOptions
from prosestyle.registry import CheckRegistry

HEDGING_PHRASES = [
    "I would argue that",
    "I believe that",
    "I think that",
    "I feel that",
    "I suppose",
    "I guess",
    "in my opinion",
    "it seems to me",
    "it appears that",
    "it could be argued",
    "it might be said",
    "it is possible that",
    "it is likely that",
    "perhaps",
    "maybe",
    "possibly",
    "probably",
    "presumably",
    "apparently",
    "seemingly",
    "allegedly",
    "supposedly",
    "sort of",
    "kind of",
    "rather",
    "quite",
    "somewhat",
    "fairly",
    "pretty much",
    "more or less",
    "to some extent",
    "to a certain degree",
    "in a sense",
    "in a way",
    "so to speak",
    "as it were",
    "if you will",
    "to be honest",
    "to tell the truth",
    "frankly speaking",
    "generally speaking",
    "broadly speaking",
    "roughly speaking",
]

FILLER_WORDS = [
    "actually",
    "basically",
    "literally",
    "obviously",
    "clearly",
    "certainly",
    "definitely",
    "absolutely",
    "totally",
    "completely",
    "really",
    "truly",
    "honestly",
    "frankly",
    "seriously",
    "essentially",
    "fundamentally",
    "ultimately",
    "particularly",
    "especially",
    "specifically",
    "generally",
    "typically",
    "usually",
    "normally",
    "naturally",
]


def check_hedging(text: str) -> list[Finding]:
    return existence_check(
        text,
        HEDGING_PHRASES,
        "hedging.misc",
        'Hedging language detected: "{}". Consider stating this more confidently.',
        MatchOptions(ignore_case=True, severity="suggestion", source="proselint"),
    )


def check_filler_words(text: str) -> list[Finding]:
    return existence_check(
        text,
        FILLER_WORDS,
        "hedging.filler_words",
        'Filler word detected: "{}". Consider removing for stronger writing.',
        MatchOptions(ignore_case=True, severity="suggestion", source="proselint"),
    )


def register(registry: CheckRegistry) -> None:
    registry.register_check(
        "hedging.misc",
        check_hedging,
        name="Hedging Language",
        description="Detect uncertain, tentative language that undermines confidence.",
        category="hedging",
        severity="suggestion",
        source="proselint",
    )
    registry.register_check(
        "hedging.filler_words",
        check_filler_words,
        name="Filler Words",
        description="Detect filler words that weaken writing.",
        category="hedging",
        severity="suggestion",
        source="proselint",
    )
