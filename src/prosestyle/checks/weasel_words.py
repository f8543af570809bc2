"""Weak, vague language: "very", weasel words and "there is" constructions."""
from __future__ import annotations

from prosestyle.matching import existence_check
from prosestyle.models import Finding, MatchOptions
from prosestyle.registry import CheckRegistry

WEASEL_WORDS = [
    "many",
    "various",
    "fairly",
    "several",
    "extremely",
    "exceedingly",
    "quite",
    "remarkably",
    "few",
    "surprisingly",
    "mostly",
    "largely",
    "huge",
    "tiny",
    "excellent",
    "interestingly",
    "significantly",
    "substantially",
    "clearly",
    "vast",
    "relatively",
    "completely",
    # verbose phrases
    "a number of",
    "all things being equal",
    "as a matter of fact",
    "at the end of the day",
    "by and large",
    "for all intents and purposes",
    "in a very real sense",
    "in fact",
    "in general",
    "in my opinion",
    "it could be argued that",
    "it goes without saying",
    "it has been shown",
    "it is believed",
    "it is clear that",
    "it is generally accepted",
    "it is important to note",
    "it is interesting to note",
    "it is known that",
    "it is obvious that",
    "it is recognized that",
    "it is worth noting",
    "it may be said",
    "it might be argued",
    "it should be noted",
    "needless to say",
    "to be sure",
    "without a doubt",
    "are a number",
    "is a number",
]

THERE_IS_PATTERNS = [
    "there is",
    "there are",
    "there was",
    "there were",
    "there will be",
    "there would be",
    "there has been",
    "there have been",
    "there had been",
]


def check_very(text: str) -> list[Finding]:
    return existence_check(
        text,
        ["very"],
        "weasel_words.very",
        '"Very" is a weak intensifier. Consider removing it or using a stronger word.',
        MatchOptions(severity="warning", source="proselint"),
    )


def check_weasel_words(text: str) -> list[Finding]:
    return existence_check(
        text,
        WEASEL_WORDS,
        "weasel_words.misc",
        'Weasel word detected: "{}". Consider being more specific.',
        MatchOptions(ignore_case=True, severity="warning", source="proselint"),
    )


def check_there_is(text: str) -> list[Finding]:
    return existence_check(
        text,
        THERE_IS_PATTERNS,
        "weasel_words.there_is",
        '"There is/are" construction detected: "{}". Consider a more direct approach.',
        MatchOptions(ignore_case=True, severity="suggestion", source="proselint"),
    )


def register(registry: CheckRegistry) -> None:
    registry.register_check(
        "weasel_words.very",
        check_very,
        name='Remove "Very"',
        description='"Very" is a weak intensifier. Consider removing it or using a stronger word.',
        category="weasel_words",
        severity="warning",
        source="proselint",
    )
    registry.register_check(
        "weasel_words.misc",
        check_weasel_words,
        name="Weasel Words",
        description="Detect vague, imprecise language that weakens writing.",
        category="weasel_words",
        severity="warning",
        source="proselint",
    )
    registry.register_check(
        "weasel_words.there_is",
        check_there_is,
        name="There Is/Are Constructions",
        description='Detect "there is/are" constructions that often indicate weak writing.',
        category="weasel_words",
        severity="suggestion",
        source="proselint",
    )
