"""Spelling: common misspellings, typos, suffix confusions and consistency."""
from __future__ import annotations

from prosestyle.matching import consistency_check, existence_check
from prosestyle.models import Finding, MatchOptions
from prosestyle.registry import CheckRegistry

GARNER = "Garner's Modern American Usage"

MISSPELLINGS = [
    "alot",
    "accomodation",
    "arguement",
    "calender",
    "definately",
    "enviroment",
    "explaination",
    "goverment",
    "independant",
    "maintainance",
    "neccessary",
    "occured",
    "occurence",
    "recomend",
    "recieve",
    "seperate",
    "tommorrow",
    "untill",
    "wierd",
    "wellcome",
]

TYPOS = [
    "teh",
    "adn",
    "taht",
    "thier",
    "recieved",
    "beleive",
    "acheive",
    "occassion",
    "occassional",
    "embarass",
    "harrass",
    "wierd",
    "freind",
    "guarentee",
    "existance",
    "persistant",
    "perseverence",
    "priviledge",
    "publically",
    "siezure",
]

ABLE_IBLE = [
    "accessable",
    "admissable",
    "collectable",
    "compatabile",
    "comprehensable",
    "convertable",
    "defensable",
    "digestable",
    "distractable",
    "divisable",
    "exhaustable",
    "expressable",
    "flexable",
    "inadmissable",
    "indefensable",
    "inexhaustable",
    "inflexable",
    "irresistable",
    "permissable",
    "resistable",
    "reversable",
    "sensable",
    "suggestable",
]

ER_OR = [
    "advisior",
    "assesser",
    "contributer",
    "councillar",
    "counsellor",
    "defendor",
    "dependor",
    "distributer",
    "editour",
    "investar",
    "oppresser",
    "possesser",
    "professur",
    "protecter",
    "reflectar",
    "successar",
    "supervisar",
    "survivour",
    "transgressar",
]

# Pairs of accepted spellings that should not be mixed within one document.
CONSISTENT_SPELLINGS = [
    ("advisor", "adviser"),
    ("centre", "center"),
    ("colour", "color"),
    ("emphasise", "emphasize"),
    ("favour", "favor"),
    ("labour", "labor"),
    ("learnt", "learned"),
    ("organise", "organize"),
    ("organisation", "organization"),
    ("recognise", "recognize"),
]


def check_misspellings(text: str) -> list[Finding]:
    return existence_check(
        text,
        MISSPELLINGS,
        "spelling.misspellings",
        'Common misspelling: "{}". Check spelling.',
        MatchOptions(severity="warning", source=GARNER),
    )


def check_typos(text: str) -> list[Finding]:
    return existence_check(
        text,
        TYPOS,
        "spelling.typos",
        'Possible typo: "{}". Did you mean something else?',
        MatchOptions(severity="warning", source="proselint"),
    )


def check_able_ible(text: str) -> list[Finding]:
    return existence_check(
        text,
        ABLE_IBLE,
        "spelling.able_ible",
        'Spelling confusion: "{}". Check if this should end in -able or -ible.',
        MatchOptions(severity="warning", source=GARNER),
    )


def check_er_or(text: str) -> list[Finding]:
    return existence_check(
        text,
        ER_OR,
        "spelling.er_or",
        'Spelling confusion: "{}". Check if this should end in -er or -or.',
        MatchOptions(severity="warning", source=GARNER),
    )


def check_consistent_spelling(text: str) -> list[Finding]:
    return consistency_check(
        text,
        CONSISTENT_SPELLINGS,
        "consistency.spelling",
        "Inconsistent spelling. '{}' is used elsewhere; '{}' differs.",
        MatchOptions(ignore_case=True, severity="suggestion", source="proselint"),
    )


def register(registry: CheckRegistry) -> None:
    registry.register_check(
        "spelling.misspellings",
        check_misspellings,
        name="Common Misspellings",
        description="Checks for frequently misspelled words",
        category="spelling",
        severity="warning",
        source=GARNER,
    )
    registry.register_check(
        "spelling.typos",
        check_typos,
        name="Common Typos",
        description="Checks for common typing errors and transpositions",
        category="spelling",
        severity="warning",
        source="proselint",
    )
    registry.register_check(
        "spelling.able_ible",
        check_able_ible,
        name="-able/-ible Confusion",
        description="Checks for words confused between -able and -ible endings",
        category="spelling",
        severity="warning",
        source=GARNER,
    )
    registry.register_check(
        "spelling.er_or",
        check_er_or,
        name="-er/-or Confusion",
        description="Checks for words confused between -er and -or endings",
        category="spelling",
        severity="warning",
        source=GARNER,
    )
    registry.register_check(
        "consistency.spelling",
        check_consistent_spelling,
        name="Consistent Spelling",
        description="Checks that a document sticks to one of two accepted spellings",
        category="consistency",
        severity="suggestion",
        source="proselint",
    )
