"""Passive voice: a form of "to be" (or "get") followed by a past participle.

This is a lexical heuristic, not a parser. A match is kept unless the word in
the participle slot is on a list of predicate adjectives, locative words or
participles normally used as adjectives ("is happy", "is here", "was tired").
Expect both false positives and false negatives.
"""
from __future__ import annotations

import re
from typing import Iterable

from prosestyle.models import Finding
from prosestyle.registry import CheckRegistry
from prosestyle.utils import is_quoted

IRREGULAR_PARTICIPLES = (
    "awoken|been|born|beat|become|begun|bent|beset|bet|bid|bidden|bound|bitten|bled|"
    "blown|broken|bred|brought|broadcast|built|burnt|burst|bought|cast|caught|chosen|"
    "clung|come|cost|crept|cut|dealt|dug|dived|done|drawn|dreamt|driven|drunk|eaten|"
    "fallen|fed|felt|fought|found|fit|fled|flung|flown|forbidden|forgotten|foregone|"
    "forgiven|forsaken|frozen|gotten|given|gone|ground|grown|hung|heard|hidden|hit|"
    "held|hurt|kept|knelt|knit|known|laid|led|leapt|learnt|left|lent|let|lain|lighted|"
    "lost|made|meant|met|misspelt|mistaken|mown|overcome|overdone|overtaken|overthrown|"
    "paid|pled|proven|put|quit|read|rid|ridden|rung|risen|run|sawn|said|seen|sought|"
    "sold|sent|set|sewn|shaken|shaven|shorn|shed|shone|shod|shot|shown|shrunk|shut|"
    "sung|sunk|sat|slept|slain|slid|slung|slit|smitten|sown|spoken|sped|spent|spilt|"
    "spun|spit|split|spread|sprung|stood|stolen|stuck|stung|stunk|stridden|struck|"
    "strung|striven|sworn|swept|swollen|swum|swung|taken|taught|torn|told|thought|"
    "thrived|thrown|thrust|trodden|understood|upheld|upset|woken|worn|woven|wed|wept|"
    "wound|won|withheld|withstood|wrung|written"
)

GET_PARTICIPLES = (
    "beaten|broken|caught|chosen|done|driven|eaten|forgotten|given|hidden|hit|known|"
    "made|paid|seen|sold|spoken|stolen|taken|told|written"
)

BE_PASSIVE = re.compile(
    rf"\b(am|are|were|being|is|been|was|be)\s+(\w+ed|{IRREGULAR_PARTICIPLES})\b",
    re.IGNORECASE,
)

ADVANCED_BE_PASSIVE = re.compile(
    rf"\b(am|is|are|was|were|being|been|be)\s+(\w+ed|beaten|{IRREGULAR_PARTICIPLES})\b",
    re.IGNORECASE,
)

GET_PASSIVE = re.compile(
    rf"\b(get|gets|got|getting)\s+(\w+ed|{GET_PARTICIPLES})\b",
    re.IGNORECASE,
)

NOT_PASSIVE = [
    re.compile(
        r"\b(is|are|was|were)\s+(good|bad|nice|fine|okay|great|terrible|awful|amazing|"
        r"wonderful|horrible)\b",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(is|are|was|were)\s+(here|there|home|away|present|absent|available|ready)\b",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(is|are|was|were)\s+(concerned|interested|excited|surprised|pleased|worried|"
        r"tired|confused)\b",
        re.IGNORECASE,
    ),
]

ADVANCED_NOT_PASSIVE = [
    re.compile(
        r"\b(is|are|was|were|am|be|being|been)\s+(happy|sad|angry|excited|tired|ready|"
        r"available|present|absent|good|bad|nice|fine|great|small|large|big|little|old|"
        r"new|young|high|low|long|short|fast|slow|hot|cold|warm|cool|wet|dry|clean|dirty|"
        r"easy|hard|difficult|simple|complex|important|interesting|boring|funny|serious|"
        r"careful|careless|helpful|useful|useless)\b",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(is|are|was|were|am|be|being|been)\s+(here|there|home|away|up|down|in|out|on|"
        r"off|under|over|inside|outside|upstairs|downstairs)\b",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(get|gets|got|getting)\s+(up|down|in|out|on|off|home|here|there|ready|"
        r"dressed|undressed)\b",
        re.IGNORECASE,
    ),
]


def is_likely_passive(phrase: str, exclusions: Iterable[re.Pattern[str]] = NOT_PASSIVE) -> bool:
    return not any(pattern.search(phrase) for pattern in exclusions)


def _scan(
    text: str,
    regex: re.Pattern[str],
    exclusions: list[re.Pattern[str]],
    check_id: str,
    message: str,
    replacements: tuple[str, ...],
) -> list[Finding]:
    """Collect non-excluded matches; ``{phrase}`` in the templates is the match."""

    findings: list[Finding] = []

    for match in regex.finditer(text):
        phrase = match.group(0)
        if not is_likely_passive(phrase, exclusions) or is_quoted(match.start(), text):
            continue
        findings.append(
            Finding(
                check_id=check_id,
                message=message.format(phrase=phrase),
                start=match.start(),
                end=match.end(),
                severity="suggestion",
                replacements=tuple(item.format(phrase=phrase) for item in replacements),
                source="proselint",
            )
        )

    return findings


def check_passive_voice(text: str) -> list[Finding]:
    return _scan(
        text,
        BE_PASSIVE,
        NOT_PASSIVE,
        "passive_voice.construction",
        'Passive voice detected: "{phrase}". Consider using active voice for stronger writing.',
        ('Consider rewriting to use active voice instead of "{phrase}"',),
    )


def check_passive_voice_advanced(text: str) -> list[Finding]:
    replacements = (
        "Rewrite in active voice by making the actor the subject",
        "Consider who or what is performing the action",
    )
    findings = _scan(
        text,
        ADVANCED_BE_PASSIVE,
        ADVANCED_NOT_PASSIVE,
        "passive_voice.advanced",
        'Passive voice detected: "{phrase}". Consider rewriting in active voice.',
        replacements,
    )
    findings.extend(
        _scan(
            text,
            GET_PASSIVE,
            ADVANCED_NOT_PASSIVE,
            "passive_voice.advanced",
            'Passive voice with "get" detected: "{phrase}". Consider rewriting in active voice.',
            replacements,
        )
    )
    return findings


def register(registry: CheckRegistry) -> None:
    registry.register_check(
        "passive_voice.construction",
        check_passive_voice,
        name="Passive Voice",
        description="Detect passive voice constructions and suggest active alternatives.",
        category="passive_voice",
        severity="suggestion",
        source="proselint",
    )
    # Off by default: it overlaps with passive_voice.construction.
    registry.register_check(
        "passive_voice.advanced",
        check_passive_voice_advanced,
        name="Advanced Passive Voice",
        description="Passive voice detection including get-passives, with wider false-positive filtering.",
        category="passive_voice",
        severity="suggestion",
        enabled=False,
        source="proselint",
    )
