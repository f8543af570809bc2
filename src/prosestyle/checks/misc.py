"""Usage checks: capitalization, preferred forms, phrasal adjectives, jargon,
illogic, scare quotes, apologizing and metadiscourse."""
from __future__ import annotations

import re

from prosestyle.matching import existence_check, preferred_forms_check, regex_check
from prosestyle.models import Finding, MatchOptions
from prosestyle.registry import CheckRegistry

GARNER = "Garner's Modern American Usage"
OGILVY = "David Ogilvy"
PINKER = 'Pinker\'s "The Sense of Style"'

PROPER_NOUNS = [
    (r"\bmother nature\b", "Mother Nature"),
    (r"\bstone age\b", "Stone Age"),
    (r"\bthe American west\b", "the American West"),
    (r"\bSpace Age\b", "space age"),
    (r"\bjanuary\b", "January"),
    (r"\bfebruary\b", "February"),
    (r"\bmarch\b(?! \d)", "March"),
    (r"\bapril\b", "April"),
    (r"\bmay\b(?! be| have| not)", "May"),
    (r"\bjune\b", "June"),
    (r"\bjuly\b", "July"),
    (r"\baugust\b", "August"),
    (r"\bseptember\b", "September"),
    (r"\boctober\b", "October"),
    (r"\bnovember\b", "November"),
    (r"\bdecember\b", "December"),
]

SEASONS = [
    (r"\bWinter\b", "winter"),
    (r"\bSummer\b", "summer"),
    (r"\bFall\b(?! [A-Z])", "fall"),
    (r"\bSpring\b(?! [A-Z])", "spring"),
]

PREFERRED_FORMS = {
    "imprimatur": ["imprimature"],
    "Halloween": ["hallowe'en", "haloween"],
    "Khrushchev": ["khruschev", "kruschev"],
    "Ku Klux Klan": ["klu klux klan"],
    "Pontius Pilate": ["pontius pilot"],
    "hippopotamuses": ["hippopotami"],
    "manifestos": ["manifesti"],
    "matrices": ["matrixes"],
    "mongooses": ["mongeese"],
    "narcissi": ["narcissuses"],
    "retinas": ["retinae"],
    "sopranos": ["soprani"],
    "titmice": ["titmouses"],
    "long-standing": ["longstanding"],
    "non sequitur": ["non-sequitur"],
    "sans serif": ["sans-serif", "sanserif"],
    "tortfeasor": ["tort feasor", "tort-feasor"],
    "transship": ["trans-ship", "tranship"],
    "transshipped": ["trans-shipped", "transhipped"],
    "transshipping": ["trans-shipping", "transhipping"],
    "attitude": ["mental attitude"],
    "Chief Justice of the United States": ["chief justice of the united states supreme court"],
    "many": ["a lot of"],
    "each": ["each and every"],
    "and so on": ["etc."],
    "to": ["in order to"],
    "before": ["prior to"],
    "after": ["subsequent to"],
}

PHRASAL_ADJECTIVES = {
    "across-the-board discounts": "across the board discounts",
    "big-ticket item": "big ticket item",
    "class-action lawyer": "class action lawyer",
    "cut-and-dried": "cut and dried",
    "face-to-face meeting": "face to face meeting",
    "fixed-rate mortgage": "fixed rate mortgage",
    "for-profit": "for profit",
    "free-range chicken": "free range chicken",
    "head-on collision": "head on collision",
    "head-to-head": "head to head",
    "health-care coverage": "health care coverage",
    "high-school student": "high school student",
    "hit-and-run": "hit and run",
    "long-term care": "long term care",
    "low-income housing": "low income housing",
    "mom-and-pop shop": "mom and pop shop",
    "no-fault": "no fault",
    "non-profit": "non profit",
    "one-way": "one way",
    "open-and-shut case": "open and shut case",
    "open-source": "open source",
    "real-estate": "real estate",
    "right-wing": "right wing",
    "round-trip": "round trip",
    "second-largest": "second largest",
    "small-business": "small business",
    "state-sponsored": "state sponsored",
    "time-honored": "time honored",
    "well-known": "well known",
    "well-publicized": "well publicized",
    "zero-sum game": "zero sum game",
    "first-quarter gain": "first quarter gain",
    "first-quarter loss": "first quarter loss",
    "second-quarter gain": "second quarter gain",
    "second-quarter loss": "second quarter loss",
    "third-quarter gain": "third quarter gain",
    "third-quarter loss": "third quarter loss",
    "fourth-quarter gain": "fourth quarter gain",
    "fourth-quarter loss": "fourth quarter loss",
    "three-part harmony": "three part harmony",
    "four-part harmony": "four part harmony",
}

JARGON = [
    "reconceptualize",
    "demassification",
    "attitudinally",
    "judgmentally",
    "utilize",
    "leverage",
    "synergy",
    "paradigm shift",
    "best practice",
    "going forward",
]

# (pattern, message, replacement)
ILLOGIC = [
    (r"\bpreplan\b", "'preplan' is illogical. Use 'plan'.", "plan"),
    (r"\bmore than .{1,10} all\b", "'more than...all' is illogical.", None),
    (
        r"\bappraisal valuations?\b",
        "'appraisal valuation' is redundant. Use 'appraisal' or 'valuation'.",
        None,
    ),
    (
        r"\b(?:I|you|he|she|it|they) could care less\b",
        "Use 'couldn't care less' (not 'could care less').",
        "couldn't care less",
    ),
    (r"\bleast worst\b", "'least worst' is illogical. Use 'best' or 'least bad'.", None),
    (r"\bmuch-needed gaps?\b", "'much-needed gap' is illogical. Gaps are absences.", None),
    (r"\bmuch-needed voids?\b", "'much-needed void' is illogical. Voids are absences.", None),
    (
        r"\bno longer requires oxygen\b",
        "'no longer requires oxygen' is illogical (means dead).",
        None,
    ),
    (r"\bwithout scarcely\b", "'without scarcely' is a double negative.", None),
    (
        r"\bto coin a phrase from\b",
        "You can't coin an existing phrase. Did you mean 'borrow'?",
        None,
    ),
    (
        r"\bwithout your collusion\b",
        "It's impossible to defraud yourself. Try 'acquiescence'.",
        None,
    ),
]

APOLOGIZING = [
    r"More research is needed",
    r"I'm sorry to say",
    r"Unfortunately,",
    r"Regrettably,",
]

METADISCOURSE = [
    r"The preceeding discussion",
    r"The rest of this article",
    r"This chapter discusses",
    r"The preceding paragraph demonstrated",
    r"The previous section analyzed",
    r"As mentioned before",
    r"As I said earlier",
    r"In the next section",
    r"Later in this chapter",
]


def check_capitalization(text: str) -> list[Finding]:
    options = MatchOptions(severity="suggestion", source=GARNER)
    findings = regex_check(
        text,
        PROPER_NOUNS,
        "misc.capitalization",
        "Incorrect capitalization of '{}'.",
        options,
    )
    findings.extend(
        regex_check(
            text,
            SEASONS,
            "misc.capitalization",
            "Seasons shouldn't be capitalized: '{}'.",
            options,
        )
    )
    return findings


def check_preferred_forms(text: str) -> list[Finding]:
    pairs = [
        (preferred, [re.escape(variant) for variant in variants])
        for preferred, variants in PREFERRED_FORMS.items()
    ]
    return preferred_forms_check(
        text,
        pairs,
        "misc.preferred_forms",
        "'{}' is the preferred form of '{}'.",
        MatchOptions(ignore_case=True, severity="suggestion", source=GARNER),
    )


def check_phrasal_adjectives(text: str) -> list[Finding]:
    pairs = [
        (hyphenated, [re.escape(unhyphenated)])
        for hyphenated, unhyphenated in PHRASAL_ADJECTIVES.items()
    ]
    return preferred_forms_check(
        text,
        pairs,
        "misc.phrasal_adjectives",
        "Hyphenate the phrasal adjective as '{}' (found '{}').",
        MatchOptions(ignore_case=True, severity="suggestion", source=GARNER),
    )


def check_ly_hyphens(text: str) -> list[Finding]:
    return regex_check(
        text,
        [r"(?<=\s)[^\s-]+ly-"],
        "misc.phrasal_adjectives.ly",
        "No hyphen is necessary in phrasal adjectives with an adverb ending in -ly.",
        MatchOptions(severity="suggestion", source=GARNER),
    )


def check_pretension(text: str) -> list[Finding]:
    return existence_check(
        text,
        JARGON,
        "misc.pretension",
        "Jargon words like '{}' are the hallmarks of a pretentious ass.",
        MatchOptions(ignore_case=True, severity="suggestion", source=OGILVY),
    )


def check_illogic(text: str) -> list[Finding]:
    findings: list[Finding] = []
    for pattern, message, replacement in ILLOGIC:
        options = MatchOptions(
            ignore_case=True,
            severity="warning",
            source=GARNER,
            replacements=(replacement,) if replacement else (),
        )
        findings.extend(regex_check(text, [pattern], "misc.illogic", message, options))
    return findings


def check_scare_quotes(text: str) -> list[Finding]:
    return regex_check(
        text,
        [r"\bthe 'take-home message'"],
        "misc.scare_quotes",
        "Misuse of 'scare quotes'. Delete them.",
        MatchOptions(
            ignore_case=True,
            severity="suggestion",
            source=PINKER,
            replacements=("the take-home message",),
        ),
    )


def check_apologizing(text: str) -> list[Finding]:
    return existence_check(
        text,
        APOLOGIZING,
        "misc.apologizing",
        "Excessive apologizing.",
        MatchOptions(ignore_case=True, require_padding=False, severity="suggestion", source=PINKER),
    )


def check_metadiscourse(text: str) -> list[Finding]:
    return existence_check(
        text,
        METADISCOURSE,
        "misc.metadiscourse",
        "Excessive metadiscourse.",
        MatchOptions(ignore_case=True, require_padding=False, severity="suggestion", source=PINKER),
    )


MISC_CHECKS = [
    (
        "misc.capitalization",
        check_capitalization,
        "Capitalization",
        "Check for incorrect capitalization of proper nouns, seasons, and months.",
        "suggestion",
        GARNER,
    ),
    (
        "misc.preferred_forms",
        check_preferred_forms,
        "Preferred Forms",
        "Check for non-standard forms of words and phrases.",
        "suggestion",
        GARNER,
    ),
    (
        "misc.phrasal_adjectives",
        check_phrasal_adjectives,
        "Phrasal Adjectives",
        "Check for missing hyphens in compound modifiers.",
        "suggestion",
        GARNER,
    ),
    (
        "misc.phrasal_adjectives.ly",
        check_ly_hyphens,
        "Hyphens After -ly Adverbs",
        "Check for unnecessary hyphens after adverbs ending in -ly.",
        "suggestion",
        GARNER,
    ),
    (
        "misc.pretension",
        check_pretension,
        "Pretentious Jargon",
        "Flag overly formal or pretentious language.",
        "suggestion",
        OGILVY,
    ),
    (
        "misc.illogic",
        check_illogic,
        "Illogical Constructions",
        "Flag logically inconsistent phrases and constructions.",
        "warning",
        GARNER,
    ),
    (
        "misc.scare_quotes",
        check_scare_quotes,
        "Scare Quotes",
        "Check for inappropriate use of scare quotes.",
        "suggestion",
        PINKER,
    ),
    (
        "misc.apologizing",
        check_apologizing,
        "Excessive Apologizing",
        "Flag unnecessary apologetic phrases in writing.",
        "suggestion",
        PINKER,
    ),
    (
        "misc.metadiscourse",
        check_metadiscourse,
        "Metadiscourse",
        "Flag excessive self-referential writing.",
        "suggestion",
        PINKER,
    ),
]


def register(registry: CheckRegistry) -> None:
    for check_id, function, name, description, severity, source in MISC_CHECKS:
        registry.register_check(
            check_id,
            function,
            name=name,
            description=description,
            category="misc",
            severity=severity,
            source=source,
        )
