"""Typography: dashes, ellipses and symbol approximations."""
from __future__ import annotations

from prosestyle.matching import regex_check
from prosestyle.models import Finding, MatchOptions
from prosestyle.registry import CheckRegistry

BUTTERICK = "Butterick's Practical Typography"
CHICAGO = "Chicago Manual of Style"


def _options(source: str, *replacements: str, ignore_case: bool = False) -> MatchOptions:
    return MatchOptions(
        ignore_case=ignore_case,
        severity="suggestion",
        source=source,
        replacements=replacements,
    )


def check_three_hyphens(text: str) -> list[Finding]:
    return regex_check(
        text,
        [r"---"],
        "typography.dashes.three_hyphens",
        "Use an em dash (—) instead of three hyphens (---)",
        _options(BUTTERICK, "—"),
    )


def check_two_hyphens(text: str) -> list[Finding]:
    return regex_check(
        text,
        [(r"(\w)--(\w)", "\\1—\\2")],
        "typography.dashes.two_hyphens",
        "Use an em dash (—) instead of two hyphens (--)",
        _options(CHICAGO),
    )


def check_two_hyphens_spaced(text: str) -> list[Finding]:
    return regex_check(
        text,
        [r"\s--\s"],
        "typography.dashes.two_hyphens_spaced",
        "Use an em dash (—) instead of two hyphens (--)",
        _options(CHICAGO, " — ", "—"),
    )


def check_year_range(text: str) -> list[Finding]:
    return regex_check(
        text,
        [(r"\b(\d{4})-(\d{4})\b", "\\1–\\2")],
        "typography.dashes.year_range",
        "Use an en dash (–) for year ranges, not a hyphen",
        _options(CHICAGO),
    )


def check_number_range(text: str) -> list[Finding]:
    # Four-digit pairs belong to typography.dashes.year_range.
    return regex_check(
        text,
        [(r"\b(?!\d{4}-\d{4}\b)(\d+)-(\d+)\b", "\\1–\\2")],
        "typography.dashes.number_range",
        "Use an en dash (–) for number ranges, not a hyphen",
        _options(CHICAGO),
    )


def check_ellipsis(text: str) -> list[Finding]:
    return regex_check(
        text,
        [r"\.\.\."],
        "typography.ellipsis",
        '"..." is an approximation. Use the ellipsis symbol "…"',
        _options(BUTTERICK, "…"),
    )


def check_copyright(text: str) -> list[Finding]:
    return regex_check(
        text,
        [r"\(c\)"],
        "typography.symbols.copyright",
        "{} is an alphabetic approximation. Use the copyright symbol ©",
        _options(BUTTERICK, "©", ignore_case=True),
    )


def check_trademark(text: str) -> list[Finding]:
    return regex_check(
        text,
        [r"\(tm\)"],
        "typography.symbols.trademark",
        "{} is an alphabetic approximation. Use the trademark symbol ™",
        _options(BUTTERICK, "™", ignore_case=True),
    )


def check_registered(text: str) -> list[Finding]:
    return regex_check(
        text,
        [r"\(r\)"],
        "typography.symbols.registered",
        "{} is an alphabetic approximation. Use the registered trademark symbol ®",
        _options(BUTTERICK, "®", ignore_case=True),
    )


def check_multiplication(text: str) -> list[Finding]:
    return regex_check(
        text,
        [(r"\b(\d+) ?x ?(\d+)\b", "\\1 × \\2")],
        "typography.symbols.multiplication",
        "Use the multiplication symbol ×, not the letter x",
        _options(BUTTERICK, ignore_case=True),
    )


TYPOGRAPHY_CHECKS = [
    (
        "typography.dashes.three_hyphens",
        check_three_hyphens,
        "Three Hyphens",
        "Checks for three hyphens (---) that should be an em dash (—)",
        BUTTERICK,
    ),
    (
        "typography.dashes.two_hyphens",
        check_two_hyphens,
        "Two Hyphens",
        "Checks for two hyphens between words (--) that should be an em dash (—)",
        CHICAGO,
    ),
    (
        "typography.dashes.two_hyphens_spaced",
        check_two_hyphens_spaced,
        "Spaced Two Hyphens",
        "Checks for spaced double hyphens ( -- ) that should be an em dash (—)",
        CHICAGO,
    ),
    (
        "typography.dashes.year_range",
        check_year_range,
        "Dash in Year Ranges",
        "Checks for hyphens in year ranges that should be en dashes (–)",
        CHICAGO,
    ),
    (
        "typography.dashes.number_range",
        check_number_range,
        "Dash in Number Ranges",
        "Checks for hyphens in number ranges that should be en dashes (–)",
        CHICAGO,
    ),
    (
        "typography.ellipsis",
        check_ellipsis,
        "Ellipsis",
        "Checks for three dots (...) that should be an ellipsis character (…)",
        BUTTERICK,
    ),
    (
        "typography.symbols.copyright",
        check_copyright,
        "Copyright Symbol",
        "Checks for (c) used in place of ©",
        BUTTERICK,
    ),
    (
        "typography.symbols.trademark",
        check_trademark,
        "Trademark Symbol",
        "Checks for (tm) used in place of ™",
        BUTTERICK,
    ),
    (
        "typography.symbols.registered",
        check_registered,
        "Registered Trademark Symbol",
        "Checks for (r) used in place of ®",
        BUTTERICK,
    ),
    (
        "typography.symbols.multiplication",
        check_multiplication,
        "Multiplication Symbol",
        "Checks for the letter x used in place of ×",
        BUTTERICK,
    ),
]


def register(registry: CheckRegistry) -> None:
    for check_id, function, name, description, source in TYPOGRAPHY_CHECKS:
        registry.register_check(
            check_id,
            function,
            name=name,
            description=description,
            category="typography",
            severity="suggestion",
            source=source,
        )
