"""Pattern-matching primitives every check is built from.

All primitives share the same contract: they return fresh ``Finding`` objects
with half-open character offsets into ``text`` and skip matches that start
inside quoted text (see :func:`prosestyle.utils.is_quoted`).
"""
from __future__ import annotations

import re
from typing import Iterable, Optional, Sequence, Union

from prosestyle.models import Finding, MatchOptions
from prosestyle.utils import is_quoted

DEFAULT_OPTIONS = MatchOptions()
SUGGESTION_OPTIONS = MatchOptions(severity="suggestion")

PatternEntry = Union[str, tuple[str, str]]


def _flags(options: MatchOptions) -> int:
    return re.IGNORECASE if options.ignore_case else 0


def _loose_pattern(word: str, flags: int) -> re.Pattern[str]:
    # Lookarounds so back-to-back repeats ("color color") are each matched.
    return re.compile(rf"(?<!\w)({word})(?!\w)", flags)


def _fill(message: str, *values: str) -> str:
    for value in values:
        message = message.replace("{}", value, 1)
    return message


def _build(
    check_id: str,
    message: str,
    start: int,
    end: int,
    options: MatchOptions,
    replacements: Optional[Sequence[str]] = None,
) -> Finding:
    return Finding(
        check_id=check_id,
        message=message,
        start=start,
        end=end,
        severity=options.severity,
        replacements=tuple(options.replacements if replacements is None else replacements),
        source=options.source,
        source_url=options.source_url,
    )


def existence_check(
    text: str,
    patterns: Iterable[str],
    check_id: str,
    message: str,
    options: Optional[MatchOptions] = None,
) -> list[Finding]:
    """Flag every occurrence of each phrase in ``patterns``.

    Phrases are matched literally between word boundaries. With
    ``options.require_padding`` disabled the phrases are used as raw regular
    expressions instead. The first ``{}`` in ``message`` receives the matched
    text.
    """

    options = options or DEFAULT_OPTIONS
    flags = _flags(options)
    findings: list[Finding] = []

    for pattern in patterns:
        if options.require_padding:
            regex = re.compile(rf"\b{re.escape(pattern)}\b", flags)
        else:
            regex = re.compile(pattern, flags)

        for match in regex.finditer(text):
            start, end = match.span()
            if start == end or is_quoted(start, text):
                continue
            findings.append(
                _build(check_id, _fill(message, match.group(0)), start, end, options)
            )

    return findings


def regex_check(
    text: str,
    patterns: Iterable[PatternEntry],
    check_id: str,
    message: str,
    options: Optional[MatchOptions] = None,
) -> list[Finding]:
    """Flag every match of each regular expression in ``patterns``.

    An entry may be a ``(pattern, template)`` pair, in which case the suggested
    replacement is ``match.expand(template)`` (so ``\\1`` refers to the first
    group) instead of ``options.replacements``.
    """

    options = options or DEFAULT_OPTIONS
    flags = _flags(options)
    findings: list[Finding] = []

    for entry in patterns:
        pattern, template = (entry, None) if isinstance(entry, str) else entry
        regex = re.compile(pattern, flags)

        for match in regex.finditer(text):
            start, end = match.span()
            if start == end or is_quoted(start, text):
                continue
            replacements = None if template is None else [match.expand(template)]
            findings.append(
                _build(
                    check_id,
                    _fill(message, match.group(0)),
                    start,
                    end,
                    options,
                    replacements,
                )
            )

    return findings


def preferred_forms_check(
    text: str,
    pairs: Iterable[tuple[str, Sequence[str]]],
    check_id: str,
    message: str,
    options: Optional[MatchOptions] = None,
) -> list[Finding]:
    """Suggest ``preferred`` wherever one of its variant regexes matches.

    ``message`` placeholders are filled with the preferred form, then the
    matched text.
    """

    options = options or SUGGESTION_OPTIONS
    flags = _flags(options)
    findings: list[Finding] = []

    for preferred, variants in pairs:
        for variant in variants:
            for match in _loose_pattern(variant, flags).finditer(text):
                start, end = match.span(1)
                if start == end or is_quoted(start, text):
                    continue
                findings.append(
                    _build(
                        check_id,
                        _fill(message, preferred, match.group(1)),
                        start,
                        end,
                        options,
                        [preferred],
                    )
                )

    return findings


def consistency_check(
    text: str,
    pairs: Iterable[tuple[str, str]],
    check_id: str,
    message: str,
    options: Optional[MatchOptions] = None,
) -> list[Finding]:
    """Flag the less frequent member of each word pair when both are used.

    Nothing is reported for a pair unless both words occur. On a tie the first
    word of the pair is treated as the majority form.
    """

    options = options or SUGGESTION_OPTIONS
    flags = _flags(options)
    findings: list[Finding] = []

    for first, second in pairs:
        first_matches = list(_loose_pattern(first, flags).finditer(text))
        second_matches = list(_loose_pattern(second, flags).finditer(text))

        if not first_matches or not second_matches:
            continue

        if len(first_matches) >= len(second_matches):
            majority, minority = first, second_matches
        else:
            majority, minority = second, first_matches

        for match in minority:
            start, end = match.span(1)
            if start == end or is_quoted(start, text):
                continue
            findings.append(
                _build(
                    check_id,
                    _fill(message, majority, match.group(1)),
                    start,
                    end,
                    options,
                    [majority],
                )
            )

    return findings
