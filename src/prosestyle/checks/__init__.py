"""Built-in rule families and their registration helpers."""
from __future__ import annotations

from prosestyle.checks import (
    cliches,
    hedging,
    misc,
    passive_voice,
    redundancy,
    social_awareness,
    spelling,
    typography,
    weasel_words,
)
from prosestyle.registry import CheckRegistry

STYLE_MODULES = (weasel_words, redundancy, hedging, cliches, passive_voice)
TYPOGRAPHY_SPELLING_MODULES = (typography, spelling)


def register_style_checks(registry: CheckRegistry) -> None:
    for module in STYLE_MODULES:
        module.register(registry)


def register_typography_spelling_checks(registry: CheckRegistry) -> None:
    for module in TYPOGRAPHY_SPELLING_MODULES:
        module.register(registry)


def register_misc_checks(registry: CheckRegistry) -> None:
    misc.register(registry)


def register_social_awareness_checks(registry: CheckRegistry) -> None:
    social_awareness.register(registry)


def register_all_checks(registry: CheckRegistry) -> CheckRegistry:
    """Register every built-in family on ``registry`` and return it."""

    register_style_checks(registry)
    register_typography_spelling_checks(registry)
    register_misc_checks(registry)
    register_social_awareness_checks(registry)
    return registry


__all__ = [
    "register_all_checks",
    "register_misc_checks",
    "register_social_awareness_checks",
    "register_style_checks",
    "register_typography_spelling_checks",
]
