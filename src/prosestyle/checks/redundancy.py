"""Redundant phrases and RAS syndrome ("PIN number")."""
from __future__ import annotations

from prosestyle.matching import existence_check
from prosestyle.models import Finding, MatchOptions
from prosestyle.registry import CheckRegistry

REDUNDANT_PHRASES = [
    "absolutely essential",
    "absolutely necessary",
    "advance planning",
    "advance warning",
    "basic fundamentals",
    "close proximity",
    "completely finished",
    "consensus of opinion",
    "end result",
    "exact same",
    "false pretense",
    "final outcome",
    "free gift",
    "future plans",
    "gather together",
    "general consensus",
    "invited guest",
    "join together",
    "new innovation",
    "past history",
    "personal opinion",
    "plan ahead",
    "sudden impulse",
    "sum total",
    "true fact",
    "unexpected surprise",
    "usual custom",
]

# An acronym followed by a word the acronym already spells out.
RAS_PATTERNS = [
    "ATM machine",
    "PIN number",
    "HIV virus",
    "LCD display",
    "LED light",
    "GPS system",
    "URL link",
    "HTML markup",
    "PDF format",
    "SAT test",
    "GPA average",
    "RPM rate",
    "MHz frequency",
    "RAM memory",
    "ROM memory",
    "USB port",
    "WiFi network",
    "CEO officer",
    "CTO officer",
    "CFO officer",
    "DVD disc",
    "CD disc",
    "FAQ questions",
    "RSVP reply",
    "ISBN number",
    "VIN number",
    "UPC code",
    "ZIP code",
    "SSN number",
    "ID identification",
]


def check_redundancy(text: str) -> list[Finding]:
    return existence_check(
        text,
        REDUNDANT_PHRASES,
        "redundancy.misc",
        'Redundant phrase detected: "{}". Consider simplifying.',
        MatchOptions(ignore_case=True, severity="warning", source="proselint"),
    )


def check_ras_syndrome(text: str) -> list[Finding]:
    return existence_check(
        text,
        RAS_PATTERNS,
        "redundancy.ras_syndrome",
        'RAS syndrome detected: "{}". The acronym already contains the repeated word.',
        MatchOptions(ignore_case=True, severity="warning", source="proselint"),
    )


def register(registry: CheckRegistry) -> None:
    registry.register_check(
        "redundancy.misc",
        check_redundancy,
        name="Redundant Phrases",
        description="Identify redundant phrases that can be simplified.",
        category="redundancy",
        severity="warning",
        source="proselint",
    )
    registry.register_check(
        "redundancy.ras_syndrome",
        check_ras_syndrome,
        name="RAS Syndrome",
        description='Detect Redundant Acronym Syndrome (e.g., "ATM machine").',
        category="redundancy",
        severity="warning",
        source="proselint",
    )
