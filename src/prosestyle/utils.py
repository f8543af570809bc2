"""Shared utilities for offsets, quote detection, hashing and JSON envelopes."""
from __future__ import annotations

import hashlib
import json
from datetime import datetime, timezone
from typing import IO, Iterable

from prosestyle import __version__
from prosestyle.models import SEVERITIES


def line_and_column(text: str, position: int) -> tuple[int, int]:
    """Return the 1-based ``(line, column)`` of ``position`` within ``text``.

    A single forward scan: every newline before ``position`` starts a new line
    and resets the column.
    """

    line = 0
    column = 0
    for char in text[:position]:
        if char == "\n":
            line += 1
            column = 0
        else:
            column += 1
    return line + 1, column + 1


def _is_ascii_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def is_quoted(position: int, text: str) -> bool:
    """Return whether ``position`` appears to sit inside quoted text.

    Counts the double quotes and the non-contraction single quotes before
    ``position``; an odd count of either means the position is quoted. A single
    quote between two letters is taken to be an apostrophe (``don't``) and is
    not counted. This is a heuristic: nested or unbalanced quoting, and curly
    quotes, are not handled.
    """

    before = text[:position]
    double_quotes = 0
    single_quotes = 0

    for index, char in enumerate(before):
        if char == '"':
            double_quotes += 1
        elif char == "'":
            prev_char = before[index - 1] if index > 0 else ""
            next_char = before[index + 1] if index < len(before) - 1 else ""
            if not (_is_ascii_letter(prev_char) and _is_ascii_letter(next_char)):
                single_quotes += 1

    return single_quotes % 2 == 1 or double_quotes % 2 == 1


def utc_timestamp() -> str:
    """Return an ISO 8601 UTC timestamp suitable for envelopes and logs."""

    return datetime.now(timezone.utc).isoformat()


def hash_bytes(data: bytes) -> str:
    """Return the SHA-256 hex digest for a bytes payload."""

    return hashlib.sha256(data).hexdigest()


def build_envelope(*, tool: str, files: Iterable[dict], generated_at: str | None = None) -> dict:
    """Construct the standard JSON envelope for CLI outputs."""

    return {
        "prosestyle_version": __version__,
        "tool": tool,
        "generated_at": generated_at or utc_timestamp(),
        "files": list(files),
    }


def dump_json_line(data: dict, output_handle: IO) -> None:
    """Serialize a dictionary as JSON followed by a newline to support streaming outputs."""

    json.dump(data, output_handle, ensure_ascii=False)
    output_handle.write("\n")


SEVERITY_ORDER = {severity: rank for rank, severity in enumerate(SEVERITIES)}


def filter_files_by_severity(files: Iterable[dict], minimum: str) -> list[dict]:
    """Return file entries containing only findings at or above ``minimum`` severity."""

    threshold = SEVERITY_ORDER[minimum]
    filtered: list[dict] = []

    for entry in files:
        items = [
            item
            for item in entry.get("items", [])
            if SEVERITY_ORDER.get(item.get("severity", "suggestion"), 0) >= threshold
        ]
        filtered.append({**entry, "items": items})

    return filtered


def summarize_severities(files: Iterable[dict]) -> dict[str, int]:
    """Count findings by severity across file entries."""

    totals = {severity: 0 for severity in SEVERITIES}

    for entry in files:
        for item in entry.get("items", []):
            severity = item.get("severity", "suggestion")
            if severity in totals:
                totals[severity] += 1

    return totals
