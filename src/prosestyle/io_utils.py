"""Shared utilities for handling CLI input, output streams and text extraction."""
from __future__ import annotations

import glob
import io
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import IO, Iterable, List, Optional, Sequence, Tuple, Union

import click
from docx2python import docx2python

logger = logging.getLogger(__name__)

ZIP_MAGIC = b"PK\x03\x04"


@dataclass
class InputSource:
    """Represents an input source for CLI commands."""

    path: str
    handle: IO
    is_stdin: bool = False

    @property
    def display_name(self) -> str:
        return "stdin" if self.is_stdin else self.path


InputList = List[InputSource]


def _stdin_handle(mode: str) -> IO:
    if "b" in mode:
        return sys.stdin.buffer
    return sys.stdin


def resolve_inputs(paths: Sequence[str], mode: str = "rb") -> InputList:
    """Resolve CLI input arguments into open file handles.

    Expands glob patterns, de-duplicates resolved paths, and handles stdin markers.
    """

    resolved: InputList = []
    seen: set[str] = set()

    for raw_path in paths:
        if raw_path == "-":
            if any(source.is_stdin for source in resolved):
                continue
            resolved.append(InputSource(path="-", handle=_stdin_handle(mode), is_stdin=True))
            continue

        matches = glob.glob(raw_path)
        if not matches:
            raise click.ClickException(f"No files matched pattern: {raw_path}")

        for match in matches:
            absolute = os.path.abspath(match)
            if absolute in seen or os.path.isdir(absolute):
                continue
            seen.add(absolute)
            try:
                handle = open(absolute, mode)
            except OSError as exc:  # pragma: no cover - thin wrapper
                raise click.ClickException(str(exc)) from exc
            resolved.append(InputSource(path=absolute, handle=handle))

    if not resolved:
        raise click.ClickException("No input files provided")

    resolved.sort(key=lambda source: source.path)

    return resolved


def resolve_output_handle(
    output: Optional[Union[str, IO]], mode: str = "w"
) -> Tuple[IO, bool]:
    """Return an output handle and whether it should be closed by the caller."""

    if output is None:
        return sys.stdout, False

    if isinstance(output, io.IOBase):
        return output, False

    if isinstance(output, str):
        if output == "-":
            return sys.stdout, False
        try:
            return open(output, mode, encoding="utf-8"), True
        except OSError as exc:  # pragma: no cover - thin wrapper
            raise click.ClickException(str(exc)) from exc

    raise click.ClickException("Invalid output destination")


def close_inputs(inputs: Iterable[InputSource]) -> None:
    """Close any non-stdin input handles."""

    for source in inputs:
        if not source.is_stdin:
            source.handle.close()


def _flatten(paragraphs: list) -> list[str]:
    """Flatten docx2python's nested paragraph representation into strings."""

    flat: list[str] = []

    def _walk(node):
        if isinstance(node, str):
            flat.append(node)
        elif isinstance(node, list):
            for child in node:
                _walk(child)

    _walk(paragraphs)
    return flat


def is_docx(data: bytes, name: str = "") -> bool:
    return name.lower().endswith(".docx") or data.startswith(ZIP_MAGIC)


def docx_text(file_path: str) -> str:
    """Return the body paragraphs of a DOCX file joined with newlines."""

    try:
        content = docx2python(file_path, html=False)
    except Exception as exc:
        raise click.ClickException(f"Failed to open DOCX {file_path}: {exc}") from exc

    try:
        return "\n".join(_flatten(content.body))
    finally:
        content.close()


def extract_text(data: bytes, name: str = "") -> str:
    """Decode an input payload into the text to lint.

    DOCX payloads (by extension or zip signature) go through docx2python;
    anything else must be UTF-8 text. A leading byte order mark is dropped.
    """

    if not is_docx(data, name):
        try:
            return data.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise click.ClickException(f"{name or 'input'} is not UTF-8 text: {exc}") from exc

    with NamedTemporaryFile(delete=False, suffix=".docx") as temp:
        temp.write(data)
        temp_path = temp.name

    logger.debug("Extracting DOCX text from %s via %s", name or "stdin", temp_path)
    try:
        return docx_text(temp_path)
    finally:
        Path(temp_path).unlink(missing_ok=True)
