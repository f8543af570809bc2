from __future__ import annotations

import sys
import warnings

import click
import pytest

from prosestyle.io_utils import extract_text, resolve_inputs, resolve_output_handle


def test_resolve_output_handle_defaults_to_stdout_without_warnings():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        handle, should_close = resolve_output_handle(None)
        dash_handle, dash_should_close = resolve_output_handle("-")

    assert handle is sys.stdout and not should_close
    assert dash_handle is sys.stdout and not dash_should_close


def test_resolve_output_handle_opens_files(tmp_path):
    handle, should_close = resolve_output_handle(str(tmp_path / "out.jsonl"))

    try:
        assert should_close
        handle.write("—\n")
    finally:
        handle.close()

    assert (tmp_path / "out.jsonl").read_text(encoding="utf-8") == "—\n"


def test_resolve_inputs_skips_directories(tmp_path):
    (tmp_path / "nested").mkdir()
    (tmp_path / "essay.txt").write_text("Hello.", encoding="utf-8")

    inputs = resolve_inputs([str(tmp_path / "*")])

    try:
        assert [source.path for source in inputs] == [str(tmp_path / "essay.txt")]
    finally:
        for source in inputs:
            source.handle.close()


def test_extract_text_drops_byte_order_mark():
    assert extract_text("\ufeffHello".encode("utf-8"), "essay.txt") == "Hello"


def test_extract_text_rejects_undecodable_bytes():
    with pytest.raises(click.ClickException, match="not UTF-8 text"):
        extract_text(b"\xff\xfe\x00bad", "binary.txt")
