"""Testes da sanitização de nome e mensagem."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from api.normalizers.form import sanitize_message, sanitize_name


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Ana Souza", "Ana Souza"),
        ("Ana\x00 Souza", "Ana Souza"),
        ("Ana\nSouza", "AnaSouza"),
        ("Ana\tSouza\r", "AnaSouza"),
        ("José Ñandú 山田", "José Ñandú 山田"),
        ("zero\u200bwidth", "zerowidth"),
        ("", ""),
    ],
)
def test_sanitize_name(raw: str, expected: str) -> None:
    assert sanitize_name(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("hello\nworld", "hello\nworld"),
        ("hello\r\nworld", "hello\nworld"),
        ("a\x07b\x1bc", "abc"),
        ("tab\there", "tabhere"),
        ("<b>bold</b>", "<b>bold</b>"),
        ("\n\n", "\n\n"),
    ],
)
def test_sanitize_message(raw: str, expected: str) -> None:
    assert sanitize_message(raw) == expected


@given(st.text())
@settings(max_examples=200)
def test_sanitize_name_output_is_printable_and_idempotent(raw: str) -> None:
    cleaned = sanitize_name(raw)

    assert cleaned.isprintable()
    assert sanitize_name(cleaned) == cleaned
    assert len(cleaned) <= len(raw)


@given(st.text())
@settings(max_examples=200)
def test_sanitize_message_keeps_only_printable_and_newlines(raw: str) -> None:
    cleaned = sanitize_message(raw)

    assert all(char == "\n" or char.isprintable() for char in cleaned)
    assert cleaned.count("\n") == raw.count("\n")
    assert sanitize_message(cleaned) == cleaned


@given(st.text(alphabet=st.characters(categories=["L", "N", "P", "S"])))
def test_printable_text_is_left_untouched(raw: str) -> None:
    assert sanitize_name(raw) == raw
    assert sanitize_message(raw) == raw
