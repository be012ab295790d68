"""Testes do parse do corpo de callbacks Daraja."""

from __future__ import annotations

import pytest

from api.connectors.daraja.webhook import InvalidJsonError, parse_callback_body


def test_parses_json_object() -> None:
    assert parse_callback_body(b'{"TransID": "RKTQDM7W6S"}') == {"TransID": "RKTQDM7W6S"}


def test_empty_body_is_empty_object() -> None:
    assert parse_callback_body(b"") == {}


@pytest.mark.parametrize(("raw", "expected"), [(b"[1, 2]", [1, 2]), (b"null", None), (b'"x"', "x")])
def test_non_object_json_is_passed_through(raw: bytes, expected: object) -> None:
    assert parse_callback_body(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [b"{not json", b"\xff\xfe", b'{"TransAmount": ' + b"9" * 5000 + b"}"],
)
def test_invalid_bodies(raw: bytes) -> None:
    with pytest.raises(InvalidJsonError, match="invalid_json"):
        parse_callback_body(raw)
