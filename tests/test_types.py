"""Unit tests for type name normalization and parsing."""

from __future__ import annotations

import pytest

from pchain_client.codec.types import (
    PrimitiveKind,
    Shape,
    is_custom_type,
    normalize_type,
    parse_type,
)


def test_normalize_strips_whitespace() -> None:
    assert normalize_type(" Vec < Option < String > > ") == "Vec<Option<String>>"
    assert normalize_type("u\t6 4") == "u64"


def test_normalize_array_literals() -> None:
    assert normalize_type("[u8;32]") == "Array<u8,32>"
    assert normalize_type("Option<[u8;64]>") == "OptionArray<u8,64>"
    assert normalize_type("[ u 8; 3 2]") == "Array<u8,32>"


def test_normalize_is_whitespace_insensitive() -> None:
    assert normalize_type("[ u8 ; 64 ]") == normalize_type("[u8;64]")
    assert normalize_type(normalize_type("[u8;64]")) == normalize_type("[u8;64]")


def test_normalize_passes_unknown_through() -> None:
    assert normalize_type("Option<[u8;32]") == "Option<[u8;32]"
    assert normalize_type("HashMap<u8, u8>") == "HashMap<u8,u8>"


@pytest.mark.parametrize("name", [k.value for k in PrimitiveKind])
def test_parse_primitives(name: str) -> None:
    descriptor = parse_type(name)
    assert descriptor is not None
    assert descriptor.shape is Shape.PRIMITIVE
    assert descriptor.kind.value == name


@pytest.mark.parametrize(
    "name,shape,kind",
    [
        ("Vec<u8>", Shape.VECTOR, PrimitiveKind.U8),
        ("Vec<Vec<i16>>", Shape.VECTOR_OF_VECTOR, PrimitiveKind.I16),
        ("Option<bool>", Shape.OPTION, PrimitiveKind.BOOL),
        ("Vec< Option < String > >", Shape.VECTOR_OF_OPTION, PrimitiveKind.STRING),
        ("Option< Vec < u128 > >", Shape.OPTION_OF_VECTOR, PrimitiveKind.U128),
    ],
)
def test_parse_wrappers(name: str, shape: Shape, kind: PrimitiveKind) -> None:
    descriptor = parse_type(name)
    assert descriptor.shape is shape
    assert descriptor.kind is kind


def test_parse_fixed_bytes() -> None:
    assert parse_type("[u8; 32]").shape is Shape.FIXED_BYTES
    assert parse_type("[u8; 32]").size == 32
    assert parse_type("Option<[u8;64]>").shape is Shape.OPTION_FIXED_BYTES
    assert parse_type("Option<[u8;64]>").size == 64


def test_parse_custom() -> None:
    assert parse_type("Custom").shape is Shape.CUSTOM
    assert parse_type("Vec<Custom>").shape is Shape.VECTOR_OF_CUSTOM
    assert not parse_type("Custom").is_flat
    assert parse_type("u8").is_flat


@pytest.mark.parametrize(
    "name",
    [
        "Vec<Vec<Vec<bool>>>",
        "Option<Option<u8>>",
        "Vec<Vec<Option<u8>>>",
        "[i64;32]",
        "[u8;16]",
        "Option<[u8;32]",
        "u256",
        "string",
        "Vec<>",
        "",
    ],
)
def test_parse_unsupported(name: str) -> None:
    assert parse_type(name) is None


def test_is_custom_type_ignores_case_and_space() -> None:
    assert is_custom_type("custom")
    assert is_custom_type(" Vec < CUSTOM > ")
    assert not is_custom_type("Vec<u8>")


def test_integer_bounds() -> None:
    assert PrimitiveKind.U8.bounds() == (0, 255)
    assert PrimitiveKind.I8.bounds() == (-128, 127)
    assert PrimitiveKind.U128.bounds() == (0, 2**128 - 1)
    assert PrimitiveKind.I64.width == 8
