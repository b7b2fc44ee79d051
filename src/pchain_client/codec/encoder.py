"""
Call argument encoder.

Turns the JSON a user writes for a contract method call into the binary
layout the contract runtime reads:

- integers: little-endian, fixed width
- bool: one byte, 0 or 1
- String: u32 little-endian byte length, then UTF-8 bytes
- Vec<T>: u32 little-endian element count, then the elements
- Option<T>: tag byte 0 (absent) or 1 followed by T
- [u8;N]: N raw bytes
- Custom: the fields concatenated in declaration order
- Vec<Custom>: u32 element count, then the records concatenated

Argument values arrive as JSON text (``"123"``, ``"[1, 2]"``, ``"null"``)
and are parsed into typed Python values by ``parse_typed_value`` before
``encode_typed`` produces the bytes.
"""

from __future__ import annotations

import json
from typing import Any

from .errors import ArgumentFormatError, EncodeError, UnsupportedEncodeTypeError
from .types import PrimitiveKind, Shape, TypeDescriptor, is_custom_type, normalize_type, parse_type


def _length_prefix(count: int) -> bytes:
    return count.to_bytes(4, "little")


# ---------------------------------------------------------------------------
# Textual value stage
# ---------------------------------------------------------------------------


def _malformed(descriptor: TypeDescriptor, detail: str) -> EncodeError:
    return EncodeError(
        f"Fail to parse value of data type {descriptor.name}: {detail}",
        subject=descriptor.name,
    )


def _check_primitive(descriptor: TypeDescriptor, kind: PrimitiveKind, value: Any) -> Any:
    if kind is PrimitiveKind.BOOL:
        if not isinstance(value, bool):
            raise _malformed(descriptor, f"expected a boolean, got {json.dumps(value)}")
        return value
    if kind is PrimitiveKind.STRING:
        if not isinstance(value, str):
            raise _malformed(descriptor, f"expected a string, got {json.dumps(value)}")
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise _malformed(descriptor, f"string is not valid UTF-8: {exc}") from exc
        return value
    # bool is an int subclass in Python, JSON true/false is never an integer here
    if isinstance(value, bool) or not isinstance(value, int):
        raise _malformed(descriptor, f"expected an integer, got {json.dumps(value)}")
    low, high = kind.bounds()
    if not low <= value <= high:
        raise _malformed(descriptor, f"{value} out of range for {kind.value}")
    return value


def _check_list(descriptor: TypeDescriptor, value: Any) -> list:
    if not isinstance(value, list):
        raise _malformed(descriptor, f"expected an array, got {json.dumps(value)}")
    return value


def _check_fixed_bytes(descriptor: TypeDescriptor, value: Any) -> bytes:
    items = _check_list(descriptor, value)
    if len(items) != descriptor.size:
        raise _malformed(descriptor, f"expected {descriptor.size} elements, got {len(items)}")
    return bytes(_check_primitive(descriptor, PrimitiveKind.U8, item) for item in items)


def check_typed_value(descriptor: TypeDescriptor, value: Any) -> Any:
    """
    Validate a decoded JSON value against a flat descriptor.

    Returns the typed value: ints, bools, strs, lists and None, with the
    fixed byte arrays converted to ``bytes``.

    Raises:
        EncodeError: If the value does not have the descriptor's shape
    """
    kind = descriptor.kind
    shape = descriptor.shape

    if shape is Shape.PRIMITIVE:
        return _check_primitive(descriptor, kind, value)
    if shape is Shape.VECTOR:
        return [_check_primitive(descriptor, kind, v) for v in _check_list(descriptor, value)]
    if shape is Shape.VECTOR_OF_VECTOR:
        return [
            [_check_primitive(descriptor, kind, v) for v in _check_list(descriptor, inner)]
            for inner in _check_list(descriptor, value)
        ]
    if shape is Shape.OPTION:
        return None if value is None else _check_primitive(descriptor, kind, value)
    if shape is Shape.VECTOR_OF_OPTION:
        return [
            None if v is None else _check_primitive(descriptor, kind, v)
            for v in _check_list(descriptor, value)
        ]
    if shape is Shape.OPTION_OF_VECTOR:
        if value is None:
            return None
        return [_check_primitive(descriptor, kind, v) for v in _check_list(descriptor, value)]
    if shape is Shape.FIXED_BYTES:
        return _check_fixed_bytes(descriptor, value)
    if shape is Shape.OPTION_FIXED_BYTES:
        return None if value is None else _check_fixed_bytes(descriptor, value)
    raise UnsupportedEncodeTypeError(f"Type not supported: {descriptor.name}", subject=descriptor.name)


def parse_typed_value(descriptor: TypeDescriptor, text: str) -> Any:
    """Parse JSON text such as ``"[1, 2]"`` into a typed value for ``descriptor``."""
    try:
        value = json.loads(text)
    except json.JSONDecodeError as exc:
        raise _malformed(descriptor, str(exc)) from exc
    return check_typed_value(descriptor, value)


# ---------------------------------------------------------------------------
# Binary stage
# ---------------------------------------------------------------------------


def _encode_primitive(kind: PrimitiveKind, value: Any) -> bytes:
    if kind is PrimitiveKind.BOOL:
        return b"\x01" if value else b"\x00"
    if kind is PrimitiveKind.STRING:
        data = value.encode("utf-8")
        return _length_prefix(len(data)) + data
    return value.to_bytes(kind.width, "little", signed=kind.signed)


def _encode_vector(kind: PrimitiveKind, items: list) -> bytes:
    return _length_prefix(len(items)) + b"".join(_encode_primitive(kind, v) for v in items)


def _encode_option(value: Any, encode_inner) -> bytes:
    if value is None:
        return b"\x00"
    return b"\x01" + encode_inner(value)


def encode_typed(descriptor: TypeDescriptor, value: Any) -> bytes:
    """Encode a typed value (as returned by ``check_typed_value``) for a flat descriptor."""
    kind = descriptor.kind
    shape = descriptor.shape

    if shape is Shape.PRIMITIVE:
        return _encode_primitive(kind, value)
    if shape is Shape.VECTOR:
        return _encode_vector(kind, value)
    if shape is Shape.VECTOR_OF_VECTOR:
        return _length_prefix(len(value)) + b"".join(_encode_vector(kind, inner) for inner in value)
    if shape is Shape.OPTION:
        return _encode_option(value, lambda v: _encode_primitive(kind, v))
    if shape is Shape.VECTOR_OF_OPTION:
        return _length_prefix(len(value)) + b"".join(
            _encode_option(v, lambda x: _encode_primitive(kind, x)) for v in value
        )
    if shape is Shape.OPTION_OF_VECTOR:
        return _encode_option(value, lambda v: _encode_vector(kind, v))
    if shape is Shape.FIXED_BYTES:
        return bytes(value)
    if shape is Shape.OPTION_FIXED_BYTES:
        return _encode_option(value, bytes)
    raise UnsupportedEncodeTypeError(f"Type not supported: {descriptor.name}", subject=descriptor.name)


# ---------------------------------------------------------------------------
# JSON argument entry points
# ---------------------------------------------------------------------------


def encode(type_name: str, value: Any) -> bytes:
    """
    Encode one argument value of the declared type.

    Args:
        type_name: Declared type, e.g. "u64", "Vec<String>", "[u8; 32]", "Custom"
        value: The JSON ``argument_value``; a string holding JSON text for
            flat types, an array of argument objects for Custom / Vec<Custom>

    Returns:
        Encoded bytes

    Raises:
        UnsupportedEncodeTypeError: If the type name is not supported
        EncodeError: If the value is malformed for the declared type
    """
    if isinstance(value, str):
        descriptor = parse_type(type_name)
        if descriptor is None or not descriptor.is_flat:
            raise UnsupportedEncodeTypeError(f"Type not supported: {type_name}", subject=type_name)
        return encode_typed(descriptor, parse_typed_value(descriptor, value))

    if isinstance(value, list):
        if not is_custom_type(type_name):
            raise EncodeError(
                "Json array value must be with argument types either Custom, or Vec<Custom>",
                subject=type_name,
            )
        fields = b"".join(encode_argument(child) for child in value)
        if normalize_type(type_name).lower() == "custom":
            return fields
        return _length_prefix(len(value)) + fields

    raise EncodeError(f"Unknown Json value for {type_name}: {json.dumps(value)}", subject=json.dumps(value))


def encode_argument(argument: Any) -> bytes:
    """Encode one ``{"argument_type": ..., "argument_value": ...}`` object."""
    if not isinstance(argument, dict) or not isinstance(argument.get("argument_type"), str):
        raise ArgumentFormatError("Missing field in json: argument_type", subject=json.dumps(argument))
    return encode(argument["argument_type"], argument.get("argument_value"))


def encode_arguments(document: Any) -> list[bytes]:
    """
    Encode every argument of a ``{"arguments": [...]}`` document.

    Returns:
        One encoded byte string per argument, in order
    """
    arguments = document.get("arguments") if isinstance(document, dict) else None
    if not isinstance(arguments, list):
        raise ArgumentFormatError("Missing field in json: arguments", subject="arguments")
    return [encode_argument(argument) for argument in arguments]
