"""
Type descriptors for contract call arguments and call results.

A type name written by a user (``"Vec< u8 >"``, ``"[u8; 32]"``,
``"Option<String>"``) is first normalized, then parsed into a closed set
of shapes. Both the encoder and the decoder go through ``parse_type`` so
the shapes they accept stay identical.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Optional


class PrimitiveKind(enum.Enum):
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    BOOL = "bool"
    STRING = "String"

    @property
    def is_integer(self) -> bool:
        return self not in (PrimitiveKind.BOOL, PrimitiveKind.STRING)

    @property
    def signed(self) -> bool:
        return self.value.startswith("i")

    @property
    def width(self) -> int:
        """Byte width of an integer kind."""
        return int(self.value[1:]) // 8

    def bounds(self) -> tuple[int, int]:
        bits = self.width * 8
        if self.signed:
            return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
        return 0, (1 << bits) - 1


class Shape(enum.Enum):
    PRIMITIVE = "T"
    VECTOR = "Vec<T>"
    VECTOR_OF_VECTOR = "Vec<Vec<T>>"
    OPTION = "Option<T>"
    VECTOR_OF_OPTION = "Vec<Option<T>>"
    OPTION_OF_VECTOR = "Option<Vec<T>>"
    FIXED_BYTES = "[u8;N]"
    OPTION_FIXED_BYTES = "Option<[u8;N]>"
    CUSTOM = "Custom"
    VECTOR_OF_CUSTOM = "Vec<Custom>"


FIXED_BYTES_SIZES = (32, 64)


@dataclass(frozen=True)
class TypeDescriptor:
    """
    Parsed form of a type name.

    Attributes:
        shape: Which of the supported layouts this is
        kind: Element kind for shapes built on a primitive
        size: Byte count for the fixed byte-array shapes
        name: The normalized type name the descriptor was parsed from
    """
    shape: Shape
    kind: Optional[PrimitiveKind] = None
    size: Optional[int] = None
    name: str = ""

    @property
    def is_flat(self) -> bool:
        return self.shape not in (Shape.CUSTOM, Shape.VECTOR_OF_CUSTOM)


_ARRAY_RE = re.compile(
    r"^(?P<option>Option<)?\[(?P<elem>[ui](?:8|16|32|64|128));(?P<size>32|64)\](?(option)>)$"
)

_PRIMITIVES = {kind.value: kind for kind in PrimitiveKind}

_WRAPPERS = (
    ("Vec<Vec<", ">>", Shape.VECTOR_OF_VECTOR),
    ("Vec<Option<", ">>", Shape.VECTOR_OF_OPTION),
    ("Option<Vec<", ">>", Shape.OPTION_OF_VECTOR),
    ("Vec<", ">", Shape.VECTOR),
    ("Option<", ">", Shape.OPTION),
)


def normalize_type(name: str) -> str:
    """
    Canonicalize a type name.

    All whitespace is removed. Array literals ``[u8;32]`` / ``[u8;64]``
    (optionally inside ``Option<...>``) are rewritten to ``Array<u8,N>`` /
    ``OptionArray<u8,N>``. Anything else passes through stripped; whether
    it is supported is decided by ``parse_type``.
    """
    stripped = "".join(name.split())
    match = _ARRAY_RE.match(stripped)
    if match is None:
        return stripped
    prefix = "OptionArray" if match.group("option") else "Array"
    return f"{prefix}<{match.group('elem')},{match.group('size')}>"


def _parse_fixed_bytes(name: str) -> Optional[TypeDescriptor]:
    for prefix, shape in (("OptionArray<u8,", Shape.OPTION_FIXED_BYTES), ("Array<u8,", Shape.FIXED_BYTES)):
        if name.startswith(prefix) and name.endswith(">"):
            size = name[len(prefix):-1]
            if size in {str(s) for s in FIXED_BYTES_SIZES}:
                return TypeDescriptor(shape, PrimitiveKind.U8, int(size), name)
    return None


def parse_type(name: str) -> Optional[TypeDescriptor]:
    """
    Parse a type name into a descriptor.

    Returns None when the name is not one of the supported shapes.
    """
    name = normalize_type(name)

    if name in _PRIMITIVES:
        return TypeDescriptor(Shape.PRIMITIVE, _PRIMITIVES[name], name=name)
    if name == "Custom":
        return TypeDescriptor(Shape.CUSTOM, name=name)
    if name == "Vec<Custom>":
        return TypeDescriptor(Shape.VECTOR_OF_CUSTOM, name=name)

    fixed = _parse_fixed_bytes(name)
    if fixed is not None:
        return fixed

    # Longest wrappers first so "Vec<Vec<u8>>" is not read as Vec of "Vec<u8>".
    for prefix, suffix, shape in _WRAPPERS:
        if name.startswith(prefix) and name.endswith(suffix):
            inner = name[len(prefix):-len(suffix)]
            kind = _PRIMITIVES.get(inner)
            if kind is not None:
                return TypeDescriptor(shape, kind, name=name)
    return None


def is_custom_type(name: str) -> bool:
    """True for ``Custom`` or ``Vec<Custom>``, ignoring case and whitespace."""
    return normalize_type(name).lower() in ("custom", "vec<custom>")
