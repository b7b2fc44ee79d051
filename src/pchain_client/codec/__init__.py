"""
Codec - Contract call arguments and call results.

Translates between the JSON a user writes for a method call and the
binary layout consumed by the contract runtime, and renders returned
bytes as text:

- types:   type-name normalization and parsing
- encoder: JSON arguments -> bytes
- decoder: bytes -> rendered value of one flat type
- schema:  bytes -> named values of a nested schema
"""

from .decoder import ByteReader, decode_flat, decode_value, render
from .encoder import encode, encode_argument, encode_arguments, encode_typed, parse_typed_value
from .errors import (
    ArgumentFormatError,
    CodecError,
    DecodeError,
    EncodeError,
    UnsupportedDecodeTypeError,
    UnsupportedEncodeTypeError,
    UnsupportedTypeError,
)
from .schema import SchemaLeaf, decode_schema, flatten_schema
from .types import PrimitiveKind, Shape, TypeDescriptor, normalize_type, parse_type

__all__ = [
    "ArgumentFormatError",
    "ByteReader",
    "CodecError",
    "DecodeError",
    "EncodeError",
    "PrimitiveKind",
    "SchemaLeaf",
    "Shape",
    "TypeDescriptor",
    "UnsupportedDecodeTypeError",
    "UnsupportedEncodeTypeError",
    "UnsupportedTypeError",
    "decode_flat",
    "decode_schema",
    "decode_value",
    "encode",
    "encode_argument",
    "encode_arguments",
    "encode_typed",
    "flatten_schema",
    "normalize_type",
    "parse_type",
    "parse_typed_value",
    "render",
]
