"""
Call result decoder.

Reads a value of one flat type from a byte buffer and renders it as
text: decimal integers, ``true``/``false``, quoted strings, ``[a, b]``
for vectors and byte arrays, ``None`` for an absent option. Bytes past
the end of the value are left unread.
"""

from __future__ import annotations

import json
from typing import Any, Optional, Union

from .errors import DecodeError, UnsupportedDecodeTypeError
from .types import PrimitiveKind, Shape, TypeDescriptor, parse_type


class ByteReader:
    """
    Cursor over an immutable byte buffer.

    Example:
    ::

        reader = ByteReader(b'\\x00\\x01\\x02\\x03')
        reader.read_int(2, signed=False)  # 256
        reader.position                    # 2
    """

    def __init__(self, data: bytes, position: int = 0) -> None:
        self._data = memoryview(data)
        self._position = position

    @property
    def position(self) -> int:
        return self._position

    def __len__(self) -> int:
        return len(self._data)

    def read_bytes(self, length: int) -> bytes:
        """
        Read ``length`` bytes and advance the cursor.

        Raises:
            DecodeError: if fewer than ``length`` bytes remain.
        """
        end = self._position + length
        if end > len(self._data):
            raise DecodeError(
                f"Unexpected end of buffer: need {length} bytes at offset {self._position}, "
                f"{len(self._data) - self._position} available"
            )
        value = bytes(self._data[self._position:end])
        self._position = end
        return value

    def read_byte(self) -> int:
        return self.read_bytes(1)[0]

    def read_int(self, width: int, signed: bool) -> int:
        return int.from_bytes(self.read_bytes(width), "little", signed=signed)

    def read_length(self) -> int:
        return self.read_int(4, signed=False)


def _read_tag(reader: ByteReader, descriptor: TypeDescriptor) -> bool:
    tag = reader.read_byte()
    if tag not in (0, 1):
        raise DecodeError(f"Invalid Option tag {tag} for {descriptor.name}", subject=descriptor.name)
    return tag == 1


def _read_primitive(reader: ByteReader, kind: PrimitiveKind, descriptor: TypeDescriptor) -> Any:
    if kind is PrimitiveKind.BOOL:
        byte = reader.read_byte()
        if byte not in (0, 1):
            raise DecodeError(f"Invalid bool representation: {byte}", subject=descriptor.name)
        return byte == 1
    if kind is PrimitiveKind.STRING:
        data = reader.read_bytes(reader.read_length())
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(f"Invalid UTF-8 string: {exc}", subject=descriptor.name) from exc
    return reader.read_int(kind.width, kind.signed)


def _read_vector(reader: ByteReader, kind: PrimitiveKind, descriptor: TypeDescriptor) -> list:
    return [_read_primitive(reader, kind, descriptor) for _ in range(reader.read_length())]


def read_value(descriptor: TypeDescriptor, reader: ByteReader) -> Any:
    """Read one value of a flat descriptor, advancing the reader."""
    kind = descriptor.kind
    shape = descriptor.shape

    if shape is Shape.PRIMITIVE:
        return _read_primitive(reader, kind, descriptor)
    if shape is Shape.VECTOR:
        return _read_vector(reader, kind, descriptor)
    if shape is Shape.VECTOR_OF_VECTOR:
        return [_read_vector(reader, kind, descriptor) for _ in range(reader.read_length())]
    if shape is Shape.OPTION:
        return _read_primitive(reader, kind, descriptor) if _read_tag(reader, descriptor) else None
    if shape is Shape.VECTOR_OF_OPTION:
        return [
            _read_primitive(reader, kind, descriptor) if _read_tag(reader, descriptor) else None
            for _ in range(reader.read_length())
        ]
    if shape is Shape.OPTION_OF_VECTOR:
        return _read_vector(reader, kind, descriptor) if _read_tag(reader, descriptor) else None
    if shape is Shape.FIXED_BYTES:
        return reader.read_bytes(descriptor.size)
    if shape is Shape.OPTION_FIXED_BYTES:
        return reader.read_bytes(descriptor.size) if _read_tag(reader, descriptor) else None
    raise UnsupportedDecodeTypeError(f"Type not supported: {descriptor.name}", subject=descriptor.name)


def render(value: Any) -> str:
    if value is None:
        return "None"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    return "[" + ", ".join(render(v) for v in value) + "]"


def decode_value(buffer: Union[bytes, ByteReader], type_name: str, position: int = 0) -> Optional[tuple[str, int]]:
    """
    Decode one value starting at ``position``.

    ``buffer`` may also be a ByteReader, in which case decoding starts at
    the reader's current position and advances it.

    Returns:
        ``(rendered, consumed)``, or None when no decoding is available
        for ``type_name``

    Raises:
        DecodeError: If the bytes are malformed for the type
    """
    descriptor = parse_type(type_name)
    if descriptor is None or not descriptor.is_flat:
        return None
    reader = buffer if isinstance(buffer, ByteReader) else ByteReader(buffer, position)
    start = reader.position
    value = read_value(descriptor, reader)
    return render(value), reader.position - start


def decode_flat(buffer: bytes, type_name: str) -> str:
    result = decode_value(buffer, type_name)
    if result is None:
        raise UnsupportedDecodeTypeError(f"Type not supported: {type_name}", subject=type_name)
    return result[0]
