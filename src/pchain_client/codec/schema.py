"""
Structured call result decoding.

A schema describes the fields of a returned value, nested to any depth:

    {
        "argument_name": "Person",
        "argument_type": [
            {"argument_name": "name", "argument_type": "String"},
            {"argument_name": "friends", "argument_type": [
                {"argument_type": "Vec<String>"}
            ]}
        ]
    }

The schema is flattened breadth-first into leaves, and the leaves are
decoded one after the other from the buffer in that order.
"""

from __future__ import annotations

import json
from collections import deque
from dataclasses import dataclass
from typing import Any

from .decoder import ByteReader, decode_value
from .errors import DecodeError, UnsupportedDecodeTypeError


@dataclass(frozen=True)
class SchemaLeaf:
    name: str
    type_name: str


def _qualified_name(parent: str, index: int, argument_name: str) -> str:
    if not parent:
        return argument_name or f"[{index}]"
    if not argument_name:
        return f"{parent}[{index}]"
    return f"{parent}.{argument_name}"


def flatten_schema(schema: Any) -> list[SchemaLeaf]:
    """
    Flatten a schema node (or JSON array of nodes) into its leaves.

    Nodes are visited breadth-first in declaration order, so the leaves of
    a group come after every sibling declared at the group's own level.
    This order is the byte order of the fields in the buffer.

    Raises:
        DecodeError: If a node is not an object or its ``argument_type`` is
            neither a string nor an array
    """
    roots = schema if isinstance(schema, list) else [schema]
    queue = deque(("", index, node) for index, node in enumerate(roots))
    leaves: list[SchemaLeaf] = []

    while queue:
        parent, index, node = queue.popleft()
        if not isinstance(node, dict):
            raise DecodeError(f"Schema node must be an object: {json.dumps(node)}", subject=json.dumps(node))

        argument_name = node.get("argument_name")
        name = _qualified_name(parent, index, argument_name if isinstance(argument_name, str) else "")

        argument_type = node.get("argument_type")
        if isinstance(argument_type, str):
            leaves.append(SchemaLeaf(name, argument_type))
        elif isinstance(argument_type, list):
            queue.extend((name, child_index, child) for child_index, child in enumerate(argument_type))
        else:
            raise DecodeError(f"Invalid argument_type in schema node {name}", subject=name)

    return leaves


def decode_schema(buffer: bytes, schema: Any) -> list[tuple[str, str]]:
    """
    Decode a call result against a schema.

    Returns:
        ``(qualified_name, rendered_value)`` for every leaf, in buffer order

    Raises:
        UnsupportedDecodeTypeError: If any leaf has an unsupported type
        DecodeError: If the schema or the bytes are malformed
    """
    result = []
    reader = ByteReader(buffer)
    for leaf in flatten_schema(schema):
        try:
            decoded = decode_value(reader, leaf.type_name)
        except DecodeError as exc:
            raise DecodeError(f"{leaf.name}: {exc}", subject=leaf.name) from exc
        if decoded is None:
            raise UnsupportedDecodeTypeError(
                f"Type not supported: {leaf.type_name} (at {leaf.name})",
                subject=leaf.name,
            )
        result.append((leaf.name, decoded[0]))
    return result
