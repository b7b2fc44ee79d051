"""
Parse - Encode and decode data exchanged with contracts.

- base64-encoding: byte array <-> base64url string
- call-result:     decode a returned value by data type or schema file
- call-arguments:  encode a call arguments JSON file
- contract-address: derive a contract address from its deployer
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import click

from ..codec import CodecError, decode_flat, decode_schema, encode_arguments
from ..utils import (
    base64url_decode,
    base64url_encode,
    contract_address_v1,
    contract_address_v2,
    load_json,
    public_address_from_base64url,
)


@click.group()
def parse() -> None:
    """Encode / decode data exchanged with contracts."""


def _fail(message: str, exit_code: int = 1) -> None:
    click.secho(f"ERROR: {message}", fg="red")
    sys.exit(exit_code)


def _read_json_file(path: str, what: str):
    try:
        return load_json(Path(path))
    except OSError as exc:
        _fail(f"Fail to open or read {what} file {path}: {exc}")
    except json.JSONDecodeError as exc:
        _fail(f"Invalid JSON in {what} file {path}: {exc}")


@parse.command("base64-encoding")
@click.option("--encode", is_flag=True, help="Encode a JSON byte array to base64url")
@click.option("--decode", is_flag=True, help="Decode a base64url string to a byte array")
@click.option("--value", required=True, help="Array such as [0, 1, 2] or a base64url string")
def base64_encoding(encode: bool, decode: bool, value: str) -> None:
    """Encode / decode the provided array / string."""
    if encode == decode:
        _fail("Exactly one of --encode or --decode is required")

    if encode:
        try:
            data = json.loads(value)
            if not isinstance(data, list):
                raise ValueError("expected a JSON array")
            if any(isinstance(v, bool) for v in data):
                raise ValueError("expected integers in 0..255, got a boolean")
            raw = bytes(data)
        except (json.JSONDecodeError, ValueError, TypeError) as exc:
            _fail(f"Incorrect format for supplied vector: {exc}")
        click.echo(base64url_encode(raw))
        return

    try:
        raw = base64url_decode(value)
    except ValueError as exc:
        _fail(f"Fail to decode base64 string {value}: {exc}")
    click.echo("[" + ", ".join(str(b) for b in raw) + "]")


@parse.command("call-result")
@click.option("--value", required=True, help="Base64url string returned by a contract call")
@click.option("--data-type", default=None, help='Data type of the value, e.g. u64, Vec<u8>, "[u8;32]"')
@click.option("--schema-file", default=None, help="Path of a JSON schema describing the returned fields")
def call_result(value: str, data_type: Optional[str], schema_file: Optional[str]) -> None:
    """
    Parse the return value from a contract call.

    Exactly one of --data-type or --schema-file must be given.
    """
    if (data_type is None) == (schema_file is None):
        _fail("Exactly one of --data-type or --schema-file is required")

    try:
        raw = base64url_decode(value)
    except ValueError as exc:
        _fail(f"Fail to decode call return result {value}: {exc}")

    if data_type is not None:
        try:
            click.echo(decode_flat(raw, data_type))
        except CodecError as exc:
            _fail(f"Fail to parse call result: {exc}", exc.exit_code)
        return

    schema = _read_json_file(schema_file, "schema json")
    try:
        fields = decode_schema(raw, schema)
    except CodecError as exc:
        _fail(f"Fail to parse call result: {exc}", exc.exit_code)
    for name, rendered in fields:
        click.echo(f"{name}: {rendered}")


@parse.command("call-arguments")
@click.option("--file", "arguments_file", required=True, help='Path of a {"arguments": [...]} JSON file')
def call_arguments(arguments_file: str) -> None:
    """Encode call arguments, printing one base64url string per argument."""
    document = _read_json_file(arguments_file, "arguments json")
    try:
        encoded = encode_arguments(document)
    except CodecError as exc:
        _fail(f"Fail to parse call arguments: {exc}", exc.exit_code)
    for argument in encoded:
        click.echo(base64url_encode(argument))


U64 = click.IntRange(0, 2**64 - 1)
U32 = click.IntRange(0, 2**32 - 1)


@parse.group("contract-address")
def contract_address() -> None:
    """Derive the address of a contract deployed by an account."""


def _signer_address(address: str) -> bytes:
    try:
        return public_address_from_base64url(address)
    except ValueError as exc:
        _fail(f"Invalid signer address {address}: {exc}")


@contract_address.command("v1")
@click.option("--address", required=True, help="Base64url address of the signer account")
@click.option("--nonce", required=True, type=U64, help="Nonce of the deploy transaction")
def contract_address_v1_command(address: str, nonce: int) -> None:
    """Contract address defined in protocol v0.4."""
    signer = _signer_address(address)
    click.echo(f"Contract Address: {base64url_encode(contract_address_v1(signer, nonce))}")


@contract_address.command("v2")
@click.option("--address", required=True, help="Base64url address of the signer account")
@click.option("--nonce", required=True, type=U64, help="Nonce of the deploy transaction")
@click.option("--index", required=True, type=U32, help="Index of the deploy command in the transaction")
def contract_address_v2_command(address: str, nonce: int, index: int) -> None:
    """Contract address defined in protocol v0.5."""
    signer = _signer_address(address)
    click.echo(f"Contract Address: {base64url_encode(contract_address_v2(signer, nonce, index))}")
