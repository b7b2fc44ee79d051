"""Unit tests for utils.py and config.py functions."""

from __future__ import annotations

import binascii
import hashlib
import json
from pathlib import Path
from unittest.mock import patch

import pytest

from pchain_client.config import ConfigError, cli_home, config_path, load_url, save_url
from pchain_client.utils import (
    base64url_decode,
    base64url_encode,
    contract_address_v1,
    contract_address_v2,
    load_json,
    public_address_from_base64url,
)


class TestBase64Url:
    def test_encode_strips_padding(self) -> None:
        assert base64url_encode(bytes([0, 1, 2, 3])) == "AAECAw"

    def test_decode_restores_padding(self) -> None:
        assert base64url_decode("AAECAw") == bytes([0, 1, 2, 3])

    def test_url_safe_alphabet(self) -> None:
        encoded = base64url_encode(b"\xfb\xff")
        assert encoded == "-_8"
        assert base64url_decode(encoded) == b"\xfb\xff"

    def test_decode_rejects_invalid_characters(self) -> None:
        with pytest.raises(binascii.Error):
            base64url_decode("AA*CAw")


def test_load_json(tmp_path: Path) -> None:
    path = tmp_path / "schema.json"
    path.write_text(json.dumps([{"argument_type": "u8"}]), encoding="utf-8")
    assert load_json(path) == [{"argument_type": "u8"}]


class TestConfig:
    def test_cli_home_from_env(self, tmp_path: Path) -> None:
        with patch.dict("os.environ", {"PCHAIN_CLI_HOME": str(tmp_path)}):
            assert cli_home() == tmp_path
            assert config_path() == tmp_path / ".env"

    def test_save_and_load_url(self, tmp_path: Path) -> None:
        env_path = tmp_path / "home" / ".env"
        assert save_url("https://rpc.example.org", env_path) == env_path
        assert load_url(env_path) == "https://rpc.example.org"

    def test_save_url_overwrites(self, tmp_path: Path) -> None:
        env_path = tmp_path / ".env"
        save_url("http://localhost:8080", env_path)
        save_url("https://rpc.example.org", env_path)
        assert load_url(env_path) == "https://rpc.example.org"
        assert env_path.read_text(encoding="utf-8").count("PCHAIN_URL") == 1

    @pytest.mark.parametrize("url", ["rpc.example.org", "ftp://rpc.example.org", "https://"])
    def test_save_url_rejects_invalid(self, tmp_path: Path, url: str) -> None:
        with pytest.raises(ConfigError, match="Invalid URL"):
            save_url(url, tmp_path / ".env")

    def test_load_url_missing(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="PCHAIN_URL not found"):
            load_url(tmp_path / ".env")


class TestContractAddress:
    SIGNER = bytes(range(32))

    def test_v1_hashes_signer_and_nonce(self) -> None:
        expected = hashlib.sha256(self.SIGNER + (5).to_bytes(8, "little")).digest()
        assert contract_address_v1(self.SIGNER, 5) == expected

    def test_v2_appends_index(self) -> None:
        expected = hashlib.sha256(
            self.SIGNER + (5).to_bytes(8, "little") + (2).to_bytes(4, "little")
        ).digest()
        assert contract_address_v2(self.SIGNER, 5, 2) == expected
        assert contract_address_v2(self.SIGNER, 5, 0) != contract_address_v1(self.SIGNER, 5)

    def test_public_address_round_trip(self) -> None:
        assert public_address_from_base64url(base64url_encode(self.SIGNER)) == self.SIGNER

    def test_public_address_wrong_length(self) -> None:
        with pytest.raises(ValueError, match="Incorrect address length"):
            public_address_from_base64url("AAECAw")


def test_save_url_trims_whitespace_and_trailing_slash(tmp_path: Path) -> None:
    env_path = tmp_path / ".env"
    save_url("  https://rpc.example.org/  ", env_path)
    assert load_url(env_path) == "https://rpc.example.org"
