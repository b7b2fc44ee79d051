"""
CLI configuration.

The RPC URL of the fullnode is stored in $PCHAIN_CLI_HOME/.env
(default ~/.pchain/.env) as PCHAIN_URL.

Dependencies: python-dotenv
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from dotenv import dotenv_values, set_key


URL_KEY = "PCHAIN_URL"


class ConfigError(RuntimeError):
    exit_code: int = 1


def cli_home() -> Path:
    """Return the CLI home directory, honouring $PCHAIN_CLI_HOME."""
    home = os.environ.get("PCHAIN_CLI_HOME")
    return Path(home) if home else Path.home() / ".pchain"


def config_path() -> Path:
    return cli_home() / ".env"


def save_url(url: str, env_path: Optional[Path] = None) -> Path:
    """
    Save the fullnode RPC URL, without surrounding whitespace or trailing slashes.

    Args:
        url: http(s) URL of the fullnode
        env_path: Path to .env file (default: $PCHAIN_CLI_HOME/.env)

    Returns:
        Path to the saved .env file

    Raises:
        ConfigError: If the URL is not an http or https URL
    """
    url = url.strip().rstrip("/")
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"Invalid URL: {url}")

    env_path = env_path or config_path()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.touch(exist_ok=True)
    set_key(str(env_path), URL_KEY, url, quote_mode="never")
    return env_path


def load_url(env_path: Optional[Path] = None) -> str:
    """
    Load the fullnode RPC URL.

    Raises:
        ConfigError: If no URL has been set up
    """
    env_path = env_path or config_path()
    url = dotenv_values(env_path).get(URL_KEY) if env_path.exists() else None
    if not url:
        raise ConfigError(
            f"{URL_KEY} not found. Run 'pchain-client config setup --url <URL>' "
            f"or set {URL_KEY} in {env_path}"
        )
    return url
