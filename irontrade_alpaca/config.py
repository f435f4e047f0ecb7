"""Alpaca credential and endpoint configuration.

Values come from the APCA_* environment variables first and fall back to the
[alpaca] table of ~/.config/irontrade/config.toml.
"""

import os
from pathlib import Path
from typing import Mapping, Optional

import toml
from pydantic import BaseModel, Field

from irontrade_alpaca.errors import ConfigError

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "irontrade" / "config.toml"
DEFAULT_BASE_URL = "https://paper-api.alpaca.markets"

ENV_KEY_ID = "APCA_API_KEY_ID"
ENV_SECRET_KEY = "APCA_API_SECRET_KEY"
ENV_BASE_URL = "APCA_API_BASE_URL"


class AlpacaConfig(BaseModel):
    """Connection settings for one Alpaca account."""

    key_id: str = Field(..., min_length=1, description="Alpaca API key id")
    secret_key: str = Field(..., min_length=1, description="Alpaca API secret key")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="Trading API base URL")

    model_config = {"frozen": True}

    @property
    def is_paper(self) -> bool:
        return "paper" in self.base_url

    def require_paper(self) -> "AlpacaConfig":
        """Return self if this config targets a paper account.

        Raises:
            ConfigError: If the base URL is not a paper endpoint.
        """
        if not self.is_paper:
            raise ConfigError(f"Refusing non-paper endpoint {self.base_url}")
        return self


def _read_file(config_path: Path) -> dict:
    if not config_path.exists():
        return {}
    try:
        return toml.load(config_path).get("alpaca", {})
    except toml.TomlDecodeError as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}") from e


def load_config(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> AlpacaConfig:
    """Load Alpaca configuration.

    Args:
        config_path: TOML file to fall back to. Defaults to
            ~/.config/irontrade/config.toml.
        environ: Environment mapping. Defaults to os.environ.

    Returns:
        AlpacaConfig built from the environment and the file.

    Raises:
        ConfigError: If credentials are missing or the file is invalid.
    """
    env = os.environ if environ is None else environ
    file_values = _read_file(config_path or DEFAULT_CONFIG_PATH)

    key_id = env.get(ENV_KEY_ID) or file_values.get("key_id")
    secret_key = env.get(ENV_SECRET_KEY) or file_values.get("secret_key")
    if not key_id or not secret_key:
        raise ConfigError(
            f"Alpaca credentials not configured. Set {ENV_KEY_ID} and "
            f"{ENV_SECRET_KEY} or add them to the [alpaca] table of the config file."
        )

    values = {"key_id": key_id, "secret_key": secret_key}
    base_url = env.get(ENV_BASE_URL) or file_values.get("base_url")
    if base_url:
        values["base_url"] = base_url
    return AlpacaConfig(**values)
