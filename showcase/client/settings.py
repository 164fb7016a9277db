import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from showcase.models.models.cli import CLIConfig, ClientConfig
from showcase.models.utils import get_config, validate_model_config

DEFAULT_CLI_CONFIG_PATH = "~/.showcase/cli.yaml"


class ClientSettings(BaseSettings):
    """Client settings. Overwrite priority: environment variables > cli.yaml > defaults."""

    api_base_url: str = Field(default="http://localhost:5000")

    # HTTP timeouts (in seconds)
    read_timeout: float = Field(default=10.0)
    upload_timeout: float = Field(default=30.0)

    # Fetch retry policy
    fetch_retries: int = Field(default=3)
    fetch_retry_delay: float = Field(default=2.0)

    token_path: str = Field(default="~/.showcase/token")
    logging_verbosity: str = Field(default="ERROR")

    model_config = SettingsConfigDict(env_prefix="SHOWCASE_")

    @property
    def client_config(self) -> ClientConfig:
        return ClientConfig(
            api_base_url=self.api_base_url,
            read_timeout=self.read_timeout,
            upload_timeout=self.upload_timeout,
        )

    @property
    def resolved_token_path(self) -> Path:
        return Path(os.path.expanduser(self.token_path))


def load_settings(yaml_config_path: str | None = None) -> ClientSettings:
    """
    Build settings from the optional YAML file, letting environment variables win.

    A missing file at the default location is not an error; a missing file
    that was asked for explicitly is.
    """
    path = os.path.expanduser(yaml_config_path or DEFAULT_CLI_CONFIG_PATH)
    file_values: dict = {}
    if os.path.exists(path):
        cli_config = validate_model_config(get_config(path), CLIConfig)
        file_values = cli_config.model_dump(exclude_none=True)
    elif yaml_config_path is not None:
        raise FileNotFoundError(f"The file '{path}' does not exist.")

    env_prefix = ClientSettings.model_config.get("env_prefix", "")
    overrides = {
        key: value
        for key, value in file_values.items()
        if f"{env_prefix}{key}".upper() not in os.environ
    }
    return ClientSettings(**overrides)
