import re

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ClientConfig(BaseModel):
    """
    Explicit connection settings handed to the HTTP client and URL resolver at start.
    """

    api_base_url: str
    read_timeout: float = Field(default=10.0, gt=0)
    upload_timeout: float = Field(default=30.0, gt=0)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("api_base_url")
    def validate_api_base_url(cls, v):
        """
        Validates that the URL starts with http:// or https:// and,
        optionally, ends with a port number. A trailing slash is dropped.
        """
        v = v.strip().rstrip("/")
        pattern = r"^https?:\/\/[^\/\s]+(?::\d+)?$"
        if not re.match(pattern, v):
            raise ValueError("Invalid URL format")
        return v


class CLIConfig(BaseModel):
    """Contents of the optional ``cli.yaml`` file."""

    api_base_url: str | None = None
    token_path: str | None = None
    read_timeout: float | None = Field(default=None, gt=0)
    upload_timeout: float | None = Field(default=None, gt=0)
    fetch_retries: int | None = Field(default=None, ge=0)
    fetch_retry_delay: float | None = Field(default=None, ge=0)

    model_config = ConfigDict(extra="forbid")

    @field_validator("api_base_url")
    def validate_api_base_url(cls, v):
        if v is None:
            return v
        return ClientConfig(api_base_url=v).api_base_url
