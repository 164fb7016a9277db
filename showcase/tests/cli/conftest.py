from unittest.mock import patch

import httpx
import pytest
from typer.testing import CliRunner

from showcase.client.http import HttpClient
from showcase.client.token_store import TokenStore


@pytest.fixture
def runner():
    """CliRunner fixture for testing Typer commands"""
    return CliRunner()


@pytest.fixture
def cli_env(tmp_path, monkeypatch, backend):
    """
    Isolated environment for CLI runs: HOME in tmp_path, a stored token, and
    every client built by the commands routed to the in-memory backend.
    """
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("COLUMNS", "200")
    token_path = tmp_path / "token"
    token_path.write_text("cli-token\n")
    monkeypatch.setenv("SHOWCASE_API_BASE_URL", "http://api.test")
    monkeypatch.setenv("SHOWCASE_TOKEN_PATH", str(token_path))
    monkeypatch.setenv("SHOWCASE_FETCH_RETRY_DELAY", "0")

    def fake_build_client(settings):
        return HttpClient(
            settings.client_config,
            token_store=TokenStore(settings.resolved_token_path),
            transport=httpx.MockTransport(backend),
        )

    with patch("showcase.cli.cli.utils.common.build_client", side_effect=fake_build_client):
        yield token_path


@pytest.fixture
def image_file(tmp_path, png_bytes):
    path = tmp_path / "still.png"
    path.write_bytes(png_bytes)
    return str(path)
