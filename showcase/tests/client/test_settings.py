import pytest

from showcase.client.settings import ClientSettings, load_settings


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    for name in ("API_BASE_URL", "READ_TIMEOUT", "UPLOAD_TIMEOUT", "FETCH_RETRIES", "TOKEN_PATH"):
        monkeypatch.delenv(f"SHOWCASE_{name}", raising=False)


class TestLoadSettings:
    def test_defaults_without_config_file(self):
        settings = load_settings()

        assert settings.api_base_url == "http://localhost:5000"
        assert settings.read_timeout == 10.0
        assert settings.upload_timeout == 30.0
        assert settings.fetch_retries == 3
        assert settings.fetch_retry_delay == 2.0

    def test_default_config_file_is_picked_up(self, tmp_path):
        (tmp_path / ".showcase").mkdir()
        (tmp_path / ".showcase" / "cli.yaml").write_text("fetch_retries: 5\n")

        assert load_settings().fetch_retries == 5

    def test_explicit_file(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("api_base_url: https://api.example.org/\nupload_timeout: 60\n")

        settings = load_settings(str(path))

        assert settings.api_base_url == "https://api.example.org"
        assert settings.upload_timeout == 60.0
        assert settings.client_config.upload_timeout == 60.0

    def test_environment_wins_over_file(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.yaml"
        path.write_text("api_base_url: https://api.example.org\nread_timeout: 4\n")
        monkeypatch.setenv("SHOWCASE_API_BASE_URL", "http://localhost:8000")

        settings = load_settings(str(path))

        assert settings.api_base_url == "http://localhost:8000"
        assert settings.read_timeout == 4.0

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_settings(str(tmp_path / "missing.yaml"))

    def test_unknown_key_is_rejected(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("s3_bucket: nope\n")

        with pytest.raises(ValueError):
            load_settings(str(path))

    def test_non_yaml_file_is_rejected(self, tmp_path):
        path = tmp_path / "custom.json"
        path.write_text("{}")

        with pytest.raises(ValueError):
            load_settings(str(path))


class TestClientSettings:
    def test_resolved_token_path_expands_home(self, tmp_path):
        settings = ClientSettings()
        assert settings.resolved_token_path == tmp_path / ".showcase" / "token"

    def test_invalid_base_url_fails_client_config(self):
        with pytest.raises(ValueError):
            ClientSettings(api_base_url="ftp://example.org").client_config
