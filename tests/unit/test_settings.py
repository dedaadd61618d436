import pytest
from pydantic import ValidationError

from dupscan.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_max_file_size(self) -> None:
        s = Settings()
        assert s.max_file_size_bytes == 5 * 1024 * 1024

    def test_default_batch_size(self) -> None:
        s = Settings()
        assert s.batch_size == 50

    def test_default_non_printable_threshold(self) -> None:
        s = Settings()
        assert s.non_printable_threshold == 0.1

    def test_default_cors_origins(self) -> None:
        s = Settings()
        assert s.cors_allow_origins == ["*"]


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_batch_size(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BATCH_SIZE", "10")
        s = Settings()
        assert s.batch_size == 10

    def test_loads_max_file_size(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_FILE_SIZE_BYTES", "1024")
        s = Settings()
        assert s.max_file_size_bytes == 1024

    def test_loads_cors_origins_as_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", '["http://localhost:3000"]')
        s = Settings()
        assert s.cors_allow_origins == ["http://localhost:3000"]


class TestSettingsValidation:
    def test_invalid_batch_size_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BATCH_SIZE", "many")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_api_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()
