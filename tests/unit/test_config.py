"""Unit tests for AppSettings."""

import pytest
from pydantic import ValidationError

from docker_manager.core.config import DEFAULT_DOCKER_ENDPOINT, AppSettings, endpoint_from_environment


class TestAppSettings:
    def test_defaults(self):
        settings = AppSettings()

        assert settings.endpoint == DEFAULT_DOCKER_ENDPOINT
        assert settings.image_reference == "ubuntu:20.04"
        assert settings.image_arch == "x86-64"
        assert settings.container_name == "ubuntu2004"
        assert settings.container_cmd == ["sleep", "infinity"]
        assert settings.ready_timeout_seconds == 180
        assert settings.ready_poll_interval_seconds == 1.0
        assert settings.exec_interval_seconds == 0.8
        assert settings.exec_cmd == ["/bin/sh", "-c", "top -b -n 1 | head -4 | tail -2"]
        assert settings.quit_keyword == "e"
        assert endpoint_from_environment() is None

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("DOCKER_MANAGER_ENDPOINT", "http://remote:2375/")
        monkeypatch.setenv("DOCKER_MANAGER_CONTAINER_CMD", '["sleep", "300"]')
        monkeypatch.setenv("DOCKER_MANAGER_LOG_LEVEL", "debug")

        settings = AppSettings()

        assert settings.endpoint == "http://remote:2375"
        assert settings.container_cmd == ["sleep", "300"]
        assert settings.log_level == "DEBUG"
        assert endpoint_from_environment() == "http://remote:2375/"

    def test_dotenv_file_is_read(self, tmp_path):
        (tmp_path / ".env").write_text("DOCKER_MANAGER_IMAGE=alpine\n", encoding="utf-8")

        assert AppSettings().image == "alpine"

    @pytest.mark.parametrize(
        "field, value",
        [
            ("ready_timeout_seconds", 0),
            ("exec_interval_seconds", -1),
            ("quit_keyword", ""),
            ("log_format", "xml"),
            ("exec_cmd", []),
        ],
    )
    def test_invalid_values_are_rejected(self, field, value):
        with pytest.raises(ValidationError):
            AppSettings(**{field: value})


class TestEndpointFromEnvironment:
    def test_ignores_invalid_sibling_variables(self, monkeypatch):
        monkeypatch.setenv("DOCKER_MANAGER_ENDPOINT", "http://remote:2375")
        monkeypatch.setenv("DOCKER_MANAGER_IMAGE", "")
        monkeypatch.setenv("DOCKER_MANAGER_LOG_FORMAT", "xml")

        assert endpoint_from_environment() == "http://remote:2375"

    def test_reads_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("DOCKER_MANAGER_ENDPOINT=http://dotenv:2375\n", encoding="utf-8")

        assert endpoint_from_environment() == "http://dotenv:2375"
