#  Copyright 2026 Canonical Ltd.  This software is licensed under the
#  GNU Affero General Public License version 3 (see the file LICENSE).

from pathlib import Path

import pytest

from dockernetservicelayer.settings import (
    Config,
    get_config_path,
    NapiConfig,
    read_config,
)


class TestGetConfigPath:
    def test_path_from_env(self, monkeypatch):
        monkeypatch.setenv("DOCKERNET_CONFIG", "/srv/dockernet.yaml")
        assert get_config_path() == Path("/srv/dockernet.yaml")

    def test_default_path(self, monkeypatch):
        monkeypatch.delenv("DOCKERNET_CONFIG")
        assert get_config_path() == Path("/etc/dockernet/dockernet.yaml")


class TestReadConfig:
    def test_no_file(self):
        assert read_config() == Config()

    def test_empty_file(self):
        get_config_path().write_text("")
        assert read_config() == Config()

    def test_from_file(self):
        get_config_path().write_text(
            "napi:\n"
            "  url: http://10.0.0.5\n"
            "  connect_timeout: 2\n"
            "  request_timeout: 30\n"
            "debug: true\n"
        )
        assert read_config() == Config(
            napi=NapiConfig(
                url="http://10.0.0.5",
                connect_timeout=2.0,
                request_timeout=30.0,
            ),
            debug=True,
        )

    def test_url_from_env(self, monkeypatch):
        get_config_path().write_text("napi:\n  url: http://10.0.0.5\n")
        monkeypatch.setenv("DOCKERNET_NAPI_URL", "http://napi.example.com")
        assert read_config().napi.url == "http://napi.example.com"

    def test_invalid_timeout(self):
        get_config_path().write_text("napi:\n  request_timeout: soon\n")
        with pytest.raises(ValueError):
            read_config()
