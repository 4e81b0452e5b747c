"""Tests for genpi.config."""

import pytest

from genpi.config import Config
from genpi.domain.errors import InvalidConfiguration


class TestConfigFromEnv:
    def test_empty(self):
        assert Config.from_env({}) == Config(base_path="", port=3000, log_level="INFO")

    def test_all(self):
        config = Config.from_env(
            {"BASE_PATH": "/lab/genpi", "PORT": "8080", "LOG_LEVEL": "debug"}
        )
        assert config == Config(base_path="/lab/genpi", port=8080, log_level="DEBUG")

    def test_reads_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv("PORT", "4000")
        monkeypatch.delenv("BASE_PATH", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert Config.from_env().port == 4000

    def test_empty_port_raises(self):
        with pytest.raises(InvalidConfiguration, match=r"PORT range is \(0\.\.=65535\)"):
            Config.from_env({"PORT": ""})

    def test_plus_sign_accepted(self):
        assert Config.from_env({"PORT": "+80"}).port == 80

    @pytest.mark.parametrize("port", ["0", "65535"])
    def test_port_bounds(self, port):
        assert Config.from_env({"PORT": port}).port == int(port)

    @pytest.mark.parametrize(
        "port", ["a", "65536", "-1", "3000.0", "0x10", "", "1_000", "３０００", " 80 "]
    )
    def test_invalid_port_raises(self, port):
        with pytest.raises(InvalidConfiguration, match=r"PORT range is \(0\.\.=65535\)"):
            Config.from_env({"PORT": port})

    def test_base_path_trailing_slash_stripped(self):
        assert Config.from_env({"BASE_PATH": "/lab/genpi/"}).base_path == "/lab/genpi"

    def test_root_base_path_means_unprefixed(self):
        assert Config.from_env({"BASE_PATH": "/"}).base_path == ""

    def test_relative_base_path_raises(self):
        with pytest.raises(InvalidConfiguration, match="BASE_PATH"):
            Config.from_env({"BASE_PATH": "lab"})

    def test_unknown_log_level_raises(self):
        with pytest.raises(InvalidConfiguration, match="LOG_LEVEL"):
            Config.from_env({"LOG_LEVEL": "chatty"})
