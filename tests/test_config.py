"""Unit tests for Config (gyatt.config)."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from gyatt.config import Config


class TestConfigDefaults:
    @pytest.mark.unit
    def test_defaults(self):
        config = Config()
        assert config.bin_dir == Path("/usr/local/bin")
        assert config.legacy_exit_codes is False
        assert config.run_post_init is True

    @pytest.mark.unit
    def test_commands(self):
        config = Config()
        assert config.vcs_init_command == ["git", "init"]
        assert config.module_init_for("demo") == ["go", "mod", "init", "demo"]
        assert config.post_init_commands == [["go", "mod", "tidy", "-e"], ["make", "build"]]

    @pytest.mark.unit
    def test_default_lists_not_shared(self):
        a, b = Config(), Config()
        a.post_init_commands.append(["echo"])
        assert b.post_init_commands == [["go", "mod", "tidy", "-e"], ["make", "build"]]

    @pytest.mark.unit
    @pytest.mark.parametrize("bin_dir", [Path("bin"), Path("."), Path("../usr/local/bin")])
    def test_relative_bin_dir_rejected(self, bin_dir):
        with pytest.raises(ValidationError, match="absolute"):
            Config(bin_dir=bin_dir)


class TestConfigFromEnv:
    @pytest.mark.unit
    def test_empty_env(self):
        with patch.dict(os.environ, {}, clear=True):
            assert Config.from_env() == Config()

    @pytest.mark.unit
    def test_bin_dir(self):
        with patch.dict(os.environ, {"GYATT_BIN_DIR": "/opt/bin"}, clear=True):
            assert Config.from_env().bin_dir == Path("/opt/bin")

    @pytest.mark.unit
    def test_relative_bin_dir_rejected(self):
        with patch.dict(os.environ, {"GYATT_BIN_DIR": "relative/bin"}, clear=True):
            with pytest.raises(ValidationError, match="absolute"):
                Config.from_env()

    @pytest.mark.unit
    @pytest.mark.parametrize("value,expected", [("1", True), ("true", True), ("no", False)])
    def test_legacy_exit_codes(self, value, expected):
        with patch.dict(os.environ, {"GYATT_LEGACY_EXIT_CODES": value}, clear=True):
            assert Config.from_env().legacy_exit_codes is expected

    @pytest.mark.unit
    @pytest.mark.parametrize("value,expected", [("1", False), ("yes", False), ("0", True)])
    def test_skip_build(self, value, expected):
        with patch.dict(os.environ, {"GYATT_SKIP_BUILD": value}, clear=True):
            assert Config.from_env().run_post_init is expected
