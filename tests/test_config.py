"""Unit tests for setenv_tools.setenv_runtime.config module."""

from __future__ import annotations

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from setenv_tools.setenv_runtime.config import (
    CONFIG_CANDIDATES,
    COMMENT_PATTERN,
    DEFAULT_ENV_FILE,
    KEY_PATTERN,
    PATH_LIKE_PATTERN,
    VERBOSITY_ENV_VAR,
    load_repo_config,
    resolve_default_env_file,
    resolve_default_verbosity,
)
from setenv_tools.setenv_runtime.models import Verbosity, VerbosityAbort
from setenv_tools.utils.config_loader import ConfigLoadError


class TestPatterns:
    """Tests for the module-level regular expressions."""

    @pytest.mark.parametrize("key", ["FOO", "FOO_BAR", "A1", "_", "123"])
    def test_key_pattern_accepts(self, key):
        """Test uppercase alphanumeric keys with underscores match."""
        assert KEY_PATTERN.match(key)

    @pytest.mark.parametrize("key", ["foo", "BAD KEY", "A-B", "", "Ä", "FOO\n"])
    def test_key_pattern_rejects(self, key):
        """Test other keys do not match."""
        assert not KEY_PATTERN.match(key)

    @pytest.mark.parametrize("line", ["#x", "   # x", "\t#"])
    def test_comment_pattern(self, line):
        """Test comments may be preceded by whitespace."""
        assert COMMENT_PATTERN.match(line)

    @pytest.mark.parametrize("value", ["~", "~/x", ".", "./x", "..", "../x"])
    def test_path_like_pattern_accepts(self, value):
        """Test values that look like relative paths match."""
        assert PATH_LIKE_PATTERN.match(value)

    @pytest.mark.parametrize("value", [".hidden", "...", "..x", "x/./y", "/abs", "..\n", ".\n"])
    def test_path_like_pattern_rejects(self, value):
        """Test dotfiles and absolute paths are not path-like."""
        assert not PATH_LIKE_PATTERN.match(value)


class TestLoadRepoConfig:
    """Tests for load_repo_config."""

    def test_returns_empty_without_file(self, tmp_path: Path):
        """Test an empty dict is returned when no config file exists."""
        assert load_repo_config(tmp_path) == {}

    def test_loads_first_candidate(self, tmp_path: Path):
        """Test the primary candidate file is loaded."""
        data = {"env_file": "local.env", "verbosity": "info"}
        (tmp_path / CONFIG_CANDIDATES[0]).write_text(json.dumps(data), encoding="utf-8")
        assert load_repo_config(tmp_path) == data

    def test_raises_on_invalid_json(self, tmp_path: Path):
        """Test a broken config file is an error, not silently ignored."""
        (tmp_path / CONFIG_CANDIDATES[1]).write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigLoadError):
            load_repo_config(tmp_path)


class TestResolveDefaults:
    """Tests for default env file and verbosity resolution."""

    def test_default_env_file(self):
        """Test the built-in default is ./dev.env."""
        assert resolve_default_env_file({}) == DEFAULT_ENV_FILE == "./dev.env"

    def test_env_file_from_config(self):
        """Test a configured env file replaces the default."""
        assert resolve_default_env_file({"env_file": "x.env"}) == "x.env"

    def test_env_file_ignores_non_string(self):
        """Test non-string values fall back to the default."""
        assert resolve_default_env_file({"env_file": 3}) == DEFAULT_ENV_FILE

    def test_default_verbosity_is_none(self):
        """Test logging is disabled by default."""
        with patch.dict(os.environ, {}, clear=True):
            assert resolve_default_verbosity({}) is Verbosity.NONE

    def test_verbosity_from_config(self):
        """Test the config file can raise the default verbosity."""
        with patch.dict(os.environ, {}, clear=True):
            assert resolve_default_verbosity({"verbosity": "warning"}) is Verbosity.WARNING

    def test_env_var_overrides_config(self):
        """Test SETENV_VERBOSITY takes precedence over the config file."""
        with patch.dict(os.environ, {VERBOSITY_ENV_VAR: "error"}, clear=True):
            assert resolve_default_verbosity({"verbosity": "info"}) is Verbosity.ERROR

    def test_rejects_unknown_verbosity(self):
        """Test an unknown configured level aborts."""
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(VerbosityAbort):
                resolve_default_verbosity({"verbosity": "loud"})
