"""Unit tests for the setenv_tools.setenv re-export module."""

from __future__ import annotations

from setenv_tools import setenv
from setenv_tools import setenv_runtime
from setenv_tools.setenv_runtime import loader, workflow


def test_reexports_match_canonical_objects():
    """Test the short import path exposes the runtime implementations."""
    assert setenv.load_env is loader.load_env
    assert setenv.main is workflow.main
    assert setenv.render_exports is workflow.render_exports
    assert setenv.LoaderConfig is setenv_runtime.LoaderConfig


def test_all_names_resolve():
    """Test every advertised name is importable from both packages."""
    for name in setenv.__all__:
        assert getattr(setenv, name) is getattr(setenv_runtime, name)
    for name in setenv_runtime.__all__:
        assert hasattr(setenv_runtime, name)
