"""
Shared pytest fixtures for mapext tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import typing as _typing

import pytest as _pytest

import mapext.config as config

# Environment prefix that must not leak into tests
ENV_PREFIX = "MAPEXT_"


@_pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: _pytest.MonkeyPatch) -> _typing.Iterator[None]:
    """Clear MAPEXT_* variables and the settings cache around every test."""
    for key in list(_os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    config.reset_settings()
    yield
    config.reset_settings()


@_pytest.fixture
def abc_map() -> dict[str, int]:
    """Three-entry dict in a known order."""
    return {"a": 100, "b": 200, "c": 300}


@_pytest.fixture
def self_merge_error(monkeypatch: _pytest.MonkeyPatch) -> None:
    """Configure merge_into() to reject self-merges."""
    monkeypatch.setenv("MAPEXT_MERGE__SELF_MERGE", "error")
    config.reset_settings()


@_pytest.fixture
def trace_callbacks(monkeypatch: _pytest.MonkeyPatch) -> None:
    """Enable debug tracing of callback invocations."""
    monkeypatch.setenv("MAPEXT_LOGGING__TRACE_CALLBACKS", "true")
    config.reset_settings()
