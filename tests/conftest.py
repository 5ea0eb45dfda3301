"""Pytest configuration and fixtures for borc tests."""

import os
from pathlib import Path
from typing import Callable

import pytest

# Fixed modification time used for sources that should look unchanged
PINNED_MTIME = 1_700_000_000


@pytest.fixture(autouse=True)
def isolate_output_globals():
    """Reset borc.output module state before/after each test."""
    from borc import output

    original_start_time = output._start_time
    original_output_stream = output._output_stream
    original_verbose = output._verbose

    output._start_time = None
    output._output_stream = None
    output._verbose = False

    yield

    output._start_time = original_start_time
    output._output_stream = original_output_stream
    output._verbose = original_verbose


@pytest.fixture(autouse=True)
def isolate_borc_env(monkeypatch, tmp_path):
    """Point borc state at the test's temporary directory."""
    monkeypatch.delenv("BORC_CACHE_FILE", raising=False)
    monkeypatch.setenv("BORC_HOME", str(tmp_path / ".borc"))


@pytest.fixture
def make_source(tmp_path) -> Callable[..., Path]:
    """Factory creating a source file with a pinned modification time.

    Usage:
        path = make_source("core/main.cpp", mtime=1_700_000_000)
    """

    def _make(relative: str, content: str = "int main() { return 0; }\n", mtime: int = PINNED_MTIME) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        os.utime(path, (mtime, mtime))
        return path

    return _make


@pytest.fixture
def cache_file(tmp_path) -> Path:
    """Location of the build cache store for a test."""
    return tmp_path / ".borc" / "build_cache.txt"
