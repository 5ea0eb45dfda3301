"""
On-disk locations used by borc.

Paths are read from the environment at call time so tests and nested builds
can redirect them:

- BORC_HOME: state directory (default: ./.borc)
- BORC_CACHE_FILE: build cache store (default: $BORC_HOME/build_cache.txt)
"""

import os
from pathlib import Path

CACHE_FILE_NAME = "build_cache.txt"


def get_borc_home() -> Path:
    """State directory for build metadata."""
    home = os.environ.get("BORC_HOME")
    if home:
        return Path(home)
    return Path.cwd() / ".borc"


def get_cache_file() -> Path:
    """Path of the build cache store."""
    cache_file = os.environ.get("BORC_CACHE_FILE")
    if cache_file:
        return Path(cache_file)
    return get_borc_home() / CACHE_FILE_NAME
