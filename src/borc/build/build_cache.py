"""Persistent build cache for incremental compilation.

This module tracks the modification time of every source that was compiled
successfully, so that later runs can skip sources that have not changed.

Store format:
    UTF-8 text, one entry per line: ``<absolute-source-path>:<epoch-seconds>``.
    The timestamp is split off at the last colon so that Windows drive letters
    survive. Malformed lines are skipped. When a path appears more than once,
    the last occurrence wins, which lets record_built() append instead of
    rewriting the file.

Staleness:
    A source needs a rebuild unless its cached timestamp and its current
    modification time are both known and exactly equal. Any difference, older
    or newer, counts as a change. A file whose timestamp is reset to a value
    already in the cache (e.g. by a version-control checkout) is therefore not
    detected.

The cache assumes a single writer: two builds sharing one store must not run
at the same time.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from types import TracebackType
from typing import Optional

from .errors import BuildCacheError

logger = logging.getLogger(__name__)


def _cache_key(path: Path) -> str:
    return str(Path(path).resolve())


def _read_mtime(path: Path) -> Optional[int]:
    """Current modification time in whole seconds, or None if stat fails."""
    try:
        return int(Path(path).stat().st_mtime)
    except OSError:
        return None


def parse_cache_line(line: str) -> Optional[tuple[str, int]]:
    """Parse one store line into (path, timestamp).

    Returns:
        The parsed entry, or None if the line is blank or malformed
    """
    line = line.strip()
    if not line:
        return None

    path, sep, stamp = line.rpartition(":")
    if not sep or not path:
        return None

    try:
        return path, int(stamp)
    except ValueError:
        return None


def format_cache_line(path: str, timestamp: int) -> str:
    """Format one store entry, including the trailing newline."""
    return f"{path}:{timestamp}\n"


class BuildCache:
    """Tracks source modification times across build invocations.

    Construct one per build invocation and pass it to the orchestrator. The
    store is read once at construction and rewritten by save(). Each
    record_built() call is also appended to the store right away, so entries
    survive a build that is killed before save() runs.
    """

    def __init__(self, cache_file: Path):
        """Initialize build cache.

        Args:
            cache_file: Path to the store file (created on first write)
        """
        self.cache_file = Path(cache_file)
        self.cache: dict[str, int] = {}
        self._load_cache()

    def _load_cache(self) -> None:
        """Load the store from disk."""
        if not self.cache_file.exists():
            logger.debug(f"Build cache not found: {self.cache_file}")
            return

        skipped = 0
        try:
            with open(self.cache_file, "r", encoding="utf-8") as f:
                for line in f:
                    entry = parse_cache_line(line)
                    if entry is None:
                        if line.strip():
                            skipped += 1
                        continue
                    path, timestamp = entry
                    self.cache[path] = timestamp
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to load build cache from {self.cache_file}: {e}")
            self.cache = {}
            return

        if skipped:
            logger.warning(f"Skipped {skipped} malformed line(s) in {self.cache_file}")
        logger.info(f"Loaded build cache with {len(self.cache)} entries from {self.cache_file}")

    def _needs_line_break(self) -> bool:
        """True if the store is non-empty and its last line is unterminated."""
        try:
            with open(self.cache_file, "rb") as f:
                f.seek(0, os.SEEK_END)
                if f.tell() == 0:
                    return False
                f.seek(-1, os.SEEK_END)
                return f.read(1) != b"\n"
        except FileNotFoundError:
            return False

    def _append_entry(self, key: str, timestamp: int) -> None:
        try:
            self.cache_file.parent.mkdir(parents=True, exist_ok=True)
            # An interrupted write or a hand edit can leave the last line unterminated
            prefix = "\n" if self._needs_line_break() else ""
            with open(self.cache_file, "a", encoding="utf-8") as f:
                f.write(prefix + format_cache_line(key, timestamp))
        except OSError as e:
            raise BuildCacheError(f"Failed to append to build cache {self.cache_file}: {e}") from e

    def save(self) -> None:
        """Rewrite the store from memory.

        Uses atomic write pattern (temp file + rename) so a crash mid-write
        leaves the previous store intact.

        Raises:
            BuildCacheError: If the store cannot be written
        """
        try:
            self.cache_file.parent.mkdir(parents=True, exist_ok=True)

            temp_file = self.cache_file.with_suffix(self.cache_file.suffix + ".tmp")
            with open(temp_file, "w", encoding="utf-8") as f:
                for path, timestamp in self.cache.items():
                    f.write(format_cache_line(path, timestamp))

            temp_file.replace(self.cache_file)
        except OSError as e:
            raise BuildCacheError(f"Failed to save build cache to {self.cache_file}: {e}") from e

        logger.debug(f"Saved build cache with {len(self.cache)} entries to {self.cache_file}")

    def get(self, path: Path) -> Optional[int]:
        """Cached timestamp for a source, or None if it was never recorded."""
        return self.cache.get(_cache_key(path))

    def needs_rebuild(self, path: Path) -> bool:
        """Check whether a source must be recompiled.

        Args:
            path: Path to the source file

        Returns:
            False only when the cached and current timestamps are both known
            and equal, True otherwise
        """
        cached = self.get(path)
        if cached is None:
            logger.debug(f"Source not in build cache: {path}")
            return True

        current = _read_mtime(path)
        if current is None:
            logger.debug(f"Cannot stat source: {path}")
            return True

        if current != cached:
            logger.debug(f"Source changed: {path} ({cached} -> {current})")
            return True

        return False

    def record_built(self, path: Path) -> None:
        """Record that a source was compiled successfully.

        Stores the source's current modification time, replacing any previous
        entry, and appends the entry to the store immediately.

        Args:
            path: Path to the source file

        Raises:
            BuildCacheError: If the source cannot be stat'ed or the store cannot be written
        """
        current = _read_mtime(path)
        if current is None:
            raise BuildCacheError(f"Cannot record build of missing source: {path}")

        key = _cache_key(path)
        self.cache[key] = current
        self._append_entry(key, current)
        logger.debug(f"Recorded build of {key} at {current}")

    def invalidate(self, path: Path) -> None:
        """Forget a source, forcing it to rebuild on the next run.

        Takes effect on disk at the next save().
        """
        if self.cache.pop(_cache_key(path), None) is not None:
            logger.debug(f"Invalidated build cache entry: {path}")

    def clear(self) -> None:
        """Clear entire cache and rewrite the store."""
        self.cache.clear()
        self.save()
        logger.info("Build cache cleared")

    def get_statistics(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with cache statistics
        """
        return {
            "total_entries": len(self.cache),
        }

    def __len__(self) -> int:
        return len(self.cache)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, Path)):
            return False
        return _cache_key(Path(path)) in self.cache

    def __enter__(self) -> "BuildCache":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        # Appended entries already cover an aborted build; only compact on success
        if exc_type is None:
            self.save()
