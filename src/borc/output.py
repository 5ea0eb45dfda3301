"""
Timestamped console output for borc builds.

Every line is prefixed with the time elapsed since the timer started, in
MM:SS.cc format, so a build log shows where time went.

Example output:
    00:00.01 PROFILE=debug COMPILER=gcc STD=c++17 PLATFORM=linux
    00:00.01 [1/2] Building component 'core'...
    00:00.02       [core] main.cpp
    00:00.40       [core] util.cpp (cached)

Usage:
    from borc.output import log, log_phase, log_file

    log_phase(1, 2, "Building component 'core'...")
    log_file("core", "main.cpp", cached=True)
"""

import sys
import time
from typing import Optional, TextIO

# Global state for the timer
_start_time: Optional[float] = None
_output_stream: Optional[TextIO] = None
_verbose: bool = False


def init_timer(output_stream: Optional[TextIO] = None) -> None:
    """
    Start the elapsed-time clock.

    Called automatically on first output if not called explicitly.

    Args:
        output_stream: Stream to write to (defaults to sys.stdout at write time)
    """
    global _start_time, _output_stream
    _start_time = time.time()
    _output_stream = output_stream


def set_verbose(verbose: bool) -> None:
    """
    Enable or disable verbose-only messages.

    Args:
        verbose: If True, messages logged with verbose_only=True are printed
    """
    global _verbose
    _verbose = verbose


def is_verbose() -> bool:
    return _verbose


def format_timestamp() -> str:
    """Format the elapsed time as MM:SS.cc."""
    if _start_time is None:
        init_timer(_output_stream)
    elapsed = time.time() - _start_time  # type: ignore[operator]
    minutes = int(elapsed // 60)
    seconds = elapsed % 60
    return f"{minutes:02d}:{seconds:05.2f}"


def _print(message: str) -> None:
    stream = _output_stream or sys.stdout
    stream.write(f"{format_timestamp()} {message}\n")
    stream.flush()


def log(message: str, verbose_only: bool = False) -> None:
    """
    Log a message with timestamp.

    Args:
        message: Message to log
        verbose_only: If True, only print if verbose mode is enabled
    """
    if verbose_only and not _verbose:
        return
    _print(message)


def log_phase(phase: int, total: int, message: str, verbose_only: bool = False) -> None:
    """
    Log a build phase message as ``[N/M] message``.
    """
    if verbose_only and not _verbose:
        return
    _print(f"[{phase}/{total}] {message}")


def log_detail(message: str, indent: int = 6, verbose_only: bool = False) -> None:
    """
    Log an indented detail message.

    Args:
        message: Detail message
        indent: Number of spaces to indent (default 6)
        verbose_only: If True, only print if verbose mode is enabled
    """
    if verbose_only and not _verbose:
        return
    _print(f"{' ' * indent}{message}")


def log_file(component: str, filename: str, cached: bool = False, verbose_only: bool = True) -> None:
    """
    Log a source file as ``[component] filename (cached)``.

    Args:
        component: Name of the component the file belongs to
        filename: Source file name
        cached: If True, append "(cached)" to message
        verbose_only: If True, only print if verbose mode is enabled
    """
    if verbose_only and not _verbose:
        return
    suffix = " (cached)" if cached else ""
    _print(f"      [{component}] {filename}{suffix}")
