"""Exception types raised by the borc build system.

Cache misses and unreadable sources are deliberately absent here: the build
cache folds both into "needs rebuild" instead of raising.
"""

from typing import Optional


class BorcError(Exception):
    """Base class for all borc build errors."""

    pass


class BuildCacheError(BorcError):
    """Raised when the build cache store cannot be updated."""

    pass


class EmptyLinkInputError(BorcError, ValueError):
    """Raised when a link is requested with no object files.

    This is a precondition violation and usually means the component declares
    no compilable sources.
    """

    def __init__(self, component_name: str):
        self.component_name = component_name
        super().__init__(f"Cannot link '{component_name}': no object files to link (does the component declare any compilable sources?)")


class ExecutionError(BorcError):
    """Raised when an external command exits with a non-zero status.

    Attributes:
        cmdline: Full command line that was executed
        returncode: Process exit status
        stderr: Captured standard error, if any
    """

    def __init__(self, cmdline: str, returncode: int, stderr: Optional[str] = None):
        self.cmdline = cmdline
        self.returncode = returncode
        self.stderr = stderr
        message = f"The following command failed with exit code {returncode}: {cmdline}"
        if stderr:
            message += f"\nstderr: {stderr.strip()}"
        super().__init__(message)
