"""Command descriptor.

A Command names a program and an ordered list of arguments. It is purely
descriptive: building one never runs anything. Compilers and linkers produce
Commands, and a listener decides whether and how to execute them.
"""

import shlex
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Command:
    """Immutable program invocation.

    Attributes:
        program: Program name (looked up on PATH) or path to an executable
        args: Ordered argument tokens passed after the program
    """

    program: str
    args: tuple[str, ...] = ()

    def add_arg(self, arg: str) -> "Command":
        """Return a new Command with ``arg`` appended."""
        return Command(self.program, self.args + (arg,))

    def add_args(self, args: Iterable[str]) -> "Command":
        """Return a new Command with every argument in ``args`` appended."""
        return Command(self.program, self.args + tuple(args))

    @property
    def argv(self) -> list[str]:
        """Argument vector suitable for subprocess (program first)."""
        return [self.program, *self.args]

    @property
    def cmdline(self) -> str:
        """Shell-quoted command line, for logs and error messages."""
        return shlex.join(self.argv)

    def __str__(self) -> str:
        return self.cmdline
