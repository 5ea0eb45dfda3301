"""Linker command generation.

The Linker turns a component's object files into the Command that links them
into one executable. Like the Compiler it is stateless and only describes the
action.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from .build_profiles import ToolchainConfig
from .command import Command
from .errors import EmptyLinkInputError


@dataclass(frozen=True)
class LinkOutput:
    """Result of translating a component's objects into a link action.

    Attributes:
        object_paths: Object files passed to the linker, in link order
        executable_path: Executable the command writes
        command: Command that performs the link
    """

    object_paths: tuple[Path, ...]
    executable_path: Path
    command: Command


class Linker:
    """Builds link commands from a fixed toolchain configuration."""

    def __init__(self, config: Optional[ToolchainConfig] = None):
        self.config = config or ToolchainConfig()

    def link(self, name: str, output_path: Path, object_paths: Sequence[Path]) -> LinkOutput:
        """Create the link action for a component.

        Args:
            name: Component name, used for error reporting
            output_path: Path of the executable to produce
            object_paths: Object files to link, in order

        Returns:
            LinkOutput holding the executable path and the command

        Raises:
            EmptyLinkInputError: If object_paths is empty
        """
        if not object_paths:
            raise EmptyLinkInputError(name)

        objects = tuple(Path(obj) for obj in object_paths)
        output_path = Path(output_path)

        command = (
            Command(self.config.compiler)
            .add_args(str(obj) for obj in objects)
            .add_args(self.config.link_flags)
            .add_args(["-o", str(output_path)])
        )

        return LinkOutput(object_paths=objects, executable_path=output_path, command=command)
