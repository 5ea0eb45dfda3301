"""Compiler command generation.

The Compiler translates a source path into the Command that would compile it
and the path of the object file that Command produces. It never runs anything
and never touches the filesystem, so calling compile() for a source that is
up to date is cheap and has no side effects.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .build_profiles import ToolchainConfig
from .command import Command


@dataclass(frozen=True)
class CompileOutput:
    """Result of translating one source file.

    Attributes:
        source_path: Source file to compile
        object_path: Object file the command writes
        command: Command that compiles source_path into object_path
    """

    source_path: Path
    object_path: Path
    command: Command


class Compiler:
    """Builds compile commands from a fixed toolchain configuration."""

    def __init__(self, config: Optional[ToolchainConfig] = None):
        """Initialize compiler.

        Args:
            config: Toolchain settings (defaults to ToolchainConfig())
        """
        self.config = config or ToolchainConfig()

    def is_compilable(self, source: str | Path) -> bool:
        """Check whether a source name has the compilable suffix.

        Headers and data files return False and take no part in the build.
        """
        return Path(source).suffix == self.config.source_suffix

    def object_path(self, source_path: Path) -> Path:
        """Object file path for a source: the source path plus the object suffix."""
        return source_path.with_name(source_path.name + self.config.object_suffix)

    def compile(self, source_path: Path) -> CompileOutput:
        """Create the compile action for a source file.

        Args:
            source_path: Path to the source file

        Returns:
            CompileOutput holding the object path and the command
        """
        source_path = Path(source_path)
        object_path = self.object_path(source_path)

        command = (
            Command(self.config.compiler)
            .add_arg(f"-std={self.config.std}")
            .add_args(["-c", str(source_path)])
            .add_args(self.config.compile_flags)
            .add_args(["-o", str(object_path)])
        )

        return CompileOutput(source_path=source_path, object_path=object_path, command=command)
