"""
Build system components for borc.

This module provides the build system implementation including:
- Command descriptors and toolchain configuration
- Compile and link action generation
- The persistent build cache
- Package/component model and build orchestration
"""

from .build_cache import BuildCache
from .build_profiles import BuildProfile, TargetPlatform, ToolchainConfig
from .command import Command
from .compiler import CompileOutput, Compiler
from .errors import BorcError, BuildCacheError, EmptyLinkInputError, ExecutionError
from .executor import CommandExecutor, ExecutionResult
from .linker import LinkOutput, Linker
from .listener import ExecutingListener, Listener, NullListener, dispatch
from .orchestrator import BuildResult, BuildSystem, build_package
from .package import Component, Package
from .package_factory import create_borc_package, create_hello_world_package, create_word_counter_package

__all__ = [
    "BorcError",
    "BuildCache",
    "BuildCacheError",
    "BuildProfile",
    "BuildResult",
    "BuildSystem",
    "Command",
    "CommandExecutor",
    "CompileOutput",
    "Compiler",
    "Component",
    "EmptyLinkInputError",
    "ExecutingListener",
    "ExecutionError",
    "ExecutionResult",
    "LinkOutput",
    "Linker",
    "Listener",
    "NullListener",
    "Package",
    "TargetPlatform",
    "ToolchainConfig",
    "build_package",
    "create_borc_package",
    "create_hello_world_package",
    "create_word_counter_package",
    "dispatch",
]
