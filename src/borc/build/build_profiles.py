"""Build Profile Configuration.

This module defines the toolchain settings shared by the compiler and linker.

Design:
    A profile declares the optimization level and whether debug symbols are
    emitted. The language standard and the target platform are fixed alongside
    the profile in a ToolchainConfig, which is handed to Compiler and Linker at
    construction time and never changes during a build.

    The target platform is a static indicator chosen by whoever builds the
    ToolchainConfig. It is not detected from the running interpreter, so a
    build description produces the same commands on every host.
"""

from dataclasses import dataclass, field
from enum import Enum


class BuildProfile(Enum):
    """Build profile enum for type-safe profile selection."""

    DEBUG = "debug"
    RELEASE = "release"

    def __str__(self) -> str:
        """Return the string value for directory names and display."""
        return self.value


class TargetPlatform(Enum):
    """Platform the linked executable is produced for."""

    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ProfileFlags:
    """Flags controlled by a build profile.

    Attributes:
        name: Profile identifier (matches BuildProfile enum value)
        description: Human-readable profile description
        optimization: Optimization level passed as -O<level>
        debug_symbols: Whether -g is passed to the compiler
    """

    name: str
    description: str
    optimization: str
    debug_symbols: bool

    @property
    def compile_flags(self) -> tuple[str, ...]:
        """Compiler flags in the order they appear on the command line."""
        flags = (f"-O{self.optimization}",)
        if self.debug_symbols:
            flags += ("-g",)
        return flags


PROFILES: dict[BuildProfile, ProfileFlags] = {
    BuildProfile.DEBUG: ProfileFlags(
        name="debug",
        description="Unoptimized build with debug symbols (default)",
        optimization="0",
        debug_symbols=True,
    ),
    BuildProfile.RELEASE: ProfileFlags(
        name="release",
        description="Optimized build without debug symbols",
        optimization="2",
        debug_symbols=False,
    ),
}

# Link flags selected by the static platform indicator
PLATFORM_LINK_FLAGS: dict[TargetPlatform, tuple[str, ...]] = {
    TargetPlatform.LINUX: ("-lstdc++",),
    TargetPlatform.MACOS: ("-macosx_version_min", "10.14", "-lc++"),
    TargetPlatform.WINDOWS: ("-lstdc++",),
}

# Link flags added for every platform, after the platform flags
COMMON_LINK_FLAGS: tuple[str, ...] = ("-lm",)


def get_profile(profile: BuildProfile) -> ProfileFlags:
    """Get profile configuration by enum.

    Args:
        profile: BuildProfile enum value

    Returns:
        ProfileFlags for the requested profile
    """
    return PROFILES[profile]


def get_link_flags(platform: TargetPlatform) -> tuple[str, ...]:
    """Get linker flags for a target platform.

    Args:
        platform: TargetPlatform enum value

    Returns:
        Platform-specific flags followed by the flags common to all platforms
    """
    return PLATFORM_LINK_FLAGS[platform] + COMMON_LINK_FLAGS


@dataclass(frozen=True)
class ToolchainConfig:
    """Toolchain settings fixed for the lifetime of a Compiler or Linker.

    Attributes:
        compiler: Program used for both compiling and linking
        profile: Build profile (optimization level and debug symbols)
        std: Language standard passed as -std=<std>
        target_platform: Static platform indicator selecting link flags
        source_suffix: File suffix recognized as compilable
        object_suffix: Suffix appended to a source path to name its object
    """

    compiler: str = "gcc"
    profile: BuildProfile = BuildProfile.DEBUG
    std: str = "c++17"
    target_platform: TargetPlatform = TargetPlatform.LINUX
    source_suffix: str = ".cpp"
    object_suffix: str = ".obj"
    extra_compile_flags: tuple[str, ...] = field(default_factory=tuple)

    @property
    def profile_flags(self) -> ProfileFlags:
        """Resolved flags for the configured profile."""
        return get_profile(self.profile)

    @property
    def compile_flags(self) -> tuple[str, ...]:
        """Profile flags followed by any extra compile flags."""
        return self.profile_flags.compile_flags + self.extra_compile_flags

    @property
    def link_flags(self) -> tuple[str, ...]:
        """Link flags for the configured target platform."""
        return get_link_flags(self.target_platform)


def format_profile_banner(config: ToolchainConfig) -> str:
    """Format a build profile banner for display.

    Args:
        config: Toolchain configuration to describe

    Returns:
        Formatted banner string
    """
    return " ".join(
        [
            f"PROFILE={config.profile.value}",
            f"COMPILER={config.compiler}",
            f"STD={config.std}",
            f"PLATFORM={config.target_platform.value}",
        ]
    )


def print_profile_banner(config: ToolchainConfig) -> None:
    """Print the build profile banner to the console.

    Uses the borc output module for consistent formatting.

    Args:
        config: Toolchain configuration to describe
    """
    from ..output import log

    log(format_profile_banner(config))
