"""
Build orchestration for borc packages.

BuildSystem walks a package's components in declaration order, decides which
sources need recompiling, and hands every compile and link action to a
Listener. It keeps no state of its own between runs; all rebuild decisions
come from the BuildCache passed in.

Per component:
    1. Skip sources the compiler does not recognize (headers, data files)
    2. Create the compile action for every remaining source
    3. Deliver it to the listener only if the build cache says it is stale,
       then record the source as built
    4. Link all objects, cached or fresh, and always deliver the link action

Any exception from the listener, the linker or the cache aborts the build
immediately. Sources recorded before the failure stay recorded, and later
components are not processed.
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..output import log_detail, log_file, log_phase
from ..paths import get_cache_file
from .build_cache import BuildCache
from .build_profiles import ToolchainConfig, print_profile_banner
from .compiler import Compiler
from .linker import Linker
from .listener import ExecutingListener, Listener, dispatch
from .package import Component, Package

# Module-level logger
logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Summary of a completed build.

    Attributes:
        compiled: Sources delivered to the listener for compilation
        cached: Sources skipped because the build cache had them up to date
        executables: Executables delivered to the listener for linking
        build_time: Wall-clock duration in seconds
    """

    compiled: List[Path] = field(default_factory=list)
    cached: List[Path] = field(default_factory=list)
    executables: List[Path] = field(default_factory=list)
    build_time: float = 0.0

    @property
    def message(self) -> str:
        return f"Built {len(self.executables)} component(s): {len(self.compiled)} compiled, {len(self.cached)} cached in {self.build_time:.2f}s"


class BuildSystem:
    """
    Orchestrates incremental builds of one package.

    The build cache is owned by the caller and shared with no other build, so
    several BuildSystems may run independently in one process.
    """

    def __init__(
        self,
        package: Package,
        build_cache: BuildCache,
        listener: Optional[Listener],
        show_progress: bool = False,
    ):
        """
        Initialize build system.

        Args:
            package: Package to build
            build_cache: Build cache deciding which sources are stale
            listener: Receives every action; None makes the build a dry run
                that delivers and records nothing
            show_progress: Show a progress bar while walking sources
        """
        self.package = package
        self.build_cache = build_cache
        self.listener = listener
        self.show_progress = show_progress

    def build(self, compiler: Compiler, linker: Linker) -> BuildResult:
        """Build every component of the package in declaration order.

        Args:
            compiler: Creates compile actions
            linker: Creates link actions

        Returns:
            BuildResult summarizing the delivered actions

        Raises:
            EmptyLinkInputError: If a component has no compilable sources
            ExecutionError: If the listener rejects an action
            BuildCacheError: If a built source cannot be recorded
        """
        start_time = time.time()
        result = BuildResult()
        components = self.package.components

        logger.info(f"Building package '{self.package.name}' ({len(components)} components)")

        for index, component in enumerate(components, start=1):
            log_phase(index, len(components), f"Building component '{component.name}'...")
            self._build_component(compiler, linker, component, result)

        result.build_time = time.time() - start_time
        logger.info(result.message)
        return result

    def build_component(self, compiler: Compiler, linker: Linker, component: Component) -> BuildResult:
        """Build a single component of the package.

        Args:
            compiler: Creates compile actions
            linker: Creates link actions
            component: Component to build, owned by this package

        Returns:
            BuildResult for this component alone
        """
        start_time = time.time()
        result = BuildResult()
        self._build_component(compiler, linker, component, result)
        result.build_time = time.time() - start_time
        return result

    def _build_component(
        self,
        compiler: Compiler,
        linker: Linker,
        component: Component,
        result: BuildResult,
    ) -> None:
        objects: List[Path] = []
        sources = [s for s in component.sources if compiler.is_compilable(s)]

        if self.show_progress:
            from tqdm import tqdm

            with tqdm(
                total=len(sources),
                desc=f"Compiling {component.name}",
                unit="file",
                ncols=80,
                leave=False,
            ) as pbar:
                for source in sources:
                    objects.append(self._build_source(compiler, component, source, result))
                    pbar.update(1)
        else:
            for source in sources:
                objects.append(self._build_source(compiler, component, source, result))

        output = linker.link(component.name, self.package.output_path(component), objects)

        if self.listener is not None:
            logger.debug(f"Linking {output.executable_path} from {len(output.object_paths)} objects")
            dispatch(output, self.listener)
            result.executables.append(output.executable_path)
            log_detail(f"Executable: {output.executable_path}", verbose_only=True)

    def _build_source(
        self,
        compiler: Compiler,
        component: Component,
        source: str,
        result: BuildResult,
    ) -> Path:
        """Compile one source if stale. Returns its object path either way."""
        source_path = self.package.source_path(component, source)
        output = compiler.compile(source_path)

        if self.build_cache.needs_rebuild(source_path):
            if self.listener is not None:
                log_file(component.name, source)
                dispatch(output, self.listener)
                self.build_cache.record_built(source_path)
                result.compiled.append(source_path)
        else:
            log_file(component.name, source, cached=True)
            result.cached.append(source_path)

        return output.object_path


def build_package(
    package: Package,
    listener: Optional[Listener] = None,
    config: Optional[ToolchainConfig] = None,
    cache_file: Optional[Path] = None,
    show_progress: bool = False,
) -> BuildResult:
    """Build a package with a fresh build cache, saving the cache on success.

    Args:
        package: Package to build
        listener: Receives every action (defaults to an ExecutingListener)
        config: Toolchain settings for compiler and linker
        cache_file: Build cache store (defaults to borc.paths.get_cache_file())
        show_progress: Show a progress bar while walking sources

    Returns:
        BuildResult summarizing the delivered actions
    """
    config = config or ToolchainConfig()
    if listener is None:
        listener = ExecutingListener()
    if cache_file is None:
        cache_file = get_cache_file()

    print_profile_banner(config)

    with BuildCache(cache_file) as build_cache:
        build_system = BuildSystem(package, build_cache, listener, show_progress=show_progress)
        result = build_system.build(Compiler(config), Linker(config))

    log_detail(result.message)
    return result
