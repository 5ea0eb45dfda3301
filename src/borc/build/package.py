"""Package and component model.

A Package owns an ordered list of Components that share a root directory.
Each Component is a named, ordered group of source files built into one
executable. Components identify their owning package by name rather than by
reference; path resolution goes through the Package.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List


@dataclass(frozen=True)
class Component:
    """A named group of sources linked into one executable.

    Attributes:
        name: Component name, also the executable file name
        path: Directory of the component, relative to the package root
        sources: Source file names relative to the component directory, in build order
        package_name: Name of the owning package
    """

    name: str
    path: Path
    sources: tuple[str, ...]
    package_name: str


@dataclass
class Package:
    """An ordered collection of components sharing a root path.

    Attributes:
        name: Package name
        path: Root directory of the package
        components: Owned components, in declaration order
    """

    name: str
    path: Path
    components: List[Component] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    def add_component(self, name: str, path: str | Path, sources: Iterable[str]) -> Component:
        """Create a component owned by this package and append it.

        Args:
            name: Component name
            path: Component directory relative to the package root
            sources: Source file names relative to the component directory

        Returns:
            The new component

        Raises:
            ValueError: If a component with the same name already exists
        """
        if any(c.name == name for c in self.components):
            raise ValueError(f"Package '{self.name}' already has a component named '{name}'")

        component = Component(
            name=name,
            path=Path(path),
            sources=tuple(sources),
            package_name=self.name,
        )
        self.components.append(component)
        return component

    def get_component(self, name: str) -> Component:
        """Look up a component by name.

        Raises:
            KeyError: If no component has that name
        """
        for component in self.components:
            if component.name == name:
                return component
        raise KeyError(f"Package '{self.name}' has no component named '{name}'")

    def _check_owned(self, component: Component) -> None:
        if component.package_name != self.name:
            raise ValueError(f"Component '{component.name}' belongs to package '{component.package_name}', not '{self.name}'")
        # Same-named packages can exist side by side; only our own instances resolve here
        if not any(c is component for c in self.components):
            raise ValueError(f"Component '{component.name}' was not created by this '{self.name}' package at {self.path}")

    def component_dir(self, component: Component) -> Path:
        """Directory of a component: package root joined with the component path."""
        self._check_owned(component)
        return self.path / component.path

    def source_path(self, component: Component, source: str) -> Path:
        """Resolved path of one of a component's sources."""
        return self.component_dir(component) / source

    def output_path(self, component: Component) -> Path:
        """Path of the executable a component links into."""
        return self.component_dir(component) / component.name
