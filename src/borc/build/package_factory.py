"""
Hardcoded package declarations.

borc has no package file format yet; packages are constructed in code. These
factories describe borc itself and the sample projects under test-data/.
"""

from pathlib import Path
from typing import Optional

from .package import Package


def create_borc_package(root: Optional[Path] = None) -> Package:
    """Package that builds the borc native driver from its own checkout."""
    package = Package("ng-borc", root or Path("."))
    package.add_component("borc", ".", ["main.cpp"])
    return package


def create_hello_world_package(root: Optional[Path] = None) -> Package:
    """Single-file hello world sample."""
    package = Package("01-hello-world", root or Path("test-data/cpp-core/01-hello-world"))
    package.add_component("01-hello-world", ".", ["main.cpp"])
    return package


def create_word_counter_package(root: Optional[Path] = None) -> Package:
    """Multi-file sample mixing sources and headers."""
    package = Package("02-word-counter", root or Path("test-data/cpp-core/02-word-counter"))
    package.add_component(
        "02-word-counter",
        ".",
        [
            "main.cpp",
            "WordCounter.cpp",
            "WordCounter.hpp",
            "WordList.cpp",
            "WordList.hpp",
        ],
    )
    return package
