"""Tests for compile action generation."""

from pathlib import Path

import pytest

from borc.build.build_profiles import BuildProfile, ToolchainConfig
from borc.build.compiler import Compiler


class TestIsCompilable:
    """Test source classification."""

    @pytest.mark.parametrize("name", ["main.cpp", "src/util.cpp", "a.b.cpp"])
    def test_cpp_sources_are_compilable(self, name):
        assert Compiler().is_compilable(name) is True

    @pytest.mark.parametrize("name", ["main.hpp", "main.h", "data.txt", "Makefile", "main.CPP", "main.cpp.bak"])
    def test_other_files_are_not_compilable(self, name):
        assert Compiler().is_compilable(name) is False

    def test_custom_suffix(self):
        compiler = Compiler(ToolchainConfig(source_suffix=".cc"))
        assert compiler.is_compilable("main.cc") is True
        assert compiler.is_compilable("main.cpp") is False


class TestCompile:
    """Test CompileOutput contents."""

    def test_object_path_appends_suffix(self):
        output = Compiler().compile(Path("pkg/src/main.cpp"))

        assert output.source_path == Path("pkg/src/main.cpp")
        assert output.object_path == Path("pkg/src/main.cpp.obj")

    def test_default_command(self):
        output = Compiler().compile(Path("main.cpp"))

        assert output.command.argv == ["gcc", "-std=c++17", "-c", "main.cpp", "-O0", "-g", "-o", "main.cpp.obj"]

    def test_release_command(self):
        config = ToolchainConfig(compiler="clang", profile=BuildProfile.RELEASE, std="c++20")
        output = Compiler(config).compile(Path("main.cpp"))

        assert output.command.argv == ["clang", "-std=c++20", "-c", "main.cpp", "-O2", "-o", "main.cpp.obj"]

    def test_is_deterministic_and_side_effect_free(self, tmp_path):
        source = tmp_path / "missing.cpp"

        first = Compiler().compile(source)
        second = Compiler().compile(source)

        assert first == second
        assert not first.object_path.exists()

    def test_accepts_string_paths(self):
        output = Compiler().compile("main.cpp")  # type: ignore[arg-type]
        assert output.source_path == Path("main.cpp")
