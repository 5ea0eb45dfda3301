"""Listener protocol for build actions.

The orchestrator never runs commands itself. Every compile and link action is
handed to a Listener, which is responsible for executing it and for raising if
it fails. A Listener that returns normally has accepted the action; the
orchestrator only records a source as built after that.
"""

import logging
from functools import singledispatch
from typing import Protocol, Union, runtime_checkable

from .compiler import CompileOutput
from .executor import CommandExecutor, ExecutionResult
from .linker import LinkOutput

logger = logging.getLogger(__name__)

BuildOutput = Union[CompileOutput, LinkOutput]


@runtime_checkable
class Listener(Protocol):
    """Protocol for receiving build actions from the orchestrator.

    Both methods must raise to reject an action; raising aborts the build.
    """

    def receive_compile_output(self, output: CompileOutput) -> None:
        """Called once per source that needs recompiling.

        Args:
            output: Compile action for the source
        """
        ...

    def receive_link_output(self, output: LinkOutput) -> None:
        """Called once per component, after all its compile actions.

        Args:
            output: Link action for the component
        """
        ...


@singledispatch
def dispatch(output: object, listener: Listener) -> None:
    """Deliver a build output to the listener method for its kind.

    Raises:
        TypeError: If output is neither a CompileOutput nor a LinkOutput
    """
    raise TypeError(f"Unsupported build output type: {type(output).__name__}")


@dispatch.register
def _(output: CompileOutput, listener: Listener) -> None:
    listener.receive_compile_output(output)


@dispatch.register
def _(output: LinkOutput, listener: Listener) -> None:
    listener.receive_link_output(output)


class NullListener:
    """No-op listener for dry runs and tests.

    Accepts every action without running anything.
    """

    def receive_compile_output(self, output: CompileOutput) -> None:
        """Discard compile action."""
        pass

    def receive_link_output(self, output: LinkOutput) -> None:
        """Discard link action."""
        pass


class ExecutingListener:
    """Listener that runs each action's command and fails on non-zero exit.

    Output directories are created before each command runs.
    """

    def __init__(self, executor: CommandExecutor | None = None, verbose: bool = False):
        """Initialize executing listener.

        Args:
            executor: Executor used to run commands (defaults to CommandExecutor())
            verbose: Log each command line before running it
        """
        self.executor = executor or CommandExecutor()
        self.verbose = verbose
        self.results: list[ExecutionResult] = []

    def _run(self, output: BuildOutput) -> ExecutionResult:
        if self.verbose:
            logger.info(f"      {output.command.cmdline}")
        result = self.executor.execute(output.command)
        self.results.append(result)
        if result.stderr and result.success:
            # Warnings from a successful command
            logger.warning(result.stderr.rstrip())
        return result.check()

    def receive_compile_output(self, output: CompileOutput) -> None:
        """Compile one source.

        Raises:
            ExecutionError: If the compiler exits non-zero
        """
        output.object_path.parent.mkdir(parents=True, exist_ok=True)
        self._run(output)

    def receive_link_output(self, output: LinkOutput) -> None:
        """Link one component.

        Raises:
            ExecutionError: If the linker exits non-zero
        """
        output.executable_path.parent.mkdir(parents=True, exist_ok=True)
        self._run(output)
