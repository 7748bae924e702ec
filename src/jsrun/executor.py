"""Launch the selected task in a subprocess."""

from __future__ import annotations

import subprocess
from typing import Protocol

from .core import Catalog, execution_request
from .logging import get_logger
from .models import ExecutionRequest
from .selector import Selector

logger = get_logger("executor")


class ExecutionError(RuntimeError):
    """Raised when the task process cannot be started."""


class Executor(Protocol):
    def run(self, request: ExecutionRequest) -> int: ...


class SubprocessExecutor:
    """Run the command through the shell, streaming output to the terminal."""

    def run(self, request: ExecutionRequest) -> int:
        logger.debug("Running %r in %s", request.command, request.directory)
        try:
            completed = subprocess.run(request.command, shell=True, cwd=request.directory, check=False)
        except OSError as exc:
            raise ExecutionError(f"Failed to run {request.command!r} in {request.directory}: {exc}") from exc
        if completed.returncode < 0:
            # killed by signal
            return 128 - completed.returncode
        return completed.returncode


def run_selection(catalog: Catalog, selector: Selector, executor: Executor) -> int | None:
    """Let the user pick an item and execute it; None when nothing was chosen."""
    selection = selector.select(catalog)
    if selection is None:
        return None
    return executor.run(execution_request(selection.source, selection.item))
