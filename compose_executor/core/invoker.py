"""
Container runtime command execution.
"""
import logging
import subprocess
from typing import List, NamedTuple, Sequence

from .exceptions import RuntimeUnavailable

logger = logging.getLogger('compose_executor.invoker')

DEFAULT_RUNTIME = "docker"


class InvocationResult(NamedTuple):
    """Captured output and exit status of one runtime command."""
    output: str
    returncode: int

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


class CommandInvoker:
    """Runs commands against the container runtime's CLI."""

    def __init__(self, runtime: str = DEFAULT_RUNTIME):
        self.runtime = runtime

    def execute(self, args: Sequence[str], merge_stderr: bool = True) -> InvocationResult:
        """
        Run the runtime executable with the given arguments and wait for it.

        Args:
            args: Arguments passed after the runtime executable
            merge_stderr: Fold stderr into the captured output

        Returns:
            InvocationResult holding the output verbatim and the exit status

        Raises:
            RuntimeUnavailable: If the executable cannot be launched
        """
        cmd: List[str] = [self.runtime, *args]
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            process = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT if merge_stderr else subprocess.PIPE,
                encoding="utf-8",
                errors="replace"
            )
        except OSError as e:
            logger.error(f"error running the {self.runtime} command: {e}")
            raise RuntimeUnavailable(self.runtime, str(e)) from e

        output = process.stdout or ""
        if process.returncode != 0:
            logger.debug(f"{' '.join(cmd)} exited with status {process.returncode}")
            if not merge_stderr and process.stderr:
                logger.debug(f"stderr: {process.stderr.strip()}")
        return InvocationResult(output, process.returncode)

    def run(self, container: str, verb: str) -> InvocationResult:
        """Issue ``<runtime> <verb> <container>``."""
        result = self.execute([verb, container])
        if not result.succeeded:
            logger.warning(f"{self.runtime} command failed: {verb} {container} "
                           f"(exit status {result.returncode})")
            logger.warning(f"associated output: {result.output.strip()}")
        return result
