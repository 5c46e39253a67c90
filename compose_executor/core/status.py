"""
Container status inspection.

The runtime's ``ps`` listing is read as plain text. Both the container name
and the state marker are matched as substrings of a whole line, so the check
tolerates column width changes but a container whose name contains another
container's name can match first. The first matching line, scanning top to
bottom, decides the result.
"""
import logging
from typing import List, NamedTuple

from .exceptions import RuntimeUnavailable
from .invoker import CommandInvoker
from .operations import ContainerState

logger = logging.getLogger('compose_executor.status')

LIST_VERB = "ps"


class ContainerStatusLine(NamedTuple):
    """One line of runtime list output."""
    text: str

    def mentions(self, container: str) -> bool:
        return container in self.text

    def shows(self, state: ContainerState) -> bool:
        return state.marker in self.text


def parse_status_lines(output: str) -> List[ContainerStatusLine]:
    """Split ``ps`` output into lines, dropping one trailing newline."""
    if output.endswith("\n"):
        output = output[:-1]
    return [ContainerStatusLine(line) for line in output.split("\n")]


class RuntimeStatusSource:
    """Lists containers by running the runtime's ``ps`` command."""

    def __init__(self, invoker: CommandInvoker):
        self.invoker = invoker

    def list_containers(self) -> List[ContainerStatusLine]:
        """
        Take one snapshot of the runtime's container listing.

        Raises:
            RuntimeUnavailable: If ``ps`` cannot be run or exits non-zero
        """
        result = self.invoker.execute([LIST_VERB], merge_stderr=False)
        if not result.succeeded:
            raise RuntimeUnavailable(
                self.invoker.runtime,
                f"'{LIST_VERB}' exited with status {result.returncode}"
            )
        return parse_status_lines(result.output)


class StatusVerifier:
    """Checks whether a container is in an expected state."""

    def __init__(self, source):
        """
        Args:
            source: Any object with a ``list_containers()`` method returning
                    ContainerStatusLine items
        """
        self.source = source

    def confirm(self, container: str, expected: ContainerState) -> bool:
        """
        Check one snapshot of the listing for the container's state.

        Returns:
            True if the first line mentioning the container shows the
            expected state, False otherwise or if no line mentions it
        """
        started = expected is ContainerState.RUNNING
        for line in self.source.list_containers():
            if not line.mentions(container):
                continue
            if line.shows(expected):
                logger.info(f"container {'started' if started else 'stopped'}: "
                            f"{container} details: {line.text}")
                return True
            logger.warning(f"container NOT {'started' if started else 'stopped'}: {container}")
            return False

        logger.warning(f"container not listed by {LIST_VERB}: {container}")
        return False
