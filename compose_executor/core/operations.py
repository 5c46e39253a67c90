"""
Operations, container states and execution results.

Every operation maps to exactly one runtime verb and one expected terminal
container state. The mapping is closed and fixed.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .exceptions import UnknownOperation


class ContainerState(Enum):
    """Terminal container state; the value is the marker shown by ``ps``."""
    RUNNING = "Up"
    EXITED = "Exited"

    @property
    def marker(self) -> str:
        return self.value


class Operation(Enum):
    """Lifecycle operation that can be requested for a service."""
    START = "start"
    STOP = "stop"
    RESTART = "restart"

    @property
    def verb(self) -> str:
        """Runtime subcommand issued for this operation."""
        return self.value

    @property
    def expected_state(self) -> ContainerState:
        """State the container must be in after the operation."""
        return _EXPECTED_STATES[self]

    @classmethod
    def parse(cls, value: Union[str, "Operation"]) -> "Operation":
        """
        Convert operation text to an Operation.

        Args:
            value: One of "start", "stop", "restart" or an Operation

        Returns:
            The matching Operation

        Raises:
            UnknownOperation: If the value names no supported operation
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownOperation(str(value))


_EXPECTED_STATES = {
    Operation.START: ContainerState.RUNNING,
    Operation.STOP: ContainerState.EXITED,
    Operation.RESTART: ContainerState.RUNNING,
}


class Outcome(Enum):
    SUCCEEDED = "succeeded"
    COMMAND_FAILED = "command_failed"
    VERIFICATION_FAILED = "verification_failed"
    UNKNOWN_SERVICE = "unknown_service"
    UNKNOWN_OPERATION = "unknown_operation"


# Exit codes used by the CLI in strict mode
EXIT_CODES = {
    Outcome.SUCCEEDED: 0,
    Outcome.COMMAND_FAILED: 1,
    Outcome.VERIFICATION_FAILED: 2,
    Outcome.UNKNOWN_SERVICE: 3,
    Outcome.UNKNOWN_OPERATION: 4,
}


@dataclass
class ExecutionResult:
    """Outcome of a single execute call."""
    outcome: Outcome
    service: str
    operation: str
    container: Optional[str] = None
    output: str = ""
    returncode: Optional[int] = None

    @property
    def succeeded(self) -> bool:
        return self.outcome is Outcome.SUCCEEDED

    @property
    def exit_code(self) -> int:
        return EXIT_CODES[self.outcome]
