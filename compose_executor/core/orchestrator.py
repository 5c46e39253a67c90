"""
Operation orchestration: resolve, invoke, verify.
"""
import logging
from typing import Union

from .config import ExecutorConfig
from .exceptions import UnknownOperation, UnknownService
from .invoker import CommandInvoker
from .operations import ExecutionResult, Operation, Outcome
from .registry import ServiceRegistry
from .status import RuntimeStatusSource, StatusVerifier

logger = logging.getLogger('compose_executor.orchestrator')


class Orchestrator:
    """
    Executes one lifecycle operation against one service.

    Each call resolves the service, issues a single runtime command and,
    if that command exits cleanly, takes a single status snapshot to confirm
    the container reached the operation's terminal state. Nothing is
    retried. RuntimeUnavailable is the only error raised; every other
    failure is returned as an ExecutionResult.

    Example:
        >>> orchestrator = Orchestrator.from_config(load_config())
        >>> orchestrator.execute("edgex-core-data", "restart").outcome
        <Outcome.SUCCEEDED: 'succeeded'>
    """

    def __init__(self, registry: ServiceRegistry, invoker: CommandInvoker,
                 verifier: StatusVerifier):
        self.registry = registry
        self.invoker = invoker
        self.verifier = verifier

    @classmethod
    def from_config(cls, config: ExecutorConfig) -> "Orchestrator":
        invoker = CommandInvoker(config.runtime)
        return cls(
            ServiceRegistry(config.services),
            invoker,
            StatusVerifier(RuntimeStatusSource(invoker))
        )

    def execute(self, service: str, operation: Union[str, Operation]) -> ExecutionResult:
        """
        Run an operation for a service and verify its result.

        Args:
            service: Service key to act on
            operation: Operation or its text ("start", "stop", "restart")

        Returns:
            ExecutionResult describing the outcome

        Raises:
            RuntimeUnavailable: If the runtime cannot be invoked
        """
        op_text = operation.value if isinstance(operation, Operation) else str(operation)

        try:
            op = Operation.parse(operation)
        except UnknownOperation as e:
            logger.warning(str(e))
            return ExecutionResult(Outcome.UNKNOWN_OPERATION, service, op_text)

        try:
            container = self.registry.resolve(service)
        except UnknownService as e:
            logger.warning(str(e))
            return ExecutionResult(Outcome.UNKNOWN_SERVICE, service, op_text)

        logger.info(f"Running {op.verb} for service {service} (container {container})")
        invocation = self.invoker.run(container, op.verb)
        if not invocation.succeeded:
            return ExecutionResult(
                Outcome.COMMAND_FAILED, service, op_text, container,
                invocation.output, invocation.returncode
            )

        if not self.verifier.confirm(container, op.expected_state):
            logger.warning(f"{self.invoker.runtime} {op.verb} operation failed "
                           f"for service {service}")
            outcome = Outcome.VERIFICATION_FAILED
        else:
            outcome = Outcome.SUCCEEDED

        return ExecutionResult(
            outcome, service, op_text, container,
            invocation.output, invocation.returncode
        )

    def start(self, service: str) -> ExecutionResult:
        return self.execute(service, Operation.START)

    def stop(self, service: str) -> ExecutionResult:
        return self.execute(service, Operation.STOP)

    def restart(self, service: str) -> ExecutionResult:
        return self.execute(service, Operation.RESTART)
