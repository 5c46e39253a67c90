from .exceptions import (
    ExecutorError,
    UnknownService,
    UnknownOperation,
    RuntimeUnavailable,
    ConfigError
)
from .operations import ContainerState, Operation, Outcome, ExecutionResult
from .registry import ServiceRegistry, DEFAULT_SERVICES
from .invoker import CommandInvoker, InvocationResult
from .status import ContainerStatusLine, RuntimeStatusSource, StatusVerifier
from .orchestrator import Orchestrator
from .config import ExecutorConfig, load_config
