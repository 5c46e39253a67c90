"""
compose-executor
Starts, stops and restarts service containers and verifies the result.
"""

# Version information
__version__ = "1.0.0"

# Make key components available at package level
from .core.orchestrator import Orchestrator
from .core.operations import Operation, Outcome, ExecutionResult
from .core.exceptions import ExecutorError, RuntimeUnavailable
