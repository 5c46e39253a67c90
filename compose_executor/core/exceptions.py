"""Custom exceptions for compose-executor."""


class ExecutorError(Exception):
    """Base exception for all compose-executor errors."""
    pass


class UnknownService(ExecutorError):
    """Raised when a service key is not present in the registry."""
    def __init__(self, service: str):
        self.service = service
        super().__init__(f"unknown service: {service}")


class UnknownOperation(ExecutorError):
    """Raised when an operation is not one of start, stop or restart."""
    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"unknown operation was requested: {operation}")


class RuntimeUnavailable(ExecutorError):
    """
    Raised when the container runtime cannot be used at all.

    This is the only error the executor treats as fatal: if the runtime
    binary cannot be launched no operation can succeed.
    """
    def __init__(self, runtime: str, reason: str):
        self.runtime = runtime
        self.reason = reason
        super().__init__(f"error running the {runtime} command: {reason}")


class ConfigError(ExecutorError):
    """Raised when the configuration file cannot be loaded or is invalid."""
    pass


def handle_executor_error(error: ExecutorError) -> str:
    """
    Convert an executor error to a user-friendly message.

    Args:
        error: The error to handle

    Returns:
        A formatted error message
    """
    if isinstance(error, RuntimeUnavailable):
        return (f"Container runtime '{error.runtime}' is unavailable:\n"
                f"  {error.reason}")
    elif isinstance(error, ConfigError):
        return f"Configuration error: {error}"
    else:
        return str(error)
