import pytest

from compose_executor.core.exceptions import UnknownOperation
from compose_executor.core.operations import (
    ContainerState,
    ExecutionResult,
    Operation,
    Outcome,
)


@pytest.mark.parametrize("operation, verb, state", [
    (Operation.START, "start", ContainerState.RUNNING),
    (Operation.STOP, "stop", ContainerState.EXITED),
    (Operation.RESTART, "restart", ContainerState.RUNNING),
])
def test_operation_mapping(operation, verb, state):
    """Test every operation maps to one verb and one terminal state"""
    assert operation.verb == verb
    assert operation.expected_state is state


def test_state_markers():
    assert ContainerState.RUNNING.marker == "Up"
    assert ContainerState.EXITED.marker == "Exited"


def test_parse_operation_text():
    assert Operation.parse("restart") is Operation.RESTART
    assert Operation.parse(Operation.STOP) is Operation.STOP


@pytest.mark.parametrize("value", ["pause", "START", "", "kill"])
def test_parse_unknown_operation(value):
    with pytest.raises(UnknownOperation) as exc_info:
        Operation.parse(value)
    assert exc_info.value.operation == value


def test_result_exit_codes():
    codes = {
        outcome: ExecutionResult(outcome, "svc", "start").exit_code
        for outcome in Outcome
    }
    assert codes[Outcome.SUCCEEDED] == 0
    assert len(set(codes.values())) == len(Outcome)
    assert ExecutionResult(Outcome.SUCCEEDED, "svc", "start").succeeded
    assert not ExecutionResult(Outcome.COMMAND_FAILED, "svc", "start").succeeded
