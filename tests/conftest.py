"""
Pytest configuration and fixtures for the compose-executor tests.
"""
from unittest.mock import MagicMock

import pytest

from compose_executor.core.config import CONFIG_ENV_VAR, LOG_DIR_ENV_VAR, RUNTIME_ENV_VAR
from compose_executor.core.invoker import CommandInvoker, InvocationResult
from compose_executor.core.orchestrator import Orchestrator
from compose_executor.core.registry import ServiceRegistry
from compose_executor.core.status import ContainerStatusLine, StatusVerifier, parse_status_lines

PS_HEADER = "CONTAINER ID   IMAGE                                  COMMAND                  CREATED          STATUS                     PORTS                      NAMES"


def ps_line(name, status, image="edgexfoundry/docker-service:0.6.0"):
    """Build one line of docker ps output."""
    return f"3f2a9c1d7e4b   {image}   \"/bin/sh -c ...\"   10 minutes ago   {status}   0.0.0.0:48080->48080/tcp   {name}"


def ps_output(*lines):
    return "\n".join((PS_HEADER,) + lines) + "\n"


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep configuration environment variables out of the tests."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.delenv(RUNTIME_ENV_VAR, raising=False)
    monkeypatch.setenv(LOG_DIR_ENV_VAR, str(tmp_path / "logs"))


@pytest.fixture
def registry():
    return ServiceRegistry()


@pytest.fixture
def invoker():
    """Spy invoker whose action commands succeed."""
    spy = MagicMock(spec=CommandInvoker)
    spy.runtime = "docker"
    spy.run.return_value = InvocationResult("CoreData\n", 0)
    return spy


@pytest.fixture
def status_source():
    """Status source returning a running CoreData container."""
    source = MagicMock()
    source.list_containers.return_value = parse_status_lines(
        ps_output(ps_line("CoreData", "Up 5 seconds"))
    )
    return source


@pytest.fixture
def verifier(status_source):
    return StatusVerifier(status_source)


@pytest.fixture
def orchestrator(registry, invoker, verifier):
    return Orchestrator(registry, invoker, verifier)


def set_listing(source, *lines):
    """Replace the listing returned by a status source fixture."""
    source.list_containers.return_value = [ContainerStatusLine(line) for line in (PS_HEADER,) + lines]


@pytest.fixture
def mocker_verifier():
    """Spy verifier that always confirms."""
    spy = MagicMock(spec=StatusVerifier)
    spy.confirm.return_value = True
    return spy
