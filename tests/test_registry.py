import pytest

from compose_executor.core.exceptions import UnknownService
from compose_executor.core.registry import (
    CONFIG_SEED_SERVICE_KEY,
    DEFAULT_SERVICES,
    SYSTEM_MANAGEMENT_AGENT_SERVICE_KEY,
    ServiceRegistry,
)


def test_resolve_known_service(registry):
    """Test resolving each default service key"""
    assert registry.resolve("edgex-core-data") == "CoreData"
    assert registry.resolve("edgex-support-notifications") == "Notifications"
    assert registry.resolve("edgex-support-scheduler") == "Scheduler"


def test_default_table_size(registry):
    assert len(registry) == 8
    assert set(registry.keys()) == set(DEFAULT_SERVICES)


def test_resolve_unknown_service(registry):
    """Test an unknown key raises UnknownService"""
    with pytest.raises(UnknownService) as exc_info:
        registry.resolve("not-a-real-service")
    assert exc_info.value.service == "not-a-real-service"
    assert str(exc_info.value) == "unknown service: not-a-real-service"


@pytest.mark.parametrize("key", [CONFIG_SEED_SERVICE_KEY, SYSTEM_MANAGEMENT_AGENT_SERVICE_KEY])
def test_keys_without_container_are_unknown(registry, key):
    assert key not in registry
    with pytest.raises(UnknownService):
        registry.resolve(key)


def test_custom_table_replaces_defaults():
    registry = ServiceRegistry({"web": "web_1"})
    assert registry.resolve("web") == "web_1"
    assert "edgex-core-data" not in registry


def test_registry_is_read_only():
    table = {"web": "web_1"}
    registry = ServiceRegistry(table)
    table["web"] = "changed"
    assert registry.resolve("web") == "web_1"
    with pytest.raises(TypeError):
        registry.services["web"] = "other"
