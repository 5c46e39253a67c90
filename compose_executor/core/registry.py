"""
Service registry.

Maps the logical service keys used by callers to the names of the
containers that run them.
"""
import logging
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple

from .exceptions import UnknownService

logger = logging.getLogger('compose_executor.registry')

CONFIG_SEED_SERVICE_KEY = "edgex-config-seed"
CORE_COMMAND_SERVICE_KEY = "edgex-core-command"
CORE_DATA_SERVICE_KEY = "edgex-core-data"
CORE_METADATA_SERVICE_KEY = "edgex-core-metadata"
EXPORT_CLIENT_SERVICE_KEY = "edgex-export-client"
EXPORT_DISTRO_SERVICE_KEY = "edgex-export-distro"
SUPPORT_LOGGING_SERVICE_KEY = "edgex-support-logging"
SUPPORT_NOTIFICATIONS_SERVICE_KEY = "edgex-support-notifications"
SYSTEM_MANAGEMENT_AGENT_SERVICE_KEY = "edgex-sys-mgmt-agent"
SUPPORT_SCHEDULER_SERVICE_KEY = "edgex-support-scheduler"

# Config seed and the management agent have no container of their own.
DEFAULT_SERVICES: Mapping[str, str] = MappingProxyType({
    SUPPORT_NOTIFICATIONS_SERVICE_KEY: "Notifications",
    CORE_COMMAND_SERVICE_KEY: "Command",
    CORE_DATA_SERVICE_KEY: "CoreData",
    CORE_METADATA_SERVICE_KEY: "Metadata",
    EXPORT_CLIENT_SERVICE_KEY: "Export",
    EXPORT_DISTRO_SERVICE_KEY: "Distro",
    SUPPORT_LOGGING_SERVICE_KEY: "Logging",
    SUPPORT_SCHEDULER_SERVICE_KEY: "Scheduler",
})


class ServiceRegistry:
    """
    Read-only mapping from service key to container name.

    Example:
        >>> registry = ServiceRegistry()
        >>> registry.resolve("edgex-core-data")
        'CoreData'
    """

    def __init__(self, services: Optional[Mapping[str, str]] = None):
        """
        Initialize the registry.

        Args:
            services: Optional {service_key: container_name} table.
                      Defaults to DEFAULT_SERVICES.
        """
        table: Dict[str, str] = dict(DEFAULT_SERVICES if services is None else services)
        self._services = MappingProxyType(table)
        logger.debug(f"Registry loaded with {len(self._services)} services")

    @property
    def services(self) -> Mapping[str, str]:
        return self._services

    def resolve(self, service: str) -> str:
        """
        Look up the container name for a service key.

        Raises:
            UnknownService: If the key is not registered
        """
        try:
            return self._services[service]
        except KeyError:
            raise UnknownService(service)

    def keys(self):
        return self._services.keys()

    def items(self) -> Iterator[Tuple[str, str]]:
        return iter(self._services.items())

    def __contains__(self, service) -> bool:
        return service in self._services

    def __len__(self) -> int:
        return len(self._services)
