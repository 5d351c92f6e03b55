"""
Minimal service container with visibility flags and compiler passes.

Services are registered as factories. Private services can only be injected into
other services (through reference()); get() resolves public services only, and
only after compile() has run every registered compiler pass.
"""

import logging
from typing import Any, Callable, Dict, List, Protocol

logger = logging.getLogger(__name__)


class ContainerError(Exception):
    """Base error for service container failures."""


class ServiceNotFoundError(ContainerError):
    """Raised when a service id has no definition."""


class PrivateServiceError(ContainerError):
    """Raised when get() is called for a service that is not public."""


class ContainerFrozenError(ContainerError):
    """Raised when the container is modified after compile()."""


class CompilerPass(Protocol):
    """Hook run once while the container is compiled."""

    def process(self, container: "ServiceContainer") -> None:
        ...


class ServiceDefinition:
    """
    Metadata for a single service: how to build it and whether it is public.
    """

    def __init__(
        self,
        service_id: str,
        factory: Callable[["ServiceContainer"], Any],
        public: bool = False,
        shared: bool = True
    ):
        self.id = service_id
        self.factory = factory
        self.public = public
        self.shared = shared

    def set_public(self, public: bool) -> "ServiceDefinition":
        self.public = public
        return self

    def __repr__(self) -> str:
        return f"ServiceDefinition(id={self.id!r}, public={self.public}, shared={self.shared})"


class ServiceContainer:
    """
    Service graph: definitions, compiler passes and shared instances.
    """

    def __init__(self):
        self._definitions: Dict[str, ServiceDefinition] = {}
        self._passes: List[CompilerPass] = []
        self._instances: Dict[str, Any] = {}
        self._compiled = False

    def _ensure_not_frozen(self) -> None:
        if self._compiled:
            raise ContainerFrozenError("Container is already compiled")

    def register(
        self,
        service_id: str,
        factory: Callable[["ServiceContainer"], Any],
        public: bool = False,
        shared: bool = True
    ) -> ServiceDefinition:
        """
        Register (or replace) a service definition.

        Args:
            service_id: Unique service id (e.g., "inventory.provider.inventory_status")
            factory: Callable receiving the container and returning the service
            public: Whether get() may resolve the service
            shared: Reuse a single instance for every resolution

        Returns:
            The new ServiceDefinition
        """
        self._ensure_not_frozen()
        definition = ServiceDefinition(service_id, factory, public=public, shared=shared)
        self._definitions[service_id] = definition
        logger.debug(f"Registered service {definition!r}")
        return definition

    def has_definition(self, service_id: str) -> bool:
        return service_id in self._definitions

    def get_definition(self, service_id: str) -> ServiceDefinition:
        try:
            return self._definitions[service_id]
        except KeyError:
            raise ServiceNotFoundError(f"Service '{service_id}' is not defined") from None

    def add_compiler_pass(self, compiler_pass: CompilerPass) -> None:
        self._ensure_not_frozen()
        self._passes.append(compiler_pass)

    def compile(self) -> None:
        """
        Run every compiler pass once, in registration order, then freeze the container.
        """
        self._ensure_not_frozen()
        for compiler_pass in self._passes:
            logger.debug(f"Running compiler pass {type(compiler_pass).__name__}")
            compiler_pass.process(self)
        self._compiled = True
        public_ids = [d.id for d in self._definitions.values() if d.public]
        logger.info(
            f"Service container compiled: {len(self._definitions)} services, "
            f"{len(public_ids)} public"
        )

    def get(self, service_id: str) -> Any:
        """
        Resolve a public service.

        Raises:
            ContainerError: If the container has not been compiled
            ServiceNotFoundError: If the service is not defined
            PrivateServiceError: If the service is not public
        """
        if not self._compiled:
            raise ContainerError("Container must be compiled before services are resolved")
        definition = self.get_definition(service_id)
        if not definition.public:
            raise PrivateServiceError(
                f"Service '{service_id}' is private; inject it as a dependency instead"
            )
        return self._instantiate(definition)

    def reference(self, service_id: str) -> Any:
        """
        Resolve any service regardless of visibility. Meant for factories wiring dependencies.
        """
        return self._instantiate(self.get_definition(service_id))

    def _instantiate(self, definition: ServiceDefinition) -> Any:
        if definition.shared and definition.id in self._instances:
            return self._instances[definition.id]
        instance = definition.factory(self)
        if definition.shared:
            self._instances[definition.id] = instance
        return instance
