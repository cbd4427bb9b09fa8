from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from ._arguments import ArgumentResolver
from ._classes import ClassRegistry
from ._definitions import parse_definition
from ._errors import (
    CircularReferenceError,
    ClassNotFoundError,
    DefinitionMissingError,
    ServiceNotFoundError,
    UncallableMethodError,
)
from ._parameters import ParameterResolver


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from ._definitions import CallDefinition


@runtime_checkable
class ContainerInterface(Protocol):
    """Read access to services and parameters."""

    def get(self, name: str) -> Any: ...

    def has(self, name: str) -> bool: ...

    def get_parameter(self, path: str) -> Any: ...

    def has_parameter(self, path: str) -> bool: ...


class BuildState(Enum):
    UNBUILT = "unbuilt"
    BUILDING = "building"
    BUILT = "built"


class Container:
    """Dependency injection container driven by service definitions and parameters.

    - services are built lazily on first `get` and cached for the container's lifetime
    - arguments may reference other services or parameters
    - circular service references are detected.

    Example:
      container = Container(
          services={
              "logger": {"class": Logger},
              "app": {"class": App, "arguments": [ServiceReference("logger"), ParameterReference("env.name")]},
          },
          parameters={"env": {"name": "prod"}},
      )
      app = container.get("app")

    """

    def __init__(
        self,
        services: Mapping[str, Any] | None = None,
        parameters: Mapping[str, Any] | None = None,
        *,
        classes: Mapping[str, Callable[..., Any]] | None = None,
    ) -> None:
        self._services: dict[str, Any] = dict(services or {})
        self._instances: dict[str, Any] = {}
        self._parameters = ParameterResolver(dict(parameters or {}))
        self._builder = ServiceBuilder(
            self._services,
            classes=ClassRegistry(classes),
            arguments=ArgumentResolver(self, self._parameters),
        )
        self._lock = threading.RLock()

    def has(self, name: str) -> bool:
        return name in self._services

    def __contains__(self, name: object) -> bool:
        return name in self._services

    def get(self, name: str) -> Any:
        """Return the service registered under `name`, building it on first use."""
        if not self.has(name):
            raise ServiceNotFoundError(name)

        with self._lock:
            if name not in self._instances:
                self._instances[name] = self._builder.build(name)
            return self._instances[name]

    def get_parameter(self, path: str) -> Any:
        """Return the parameter at the dotted `path`, e.g. ``"db.host"``."""
        return self._parameters.resolve(path)

    def has_parameter(self, path: str) -> bool:
        return self._parameters.has(path)


class ServiceBuilder:
    """Builds one service from its definition.

    A name whose build raised stays in the BUILDING state: asking for it again
    raises CircularReferenceError instead of retrying.
    """

    def __init__(
        self,
        definitions: Mapping[str, Any],
        *,
        classes: ClassRegistry,
        arguments: ArgumentResolver,
    ) -> None:
        self._definitions = definitions
        self._classes = classes
        self._arguments = arguments
        self._states: dict[str, BuildState] = {}

    def state(self, name: str) -> BuildState:
        return self._states.get(name, BuildState.UNBUILT)

    def build(self, name: str) -> Any:
        if name not in self._definitions:
            raise DefinitionMissingError(name)

        definition = parse_definition(name, self._definitions[name])

        factory = self._classes.lookup(definition.class_identifier)
        if factory is None:
            raise ClassNotFoundError(name, definition.class_identifier)

        if self.state(name) is BuildState.BUILDING:
            raise CircularReferenceError(name)

        self._states[name] = BuildState.BUILDING
        logger.debug("Building service '%s' with %r", name, factory)

        args = self._arguments.resolve_arguments(definition.arguments)
        instance = factory(*args)

        for call in definition.calls:
            self._invoke(name, instance, call)

        self._states[name] = BuildState.BUILT
        logger.debug("Built service '%s' (%s)", name, type(instance).__name__)
        return instance

    def _invoke(self, name: str, instance: object, call: CallDefinition) -> None:
        method = getattr(instance, call.method, None)
        if method is None or not callable(method):
            raise UncallableMethodError(name, call.method)

        args = self._arguments.resolve_arguments(call.arguments)
        logger.debug("Calling '%s.%s' with %d argument(s)", name, call.method, len(args))
        method(*args)
