"""Definition-driven dependency injection container.

Services are described declaratively (a class or factory plus its constructor
arguments and post-construction calls), built lazily on first request and
cached for the container's lifetime. Arguments can reference other services or
nested parameters addressed by dotted paths.

Exports:
- `Container`: builds and caches services, looks up parameters.
- `ServiceReference` / `ParameterReference`: argument placeholders resolved at build time.
- `Literal`: wraps an argument that must be passed through untouched.
- `ServiceDefinition` / `CallDefinition`: typed alternative to raw definition mappings.
- `ContainerError` and its subclasses.
"""

from ._classes import ClassRegistry
from ._container import BuildState, Container, ContainerInterface, ServiceBuilder
from ._definitions import CallDefinition, ServiceDefinition, parse_definition
from ._errors import (
    CircularReferenceError,
    ClassNotFoundError,
    ContainerError,
    DefinitionMissingError,
    InvalidDefinitionError,
    ParameterNotFoundError,
    ServiceNotFoundError,
    UncallableMethodError,
)
from ._parameters import ParameterResolver
from ._references import Literal, ParameterReference, Reference, ServiceReference


__all__ = [
    "BuildState",
    "CallDefinition",
    "CircularReferenceError",
    "ClassNotFoundError",
    "ClassRegistry",
    "Container",
    "ContainerError",
    "ContainerInterface",
    "DefinitionMissingError",
    "InvalidDefinitionError",
    "Literal",
    "ParameterNotFoundError",
    "ParameterReference",
    "ParameterResolver",
    "Reference",
    "ServiceBuilder",
    "ServiceDefinition",
    "ServiceNotFoundError",
    "ServiceReference",
    "UncallableMethodError",
    "parse_definition",
]
