from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from ._arguments import ArgumentResolver


@dataclass(frozen=True)
class Reference(abc.ABC):
    """A name standing in for a value the container looks up at build time."""

    name: str

    @abc.abstractmethod
    def resolve(self, resolver: ArgumentResolver) -> Any: ...


@dataclass(frozen=True)
class ServiceReference(Reference):
    """Substituted with the service registered under `name`."""

    def resolve(self, resolver: ArgumentResolver) -> Any:
        return resolver.resolve_service(self.name)


@dataclass(frozen=True)
class ParameterReference(Reference):
    """Substituted with the parameter at the dotted path `name`."""

    def resolve(self, resolver: ArgumentResolver) -> Any:
        return resolver.resolve_parameter(self.name)


@dataclass(frozen=True)
class Literal:
    """A value passed through as is, even when it is itself a `Reference`."""

    value: Any

    def resolve(self, resolver: ArgumentResolver) -> Any:  # noqa: ARG002
        return self.value


ArgumentSpec = ServiceReference | ParameterReference | Literal


def as_argument(value: Any) -> ArgumentSpec:
    if isinstance(value, (Reference, Literal)):
        return value  # type: ignore[return-value]
    return Literal(value)
