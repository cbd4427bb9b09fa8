from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ._references import as_argument


if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._container import Container
    from ._parameters import ParameterResolver


class ArgumentResolver:
    """Turns an argument list into the values handed to a constructor or method.

    Service references go back through `Container.get`, so a referenced service
    is built (and cached) before the next argument is looked at.
    """

    def __init__(self, container: Container, parameters: ParameterResolver) -> None:
        self._container = container
        self._parameters = parameters

    def resolve_arguments(self, specs: Iterable[Any]) -> list[Any]:
        return [as_argument(spec).resolve(self) for spec in specs]

    def resolve_service(self, name: str) -> Any:
        return self._container.get(name)

    def resolve_parameter(self, path: str) -> Any:
        return self._parameters.resolve(path)
