from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ._errors import ParameterNotFoundError


class ParameterResolver:
    """Looks up dotted paths such as ``"db.host"`` in a nested parameter tree."""

    def __init__(self, parameters: Mapping[str, Any]) -> None:
        self._parameters = parameters

    def resolve(self, path: str) -> Any:
        context: Any = self._parameters
        for segment in path.split("."):
            if not isinstance(context, Mapping) or segment not in context:
                raise ParameterNotFoundError(path)
            context = context[segment]
        return context

    def has(self, path: str) -> bool:
        try:
            self.resolve(path)
        except ParameterNotFoundError:
            return False
        return True
