from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING, Any


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping


class ClassRegistry:
    """Maps type identifiers used in service definitions to factories.

    Lookup order:
    1. the identifier is already a callable (class or factory function)
    2. a name registered by the application at startup
    3. a dotted import path, e.g. ``"collections.OrderedDict"``.
    """

    def __init__(self, classes: Mapping[str, Callable[..., Any]] | None = None) -> None:
        self._classes: dict[str, Callable[..., Any]] = dict(classes or {})
        for identifier, factory in self._classes.items():
            if not callable(factory):
                msg = f"Class registry entry {identifier!r} is not callable: {factory!r}"
                raise TypeError(msg)

    def lookup(self, identifier: object) -> Callable[..., Any] | None:
        if callable(identifier):
            return identifier

        if not isinstance(identifier, str) or not identifier:
            return None

        factory = self._classes.get(identifier)
        if factory is not None:
            return factory

        return self._import(identifier)

    def has(self, identifier: object) -> bool:
        return self.lookup(identifier) is not None

    def _import(self, path: str) -> Callable[..., Any] | None:
        module_name, _, attr = path.rpartition(".")
        if not module_name or not attr:
            return None

        try:
            module = importlib.import_module(module_name)
        except ImportError as exc:
            logger.warning("Cannot import module '%s' for class '%s' (%s)", module_name, path, exc)
            return None

        target = getattr(module, attr, None)
        if not callable(target):
            return None

        # cache so the import only happens once per identifier
        self._classes[path] = target
        return target
