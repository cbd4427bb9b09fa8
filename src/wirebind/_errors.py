from __future__ import annotations


class ContainerError(RuntimeError):
    """Base class for everything the container raises."""


class ServiceNotFoundError(ContainerError, LookupError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Service not found: {name}")


class ParameterNotFoundError(ContainerError, LookupError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Parameter not found: {path}")


class DefinitionMissingError(ContainerError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No definition found for service '{name}'")


class InvalidDefinitionError(ContainerError):
    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid definition for service '{name}': {reason}")


class ClassNotFoundError(ContainerError):
    def __init__(self, name: str, identifier: object) -> None:
        self.name = name
        self.identifier = identifier
        super().__init__(f"Service '{name}' class does not exist: {identifier!r}")


class CircularReferenceError(ContainerError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Service '{name}' contains a circular reference")


class UncallableMethodError(ContainerError):
    def __init__(self, name: str, method: str) -> None:
        self.name = name
        self.method = method
        super().__init__(f"Service '{name}' asks for a call to uncallable method: {method}")
