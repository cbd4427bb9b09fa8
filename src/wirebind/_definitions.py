from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from ._errors import InvalidDefinitionError
from ._references import ArgumentSpec, as_argument


CLASS_KEY = "class"
ARGUMENTS_KEY = "arguments"
CALLS_KEY = "calls"
METHOD_KEY = "method"


@dataclass(frozen=True)
class CallDefinition:
    method: str
    arguments: tuple[ArgumentSpec, ...] = ()


@dataclass(frozen=True)
class ServiceDefinition:
    """Recipe for one service: what to instantiate and how to wire it.

    `class_identifier` is a class or factory callable, a name registered in the
    container's class registry, or a dotted import path.
    """

    class_identifier: Any
    arguments: tuple[ArgumentSpec, ...] = ()
    calls: tuple[CallDefinition, ...] = ()


def parse_definition(name: str, raw: object) -> ServiceDefinition:
    """Validate a raw service entry and normalise it into a `ServiceDefinition`.

    Raw entries look like::

        {
            "class": "app.mailer.Mailer",
            "arguments": [ServiceReference("transport"), ParameterReference("mail.from")],
            "calls": [{"method": "set_logger", "arguments": [ServiceReference("logger")]}],
        }

    `arguments` and `calls` are optional and default to empty.
    """
    if isinstance(raw, ServiceDefinition):
        return _check_typed_definition(name, raw)

    if not isinstance(raw, Mapping):
        msg = f"entry must be a mapping containing a '{CLASS_KEY}' key, got {type(raw).__name__}"
        raise InvalidDefinitionError(name, msg)

    if raw.get(CLASS_KEY) is None:
        raise InvalidDefinitionError(name, f"missing '{CLASS_KEY}'")

    arguments = _parse_arguments(name, raw.get(ARGUMENTS_KEY), where=f"'{ARGUMENTS_KEY}'")

    raw_calls = raw.get(CALLS_KEY)
    if raw_calls is None:
        raw_calls = ()
    if not _is_sequence(raw_calls):
        raise InvalidDefinitionError(name, f"'{CALLS_KEY}' must be a sequence")

    calls = tuple(_parse_call(name, index, call) for index, call in enumerate(raw_calls))

    return ServiceDefinition(class_identifier=raw[CLASS_KEY], arguments=arguments, calls=calls)


def _check_typed_definition(name: str, raw: ServiceDefinition) -> ServiceDefinition:
    if raw.class_identifier is None:
        raise InvalidDefinitionError(name, f"missing '{CLASS_KEY}'")

    arguments = _parse_arguments(name, raw.arguments, where=f"'{ARGUMENTS_KEY}'")

    if not _is_sequence(raw.calls):
        raise InvalidDefinitionError(name, f"'{CALLS_KEY}' must be a sequence")

    calls = []
    for index, call in enumerate(raw.calls):
        if not isinstance(call, CallDefinition) or not isinstance(call.method, str):
            msg = f"call #{index} must be a CallDefinition with a '{METHOD_KEY}' name"
            raise InvalidDefinitionError(name, msg)
        where = f"'{ARGUMENTS_KEY}' of call '{call.method}'"
        calls.append(CallDefinition(method=call.method, arguments=_parse_arguments(name, call.arguments, where=where)))

    return ServiceDefinition(class_identifier=raw.class_identifier, arguments=arguments, calls=tuple(calls))


def _parse_call(name: str, index: int, raw: object) -> CallDefinition:
    if not isinstance(raw, Mapping) or not isinstance(raw.get(METHOD_KEY), str):
        msg = f"call #{index} must be a mapping containing a '{METHOD_KEY}' name"
        raise InvalidDefinitionError(name, msg)

    method = raw[METHOD_KEY]
    arguments = _parse_arguments(name, raw.get(ARGUMENTS_KEY), where=f"'{ARGUMENTS_KEY}' of call '{method}'")
    return CallDefinition(method=method, arguments=arguments)


def _parse_arguments(name: str, raw: object, *, where: str) -> tuple[ArgumentSpec, ...]:
    if raw is None:
        return ()
    if not _is_sequence(raw):
        raise InvalidDefinitionError(name, f"{where} must be a sequence")
    return tuple(as_argument(value) for value in raw)  # type: ignore[union-attr]


def _is_sequence(value: object) -> bool:
    # strings are sequences too, but never a valid argument or call list
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))
