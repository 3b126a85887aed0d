"""Generic staging object for ``@pulumi.input_type`` argument records.

A record is created either empty or from a prior record ("defaults"), then
populated one field at a time and frozen with :meth:`ArgsBuilder.build`::

    args = (RoleWithPolicyArgs.builder()
            .name("task-role")
            .policy_arns("arn:aws:iam::aws:policy/ReadOnlyAccess")
            .build())

Field combinations are never validated here; the builder only rejects names
that the record does not declare.
"""

import inspect
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar

import pulumi

from ._utilities import copy_value
from .errors import MissingRequiredArgumentError, UnknownArgumentError

T = TypeVar("T")


def _keyword_parameters(args_type: type) -> List[inspect.Parameter]:
    sig = inspect.signature(args_type.__init__)
    return [p for p in sig.parameters.values() if p.kind is inspect.Parameter.KEYWORD_ONLY]


def fields_of(args_type: type) -> List[str]:
    """Names of every argument an input type accepts, in declaration order."""
    return [p.name for p in _keyword_parameters(args_type)]


def required_fields_of(args_type: type) -> List[str]:
    return [p.name for p in _keyword_parameters(args_type) if p.default is inspect.Parameter.empty]


def args_to_dict(args: Any) -> Dict[str, Any]:
    """Return the fields set on ``args``, keyed by their Python name.

    Values are read with ``pulumi.get`` so deprecated getters stay quiet.
    """
    values = {}
    for field in fields_of(type(args)):
        value = pulumi.get(args, field)
        if value is not None:
            values[field] = value
    return values


class ArgsBuilder(Generic[T]):
    """Mutable staging area that produces an immutable ``args_type`` record.

    Every declared field can be set through :meth:`set` or through a method of
    the same name (``builder.description("...")``). Values may be literals or
    ``pulumi.Output`` handles; outputs are stored untouched.
    """

    def __init__(self, args_type: Type[T], defaults: Optional[T] = None):
        self._args_type = args_type
        self._fields = fields_of(args_type)
        self._values: Dict[str, Any] = {}
        if defaults is not None:
            if not isinstance(defaults, args_type):
                raise TypeError(
                    f"defaults must be a {args_type.__name__}, got {type(defaults).__name__}")
            for field, value in args_to_dict(defaults).items():
                self._values[field] = copy_value(value)

    def fields(self) -> List[str]:
        return list(self._fields)

    def set(self, field: str, value: Any) -> "ArgsBuilder[T]":
        if field not in self._fields:
            raise UnknownArgumentError(self._args_type, field)
        if value is None:
            self._values.pop(field, None)
        else:
            self._values[field] = copy_value(value)
        return self

    def get(self, field: str) -> Any:
        if field not in self._fields:
            raise UnknownArgumentError(self._args_type, field)
        return self._values.get(field)

    def build(self) -> T:
        missing = [f for f in required_fields_of(self._args_type) if f not in self._values]
        if missing:
            raise MissingRequiredArgumentError(self._args_type, missing)
        return self._args_type(**{k: copy_value(v) for k, v in self._values.items()})

    def __getattr__(self, name: str) -> Callable[[Any], "ArgsBuilder[T]"]:
        # Only reached for names that are not real attributes.
        if name.startswith("_"):
            raise AttributeError(name)
        if name not in self._fields:
            raise UnknownArgumentError(self._args_type, name)

        def setter(value: Any) -> "ArgsBuilder[T]":
            return self.set(name, value)

        setter.__name__ = name
        return setter

    def __repr__(self) -> str:
        staged = ", ".join(f"{k}={v!r}" for k, v in self._values.items())
        return f"{type(self).__name__}({self._args_type.__name__}: {staged})"
