# pathroute/contracts/function_call.py
"""
Function-call contracts for the ``name(arg, key=value)`` path syntax.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class ArgKind(str, Enum):
    ENTITY = "entity"
    URL = "url"
    STRING = "string"


@dataclass(frozen=True)
class ArgValue:
    """Positional argument literal plus the kind inferred from its shape."""

    value: str
    kind: ArgKind

    def to_dict(self) -> dict[str, str]:
        return {"value": self.value, "kind": self.kind.value}


@dataclass(frozen=True)
class FunctionCall:
    """A parsed path-embedded call.

    Attributes:
        name: Callable name, optionally dot-namespaced (``papa.parse``).
        args: Positional arguments in call order.
        kwargs: Named arguments. Values are raw strings.
    """

    name: str
    args: tuple[ArgValue, ...] = ()
    kwargs: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))
        object.__setattr__(self, "kwargs", MappingProxyType(dict(self.kwargs)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FunctionCall):
            return NotImplemented
        return (
            self.name == other.name
            and self.args == other.args
            and dict(self.kwargs) == dict(other.kwargs)
        )

    def __hash__(self) -> int:
        return hash((self.name, self.args, frozenset(self.kwargs.items())))

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "args": [a.to_dict() for a in self.args],
            "kwargs": dict(self.kwargs),
        }
