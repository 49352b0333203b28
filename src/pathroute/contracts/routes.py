# pathroute/contracts/routes.py
"""
Route contracts.

``Route`` is a closed union of frozen dataclasses, one per route kind.
Consumers dispatch on the concrete type (``match``/``isinstance``) or on
the ``kind`` class attribute; adding a variant means extending ``Route``
and ``RouteKind`` together.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Union

from pathroute.contracts.entity import EntityId
from pathroute.contracts.function_call import FunctionCall
from pathroute.contracts.tenant import TenantResolution


class RouteKind(str, Enum):
    COLLECTION = "collection"
    ENTITY = "entity"
    ENTITY_ACTION = "entity-action"
    COLLECTION_ACTION = "collection-action"
    META = "meta"
    FUNCTION = "function"
    SEARCH = "search"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class CollectionRoute:
    kind: ClassVar[RouteKind] = RouteKind.COLLECTION

    collection: str

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "collection": self.collection}


@dataclass(frozen=True)
class EntityRoute:
    kind: ClassVar[RouteKind] = RouteKind.ENTITY

    entity: EntityId

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "entity": self.entity.to_dict()}


@dataclass(frozen=True)
class EntityActionRoute:
    kind: ClassVar[RouteKind] = RouteKind.ENTITY_ACTION

    entity: EntityId
    action: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "entity": self.entity.to_dict(),
            "action": self.action,
        }


@dataclass(frozen=True)
class CollectionActionRoute:
    kind: ClassVar[RouteKind] = RouteKind.COLLECTION_ACTION

    collection: str
    action: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "collection": self.collection,
            "action": self.action,
        }


@dataclass(frozen=True)
class MetaRoute:
    """Introspection request (``$schema``, ``$history``, ...).

    Scoped to an entity, to a collection, or to the root when both are
    ``None``. Never both.
    """

    kind: ClassVar[RouteKind] = RouteKind.META

    resource: str
    entity: EntityId | None = None
    collection: str | None = None

    def __post_init__(self) -> None:
        if self.entity is not None and self.collection is not None:
            raise ValueError(
                f"Meta route '${self.resource}' cannot target both "
                f"entity '{self.entity}' and collection '{self.collection}'"
            )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"kind": self.kind.value, "resource": self.resource}
        if self.entity is not None:
            out["entity"] = self.entity.to_dict()
        if self.collection is not None:
            out["collection"] = self.collection
        return out


@dataclass(frozen=True)
class FunctionCallRoute:
    kind: ClassVar[RouteKind] = RouteKind.FUNCTION

    call: FunctionCall

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "call": self.call.to_dict()}


@dataclass(frozen=True)
class SearchRoute:
    kind: ClassVar[RouteKind] = RouteKind.SEARCH

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value}


@dataclass(frozen=True)
class UnknownRoute:
    """Fallback for paths no rule matched; the root path yields no segments."""

    kind: ClassVar[RouteKind] = RouteKind.UNKNOWN

    segments: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", tuple(self.segments))

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "segments": list(self.segments)}


Route = Union[
    CollectionRoute,
    EntityRoute,
    EntityActionRoute,
    CollectionActionRoute,
    MetaRoute,
    FunctionCallRoute,
    SearchRoute,
    UnknownRoute,
]


@dataclass(frozen=True)
class RouteInfo:
    """Per-request classification result published by the routing middleware.

    Attributes:
        tenant: Tenant slug and its provenance.
        route: The classified route.
        path: Request path with any ``/~tenant`` prefix removed.
    """

    tenant: TenantResolution
    route: Route
    path: str

    @property
    def kind(self) -> RouteKind:
        return self.route.kind

    def to_dict(self) -> dict[str, Any]:
        return {
            "tenant": self.tenant.to_dict(),
            "route": self.route.to_dict(),
            "path": self.path,
        }
