"""Public contracts for route classification."""
from pathroute.contracts.entity import EntityId
from pathroute.contracts.function_call import ArgKind, ArgValue, FunctionCall
from pathroute.contracts.routes import (
    CollectionActionRoute,
    CollectionRoute,
    EntityActionRoute,
    EntityRoute,
    FunctionCallRoute,
    MetaRoute,
    Route,
    RouteInfo,
    RouteKind,
    SearchRoute,
    UnknownRoute,
)
from pathroute.contracts.tenant import TenantPathMatch, TenantResolution, TenantSource

__all__ = [
    "EntityId",
    "ArgKind", "ArgValue", "FunctionCall",
    "Route", "RouteKind", "RouteInfo",
    "CollectionRoute", "EntityRoute", "EntityActionRoute", "CollectionActionRoute",
    "MetaRoute", "FunctionCallRoute", "SearchRoute", "UnknownRoute",
    "TenantResolution", "TenantSource", "TenantPathMatch",
]
