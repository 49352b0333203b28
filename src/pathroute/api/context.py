# pathroute/api/context.py
"""
Route context via FastAPI dependency injection.

Handlers read the classified route with ``Depends(get_route_info)`` (or
the narrower helpers below) instead of parsing ``request.url.path``.
"""
from __future__ import annotations

from typing import Callable

from fastapi import Depends, HTTPException, Request

from pathroute.contracts.routes import Route, RouteInfo, RouteKind
from pathroute.contracts.tenant import TenantResolution


def get_route_info(request: Request) -> RouteInfo:
    """Main route dependency. Use as: Depends(get_route_info)"""
    info = getattr(request.state, "route_info", None)
    if info is None:
        raise HTTPException(500, "Routing middleware is not installed")
    return info


def get_route(info: RouteInfo = Depends(get_route_info)) -> Route:
    return info.route


def get_tenant(info: RouteInfo = Depends(get_route_info)) -> TenantResolution:
    return info.tenant


def require_route_kind(*kinds: RouteKind) -> Callable[..., RouteInfo]:
    """
    Dependency factory restricting a handler to the given route kinds.

    Responds 404 when the request was classified as anything else::

        @router.get("/{path:path}")
        async def entity(info = Depends(require_route_kind(RouteKind.ENTITY))):
            ...
    """
    allowed = frozenset(kinds)

    def _dependency(info: RouteInfo = Depends(get_route_info)) -> RouteInfo:
        if info.kind not in allowed:
            raise HTTPException(
                status_code=404,
                detail=f"No {'/'.join(sorted(k.value for k in allowed))} route at '{info.path}'",
            )
        return info

    return _dependency
