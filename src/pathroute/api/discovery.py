# pathroute/api/discovery.py
"""
Root-level health and classification endpoints.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request

from pathroute.api.context import get_route_info
from pathroute.api.middleware import current_router_config
from pathroute.contracts.routes import RouteInfo
from pathroute.contracts.tenant import TenantResolution, TenantSource
from pathroute.core.classifier import classify
from pathroute.core.tenant import extract_tenant_from_path

router = APIRouter()


@router.get("/health")
async def health(request: Request) -> dict:
    cfg = current_router_config(request.app)
    return {
        "status": "healthy",
        "collections": len(cfg.known_collections),
        "type_prefixes": None if cfg.type_prefixes is None else len(cfg.type_prefixes),
    }


@router.get("/config")
async def router_config(request: Request) -> dict:
    """Describe the active routing rules."""
    return current_router_config(request.app).describe()


@router.get("/classify")
async def classify_path(
    request: Request,
    path: str = Query(default="", description="Path to classify, optionally /~tenant prefixed"),
) -> dict:
    """Classify an arbitrary path under the active router config."""
    cfg = current_router_config(request.app)
    if not path.startswith("/"):
        path = "/" + path

    match = extract_tenant_from_path(path)
    if match is not None:
        tenant = TenantResolution(tenant=match.tenant, source=TenantSource.PATH)
        remaining = match.remaining_path
    else:
        tenant = TenantResolution.unresolved()
        remaining = path

    info = RouteInfo(tenant=tenant, route=classify(remaining, cfg), path=remaining)
    return info.to_dict()


@router.get("/whoami")
async def whoami(info: RouteInfo = Depends(get_route_info)) -> dict:
    """Echo the route info the middleware attached to this request."""
    return info.to_dict()
