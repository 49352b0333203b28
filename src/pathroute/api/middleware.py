# pathroute/api/middleware.py
"""
Routing middleware.

Runs once per request, before any handler: resolves the tenant, strips
the ``/~tenant`` prefix, classifies the remaining path and publishes the
result on ``request.state``:

* ``route_info``     -- :class:`RouteInfo`
* ``tenant``         -- tenant slug or ``None``
* ``tenant_source``  -- :class:`TenantSource`

It never answers a request itself; it always hands off to the next stage.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request

from pathroute.contracts.routes import RouteInfo
from pathroute.core.classifier import classify
from pathroute.core.router_config import RouterConfig
from pathroute.core.tenant import extract_tenant_from_path, resolve_tenant

logger = logging.getLogger(__name__)


def request_path(request: Request) -> str:
    """
    Return the percent-decoded request path.

    Read straight from the ASGI scope: ``request.url.path`` re-parses the
    decoded path as a URL and drops everything after a decoded ``?``, which
    truncates calls such as ``/fetch(https://example.com/a%3Fb=c)``.
    """
    return request.scope["path"]


def route_request(request: Request, config: RouterConfig) -> RouteInfo:
    """Build the :class:`RouteInfo` for ``request`` without side effects."""
    path = request_path(request)
    tenant = resolve_tenant(
        path,
        request.headers,
        request.url.hostname or "",
        config,
    )

    path_match = extract_tenant_from_path(path)
    remaining = path_match.remaining_path if path_match else path

    return RouteInfo(tenant=tenant, route=classify(remaining, config), path=remaining)


def current_router_config(app: FastAPI) -> RouterConfig:
    cfg = getattr(app.state, "router_config", None)
    if cfg is None:
        raise RuntimeError("Router config not set - call attach_routing() first")
    return cfg


def attach_routing(app: FastAPI, config: RouterConfig) -> None:
    """
    Install the routing middleware on ``app``.

    The active config is read from ``app.state.router_config`` on every
    request. To reload, assign a new :class:`RouterConfig` to that
    attribute; never mutate the current one.
    """
    app.state.router_config = config

    @app.middleware("http")
    async def _route_classifier(request: Request, call_next):
        info = route_request(request, current_router_config(request.app))

        request.state.route_info = info
        request.state.tenant = info.tenant.tenant
        request.state.tenant_source = info.tenant.source

        logger.debug(
            "%s %s -> %s (tenant=%s via %s)",
            request.method,
            request_path(request),
            info.kind.value,
            info.tenant.tenant,
            info.tenant.source.value,
        )
        return await call_next(request)
