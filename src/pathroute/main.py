# pathroute/main.py
"""
Application factory.

Creates a FastAPI application with the routing middleware installed.
Downstream handlers read the per-request :class:`RouteInfo` from
``request.state.route_info`` (or via ``pathroute.api.context``).
"""
from __future__ import annotations

import logging

from fastapi import FastAPI

from pathroute.api.discovery import router as discovery_router
from pathroute.api.middleware import attach_routing
from pathroute.core.config import settings
from pathroute.core.logging import configure_logging
from pathroute.core.router_config import RouterConfig, load_router_config

logger = logging.getLogger(__name__)


def create_app(router_config: RouterConfig | None = None) -> FastAPI:
    """Build and wire the application.

    Args:
        router_config: Routing rules to use. Loaded from
            ``settings.router_config_paths`` when omitted.
    """
    configure_logging(settings.log_level, settings.log_format)
    logger.info("Creating pathroute application (env=%s)", settings.app_env)

    if router_config is None:
        try:
            router_config = load_router_config(
                settings.router_config_paths,
                tenant_header=settings.tenant_header,
            )
        except Exception:
            logger.exception("Failed to load router config")
            raise

    app = FastAPI(
        title="pathroute",
        version="0.1.0",
        description="Self-describing path classification",
    )

    attach_routing(app, router_config)
    app.include_router(discovery_router)

    logger.info(
        "pathroute application ready: %d known collection(s), type prefixes: %s",
        len(router_config.known_collections),
        "any" if router_config.type_prefixes is None else len(router_config.type_prefixes),
    )
    return app
