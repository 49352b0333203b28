# pathroute/core/tenant.py
"""
Tenant resolution.

A tenant is taken from, in priority order:

1. a ``/~tenant`` path prefix,
2. the tenant header (``x-tenant`` by default),
3. a single-label subdomain of a configured base domain.

With none of these the resolution is ``TenantSource.NONE``.
"""
from __future__ import annotations

import logging
import re
from typing import Collection, Mapping

from pathroute.contracts.tenant import TenantPathMatch, TenantResolution, TenantSource
from pathroute.core.router_config import (
    DEFAULT_BASE_DOMAINS,
    DEFAULT_SYSTEM_SUBDOMAINS,
    RouterConfig,
)

logger = logging.getLogger(__name__)

TENANT_PATH_PATTERN = re.compile(r"/~([a-zA-Z0-9_-]+)(/.*)?", re.DOTALL)


def extract_tenant_from_path(path: str) -> TenantPathMatch | None:
    """
    Strip a ``/~tenant`` prefix.

    Example::

        extract_tenant_from_path("/~acme/contacts")
        # TenantPathMatch(tenant="acme", remaining_path="/contacts")
        extract_tenant_from_path("/contacts")
        # None
    """
    match = TENANT_PATH_PATTERN.fullmatch(path or "")
    if match is None:
        return None
    return TenantPathMatch(tenant=match.group(1), remaining_path=match.group(2) or "/")


def extract_tenant_from_subdomain(
    hostname: str,
    base_domains: Collection[str] = DEFAULT_BASE_DOMAINS,
    system_subdomains: Collection[str] = DEFAULT_SYSTEM_SUBDOMAINS,
) -> str | None:
    """Return the tenant label of ``<tenant>.<base domain>``, if any.

    System subdomains (``api``, ``www``, ...) and multi-level subdomains
    are not tenants.
    """
    host = (hostname or "").split(":", 1)[0].lower()
    if "." not in host or host == "localhost":
        return None

    for base in base_domains:
        suffix = "." + base.lower()
        if not host.endswith(suffix):
            continue
        subdomain = host[: -len(suffix)]
        if not subdomain or subdomain in system_subdomains:
            return None
        if "." in subdomain:
            return None
        return subdomain

    return None


def resolve_tenant(
    path: str,
    headers: Mapping[str, str],
    hostname: str,
    config: RouterConfig,
) -> TenantResolution:
    """Resolve the tenant for a request from its path, headers and host.

    ``headers`` lookups use ``config.tenant_header``; Starlette's
    ``Headers`` is case-insensitive, plain dicts should use lowercase keys.
    """
    path_match = extract_tenant_from_path(path)
    if path_match is not None:
        return TenantResolution(tenant=path_match.tenant, source=TenantSource.PATH)

    header_tenant = headers.get(config.tenant_header)
    if header_tenant:
        return TenantResolution(tenant=header_tenant, source=TenantSource.HEADER)

    subdomain_tenant = extract_tenant_from_subdomain(
        hostname, config.base_domains, config.system_subdomains
    )
    if subdomain_tenant:
        return TenantResolution(tenant=subdomain_tenant, source=TenantSource.SUBDOMAIN)

    return TenantResolution.unresolved()
