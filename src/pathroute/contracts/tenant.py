# pathroute/contracts/tenant.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TenantSource(str, Enum):
    SUBDOMAIN = "subdomain"
    PATH = "path"
    HEADER = "header"
    NONE = "none"


@dataclass(frozen=True)
class TenantResolution:
    """Resolved tenant slug and where it came from.

    ``tenant`` is ``None`` exactly when ``source`` is ``TenantSource.NONE``.
    """

    tenant: str | None
    source: TenantSource

    @classmethod
    def unresolved(cls) -> TenantResolution:
        return cls(tenant=None, source=TenantSource.NONE)

    def to_dict(self) -> dict[str, str | None]:
        return {"tenant": self.tenant, "source": self.source.value}


@dataclass(frozen=True)
class TenantPathMatch:
    """Result of stripping a ``/~tenant`` prefix from a request path."""

    tenant: str
    remaining_path: str
