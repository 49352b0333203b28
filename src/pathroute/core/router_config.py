# pathroute/core/router_config.py
"""
Router configuration.

A ``RouterConfig`` is built once at startup (from YAML, optionally) and
passed explicitly to the classifier and the routing middleware. It is
frozen; reloading means building a new instance and swapping it in.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from pathroute.core.ids import DEFAULT_MIN_ID_LENGTH
from pathroute.core.loader import load_yaml_files, substitute_env_vars

logger = logging.getLogger(__name__)

DEFAULT_BASE_DOMAINS: tuple[str, ...] = ("headless.ly", "workers.do")

DEFAULT_SYSTEM_SUBDOMAINS: frozenset[str] = frozenset(
    {
        "api",
        "www",
        "app",
        "platform",
        "dashboard",
        "docs",
        "agents",
        "db",
        "ch",
        "code",
        "build",
        "launch",
        "grow",
        "scale",
        "sell",
        "crm",
        "ehr",
        "healthcare",
    }
)

DEFAULT_TENANT_HEADER = "x-tenant"


@dataclass(frozen=True)
class RouterConfig:
    """Immutable inputs to route classification and tenant resolution.

    Attributes:
        known_collections: Collection names always classified as collections.
        type_prefixes: Allowed entity type tags; ``None`` accepts any
            ``type_id`` shaped segment.
        strict_collections: When true, only ``known_collections`` are
            collections and the letter-led alphanumeric fallback is off.
        min_id_length: Shortest opaque id accepted in an entity segment.
        base_domains: Hosts under which a single-label subdomain is a tenant.
        system_subdomains: Subdomains that are never tenants.
        tenant_header: Request header carrying an explicit tenant slug.
    """

    known_collections: frozenset[str] = field(default_factory=frozenset)
    type_prefixes: frozenset[str] | None = None
    strict_collections: bool = False
    min_id_length: int = DEFAULT_MIN_ID_LENGTH
    base_domains: tuple[str, ...] = DEFAULT_BASE_DOMAINS
    system_subdomains: frozenset[str] = DEFAULT_SYSTEM_SUBDOMAINS
    tenant_header: str = DEFAULT_TENANT_HEADER

    def __post_init__(self) -> None:
        object.__setattr__(self, "known_collections", frozenset(self.known_collections))
        if self.type_prefixes is not None:
            object.__setattr__(self, "type_prefixes", frozenset(self.type_prefixes))
        object.__setattr__(self, "base_domains", tuple(self.base_domains))
        object.__setattr__(
            self,
            "system_subdomains",
            frozenset(s.lower() for s in self.system_subdomains),
        )
        object.__setattr__(self, "tenant_header", self.tenant_header.lower())

        if self.min_id_length < 1:
            raise ValueError(
                f"min_id_length must be at least 1, got {self.min_id_length}"
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> RouterConfig:
        """Build a config from a plain mapping (e.g. the ``router:`` YAML block)."""
        kwargs: dict[str, Any] = {}

        if "collections" in data:
            kwargs["known_collections"] = frozenset(data["collections"] or [])
        if "type_prefixes" in data:
            prefixes = data["type_prefixes"]
            kwargs["type_prefixes"] = None if prefixes is None else frozenset(prefixes)
        if "strict_collections" in data:
            kwargs["strict_collections"] = _as_bool(data["strict_collections"])
        if "min_id_length" in data:
            kwargs["min_id_length"] = int(data["min_id_length"])
        if "base_domains" in data:
            kwargs["base_domains"] = tuple(data["base_domains"] or [])
        if "system_subdomains" in data:
            kwargs["system_subdomains"] = frozenset(data["system_subdomains"] or [])
        if "tenant_header" in data:
            kwargs["tenant_header"] = str(data["tenant_header"])

        return cls(**kwargs)

    def describe(self) -> dict[str, Any]:
        return {
            "collections": sorted(self.known_collections),
            "type_prefixes": (
                None if self.type_prefixes is None else sorted(self.type_prefixes)
            ),
            "strict_collections": self.strict_collections,
            "min_id_length": self.min_id_length,
            "base_domains": list(self.base_domains),
            "tenant_header": self.tenant_header,
        }


def _as_bool(value: Any) -> bool:
    # env substitution turns YAML booleans into strings
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "on")
    return bool(value)


def load_router_config(
    patterns: Iterable[str],
    *,
    tenant_header: str | None = None,
) -> RouterConfig:
    """Load router configuration from YAML.

    Expected structure::

        router:
          collections: [contacts, deals]
          type_prefixes: [contact, deal]
          strict_collections: false
          min_id_length: 3
          base_domains: [headless.ly]
          tenant_header: x-tenant

    Later files override keys from earlier ones. With no files the
    defaults apply.
    """
    yamls = load_yaml_files(patterns)
    merged: dict[str, Any] = {}

    for data in yamls:
        block = data.get("router") or {}
        merged.update(substitute_env_vars(block))

    if tenant_header and "tenant_header" not in merged:
        merged["tenant_header"] = tenant_header

    cfg = RouterConfig.from_mapping(merged)
    logger.info(
        "Loaded router config: %d collection(s), type prefixes=%s, strict=%s",
        len(cfg.known_collections),
        "any" if cfg.type_prefixes is None else sorted(cfg.type_prefixes),
        cfg.strict_collections,
    )
    return cfg
