# pathroute/core/classifier.py
"""
Route classifier.

Turns a tenant-stripped path into exactly one :data:`Route`. Rules are
tried in a fixed order and the first match wins:

1. empty path                          -> ``UnknownRoute(())``
2. whole path is ``name(args)``        -> ``FunctionCallRoute``
3. first segment is ``search``         -> ``SearchRoute``
4. first segment is a ``type_id``      -> entity / ``$meta`` / entity action
5. first segment is a collection       -> collection / ``$meta`` / action
6. first segment starts with ``$``     -> root ``MetaRoute``
7. anything else                       -> ``UnknownRoute(segments)``

The function-call check runs before the path is split on ``/`` because
call arguments may be URLs. Entity detection runs before the collection
rule so an entity id is never read as a collection name.

``classify`` never raises.
"""
from __future__ import annotations

import logging
import re

from pathroute.contracts.routes import (
    CollectionActionRoute,
    CollectionRoute,
    EntityActionRoute,
    EntityRoute,
    FunctionCallRoute,
    MetaRoute,
    Route,
    SearchRoute,
    UnknownRoute,
)
from pathroute.core.function_parser import parse_function_call
from pathroute.core.ids import parse_entity_id
from pathroute.core.router_config import RouterConfig

logger = logging.getLogger(__name__)

SEARCH_SEGMENT = "search"
META_MARKER = "$"

COLLECTION_NAME_PATTERN = re.compile(r"[a-zA-Z][a-zA-Z0-9]*")

_DEFAULT_CONFIG = RouterConfig()


def normalize_path(path: str) -> str:
    """Strip leading and trailing slashes."""
    return (path or "").strip("/")


def split_segments(path: str) -> list[str]:
    normalized = normalize_path(path)
    if not normalized:
        return []
    return normalized.split("/")


def is_collection_name(segment: str, config: RouterConfig) -> bool:
    """Whether ``segment`` names a collection under ``config``.

    Known collections always qualify. Otherwise, unless
    ``strict_collections`` is set, any letter-led alphanumeric segment does;
    whether it exists is for the handler to decide.
    """
    if segment in config.known_collections:
        return True
    if config.strict_collections:
        return False
    return COLLECTION_NAME_PATTERN.fullmatch(segment) is not None


def classify(path: str, config: RouterConfig | None = None) -> Route:
    """Classify a tenant-stripped request path."""
    cfg = config or _DEFAULT_CONFIG
    route = _classify(normalize_path(path), cfg)
    logger.debug("Classified path '%s' as %s", path, route.kind.value)
    return route


def _classify(normalized: str, cfg: RouterConfig) -> Route:
    if not normalized:
        return UnknownRoute(segments=())

    call = parse_function_call(normalized, min_id_length=cfg.min_id_length)
    if call is not None:
        return FunctionCallRoute(call=call)

    segments = normalized.split("/")
    first = segments[0]
    second = segments[1] if len(segments) > 1 else ""

    if first == SEARCH_SEGMENT:
        return SearchRoute()

    entity = parse_entity_id(
        first,
        type_prefixes=cfg.type_prefixes,
        min_id_length=cfg.min_id_length,
    )
    if entity is not None:
        if not second:
            return EntityRoute(entity=entity)
        if second.startswith(META_MARKER):
            return MetaRoute(resource=second[1:], entity=entity)
        return EntityActionRoute(entity=entity, action=second)

    if is_collection_name(first, cfg):
        if not second:
            return CollectionRoute(collection=first)
        if second.startswith(META_MARKER):
            return MetaRoute(resource=second[1:], collection=first)
        return CollectionActionRoute(collection=first, action=second)

    if first.startswith(META_MARKER):
        return MetaRoute(resource=first[1:])

    return UnknownRoute(segments=tuple(segments))
