# pathroute/core/ids.py
"""
Self-describing entity id recognition.

Segments of the form ``<type>_<id>``:

* ``type`` starts with a lowercase letter, then letters/digits.
* the first underscore is the separator; later underscores belong to ``id``.
* ``id`` starts alphanumeric and is at least ``min_id_length`` characters.

An optional allow-list of type prefixes narrows what counts as an entity.
"""
from __future__ import annotations

import re
from typing import Collection

from pathroute.contracts.entity import EntityId

DEFAULT_MIN_ID_LENGTH = 3

ENTITY_ID_PATTERN = re.compile(r"([a-z][a-zA-Z0-9]*)_([a-zA-Z0-9][a-zA-Z0-9_]*)")


def parse_entity_id(
    segment: str,
    *,
    type_prefixes: Collection[str] | None = None,
    min_id_length: int = DEFAULT_MIN_ID_LENGTH,
) -> EntityId | None:
    """Decode ``segment`` into an :class:`EntityId`, or ``None`` if it is not one.

    Args:
        segment: A single path segment (no slashes).
        type_prefixes: Allowed type tags. ``None`` accepts any shape match.
        min_id_length: Shortest accepted opaque id.
    """
    if not segment:
        return None

    match = ENTITY_ID_PATTERN.fullmatch(segment)
    if match is None:
        return None

    type_, id_ = match.group(1), match.group(2)
    if len(id_) < min_id_length:
        return None
    if type_prefixes is not None and type_ not in type_prefixes:
        return None

    return EntityId(type=type_, id=id_)


def is_entity_id(
    segment: str,
    *,
    type_prefixes: Collection[str] | None = None,
    min_id_length: int = DEFAULT_MIN_ID_LENGTH,
) -> bool:
    return (
        parse_entity_id(
            segment, type_prefixes=type_prefixes, min_id_length=min_id_length
        )
        is not None
    )
