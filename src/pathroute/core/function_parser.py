# pathroute/core/function_parser.py
"""
Parser for callable-function paths: ``name(arg, arg, key=value)``.

The call must span the whole text: no trailing segments, no nested
parentheses. Positional arguments are tagged by shape (entity id, URL,
plain string); named arguments are kept as raw strings.

Arguments are split on every comma. A URL argument whose query string
contains a comma is therefore split in two; there is no quoting syntax.
"""
from __future__ import annotations

import re

from pathroute.contracts.function_call import ArgKind, ArgValue, FunctionCall
from pathroute.core.ids import DEFAULT_MIN_ID_LENGTH, is_entity_id


CALL_PATTERN = re.compile(r"([a-zA-Z_][a-zA-Z0-9_.]*)\(([^()]*)\)", re.DOTALL)
KWARG_KEY_PATTERN = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")

URL_PREFIXES = ("http://", "https://")


def is_function_call(text: str) -> bool:
    return bool(text) and CALL_PATTERN.fullmatch(text) is not None


def classify_arg(value: str, *, min_id_length: int = DEFAULT_MIN_ID_LENGTH) -> ArgKind:
    """Tag an argument by its literal shape. Type prefix allow-lists do not apply."""
    if is_entity_id(value, min_id_length=min_id_length):
        return ArgKind.ENTITY
    if value.startswith(URL_PREFIXES):
        return ArgKind.URL
    return ArgKind.STRING


def split_args(text: str) -> list[str]:
    """Split an argument list on commas, trimming and dropping empty parts."""
    if not text:
        return []
    return [part.strip() for part in text.split(",") if part.strip()]


def parse_function_call(
    text: str, *, min_id_length: int = DEFAULT_MIN_ID_LENGTH
) -> FunctionCall | None:
    """
    Parse ``text`` as a function call.

    Returns ``None`` when the text is not a well-formed call (unbalanced or
    nested parentheses, missing name, content after the closing paren).

    Example::

        parse_function_call("papa.parse(https://example.com/data.csv,header=true)")
        # FunctionCall(name="papa.parse",
        #              args=(ArgValue("https://example.com/data.csv", ArgKind.URL),),
        #              kwargs={"header": "true"})
    """
    if not text:
        return None

    match = CALL_PATTERN.fullmatch(text)
    if match is None:
        return None

    name, arglist = match.group(1), match.group(2)

    args: list[ArgValue] = []
    kwargs: dict[str, str] = {}

    for part in split_args(arglist):
        key, sep, value = part.partition("=")
        if sep and KWARG_KEY_PATTERN.fullmatch(key):
            kwargs[key] = value
            continue
        args.append(
            ArgValue(
                value=part,
                kind=classify_arg(part, min_id_length=min_id_length),
            )
        )

    return FunctionCall(name=name, args=tuple(args), kwargs=kwargs)
