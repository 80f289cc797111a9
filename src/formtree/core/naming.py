"""
Wire-name utilities.

Field names follow the nested-bracket convention used by HTML form
submissions: ``outer[middle][leaf]``. The helpers here convert between that
string form and an ordered list of segments.
"""

import re
from collections.abc import Mapping
from typing import Any

_ID_UNSAFE = re.compile(r"[^\w\-:.]")


def tokenize_name(name: str | None) -> list[str]:
    """
    Split a wire name into its segments.

    Every ``]`` is removed and the remainder is split on ``[``. No validation
    of the bracket syntax is performed; malformed names are split best-effort.

    Params:
        name: Wire name such as ``"a[b][c]"``

    Returns:
        Segments in outer-to-inner order; an empty list for an empty name

    Examples:
        "a[b][c]" -> ["a", "b", "c"]
        "city" -> ["city"]
        "" -> []
    """
    if not name:
        return []
    return name.replace("]", "").split("[")


def join_name(tokens: list[str]) -> str:
    """
    Build a wire name from segments: the first one bare, the rest bracketed.

    Examples:
        ["a", "b", "c"] -> "a[b][c]"
        [] -> ""
    """
    if not tokens:
        return ""
    return tokens[0] + "".join(f"[{token}]" for token in tokens[1:])


def prefix_name(prefix: str, tokens: list[str]) -> str:
    """
    Prepend a group name to segments, bracketing every segment.

    Examples:
        ("addr", ["city"]) -> "addr[city]"
        ("a", ["b", "x"]) -> "a[b][x]"
        ("a", []) -> "a"
    """
    if not tokens:
        return prefix
    return prefix + "[" + "][".join(tokens) + "]"


def strip_prefix(tokens: list[str], prefix: str | None) -> list[str]:
    """
    Drop a previously applied prefix from a list of segments.

    The final segment of ``prefix`` is searched for from the end of ``tokens``;
    everything up to and including the last occurrence is removed. When the
    segment does not occur at all the tokens are returned unchanged.

    Params:
        tokens: Segments of the element's current name
        prefix: The group name that was applied earlier

    Returns:
        Remaining segments (a new list)
    """
    prefix_tokens = tokenize_name(prefix)
    if not prefix_tokens:
        return list(tokens)
    marker = prefix_tokens[-1]
    for position in range(len(tokens) - 1, -1, -1):
        if tokens[position] == marker:
            return tokens[position + 1 :]
    return list(tokens)


def name_to_id(name: str | None) -> str:
    """
    Derive an HTML id fragment from a wire name.

    Examples:
        "addr[city]" -> "addr-city"
        "tags[]" -> "tags"
    """
    tokens = [token for token in tokenize_name(name) if token]
    return _ID_UNSAFE.sub("_", "-".join(tokens))


def set_nested_value(values: dict, name: str | None, value: Any) -> None:
    """
    Store a value in a nested dict following the segments of a wire name.

    An empty final segment (``tags[]``) stores the value as a list.

    Examples:
        "addr[city]" -> {"addr": {"city": value}}
        "tags[]" -> {"tags": [value]}
    """
    tokens = tokenize_name(name)
    append = len(tokens) > 1 and tokens[-1] == ""
    if append:
        tokens.pop()
        value = list(value) if isinstance(value, (list, tuple)) else [value]
    if not tokens:
        return
    target = values
    for token in tokens[:-1]:
        existing = target.get(token)
        if not isinstance(existing, dict):
            existing = target[token] = {}
        target = existing
    if append and isinstance(target.get(tokens[-1]), list):
        target[tokens[-1]].extend(value)
    else:
        target[tokens[-1]] = value


def merge_values(target: dict, source: Mapping) -> dict:
    """
    Recursively merge ``source`` into ``target``; source wins on conflicts.

    Returns:
        The updated target
    """
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(existing, dict) and isinstance(value, Mapping):
            merge_values(existing, value)
        else:
            target[key] = value
    return target
