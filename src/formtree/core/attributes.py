"""
HTML attribute helpers.
"""

from collections.abc import Mapping
from html import escape
from typing import Any

from formtree.exceptions import InvalidInputError


def prepare_attributes(attributes: Mapping[str, Any] | None) -> dict[str, Any]:
    """
    Normalize user supplied attributes into a fresh dict with lowercase keys.

    Raises:
        InvalidInputError: If attributes is neither None nor a mapping
    """
    if attributes is None:
        return {}
    if not isinstance(attributes, Mapping):
        raise InvalidInputError(
            f"Attributes should be a mapping, {type(attributes).__name__} given"
        )
    return {str(key).lower(): value for key, value in attributes.items()}


def render_attributes(attributes: Mapping[str, Any]) -> str:
    """
    Render attributes as a string suitable for an opening tag.

    ``None`` and ``False`` values are skipped, ``True`` renders a boolean
    attribute (``disabled="disabled"``). The result starts with a space unless
    it is empty.
    """
    parts = []
    for key, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            value = key
        parts.append(f'{escape(key)}="{escape(str(value))}"')
    return "".join(f" {part}" for part in parts)
