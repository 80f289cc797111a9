"""
Data source backed by a (possibly nested) mapping.
"""

from collections.abc import Mapping
from typing import Any

from formtree.core.naming import tokenize_name
from formtree.datasources.base import DataSource


def lookup_value(values: Mapping[str, Any], name: str) -> Any:
    """
    Find a value by wire name in a nested mapping.

    A flat key equal to the full name wins; otherwise the name's segments are
    followed through nested mappings.

    Examples:
        ({"addr": {"city": "Oslo"}}, "addr[city]") -> "Oslo"
        ({"addr[city]": "Oslo"}, "addr[city]") -> "Oslo"
        ({"addr": "x"}, "addr[city]") -> None
    """
    if not name:
        return None
    if name in values:
        return values[name]
    current: Any = values
    for token in tokenize_name(name):
        if not isinstance(current, Mapping) or token not in current:
            return None
        current = current[token]
    return current


class ArrayDataSource(DataSource):
    """
    Data source holding default values in a mapping.

    Params:
        values: Mapping of wire names (flat or nested) to values
    """

    def __init__(self, values: Mapping[str, Any] | None = None):
        self._values: dict[str, Any] = dict(values or {})

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"

    def get_value(self, name: str) -> Any:
        return lookup_value(self._values, name)

    def get_values(self) -> dict[str, Any]:
        return dict(self._values)

    def set_values(self, values: Mapping[str, Any] | None = None) -> None:
        """Replace the values held by this source."""
        self._values = dict(values or {})
