"""
Core formtree components.

This package provides the fundamental building blocks shared by elements,
containers and forms: the Node base class, wire-name helpers, traversal
helpers and type aliases.
"""

from formtree.core.naming import (
    join_name,
    merge_values,
    name_to_id,
    prefix_name,
    set_nested_value,
    strip_prefix,
    tokenize_name,
)
from formtree.core.node import Node, generate_id
from formtree.core.traversal import cascade, leaves, walk
from formtree.core.types import Attributes, FieldValue, ValueFilter, ValueMap

__all__ = [
    "Node",
    "generate_id",
    "tokenize_name",
    "join_name",
    "prefix_name",
    "strip_prefix",
    "name_to_id",
    "set_nested_value",
    "merge_values",
    "cascade",
    "walk",
    "leaves",
    "Attributes",
    "FieldValue",
    "ValueFilter",
    "ValueMap",
]
