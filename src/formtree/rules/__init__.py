"""
Validation rules attached to form nodes.
"""

from formtree.rules.core import (
    RULE_TYPES,
    Callback,
    Length,
    Regex,
    Required,
    Rule,
    create_rule,
    is_empty,
    register_rule,
)

__all__ = [
    "RULE_TYPES",
    "Callback",
    "Length",
    "Regex",
    "Required",
    "Rule",
    "create_rule",
    "is_empty",
    "register_rule",
]
