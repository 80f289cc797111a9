"""
Core type definitions for formtree.

This module contains the type aliases shared by nodes, containers and
data sources.
"""

from collections.abc import Callable
from typing import Any

FieldValue = str | int | float | bool | list | dict | None

ValueMap = dict[str, Any]

ValueFilter = Callable[..., Any]

Attributes = dict[str, Any]
