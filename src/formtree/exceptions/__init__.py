"""
formtree exception classes.

This package provides all exception types used throughout formtree for
consistent error handling and reporting.
"""

from formtree.exceptions.core import (
    FormTreeError,
    InvalidInputError,
    NotFoundError,
    ReadOnlyAttributeError,
    StructuralViolationError,
    UnsupportedOperationError,
)

__all__ = [
    "FormTreeError",
    "InvalidInputError",
    "NotFoundError",
    "ReadOnlyAttributeError",
    "StructuralViolationError",
    "UnsupportedOperationError",
]
