"""
Exception classes for formtree.

This module defines the error types raised when a form tree is built or
mutated incorrectly. All of them are programmer errors: they are raised
synchronously at the point of violation and are not recovered internally.
"""


class FormTreeError(Exception):
    """Base exception for all formtree errors."""

    pass


class ReadOnlyAttributeError(FormTreeError):
    """Raised when an attribute that is fixed at construction is changed."""

    def __init__(self, attribute: str):
        """
        Initialize the exception.

        Params:
            attribute: Name of the read-only attribute
        """
        self.attribute = attribute
        super().__init__(f"Attribute '{attribute}' is read-only")


class InvalidInputError(FormTreeError):
    """Raised when a non-conforming object is passed to a typed collection."""

    def __init__(self, reason: str):
        """
        Initialize the exception.

        Params:
            reason: Description of what was wrong with the input
        """
        self.reason = reason
        super().__init__(reason)


class UnsupportedOperationError(FormTreeError):
    """Raised when an operation is not available for a node type."""

    def __init__(self, operation: str, node_type: str):
        """
        Initialize the exception.

        Params:
            operation: The operation that was attempted
            node_type: Type tag of the node it was attempted on
        """
        self.operation = operation
        self.node_type = node_type
        super().__init__(f"Operation '{operation}' is not supported by '{node_type}'")


class StructuralViolationError(FormTreeError):
    """Raised when a mutation would break the shape of the tree."""

    def __init__(self, reason: str):
        """
        Initialize the exception.

        Params:
            reason: Why the mutation is not allowed
        """
        self.reason = reason
        super().__init__(reason)


class NotFoundError(FormTreeError):
    """Raised when an element is expected to be a child but is not."""

    def __init__(self, name: str | None):
        self.name = name
        super().__init__(f"Element with name '{name}' was not found")
