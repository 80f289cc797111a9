"""
Tree traversal helpers shared by the container cascades.

Validation, rendering and freeze toggling all follow the same shape: call one
operation on every child in insertion order. `cascade` captures that shape so
each call site only supplies the per-node operation.
"""

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from formtree.core.node import Node

T = TypeVar("T")


def cascade(container: "Node", operation: Callable[["Node"], T]) -> list[T]:
    """
    Apply an operation to every direct child of a container.

    Every child is visited even if an earlier call returned a falsy result, so
    that side effects (such as error messages) are produced for all of them.

    Params:
        container: Node whose children are visited; leaves have none
        operation: Callable invoked with each child

    Returns:
        The results in child order
    """
    return [operation(child) for child in container.children()]


def walk(node: "Node") -> Iterator["Node"]:
    """
    Iterate over all descendants of a node, depth-first, pre-order.

    The node itself is not yielded.
    """
    for child in node.children():
        yield child
        yield from walk(child)


def leaves(node: "Node") -> Iterator["Node"]:
    """Iterate over the descendant nodes that have no children of their own."""
    for descendant in walk(node):
        if not descendant.is_container():
            yield descendant
