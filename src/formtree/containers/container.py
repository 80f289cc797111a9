"""
Ordered collections of form nodes.

A Container owns its children: it adds, removes and iterates them, and
cascades value resolution, freezing, validation and rendering down to them in
insertion order.
"""

import logging
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any

from formtree.config import get_option
from formtree.core.naming import merge_values, set_nested_value
from formtree.core.node import Node
from formtree.core.traversal import cascade, leaves, walk
from formtree.core.types import ValueFilter, ValueMap
from formtree.exceptions import (
    InvalidInputError,
    NotFoundError,
    UnsupportedOperationError,
)

if TYPE_CHECKING:
    from formtree.rendering.base import Renderer
    from formtree.rendering.script import ScriptBuilder

logger = logging.getLogger(__name__)


class Container(Node):
    """
    Node holding an ordered list of child nodes.

    Insertion order is significant: it is both the render order and the
    validation order. A node belongs to at most one container; adding it here
    removes it from wherever it was before.
    """

    def __init__(
        self,
        name: str | None = None,
        attributes: Mapping[str, Any] | None = None,
        **data: Any,
    ):
        self._elements: list[Node] = []
        super().__init__(name, attributes, **data)

    def get_type(self) -> str:
        return "container"

    def children(self) -> list[Node]:
        return list(self._elements)

    def is_container(self) -> bool:
        return True

    def __iter__(self) -> Iterator[Node]:
        return iter(list(self._elements))

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, element: object) -> bool:
        return any(child is element for child in self._elements)

    def __str__(self) -> str:
        return get_option("linebreak").join(str(child) for child in self._elements)

    # Structure

    def append_child(self, element: Node) -> Node:
        """
        Append a node, taking it away from its previous container.

        Appending a node that is already a child moves it to the end instead
        of adding it twice.

        Returns:
            The appended node
        """
        return self.insert_before(element)

    def insert_before(self, element: Node, reference: Node | None = None) -> Node:
        """
        Insert a node before another child, or at the end.

        Params:
            element: Node to insert
            reference: Child to insert before; None appends

        Returns:
            The inserted node

        Raises:
            InvalidInputError: If element is not a Node or would create a cycle
            NotFoundError: If reference is not a child of this container
            StructuralViolationError: If element cannot live in a container
        """
        if not isinstance(element, Node):
            raise InvalidInputError(
                f"Only Node instances can be added to a container, {type(element).__name__} given"
            )
        if reference is not None and (reference is element or reference not in self):
            raise NotFoundError(reference.get_name())
        element._validate_container(self)

        if element.container is not None:
            element.container.remove_child(element)
        self._prepare_child(element)
        if reference is None:
            self._elements.append(element)
        else:
            position = next(
                index for index, child in enumerate(self._elements) if child is reference
            )
            self._elements.insert(position, element)
        element._set_container(self)
        return element

    def remove_child(self, element: Node) -> Node:
        """
        Remove a direct child.

        Returns:
            The removed node, now detached

        Raises:
            NotFoundError: If element is not a child of this container
        """
        if element not in self:
            raise NotFoundError(element.get_name())
        self._elements = [child for child in self._elements if child is not element]
        self._release_child(element)
        element._set_container(None)
        return element

    def _prepare_child(self, element: Node) -> None:
        """Hook run before a node becomes a child."""
        pass

    def _release_child(self, element: Node) -> None:
        """Hook run after a node stops being a child."""
        pass

    def add_element(
        self,
        element_type: str,
        name: str | None = None,
        attributes: Mapping[str, Any] | None = None,
        **data: Any,
    ) -> Node:
        """Create a node through the element factory and append it."""
        from formtree.elements.factory import create_element

        return self.append_child(create_element(element_type, name, attributes, **data))

    def get_elements(self) -> list[Node]:
        return self.children()

    def get_element_by_id(self, node_id: str) -> Node | None:
        """Find a descendant by HTML id."""
        for node in walk(self):
            if node.get_id() == node_id:
                return node
        return None

    def get_elements_by_name(self, name: str) -> list[Node]:
        """Find all descendants with the given wire name."""
        return [node for node in walk(self) if node.get_name() == name]

    # Values

    def get_raw_value(self) -> ValueMap:
        """
        Aggregate the values of all descendants into a nested dict.

        Leaf values are placed according to their wire names, so a leaf named
        ``addr[city]`` ends up under ``values["addr"]["city"]``. Values of
        nested containers (already filtered by those containers) are merged in.
        None values are left out.
        """
        return self._collect(lambda child: child.get_value())

    def get_value(self) -> ValueMap:
        """Aggregate descendant values and run them through this node's filters."""
        return self._apply_filters(self.get_raw_value())

    def get_submit_value(self) -> ValueMap:
        """
        Aggregate only the values that a browser would actually submit.

        Frozen elements without persistent freeze are not rendered as form
        controls, so they are left out.
        """
        return self._apply_filters(self._collect_submit())

    def _collect_submit(self) -> ValueMap:
        def submit_value(child: Node) -> Any:
            if child.is_container():
                return child.get_submit_value()
            if child.is_frozen() and not child.persistent_freeze():
                return None
            return child.get_value()

        return self._collect(submit_value)

    def _collect(self, value_of) -> ValueMap:
        values: ValueMap = {}
        for child in self._elements:
            value = value_of(child)
            if value is None:
                continue
            if child.is_container():
                merge_values(values, value)
            else:
                set_nested_value(values, child.get_name(), value)
        return values

    def set_value(self, value: Any) -> "Container":
        raise UnsupportedOperationError("set_value", self.get_type())

    def update_value(self) -> None:
        cascade(self, lambda child: child.update_value())

    def add_recursive_filter(self, callback: ValueFilter, *args: Any) -> "Container":
        """
        Add a filter to every descendant leaf.

        Only nodes that are currently in the tree receive the filter.

        Raises:
            InvalidInputError: If callback is not callable
        """
        if not callable(callback):
            raise InvalidInputError("Filter should be a callable")
        for leaf in leaves(self):
            leaf.add_filter(callback, *args)
        return self

    # Frozen state

    def toggle_frozen(self, freeze: bool | None = None) -> bool:
        if freeze is not None:
            cascade(self, lambda child: child.toggle_frozen(freeze))
        return super().toggle_frozen(freeze)

    def persistent_freeze(self, persistent: bool | None = None) -> bool:
        if persistent is not None:
            cascade(self, lambda child: child.persistent_freeze(persistent))
        return super().persistent_freeze(persistent)

    # Validation and rendering

    def validate(self) -> bool:
        """
        Validate the container's own rules, then every child.

        Children are always all visited, so each of them gets its error state
        even after an earlier one failed.
        """
        valid = super().validate()
        for child_valid in cascade(self, lambda child: child.validate()):
            valid = child_valid and valid
        logger.debug("Validated %s %r: %s", self.get_type(), self.get_name(), valid)
        return valid

    def render(self, renderer: "Renderer") -> "Renderer":
        renderer.start_group(self)
        cascade(self, lambda child: child.render(renderer))
        renderer.finish_group(self)
        return renderer

    def render_client_rules(self, builder: "ScriptBuilder") -> None:
        super().render_client_rules(builder)
        cascade(self, lambda child: child.render_client_rules(builder))
