"""
Factory creating form nodes from type names.

Type names map to node classes in a registry; applications can register
their own element classes next to the built-in ones.
"""

import logging
from collections.abc import Mapping
from typing import Any

from formtree.containers.fieldset import Fieldset
from formtree.containers.group import Group
from formtree.core.node import Node
from formtree.elements.input import HiddenInput, PasswordInput, SubmitInput, TextInput
from formtree.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

_ELEMENT_TYPES: dict[str, type[Node]] = {
    "text": TextInput,
    "password": PasswordInput,
    "hidden": HiddenInput,
    "submit": SubmitInput,
    "group": Group,
    "fieldset": Fieldset,
}


def register_element_type(element_type: str, node_class: type[Node]) -> None:
    """
    Register a node class under a type name, replacing any previous one.

    Raises:
        InvalidInputError: If node_class is not a Node subclass
    """
    if not (isinstance(node_class, type) and issubclass(node_class, Node)):
        raise InvalidInputError(f"Class registered for '{element_type}' should be a Node subclass")
    _ELEMENT_TYPES[element_type.lower()] = node_class


def is_type_registered(element_type: str) -> bool:
    return element_type.lower() in _ELEMENT_TYPES


def list_element_types() -> list[str]:
    return list(_ELEMENT_TYPES)


def create_element(
    element_type: str,
    name: str | None = None,
    attributes: Mapping[str, Any] | None = None,
    **data: Any,
) -> Node:
    """
    Create a node of a registered type.

    Params:
        element_type: Registered type name, case-insensitive
        name: Wire name of the new node
        attributes: HTML attributes
        **data: Passed on to the node class (``value``, ``label``...)

    Raises:
        InvalidInputError: If the type is not registered
    """
    node_class = _ELEMENT_TYPES.get(element_type.lower())
    if node_class is None:
        raise InvalidInputError(
            f"Element type '{element_type}' is not known. Available types: {list_element_types()}"
        )
    logger.debug("Creating %s element %r", element_type, name)
    return node_class(name, attributes, **data)
