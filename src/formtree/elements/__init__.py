"""
Leaf elements and the element factory.
"""

from formtree.elements.base import Element
from formtree.elements.factory import (
    create_element,
    is_type_registered,
    list_element_types,
    register_element_type,
)
from formtree.elements.input import (
    HiddenInput,
    Input,
    PasswordInput,
    SubmitInput,
    TextInput,
)

__all__ = [
    "Element",
    "HiddenInput",
    "Input",
    "PasswordInput",
    "SubmitInput",
    "TextInput",
    "create_element",
    "is_type_registered",
    "list_element_types",
    "register_element_type",
]
