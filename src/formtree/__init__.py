"""
formtree - build, validate and render HTML forms as trees of elements

Forms are trees: groups prefix the names of their descendants so that
submitted values arrive nested, and the form resolves element values from
prioritized data sources.
"""

from importlib.metadata import version

from formtree.containers import Container, Fieldset, Group
from formtree.datasources import (
    ArrayDataSource,
    DataSource,
    InboundRequest,
    RequestDataSource,
    SubmitDataSource,
)
from formtree.elements import create_element, register_element_type
from formtree.form import Form
from formtree.rendering import DefaultRenderer, Renderer

__version__ = version("formtree")

__all__ = [
    "__version__",
    "ArrayDataSource",
    "Container",
    "DataSource",
    "DefaultRenderer",
    "Fieldset",
    "Form",
    "Group",
    "InboundRequest",
    "Renderer",
    "RequestDataSource",
    "SubmitDataSource",
    "create_element",
    "register_element_type",
]
