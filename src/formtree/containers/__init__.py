"""
Container nodes: ordered collections of elements.
"""

from formtree.containers.container import Container
from formtree.containers.fieldset import Fieldset
from formtree.containers.group import Group

__all__ = ["Container", "Fieldset", "Group"]
