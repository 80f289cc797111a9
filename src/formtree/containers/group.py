"""
Groups of elements that prefix the names of their descendants.

A group named ``addr`` turns a child named ``city`` into ``addr[city]``, so the
submitted values arrive nested under the group name. Groups can be renamed
and nested at any time; the names of the descendants are rewritten so that
they always reflect the current chain of group names.
"""

import logging
from collections.abc import Mapping
from typing import Any

from formtree.containers.container import Container
from formtree.core.naming import join_name, prefix_name, strip_prefix, tokenize_name
from formtree.core.node import Node

logger = logging.getLogger(__name__)


class Group(Container):
    """
    Container that applies its name as a prefix to its children's names.

    Params:
        name: Group name; None or an empty string leaves children names alone
        attributes: HTML attributes of the group
        **data: Additional data such as ``label``
    """

    def __init__(
        self,
        name: str | None = None,
        attributes: Mapping[str, Any] | None = None,
        **data: Any,
    ):
        self._name: str | None = None
        self._previous_name: str | None = None
        super().__init__(name, attributes, **data)

    def get_type(self) -> str:
        return "group"

    def get_name(self) -> str | None:
        return self._name

    def get_previous_name(self) -> str | None:
        return self._previous_name

    def set_name(self, name: str | None) -> "Group":
        """
        Rename the group and rewrite the names of all current children.

        The old name is kept as the previous name, so that the prefix it
        applied can be removed from the children before the new one is added.
        Children that are groups rename their own children in turn.
        """
        self._previous_name = self._name
        self._name = name
        logger.debug("Renaming group %r to %r", self._previous_name, name)
        for child in self.children():
            self.rename_child(child)
        return self

    def rename_child(self, element: Node) -> Node:
        """
        Compute and assign the wire name of a child.

        For an element that is already a child, the prefix applied under the
        previous group name is removed first: everything up to and including
        the last occurrence of the previous name's final segment is dropped.
        Without a current group name the element keeps only its relative
        segments; with one, the group name is put in front of them.

        Returns:
            The renamed element
        """
        tokens = tokenize_name(element.get_name())
        if element.container is self and self._previous_name:
            tokens = strip_prefix(tokens, self._previous_name)
        if not self._name:
            if not self._previous_name:
                return element
            new_name = join_name(tokens)
        else:
            new_name = prefix_name(self._name, tokens)
        element.set_name(new_name)
        return element

    def _prepare_child(self, element: Node) -> None:
        self.rename_child(element)

    def _release_child(self, element: Node) -> None:
        # The element leaves with its relative name only
        if not self._name:
            return
        tokens = tokenize_name(element.get_name())
        group_tokens = tokenize_name(self._name)
        if tokens[: len(group_tokens)] == group_tokens:
            element.set_name(join_name(tokens[len(group_tokens) :]))
