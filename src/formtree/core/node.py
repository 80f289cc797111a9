"""
Base class for every node of a form tree.

A node has a wire-level name, an HTML id, a set of attributes, a value and a
frozen state. It knows the container that owns it (at most one), carries its
own validation rules and value filters, and knows how to render itself.
"""

import itertools
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any, ClassVar, Optional

from formtree.config import get_option
from formtree.core.attributes import prepare_attributes
from formtree.core.naming import name_to_id
from formtree.core.types import ValueFilter
from formtree.exceptions import InvalidInputError

if TYPE_CHECKING:
    from formtree.containers.container import Container
    from formtree.datasources.base import DataSource
    from formtree.rendering.base import Renderer
    from formtree.rendering.script import ScriptBuilder
    from formtree.rules.core import Rule

logger = logging.getLogger(__name__)

_id_counter = itertools.count(1)


def generate_id(name: str | None) -> str:
    """
    Generate an HTML id for an element that was not given one.

    Params:
        name: Wire name of the element, used as the readable part of the id

    Returns:
        An id such as ``addr-city-3`` or ``qfauto-7``
    """
    base = name_to_id(name)
    if not base:
        return f"qfauto-{next(_id_counter)}"
    if get_option("id_force_append_index"):
        return f"{base}-{next(_id_counter)}"
    return base


class Node(ABC):
    """
    Abstract base for leaf elements and containers.

    Params:
        name: Wire name of the node
        attributes: HTML attributes; ``id`` is generated when missing
        **data: Additional non-attribute data, such as ``label``
    """

    _watched_attributes: ClassVar[tuple[str, ...]] = ("id", "name")

    def __init__(
        self,
        name: str | None = None,
        attributes: Mapping[str, Any] | None = None,
        **data: Any,
    ):
        self.attributes: dict[str, Any] = prepare_attributes(attributes)
        self.data: dict[str, Any] = dict(data)
        self._container: Optional["Container"] = None
        self._frozen = False
        self._persistent = False
        self._rules: list["Rule"] = []
        self._filters: list[tuple[ValueFilter, tuple]] = []
        self._error: str | None = None
        if name is not None:
            self.set_name(name)
        if not self.attributes.get("id"):
            self._assign_id(generate_id(self.get_name()))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.get_name()!r} id={self.get_id()!r}>"

    @abstractmethod
    def get_type(self) -> str:
        """Return the type tag of the node (``text``, ``group``, ``form``...)."""
        pass

    # Naming and attributes

    def get_name(self) -> str | None:
        return self.attributes.get("name")

    def set_name(self, name: str | None) -> "Node":
        self.attributes["name"] = name
        return self

    @property
    def name(self) -> str | None:
        """Wire name of the node."""
        return self.get_name()

    def get_id(self) -> str | None:
        return self.attributes.get("id")

    def set_id(self, node_id: str | None = None) -> "Node":
        """
        Set the HTML id, generating one from the name when none is given.
        """
        self._assign_id(node_id if node_id else generate_id(self.get_name()))
        return self

    def _assign_id(self, node_id: str) -> None:
        self.attributes["id"] = node_id

    @property
    def id(self) -> str | None:
        """HTML id of the node."""
        return self.get_id()

    def get_attribute(self, name: str) -> Any:
        return self.attributes.get(name.lower())

    def set_attribute(self, name: str, value: Any = None) -> "Node":
        """
        Set an HTML attribute.

        Watched attributes (``name``, ``id`` and whatever subclasses add) are
        routed through `_on_attribute_change` so that the node can keep its
        internal state in sync or refuse the change.
        """
        name = name.lower()
        if name in self._watched_attributes:
            self._on_attribute_change(name, value)
        else:
            self.attributes[name] = value
        return self

    def remove_attribute(self, name: str) -> "Node":
        name = name.lower()
        if name in self._watched_attributes:
            self._on_attribute_change(name, None)
        else:
            self.attributes.pop(name, None)
        return self

    def _on_attribute_change(self, name: str, value: Any) -> None:
        if name == "name":
            self.set_name(value)
        elif name == "id":
            self.set_id(value)

    def get_label(self) -> Any:
        return self.data.get("label")

    def set_label(self, label: Any) -> "Node":
        self.data["label"] = label
        return self

    # Tree structure

    @property
    def container(self) -> Optional["Container"]:
        """Container owning this node, or None if detached."""
        return self._container

    def _validate_container(self, container: "Container") -> None:
        """Check that this node may be placed into the given container.

        Called before any state is changed, so that a refused insertion leaves
        the tree untouched.
        """
        node: Node | None = container
        while node is not None:
            if node is self:
                raise InvalidInputError("Cannot add a container to its own descendant")
            node = node.container

    def _set_container(self, container: Optional["Container"]) -> None:
        """Record the owning container; values are re-resolved on attach."""
        self._container = container
        if container is not None:
            self.update_value()

    def children(self) -> list["Node"]:
        """Return direct children; leaves have none."""
        return []

    def is_container(self) -> bool:
        return False

    def __iter__(self) -> Iterator["Node"]:
        return iter(self.children())

    def get_data_sources(self) -> list["DataSource"]:
        """Return the data sources of the form this node belongs to."""
        if self._container is None:
            return []
        return self._container.get_data_sources()

    # Values

    @abstractmethod
    def get_raw_value(self) -> Any:
        """Return the value without applying filters."""
        pass

    def get_value(self) -> Any:
        """Return the value with this node's filters applied."""
        value = self.get_raw_value()
        return None if value is None else self._apply_filters(value)

    @abstractmethod
    def set_value(self, value: Any) -> "Node":
        pass

    @abstractmethod
    def update_value(self) -> None:
        """Re-resolve the value from the available data sources."""
        pass

    def add_filter(self, callback: ValueFilter, *args: Any) -> "Node":
        """
        Append a value filter.

        Filters are applied in registration order; each receives the current
        value followed by ``args`` and returns the new value.

        Raises:
            InvalidInputError: If callback is not callable
        """
        if not callable(callback):
            raise InvalidInputError("Filter should be a callable")
        self._filters.append((callback, args))
        return self

    def _apply_filters(self, value: Any) -> Any:
        for callback, args in self._filters:
            value = callback(value, *args)
        return value

    # Frozen state

    def toggle_frozen(self, freeze: bool | None = None) -> bool:
        """
        Change or query the frozen state.

        Params:
            freeze: New state, or None to only query it

        Returns:
            Whether the node is frozen after the call
        """
        if freeze is not None:
            self._frozen = bool(freeze)
        return self._frozen

    def is_frozen(self) -> bool:
        return self._frozen

    def persistent_freeze(self, persistent: bool | None = None) -> bool:
        """
        Change or query persistent freeze.

        A frozen element with persistent freeze still submits its value in a
        hidden field, so its submitted value is trusted.
        """
        if persistent is not None:
            self._persistent = bool(persistent)
        return self._persistent

    # Validation

    def add_rule(
        self, rule: "Rule | str", message: str = "", config: Any = None
    ) -> "Rule":
        """
        Attach a validation rule.

        Params:
            rule: A Rule instance, or a registered rule type name
            message: Error message when a rule is created from a type name
            config: Rule configuration when a rule is created from a type name

        Returns:
            The attached rule
        """
        from formtree.rules.core import Rule, create_rule

        if not isinstance(rule, Rule):
            rule = create_rule(rule, message, config)
        rule.set_owner(self)
        self._rules.append(rule)
        return rule

    def remove_rule(self, rule: "Rule") -> "Rule":
        self._rules = [existing for existing in self._rules if existing is not rule]
        rule.set_owner(None)
        return rule

    def get_rules(self) -> list["Rule"]:
        return list(self._rules)

    def validate(self) -> bool:
        """
        Check the node's own rules.

        Rules run in order until one of them sets an error.

        Returns:
            Whether the node has no error afterwards
        """
        self._error = None
        for rule in self._rules:
            if self._error is not None:
                break
            rule.validate()
        return self._error is None

    def get_error(self) -> str | None:
        return self._error

    def set_error(self, error: str | None = None) -> "Node":
        self._error = error or None
        return self

    # Rendering

    @abstractmethod
    def render(self, renderer: "Renderer") -> "Renderer":
        """Push this node into the renderer."""
        pass

    def render_client_rules(self, builder: "ScriptBuilder") -> None:
        """Pass the client-side parts of this node's rules to the script builder."""
        for rule in self._rules:
            script = rule.get_javascript()
            if script:
                builder.add_rule(script)
