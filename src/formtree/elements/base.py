"""
Leaf elements of a form tree.
"""

from abc import abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from formtree.core.node import Node
from formtree.datasources.base import SubmitDataSource

if TYPE_CHECKING:
    from formtree.rendering.base import Renderer


class Element(Node):
    """
    Base class for leaf elements.

    An element has its own default value. Whenever the data sources of its
    form change, or it is attached to a form, the value is resolved again: the
    first data source with a non-None value for the element's wire name wins,
    otherwise the default is used.

    Params:
        name: Wire name
        attributes: HTML attributes
        value: Default value
        **data: Additional data such as ``label``
    """

    def __init__(
        self,
        name: str | None = None,
        attributes: Mapping[str, Any] | None = None,
        value: Any = None,
        **data: Any,
    ):
        super().__init__(name, attributes, **data)
        self._default = value
        self._value = value

    def __str__(self) -> str:
        if self.is_frozen():
            return self.get_frozen_html()
        return self.to_html()

    def get_raw_value(self) -> Any:
        return self._value

    def set_name(self, name: str | None) -> "Element":
        """Rename the element; an attached element re-resolves its value."""
        super().set_name(name)
        if self.container is not None:
            self.update_value()
        return self

    def toggle_frozen(self, freeze: bool | None = None) -> bool:
        frozen = self.is_frozen()
        result = super().toggle_frozen(freeze)
        # Whether submitted values are trusted depends on the frozen state
        if result != frozen and self.container is not None:
            self.update_value()
        return result

    def persistent_freeze(self, persistent: bool | None = None) -> bool:
        current = self._persistent
        result = super().persistent_freeze(persistent)
        if result != current and self.container is not None:
            self.update_value()
        return result

    def set_value(self, value: Any) -> "Element":
        """Set the element's own value, which also becomes its default."""
        self._default = value
        self._value = value
        return self

    def update_value(self) -> None:
        # Submitted values are not trusted for frozen elements that did not
        # send their value in a hidden field
        ignore_submit = self.is_frozen() and not self.persistent_freeze()
        name = self.get_name()
        for datasource in self.get_data_sources():
            if ignore_submit and isinstance(datasource, SubmitDataSource):
                continue
            value = datasource.get_value(name)
            if value is not None:
                self._value = value
                return
        self._value = self._default

    def render(self, renderer: "Renderer") -> "Renderer":
        renderer.render_element(self)
        return renderer

    @abstractmethod
    def to_html(self) -> str:
        """Return the HTML of the editable control."""
        pass

    def get_frozen_html(self) -> str:
        """Return the HTML shown instead of the control when frozen."""
        return ""
