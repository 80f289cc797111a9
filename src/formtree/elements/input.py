"""
``<input>`` based elements.
"""

from collections.abc import Mapping
from html import escape
from typing import TYPE_CHECKING, Any, ClassVar

from formtree.core.attributes import render_attributes
from formtree.datasources.base import SubmitDataSource
from formtree.elements.base import Element

if TYPE_CHECKING:
    from formtree.rendering.base import Renderer


class Input(Element):
    """Base for ``<input>`` elements; ``input_type`` sets the type attribute."""

    input_type: ClassVar[str] = "text"

    def __init__(
        self,
        name: str | None = None,
        attributes: Mapping[str, Any] | None = None,
        value: Any = None,
        **data: Any,
    ):
        super().__init__(name, attributes, value, **data)
        self.attributes["type"] = self.input_type

    def get_type(self) -> str:
        return self.input_type

    def get_raw_value(self) -> Any:
        # Browsers do not submit disabled controls
        if self.get_attribute("disabled"):
            return None
        return super().get_raw_value()

    def to_html(self) -> str:
        attributes = dict(self.attributes)
        attributes["value"] = self._value
        return f"<input{render_attributes(attributes)} />"

    def get_frozen_html(self) -> str:
        html = "" if self._value is None else escape(str(self._value))
        if self.persistent_freeze():
            html += self._persistent_html()
        return html

    def _persistent_html(self) -> str:
        hidden = {
            "type": "hidden",
            "name": self.get_name(),
            "value": self._value,
            "id": self.get_id(),
        }
        return f"<input{render_attributes(hidden)} />"


class TextInput(Input):
    input_type = "text"


class PasswordInput(Input):
    input_type = "password"

    def get_frozen_html(self) -> str:
        html = "" if self._value in (None, "") else "********"
        if self.persistent_freeze():
            html += self._persistent_html()
        return html


class HiddenInput(Input):
    """
    Hidden field.

    Hidden fields cannot be frozen: they are always rendered as a hidden
    control, and renderers get them through ``render_hidden``.
    """

    input_type = "hidden"

    def toggle_frozen(self, freeze: bool | None = None) -> bool:
        return False

    def render(self, renderer: "Renderer") -> "Renderer":
        renderer.render_hidden(self)
        return renderer


class SubmitInput(Input):
    """
    Submit button.

    The ``value`` is the button caption. The element only has a value when
    the form was submitted using this button, so it is resolved from submit
    data sources alone.
    """

    input_type = "submit"

    def __init__(
        self,
        name: str | None = None,
        attributes: Mapping[str, Any] | None = None,
        value: Any = None,
        **data: Any,
    ):
        super().__init__(name, attributes, None, **data)
        self._caption = value
        self._submitted: Any = None

    def get_raw_value(self) -> Any:
        if self.get_attribute("disabled"):
            return None
        return self._submitted

    def set_value(self, value: Any) -> "SubmitInput":
        self._caption = value
        return self

    def update_value(self) -> None:
        self._submitted = None
        for datasource in self.get_data_sources():
            if isinstance(datasource, SubmitDataSource):
                value = datasource.get_value(self.get_name())
                if value is not None:
                    self._submitted = value
                    return

    def to_html(self) -> str:
        attributes = dict(self.attributes)
        attributes["value"] = self._caption
        return f"<input{render_attributes(attributes)} />"

    def get_frozen_html(self) -> str:
        return ""
