"""
Plain HTML renderer.
"""

from html import escape
from typing import TYPE_CHECKING

from formtree.config import get_option
from formtree.core.attributes import render_attributes
from formtree.rendering.base import Renderer
from formtree.rendering.script import ScriptBuilder

if TYPE_CHECKING:
    from formtree.containers.container import Container
    from formtree.elements.base import Element
    from formtree.form import Form


class DefaultRenderer(Renderer):
    """
    Renders a form tree as nested ``<div>`` markup.

    Every element becomes a row with an optional label and error message.
    Hidden elements are collected and output at the top of their form.
    Completed forms accumulate; ``str(renderer)`` returns all of them.
    """

    def __init__(self, script_builder: ScriptBuilder | None = None):
        super().__init__(script_builder)
        self.reset()

    def reset(self) -> None:
        """Discard all output produced so far."""
        self._output: list[str] = []
        self._stack: list[list[str]] = [self._output]
        self._hidden: list[list[str]] = [[]]

    def __str__(self) -> str:
        linebreak = get_option("linebreak")
        return linebreak.join(self._hidden[0] + self._output)

    def start_form(self, form: "Form") -> None:
        self._stack.append([])
        self._hidden.append([])

    def finish_form(self, form: "Form") -> None:
        linebreak = get_option("linebreak")
        rows = self._stack.pop()
        hidden = self._hidden.pop()
        parts = [f"<form{render_attributes(form.attributes)}>"]
        if hidden:
            parts.append('<div style="display: none;">' + "".join(hidden) + "</div>")
        parts.extend(rows)
        parts.append("</form>")
        script = self.get_script_builder().get_form_javascript(form.get_id())
        if script:
            parts.append(script)
        self._stack[-1].append(linebreak.join(parts))

    def start_group(self, group: "Container") -> None:
        self._stack.append([])

    def finish_group(self, group: "Container") -> None:
        linebreak = get_option("linebreak")
        rows = self._stack.pop()
        label = group.get_label()
        if group.get_type() == "fieldset":
            legend = f"<legend>{escape(str(label))}</legend>" if label else ""
            html = f'<fieldset id="{escape(str(group.get_id()))}">{legend}'
            html += linebreak.join(rows) + "</fieldset>"
        else:
            html = self._row(group, linebreak.join(rows), "group")
        self._stack[-1].append(html)

    def render_element(self, element: "Element") -> None:
        self._stack[-1].append(self._row(element, str(element), "element"))

    def render_hidden(self, element: "Element") -> None:
        self._hidden[-1].append(str(element))

    def _row(self, node, content: str, css_class: str) -> str:
        label = node.get_label()
        error = node.get_error()
        html = '<div class="row">'
        if label:
            html += f'<label for="{escape(str(node.get_id()))}">{escape(str(label))}</label>'
        if error:
            css_class += " error"
        html += f'<div class="{css_class}">'
        if error:
            html += f'<span class="error">{escape(error)}</span>'
        html += content + "</div></div>"
        return html
