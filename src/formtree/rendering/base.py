"""
Renderer contract.

Renderers are visitors: the form tree pushes its nodes into the renderer in
tree order, and the renderer accumulates whatever output it produces.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from formtree.rendering.script import ScriptBuilder

if TYPE_CHECKING:
    from formtree.containers.container import Container
    from formtree.core.node import Node
    from formtree.elements.base import Element
    from formtree.form import Form


class Renderer(ABC):
    """
    Abstract base class for renderers.

    Params:
        script_builder: Collector for client-side rule scripts; a fresh one
            is created when not given
    """

    def __init__(self, script_builder: ScriptBuilder | None = None):
        self._script_builder = script_builder or ScriptBuilder()

    def get_script_builder(self) -> ScriptBuilder:
        return self._script_builder

    def set_script_builder(self, builder: ScriptBuilder) -> None:
        self._script_builder = builder

    def render(self, node: "Node") -> "Renderer":
        """Render a node (and its subtree) into this renderer."""
        node.render(self)
        return self

    @abstractmethod
    def start_form(self, form: "Form") -> None:
        pass

    @abstractmethod
    def finish_form(self, form: "Form") -> None:
        pass

    @abstractmethod
    def start_group(self, group: "Container") -> None:
        pass

    @abstractmethod
    def finish_group(self, group: "Container") -> None:
        pass

    @abstractmethod
    def render_element(self, element: "Element") -> None:
        pass

    def render_hidden(self, element: "Element") -> None:
        """Render a hidden element; by default like any other element."""
        self.render_element(element)
