"""
Renderers turning form trees into output.
"""

from formtree.rendering.base import Renderer
from formtree.rendering.default import DefaultRenderer
from formtree.rendering.script import ScriptBuilder

__all__ = ["DefaultRenderer", "Renderer", "ScriptBuilder"]
