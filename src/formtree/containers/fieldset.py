"""
Fieldset container.
"""

from formtree.containers.container import Container


class Fieldset(Container):
    """
    Visual grouping of elements rendered as ``<fieldset>``.

    Unlike a Group, a fieldset does not touch the names of its children. Its
    ``label`` data is rendered as the legend.
    """

    def get_type(self) -> str:
        return "fieldset"
