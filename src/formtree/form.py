"""
The form: root of a form tree.

A Form is a container bound to an ordered list of data sources. It decides
once, at construction, whether the current request is a submission of this
form, strips internal bookkeeping fields from the values it returns, and
drives validation and rendering of the whole tree.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, ClassVar, Literal

from formtree.containers.container import Container
from formtree.core.traversal import cascade
from formtree.core.types import ValueMap
from formtree.datasources.base import DataSource, SubmitDataSource
from formtree.datasources.request import InboundRequest, RequestDataSource
from formtree.elements.factory import create_element
from formtree.exceptions import (
    InvalidInputError,
    ReadOnlyAttributeError,
    StructuralViolationError,
    UnsupportedOperationError,
)

if TYPE_CHECKING:
    from formtree.rendering.base import Renderer

logger = logging.getLogger(__name__)

# Prefix reserved for fields the library adds on its own
INTERNAL_PREFIX = "_qf"
# Name prefix of the hidden field that marks a submission of a given form
TRACKING_PREFIX = "_qf__"


def skip_internal_fields(values: ValueMap) -> ValueMap:
    """Drop every top-level key reserved for internal fields."""
    return {key: value for key, value in values.items() if not key.startswith(INTERNAL_PREFIX)}


class Form(Container):
    """
    HTML form, the root of a tree of elements.

    Params:
        form_id: ``id`` attribute of the form; also names the tracking field
        method: HTTP method, case-insensitive; anything but GET means POST
        attributes: Additional HTML attributes
        track_submit: Whether to add a hidden field that tells submissions of
            this form apart from other requests; forced off without an id
        request: Parsed inbound request; an empty one when not given
    """

    _watched_attributes: ClassVar[tuple[str, ...]] = ("id", "method", "name")

    def __init__(
        self,
        form_id: str | None,
        method: str = "post",
        attributes: Mapping[str, Any] | None = None,
        track_submit: bool = True,
        request: InboundRequest | None = None,
    ):
        normalized: Literal["get", "post"] = "get" if str(method).upper() == "GET" else "post"
        track_submit = bool(form_id) and track_submit
        self._datasources: list[DataSource] = []
        self.request = request if request is not None else InboundRequest()

        attributes = dict(attributes or {})
        attributes.pop("name", None)
        attributes["method"] = normalized
        attributes["id"] = form_id or None
        super().__init__(None, attributes)
        self.attributes.setdefault("action", self.request.url)

        if track_submit:
            submitted = self.request.has_param(TRACKING_PREFIX + form_id)
        else:
            submitted = self.request.has_data(normalized)
        logger.debug(
            "Form %r: track_submit=%s, submitted=%s", self.get_id(), track_submit, submitted
        )
        if submitted:
            self.add_data_source(RequestDataSource(self.request, normalized))
        if track_submit:
            self.append_child(
                create_element("hidden", TRACKING_PREFIX + form_id, {"id": "qf:" + form_id})
            )
        self.add_filter(skip_internal_fields)

    def get_type(self) -> str:
        return "form"

    @property
    def method(self) -> str:
        return self.attributes["method"]

    # Read-only identity

    def _on_attribute_change(self, name: str, value: Any) -> None:
        raise ReadOnlyAttributeError(name)

    def set_id(self, node_id: str | None = None) -> "Form":
        raise ReadOnlyAttributeError("id")

    def set_name(self, name: str | None) -> "Form":
        raise ReadOnlyAttributeError("name")

    def _validate_container(self, container: Container) -> None:
        raise StructuralViolationError("Form cannot be added to a container")

    def _set_container(self, container: Container | None) -> None:
        raise StructuralViolationError("Form cannot be added to a container")

    # Data sources

    def add_data_source(self, datasource: DataSource) -> None:
        """
        Append a data source and re-resolve all element values.

        Raises:
            InvalidInputError: If datasource is not a DataSource
        """
        if not isinstance(datasource, DataSource):
            raise InvalidInputError(
                f"Data source should be a DataSource instance, {type(datasource).__name__} given"
            )
        self._datasources.append(datasource)
        logger.debug("Form %r: added %s", self.get_id(), type(datasource).__name__)
        self.update_value()

    def set_data_sources(self, datasources: Sequence[DataSource]) -> None:
        """
        Replace the list of data sources and re-resolve all element values.

        The list is checked as a whole before anything changes.

        Raises:
            InvalidInputError: If any item is not a DataSource
        """
        datasources = list(datasources)
        for datasource in datasources:
            if not isinstance(datasource, DataSource):
                raise InvalidInputError("List should contain only DataSource instances")
        self._datasources = datasources
        logger.debug("Form %r: %d data sources set", self.get_id(), len(datasources))
        self.update_value()

    def get_data_sources(self) -> list[DataSource]:
        return list(self._datasources)

    def set_value(self, value: Any) -> "Form":
        raise UnsupportedOperationError("set_value", self.get_type())

    def is_submitted(self) -> bool:
        """Whether a submit data source is attached to the form."""
        return any(isinstance(datasource, SubmitDataSource) for datasource in self._datasources)

    # Validation and rendering

    def validate(self) -> bool:
        """
        Validate the whole tree.

        A form that was not submitted is never valid, and its elements are
        not checked at all.
        """
        return self.is_submitted() and super().validate()

    def render(self, renderer: "Renderer") -> "Renderer":
        """
        Render the form and its client-side rules.

        Returns:
            The renderer, holding the output
        """
        renderer.start_form(self)
        builder = renderer.get_script_builder()
        builder.set_form_id(self.get_id())
        cascade(self, lambda child: child.render(renderer))
        self.render_client_rules(builder)
        renderer.finish_form(self)
        return renderer
