"""
Inbound request snapshot and the submit data source built from it.

Request data is never read from process-wide state: the application parses
the request itself and hands an InboundRequest to the form.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from formtree.datasources.array import ArrayDataSource, lookup_value
from formtree.datasources.base import SubmitDataSource


class InboundRequest(BaseModel):
    """
    Read-only snapshot of the parsed request a form is built for.

    Params:
        url: URL of the current request, used as the default form action
        query: Parsed query string parameters (nested mappings allowed)
        body: Parsed request body parameters (nested mappings allowed)
        files: Uploaded file information keyed like body parameters
    """

    model_config = ConfigDict(frozen=True)

    url: str = ""
    query: dict[str, Any] = Field(default_factory=dict)
    body: dict[str, Any] = Field(default_factory=dict)
    files: dict[str, Any] = Field(default_factory=dict)

    def has_param(self, name: str) -> bool:
        """Whether a parameter is present in the query string or the body."""
        return name in self.query or name in self.body

    def has_data(self, method: Literal["get", "post"]) -> bool:
        """Whether any data was sent with the given method."""
        if method == "get":
            return bool(self.query)
        return bool(self.body) or bool(self.files)


class RequestDataSource(ArrayDataSource, SubmitDataSource):
    """
    Submit data source holding the values sent with the request.

    Params:
        request: Parsed inbound request
        method: Which part of the request the form reads, ``get`` or ``post``
    """

    def __init__(self, request: InboundRequest, method: Literal["get", "post"] = "post"):
        self.request = request
        self.method = method
        super().__init__(request.query if method == "get" else request.body)

    def get_upload(self, name: str) -> Any:
        if self.method == "get":
            return None
        return lookup_value(self.request.files, name)
