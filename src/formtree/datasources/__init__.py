"""
Data sources supplying values to form elements.
"""

from formtree.datasources.array import ArrayDataSource, lookup_value
from formtree.datasources.base import DataSource, SubmitDataSource
from formtree.datasources.request import InboundRequest, RequestDataSource

__all__ = [
    "ArrayDataSource",
    "DataSource",
    "InboundRequest",
    "RequestDataSource",
    "SubmitDataSource",
    "lookup_value",
]
