"""
Data source kinds for form values.

A data source is a read-only provider of values keyed by wire name. The form
asks its data sources in list order and takes the first non-None answer.
A SubmitDataSource is a data source that holds values the user actually
submitted; its presence is what marks a form as submitted.
"""

from abc import ABC, abstractmethod
from typing import Any


class DataSource(ABC):
    """Abstract base class for data sources."""

    @abstractmethod
    def get_value(self, name: str) -> Any:
        """
        Return the value for a wire name.

        Params:
            name: Wire name such as ``addr[city]``

        Returns:
            The value, or None if the source has none for this name
        """
        pass


class SubmitDataSource(DataSource):
    """Data source containing submitted values."""

    def get_upload(self, name: str) -> Any:
        """Return information about an uploaded file, or None."""
        return None
