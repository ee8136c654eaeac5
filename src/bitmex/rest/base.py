"""Base class for REST API endpoint groups."""

from __future__ import annotations

from typing import Any
from typing import Dict

from bitmex.transport import Transport
from bitmex.utils import stringify


class BaseAPI:
    """Base class for REST API endpoint groups."""

    def __init__(self, transport: Transport) -> None:
        """Initialize base API.

        Args:
            transport: Transport shared by all endpoint groups
        """
        self.transport = transport

    @staticmethod
    def _params(**fields: Any) -> Dict[str, str]:
        """Build request fields, dropping unset ones.

        Args:
            **fields: Field values keyed by their wire name

        Returns:
            String-valued mapping
        """
        return {name: stringify(value) for name, value in fields.items() if value is not None}
