"""
Positions REST API client.
"""

from typing import Any, Dict, List, Optional

from .base import BaseAPI
from ..models import Position


class PositionsAPI(BaseAPI):
    """Position endpoints. All calls are signed."""

    async def get_positions(
        self,
        filter: Optional[Dict[str, Any]] = None,
        count: Optional[int] = None,
    ) -> List[Position]:
        """Get positions of the authenticated account.

        Args:
            filter: Field filter, e.g. ``{"isOpen": True}``
            count: Maximum number of rows

        Returns:
            Positions
        """
        params = self._params(filter=filter, count=count)
        return await self.transport.signed_get("position", params, List[Position])
