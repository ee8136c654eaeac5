"""
Instruments REST API client.

Public endpoints describing tradeable contracts and indices.
"""

from typing import Any, Dict, List, Optional

from .base import BaseAPI
from ..models import Instrument


class InstrumentsAPI(BaseAPI):
    """Instrument endpoints."""

    async def get_instruments(
        self,
        symbol: Optional[str] = None,
        filter: Optional[Dict[str, Any]] = None,
        count: Optional[int] = None,
        start: Optional[int] = None,
        reverse: Optional[bool] = None,
    ) -> List[Instrument]:
        """Get instruments, optionally narrowed by symbol or filter."""
        params = self._params(symbol=symbol, filter=filter, count=count, start=start, reverse=reverse)
        return await self.transport.get("instrument", params, List[Instrument])

    async def get_active(self) -> List[Instrument]:
        """Get all open and pending instruments."""
        return await self.transport.get("instrument/active", None, List[Instrument])
