"""
Quotes REST API client.
"""

from typing import List, Optional

from .base import BaseAPI
from ..models import Quote


class QuotesAPI(BaseAPI):
    """Best bid/offer endpoints."""

    async def get_quotes(
        self,
        symbol: str,
        count: Optional[int] = None,
        reverse: Optional[bool] = None,
    ) -> List[Quote]:
        """Get recent quotes for a symbol, newest first when ``reverse``."""
        params = self._params(symbol=symbol, count=count, reverse=reverse)
        return await self.transport.get("quote", params, List[Quote])
