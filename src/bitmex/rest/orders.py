"""
Orders REST API client.

Provides methods for placing, amending, and cancelling orders. All calls are
signed.
"""

from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

from .base import BaseAPI
from ..models import Order, OrdType, Side

Number = Union[int, float, Decimal, str]


class OrdersAPI(BaseAPI):
    """Order endpoints."""

    async def get_orders(
        self,
        symbol: Optional[str] = None,
        filter: Optional[Dict[str, Any]] = None,
        count: Optional[int] = None,
        reverse: Optional[bool] = None,
    ) -> List[Order]:
        """Get orders of the authenticated account."""
        params = self._params(symbol=symbol, filter=filter, count=count, reverse=reverse)
        return await self.transport.signed_get("order", params, List[Order])

    async def place_order(
        self,
        symbol: str,
        order_qty: Number,
        price: Optional[Number] = None,
        ord_type: Optional[Union[OrdType, str]] = None,
        side: Optional[Union[Side, str]] = None,
        cl_ord_id: Optional[str] = None,
        **extra: Any,
    ) -> Order:
        """Place a new order.

        Args:
            symbol: Instrument symbol
            order_qty: Quantity; negative sells when ``side`` is omitted
            price: Limit price
            ord_type: Order type, Limit when a price is given
            side: Order side
            cl_ord_id: Client order id
            **extra: Further order fields by their wire name (e.g. ``execInst``)

        Returns:
            The created order
        """
        data = self._params(
            symbol=symbol,
            orderQty=order_qty,
            price=price,
            ordType=ord_type,
            side=side,
            clOrdID=cl_ord_id,
            **extra,
        )
        return await self.transport.signed_post("order", data, Order)

    async def amend_order(
        self,
        order_id: Optional[str] = None,
        orig_cl_ord_id: Optional[str] = None,
        **fields: Any,
    ) -> Order:
        """Amend a live order.

        Args:
            order_id: Exchange order id
            orig_cl_ord_id: Client order id of the order to amend
            **fields: Fields to change by their wire name (e.g. ``price``)

        Returns:
            The amended order

        Raises:
            ValueError: Neither order id is given
        """
        if order_id is None and orig_cl_ord_id is None:
            raise ValueError("amend_order needs order_id or orig_cl_ord_id")
        params = self._params(orderID=order_id, origClOrdID=orig_cl_ord_id, **fields)
        return await self.transport.signed_put("order", params, Order)

    async def cancel_order(
        self,
        order_id: Optional[str] = None,
        cl_ord_id: Optional[str] = None,
        text: Optional[str] = None,
    ) -> List[Order]:
        """Cancel orders by exchange id or client id."""
        if order_id is None and cl_ord_id is None:
            raise ValueError("cancel_order needs order_id or cl_ord_id")
        params = self._params(orderID=order_id, clOrdID=cl_ord_id, text=text)
        return await self.transport.signed_delete("order", params, List[Order])

    async def cancel_all(self, symbol: Optional[str] = None) -> List[Order]:
        """Cancel every open order, optionally for one symbol."""
        params = self._params(symbol=symbol)
        return await self.transport.signed_delete("order/all", params, List[Order])
