"""Basic usage examples for the BitMEX Python SDK."""

import asyncio
import logging

from bitmex import BitMEXAPIError
from bitmex import BitMEXClient
from bitmex import BitMEXTransportError
from bitmex.models import OrdType
from bitmex.models import Side
from bitmex.utils import retry_on_transport_error


async def public_data():
    """Read market data without credentials."""
    async with BitMEXClient(testnet=True) as client:
        instruments = await client.instruments.get_active()
        print(f"Found {len(instruments)} active instruments")

        quotes = await client.quotes.get_quotes("XBTUSD", count=1, reverse=True)
        for quote in quotes:
            print(f"{quote.symbol}: {quote.bid_price} / {quote.ask_price}")


async def trading():
    """Place and cancel an order with credentials from BITMEX_* variables."""
    async with BitMEXClient.from_env() as client:
        try:
            order = await client.orders.place_order(
                "XBTUSD",
                100,
                price=10000,
                ord_type=OrdType.LIMIT,
                side=Side.BUY,
                execInst="ParticipateDoNotInitiate",
            )
            print(f"Placed {order.order_id} ({order.ord_status})")

            cancelled = await client.orders.cancel_order(order_id=order.order_id)
            print(f"Cancelled {len(cancelled)} order(s)")
        except BitMEXAPIError as e:
            print(f"Exchange rejected the request: {e}")


@retry_on_transport_error(max_retries=3)
async def positions_with_retry(client: BitMEXClient):
    """Retry policy is layered on by the caller."""
    return await client.positions.get_positions(filter={"isOpen": True})


async def raw_transport():
    """Use the transport directly for endpoints without a wrapper."""
    async with BitMEXClient.from_env() as client:
        try:
            wallet = await client.transport.signed_get("user/wallet", {"currency": "XBt"})
            print(wallet)
            print(await positions_with_retry(client))
        except BitMEXTransportError as e:
            print(f"Network failure: {e}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(public_data())
