"""REST API endpoints for BitMEX."""

from bitmex.rest.announcements import AnnouncementsAPI
from bitmex.rest.instruments import InstrumentsAPI
from bitmex.rest.orders import OrdersAPI
from bitmex.rest.positions import PositionsAPI
from bitmex.rest.quotes import QuotesAPI

__all__ = [
    "AnnouncementsAPI",
    "InstrumentsAPI",
    "OrdersAPI",
    "PositionsAPI",
    "QuotesAPI",
]
