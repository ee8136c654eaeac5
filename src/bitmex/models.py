"""Pydantic models for BitMEX API entities."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

PRODUCTION_URL = "https://www.bitmex.com/api/v1"
TESTNET_URL = "https://testnet.bitmex.com/api/v1"


class BitMEXBaseModel(BaseModel):
    """Base model with common configuration."""

    model_config = ConfigDict(
        # Use enum values instead of enum objects
        use_enum_values=True,
        # Validate field assignment
        validate_assignment=True,
        # Allow population by field name and alias
        populate_by_name=True,
        # Forbid extra fields unless explicitly allowed
        extra="forbid",
        # Use arbitrary types like Decimal
        arbitrary_types_allowed=True,
    )


class ExchangeModel(BitMEXBaseModel):
    """Base for exchange payloads, which routinely grow new fields."""

    model_config = ConfigDict(extra="allow")


# ============================================================================
# Enums
# ============================================================================

class Side(str, Enum):
    """Order side enumeration."""
    BUY = "Buy"
    SELL = "Sell"


class OrdType(str, Enum):
    """Order type enumeration."""
    MARKET = "Market"
    LIMIT = "Limit"
    STOP = "Stop"
    STOP_LIMIT = "StopLimit"
    MARKET_IF_TOUCHED = "MarketIfTouched"
    LIMIT_IF_TOUCHED = "LimitIfTouched"
    PEGGED = "Pegged"


# ============================================================================
# Authentication Models
# ============================================================================

class Credential(BitMEXBaseModel):
    """API key id and secret. Immutable once constructed."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="API key id")
    secret: str = Field(..., description="API secret", repr=False)


# ============================================================================
# Response Envelope Models
# ============================================================================

class ApiErrorBody(BitMEXBaseModel):
    """Error object reported by the exchange."""

    model_config = ConfigDict(extra="allow")

    message: str = Field(..., description="Error message")
    name: Optional[str] = Field(None, description="Error name")


class ApiErrorEnvelope(BitMEXBaseModel):
    """``{"error": {...}}`` wrapper marking a failed request."""

    model_config = ConfigDict(extra="allow")

    error: ApiErrorBody = Field(..., description="Error object")


# ============================================================================
# Configuration Models
# ============================================================================

class HTTPConfig(BitMEXBaseModel):
    """Transport configuration."""
    base_url: Optional[str] = Field(None, description="Explicit API base URL")
    testnet: bool = Field(False, description="Use the testnet host")
    timeout: Optional[float] = Field(None, description="Request timeout in seconds, None disables it")
    user_agent: str = Field("bitmex-python-sdk/1.0.0", description="User agent string")
    sign_with_request_verb: bool = Field(
        False,
        description="Sign with the request's own verb instead of GET",
    )

    @property
    def api_url(self) -> str:
        """Base URL requests are joined onto."""
        if self.base_url:
            return self.base_url.rstrip("/")
        return TESTNET_URL if self.testnet else PRODUCTION_URL


# ============================================================================
# Exchange Models
# ============================================================================

class Instrument(ExchangeModel):
    """Tradeable contract or index."""
    symbol: str = Field(..., description="Instrument symbol")
    root_symbol: Optional[str] = Field(None, alias="rootSymbol")
    state: Optional[str] = Field(None, description="Listing state")
    typ: Optional[str] = Field(None, description="Instrument type code")
    listing: Optional[datetime] = None
    expiry: Optional[datetime] = None
    underlying: Optional[str] = None
    quote_currency: Optional[str] = Field(None, alias="quoteCurrency")
    settl_currency: Optional[str] = Field(None, alias="settlCurrency")
    tick_size: Optional[Decimal] = Field(None, alias="tickSize")
    lot_size: Optional[Decimal] = Field(None, alias="lotSize")
    max_order_qty: Optional[Decimal] = Field(None, alias="maxOrderQty")
    last_price: Optional[Decimal] = Field(None, alias="lastPrice")
    mark_price: Optional[Decimal] = Field(None, alias="markPrice")
    bid_price: Optional[Decimal] = Field(None, alias="bidPrice")
    ask_price: Optional[Decimal] = Field(None, alias="askPrice")
    volume24h: Optional[Decimal] = None
    open_interest: Optional[Decimal] = Field(None, alias="openInterest")
    funding_rate: Optional[Decimal] = Field(None, alias="fundingRate")
    timestamp: Optional[datetime] = None


class Quote(ExchangeModel):
    """Best bid/offer snapshot."""
    timestamp: datetime
    symbol: str
    bid_size: Optional[Decimal] = Field(None, alias="bidSize")
    bid_price: Optional[Decimal] = Field(None, alias="bidPrice")
    ask_price: Optional[Decimal] = Field(None, alias="askPrice")
    ask_size: Optional[Decimal] = Field(None, alias="askSize")


class Order(ExchangeModel):
    """Order as reported by the exchange."""
    order_id: str = Field(..., alias="orderID")
    cl_ord_id: Optional[str] = Field(None, alias="clOrdID")
    account: Optional[int] = None
    symbol: Optional[str] = None
    side: Optional[Side] = None
    order_qty: Optional[Decimal] = Field(None, alias="orderQty")
    price: Optional[Decimal] = None
    stop_px: Optional[Decimal] = Field(None, alias="stopPx")
    ord_type: Optional[OrdType] = Field(None, alias="ordType")
    time_in_force: Optional[str] = Field(None, alias="timeInForce")
    exec_inst: Optional[str] = Field(None, alias="execInst")
    ord_status: Optional[str] = Field(None, alias="ordStatus")
    leaves_qty: Optional[Decimal] = Field(None, alias="leavesQty")
    cum_qty: Optional[Decimal] = Field(None, alias="cumQty")
    avg_px: Optional[Decimal] = Field(None, alias="avgPx")
    text: Optional[str] = None
    transact_time: Optional[datetime] = Field(None, alias="transactTime")
    timestamp: Optional[datetime] = None


class Position(ExchangeModel):
    """Open or historical position."""
    account: int
    symbol: str
    currency: Optional[str] = None
    current_qty: Optional[Decimal] = Field(None, alias="currentQty")
    avg_entry_price: Optional[Decimal] = Field(None, alias="avgEntryPrice")
    liquidation_price: Optional[Decimal] = Field(None, alias="liquidationPrice")
    leverage: Optional[Decimal] = None
    mark_price: Optional[Decimal] = Field(None, alias="markPrice")
    unrealised_pnl: Optional[Decimal] = Field(None, alias="unrealisedPnl")
    realised_pnl: Optional[Decimal] = Field(None, alias="realisedPnl")
    is_open: Optional[bool] = Field(None, alias="isOpen")
    timestamp: Optional[datetime] = None


class Announcement(ExchangeModel):
    """Site announcement."""
    id: int
    link: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    date: Optional[datetime] = None
