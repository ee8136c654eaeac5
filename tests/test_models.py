"""Tests for pydantic models."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from bitmex.models import Announcement
from bitmex.models import ApiErrorEnvelope
from bitmex.models import Credential
from bitmex.models import HTTPConfig
from bitmex.models import Instrument
from bitmex.models import Order
from bitmex.models import OrdType
from bitmex.models import Position
from bitmex.models import PRODUCTION_URL
from bitmex.models import Side
from bitmex.models import TESTNET_URL


class TestCredential:
    """Test credential model."""

    def test_secret_not_in_repr(self, credential):
        assert credential.key in repr(credential)
        assert credential.secret not in repr(credential)
        assert credential.secret not in str(credential)

    def test_immutable(self, credential):
        with pytest.raises(ValidationError):
            credential.secret = "other"

    def test_required_fields(self):
        with pytest.raises(ValidationError):
            Credential(key="only-key")


class TestHTTPConfig:
    """Test transport configuration."""

    def test_defaults(self):
        config = HTTPConfig()
        assert config.api_url == PRODUCTION_URL
        assert config.timeout is None
        assert config.sign_with_request_verb is False

    def test_testnet(self):
        assert HTTPConfig(testnet=True).api_url == TESTNET_URL

    def test_explicit_base_url_wins(self):
        config = HTTPConfig(base_url="http://localhost:8080/api/v1/", testnet=True)
        assert config.api_url == "http://localhost:8080/api/v1"

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            HTTPConfig(max_retries=3)


class TestErrorEnvelope:
    """Test error envelope model."""

    def test_parse(self):
        envelope = ApiErrorEnvelope.model_validate({"error": {"message": "x", "name": "y"}})
        assert envelope.error.message == "x"
        assert envelope.error.name == "y"

    def test_message_required(self):
        with pytest.raises(ValidationError):
            ApiErrorEnvelope.model_validate({"error": {"name": "y"}})


class TestExchangeModels:
    """Test exchange payload models."""

    def test_instrument_aliases_and_extras(self, instrument_payload):
        instrument = Instrument.model_validate(instrument_payload[0])
        assert instrument.tick_size == Decimal("0.5")
        assert instrument.settl_currency == "XBt"
        # Fields not modelled are kept
        assert instrument.model_extra["isQuanto"] is False

    def test_order(self, order_payload):
        order = Order.model_validate(order_payload)
        assert order.order_id == order_payload["orderID"]
        assert order.cl_ord_id == "mm_bitmex_1a/oemUeQ4CAJZgP3fjHsA"
        assert order.side == Side.BUY.value
        assert order.ord_type == OrdType.LIMIT.value
        assert order.order_qty == Decimal("100")

    def test_order_requires_id(self):
        with pytest.raises(ValidationError):
            Order.model_validate({"symbol": "XBTUSD"})

    def test_populate_by_field_name(self):
        position = Position(account=1, symbol="XBTUSD", current_qty=Decimal("10"))
        assert position.current_qty == Decimal("10")

    def test_announcement(self):
        announcement = Announcement.model_validate(
            {"id": 7, "title": "Maintenance", "date": "2024-01-01T00:00:00Z"}
        )
        assert announcement.id == 7
        assert announcement.date.year == 2024
