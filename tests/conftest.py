"""Test configuration and fixtures."""

import json
from typing import Any
from typing import List
from typing import Optional

import httpx
import pytest

from bitmex.models import Credential
from bitmex.models import HTTPConfig
from bitmex.transport import Transport

# Key pair from BitMEX's API signing documentation
TEST_API_KEY = "LAqUlngMIQkIUjXMUreyu3qn"
TEST_API_SECRET = "chNOOS4KvNXR_Xq4k4c9qsfoKWvnDecLATCRlcBwyKDYnWgO"


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays responses."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._queue: List[Any] = []

    def respond(
        self,
        payload: Any = None,
        status_code: int = 200,
        content: Optional[bytes] = None,
        stream: Optional[httpx.AsyncByteStream] = None,
    ) -> None:
        """Queue a response."""
        if stream is not None:
            self._queue.append(httpx.Response(status_code, stream=stream))
        elif content is not None:
            self._queue.append(httpx.Response(status_code, content=content))
        else:
            self._queue.append(
                httpx.Response(status_code, content=json.dumps(payload).encode("utf-8"))
            )

    def fail(self, exc: Exception) -> None:
        """Queue a transport-level failure."""
        self._queue.append(exc)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self._queue.pop(0) if self._queue else httpx.Response(200, content=b"[]")
        if isinstance(item, Exception):
            raise item
        return item


class FailingStream(httpx.AsyncByteStream):
    """Response body that breaks off mid-read."""

    async def __aiter__(self):
        raise httpx.ReadError("Connection reset while reading body")
        yield b""  # pragma: no cover


@pytest.fixture
def credential():
    """API credential fixture."""
    return Credential(key=TEST_API_KEY, secret=TEST_API_SECRET)


@pytest.fixture
def http_config():
    """Transport configuration fixture."""
    return HTTPConfig(base_url="http://a.com/api/v1")


@pytest.fixture
def handler():
    """Recording mock handler fixture."""
    return RecordingHandler()


@pytest.fixture
def mock_client(handler):
    """httpx client wired to the recording handler."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def signed_transport(credential, http_config, mock_client):
    """Transport holding a credential."""
    return Transport(credential, config=http_config, client=mock_client)


@pytest.fixture
def public_transport(http_config, mock_client):
    """Transport without a credential."""
    return Transport(config=http_config, client=mock_client)


@pytest.fixture
def instrument_payload():
    """Sample instrument rows as returned by GET /instrument."""
    return [
        {
            "symbol": "XBTUSD",
            "rootSymbol": "XBT",
            "state": "Open",
            "typ": "FFWCSX",
            "quoteCurrency": "USD",
            "settlCurrency": "XBt",
            "tickSize": 0.5,
            "lotSize": 100,
            "lastPrice": 64123.5,
            "markPrice": 64120.12,
            "fundingRate": 0.0001,
            "timestamp": "2024-01-01T12:00:00.000Z",
            "isQuanto": False,
        }
    ]


@pytest.fixture
def order_payload():
    """Sample order as returned by POST /order."""
    return {
        "orderID": "8b2a6e3c-4c9f-4b9e-b8a1-9a1c3b2d4e5f",
        "clOrdID": "mm_bitmex_1a/oemUeQ4CAJZgP3fjHsA",
        "account": 12345,
        "symbol": "XBTUSD",
        "side": "Buy",
        "orderQty": 100,
        "price": 64000,
        "ordType": "Limit",
        "timeInForce": "GoodTillCancel",
        "ordStatus": "New",
        "leavesQty": 100,
        "cumQty": 0,
        "transactTime": "2024-01-01T12:00:00.000Z",
        "timestamp": "2024-01-01T12:00:00.000Z",
    }


@pytest.fixture
def api_error_payload():
    """Sample error envelope."""
    return {"error": {"message": "Invalid orderQty", "name": "HTTPError"}}


@pytest.fixture
def failing_stream():
    """Response body that fails while being read."""
    return FailingStream()
