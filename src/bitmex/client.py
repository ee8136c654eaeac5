"""BitMEX Python SDK - client facade.

Bundles one shared transport with the REST endpoint groups.

Example:
    ```python
    from bitmex import BitMEXClient

    async with BitMEXClient(api_key="...", api_secret="...", testnet=True) as client:
        instruments = await client.instruments.get_active()
        order = await client.orders.place_order("XBTUSD", 100, price=20000)
    ```
"""

import logging
from typing import Optional

from .env_config import load_config_from_env
from .env_config import load_credential_from_env
from .models import Credential
from .models import HTTPConfig
from .rest.announcements import AnnouncementsAPI
from .rest.instruments import InstrumentsAPI
from .rest.orders import OrdersAPI
from .rest.positions import PositionsAPI
from .rest.quotes import QuotesAPI
from .transport import Transport

logger = logging.getLogger(__name__)


class BitMEXClient:
    """Main BitMEX SDK client."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        testnet: bool = False,
        config: Optional[HTTPConfig] = None,
        transport: Optional[Transport] = None,
    ):
        """Initialize BitMEX client.

        Args:
            api_key: API key id; signed endpoints need key and secret
            api_secret: API secret
            testnet: Use the testnet host (ignored when ``config`` is given)
            config: Complete transport configuration
            transport: Pre-built transport (takes precedence)
        """
        if transport is None:
            credential = None
            if api_key and api_secret:
                credential = Credential(key=api_key, secret=api_secret)
            transport = Transport(credential, config=config or HTTPConfig(testnet=testnet))

        self.transport = transport

        self.instruments = InstrumentsAPI(transport)
        self.quotes = QuotesAPI(transport)
        self.announcements = AnnouncementsAPI(transport)
        self.orders = OrdersAPI(transport)
        self.positions = PositionsAPI(transport)

        logger.debug(
            f"BitMEX client for {transport.base_url} "
            f"({'signed' if transport.credential else 'public only'})"
        )

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "BitMEXClient":
        """Create a client from BITMEX_* environment variables."""
        config = load_config_from_env(dotenv_path)
        credential = load_credential_from_env(dotenv_path, use_dotenv=False)
        return cls(transport=Transport(credential, config=config))

    async def __aenter__(self) -> "BitMEXClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the underlying transport."""
        await self.transport.aclose()
