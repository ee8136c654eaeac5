"""
Async transport for the BitMEX REST API.

Builds request URLs and bodies, signs private requests, sends them over a
shared httpx client and decodes the response envelope into a typed result
or a BitMEX error. Nothing is retried here; retry policy belongs to the
caller (see ``bitmex.utils.retry_on_transport_error``).
"""

from __future__ import annotations

import logging
from typing import Any
from typing import Optional
from typing import Tuple
from typing import Type
from typing import TypeVar
from typing import Union

import httpx

from bitmex.auth import Signer
from bitmex.errors import BitMEXTimeoutError
from bitmex.errors import BitMEXTransportError
from bitmex.models import Credential
from bitmex.models import HTTPConfig
from bitmex.utils import Params
from bitmex.utils import build_url
from bitmex.utils import decode_response
from bitmex.utils import expires_at
from bitmex.utils import serialize_body

logger = logging.getLogger(__name__)

O = TypeVar("O")

# Verb token BitMEX signatures are computed with unless configured otherwise
SIGNING_VERB = "GET"


class Transport:
    """HTTP transport with optional request signing.

    A transport is read-only after construction and may be shared between
    concurrent tasks.
    """

    def __init__(
        self,
        credential: Optional[Credential] = None,
        config: Optional[HTTPConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Initialize transport.

        Args:
            credential: API credential, required for signed requests only
            config: Transport configuration
            client: Pre-built httpx client; the caller keeps ownership of it
        """
        self._config = config or HTTPConfig()
        self._credential = credential
        self._signer = Signer(credential)
        self._owns_client = client is None

        if client is None:
            client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._config.timeout),
                limits=httpx.Limits(
                    max_keepalive_connections=20,
                    max_connections=100,
                    keepalive_expiry=30.0,
                ),
                headers={"User-Agent": self._config.user_agent},
            )
        self._client = client

    @classmethod
    def with_credential(
        cls,
        api_key: str,
        api_secret: str,
        config: Optional[HTTPConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> Transport:
        """Create a transport able to sign requests.

        Args:
            api_key: API key id
            api_secret: API secret
            config: Transport configuration
            client: Pre-built httpx client

        Returns:
            Transport holding the credential
        """
        return cls(Credential(key=api_key, secret=api_secret), config=config, client=client)

    @property
    def config(self) -> HTTPConfig:
        return self._config

    @property
    def credential(self) -> Optional[Credential]:
        return self._credential

    @property
    def base_url(self) -> str:
        return self._config.api_url

    async def __aenter__(self) -> Transport:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    # Convenience methods
    async def get(
        self,
        endpoint: str,
        params: Optional[Params] = None,
        response_type: Union[Type[O], Any] = Any,
    ) -> O:
        """Make a public GET request."""
        return await self.request("GET", endpoint, params=params, response_type=response_type)

    async def signed_get(
        self,
        endpoint: str,
        params: Optional[Params] = None,
        response_type: Union[Type[O], Any] = Any,
    ) -> O:
        """Make a signed GET request."""
        return await self.signed_request("GET", endpoint, params=params, response_type=response_type)

    async def signed_post(
        self,
        endpoint: str,
        data: Optional[Params] = None,
        response_type: Union[Type[O], Any] = Any,
    ) -> O:
        """Make a signed POST request with ``data`` as the JSON body."""
        return await self.signed_request("POST", endpoint, data=data, response_type=response_type)

    async def signed_put(
        self,
        endpoint: str,
        params: Optional[Params] = None,
        response_type: Union[Type[O], Any] = Any,
    ) -> O:
        """Make a signed PUT request."""
        return await self.signed_request("PUT", endpoint, params=params, response_type=response_type)

    async def signed_delete(
        self,
        endpoint: str,
        params: Optional[Params] = None,
        response_type: Union[Type[O], Any] = Any,
    ) -> O:
        """Make a signed DELETE request."""
        return await self.signed_request("DELETE", endpoint, params=params, response_type=response_type)

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Optional[Params] = None,
        data: Optional[Params] = None,
        response_type: Union[Type[O], Any] = Any,
    ) -> O:
        """Make an unauthenticated request.

        Args:
            method: HTTP method
            endpoint: Endpoint relative to the API base
            params: Query parameters
            data: Body fields
            response_type: Expected success type

        Returns:
            Decoded success payload

        Raises:
            BitMEXURLError: Invalid endpoint or params
            BitMEXTransportError: Network failure
            BitMEXDecodeError: Undecodable response
            BitMEXAPIError: Error reported by the exchange
        """
        url = build_url(self.base_url, endpoint, params)
        body = serialize_body(data) if data is not None else ""

        request = self._client.build_request(
            method,
            url,
            content=body.encode("utf-8") if body else None,
            headers={"content-type": "application/json"},
        )
        return await self._handle_response(request, response_type)

    async def signed_request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Optional[Params] = None,
        data: Optional[Params] = None,
        response_type: Union[Type[O], Any] = Any,
    ) -> O:
        """Make a request carrying BitMEX API key authentication.

        Args:
            method: HTTP method
            endpoint: Endpoint relative to the API base
            params: Query parameters
            data: Body fields
            response_type: Expected success type

        Returns:
            Decoded success payload

        Raises:
            BitMEXConfigurationError: No credential configured
            BitMEXURLError: Invalid endpoint or params
            BitMEXTransportError: Network failure
            BitMEXDecodeError: Undecodable response
            BitMEXAPIError: Error reported by the exchange
        """
        url = build_url(self.base_url, endpoint, params)
        body = serialize_body(data) if data is not None else ""

        expires = expires_at()
        sign_method = method if self._config.sign_with_request_verb else SIGNING_VERB
        key, signature = self._signer.signature(sign_method, expires, str(url), body)

        request = self._client.build_request(
            method,
            url,
            content=body.encode("utf-8") if body else None,
            headers={
                "api-expires": str(expires),
                "api-key": key,
                "api-signature": signature,
                "content-type": "application/json",
            },
        )
        return await self._handle_response(request, response_type)

    def signature(self, method: str, expires: int, url: str, body: str = "") -> Tuple[str, str]:
        """Sign a request with this transport's credential."""
        return self._signer.signature(method, expires, url, body)

    def _transport_error(self, request: httpx.Request, error: httpx.HTTPError) -> BitMEXTransportError:
        details = {"method": request.method, "url": str(request.url)}
        if isinstance(error, httpx.TimeoutException):
            return BitMEXTimeoutError(
                f"{request.method} {request.url} timed out",
                timeout=self._config.timeout,
                details=details,
            )
        return BitMEXTransportError(
            f"{request.method} {request.url} failed: {error!r}",
            details=details,
        )

    async def _handle_response(self, request: httpx.Request, response_type: Any) -> Any:
        logger.debug(f"{request.method} {request.url}")

        try:
            response = await self._client.send(request, stream=True)
        except httpx.HTTPError as e:
            raise self._transport_error(request, e) from e

        try:
            content = await response.aread()
        except httpx.HTTPError as e:
            raise self._transport_error(request, e) from e
        finally:
            await response.aclose()

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"{request.method} {request.url} -> {response.status_code}")
            logger.debug(content.decode("utf-8", errors="replace"))
        return decode_response(content, response_type, status_code=response.status_code)


def create_transport(
    api_key: Optional[str] = None,
    api_secret: Optional[str] = None,
    testnet: bool = False,
    **config: Any,
) -> Transport:
    """Create a transport, signed when both key and secret are given.

    Args:
        api_key: API key id
        api_secret: API secret
        testnet: Use the testnet host
        **config: Further HTTPConfig fields

    Returns:
        Configured transport
    """
    http_config = HTTPConfig(testnet=testnet, **config)
    if api_key and api_secret:
        return Transport.with_credential(api_key, api_secret, config=http_config)
    return Transport(config=http_config)
