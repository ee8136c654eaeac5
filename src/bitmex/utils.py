"""Utility functions for the BitMEX transport."""

from __future__ import annotations

import json
import logging
import time
from enum import Enum
from functools import lru_cache
from typing import Any
from typing import Callable
from typing import Iterable
from typing import Iterator
from typing import Mapping
from typing import Optional
from typing import Tuple
from typing import Type
from typing import TypeVar
from typing import Union
from urllib.parse import quote_plus
from urllib.parse import urlencode

import backoff
import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError

from bitmex.errors import BitMEXAPIError
from bitmex.errors import BitMEXDecodeError
from bitmex.errors import BitMEXRequestError
from bitmex.errors import BitMEXTransportError
from bitmex.errors import BitMEXURLError
from bitmex.models import ApiErrorEnvelope

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Seconds a signature stays valid on the server side
EXPIRE_DURATION = 5

Params = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


def stringify(value: Any) -> str:
    """Render a field value the way BitMEX expects it on the wire.

    Booleans are lowercase, enums contribute their value, and dicts or
    lists (``filter``, ``columns``) are compact JSON.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def iter_pairs(items: Params) -> Iterator[Tuple[str, str]]:
    """Yield ``(key, value)`` string pairs in caller order.

    Args:
        items: Mapping or sequence of pairs

    Returns:
        Iterator of string pairs
    """
    if isinstance(items, Mapping):
        items = items.items()
    for key, value in items:
        yield str(key), stringify(value)


def build_url(base_url: str, endpoint: str, params: Optional[Params] = None) -> httpx.URL:
    """Join an endpoint onto the API base and append form-encoded params.

    Args:
        base_url: API base URL
        endpoint: Endpoint path relative to the base
        params: Query parameters, order preserved

    Returns:
        The URL exactly as it will be sent

    Raises:
        BitMEXURLError: Endpoint or params do not form a valid URL
    """
    if "#" in endpoint:
        raise BitMEXURLError(f"Endpoint must not contain a fragment: {endpoint!r}")

    url = f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}"
    if params is not None:
        try:
            query = urlencode(list(iter_pairs(params)), quote_via=quote_plus)
        except (TypeError, ValueError) as e:
            raise BitMEXURLError(f"Invalid query parameters: {e}", url=url) from e
        if query:
            url += ("&" if "?" in url else "?") + query

    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise BitMEXURLError(f"Invalid URL: {e}", url=url) from e

    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise BitMEXURLError(f"URL must be absolute http(s): {url}", url=url)
    return parsed


def serialize_body(data: Params) -> str:
    """Serialize body fields as compact JSON with keys sorted.

    The returned string is both signed and sent, so it must not be
    re-encoded afterwards.

    Args:
        data: Body fields

    Returns:
        JSON object string

    Raises:
        BitMEXRequestError: Fields are not a mapping or sequence of pairs
    """
    try:
        fields = dict(iter_pairs(data))
    except (TypeError, ValueError) as e:
        raise BitMEXRequestError(f"Invalid body fields: {e}") from e
    return json.dumps(
        dict(sorted(fields.items())),
        separators=(",", ":"),
        ensure_ascii=False,
    )


def expires_at(now: Optional[float] = None) -> int:
    """Expiry timestamp for a signature created at ``now``.

    Args:
        now: Unix time, defaults to the current wall clock

    Returns:
        Unix timestamp EXPIRE_DURATION seconds ahead
    """
    if now is None:
        now = time.time()
    return int(now) + EXPIRE_DURATION


@lru_cache(maxsize=256)
def _cached_adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def type_adapter(response_type: Any) -> TypeAdapter:
    """Get a (cached where possible) TypeAdapter for a response type."""
    try:
        return _cached_adapter(response_type)
    except TypeError:
        # Unhashable type expressions cannot be cached
        return TypeAdapter(response_type)


def decode_response(
    content: bytes,
    response_type: Union[Type[T], Any] = Any,
    status_code: Optional[int] = None,
) -> T:
    """Decode a response body into the expected type or an API error.

    An object carrying an ``error`` key is the failure envelope and is
    checked before the success schema.

    Args:
        content: Raw response body
        response_type: Expected success type
        status_code: HTTP status code, for diagnostics

    Returns:
        Validated success payload

    Raises:
        BitMEXAPIError: Server reported an error
        BitMEXDecodeError: Body is not JSON or does not match either shape
    """
    raw = content.decode("utf-8", errors="replace")

    try:
        payload = json.loads(content)
    except ValueError as e:
        logger.debug(f"Undecodable response body (HTTP {status_code}): {raw}")
        raise BitMEXDecodeError(
            f"Response is not valid JSON: {e}",
            raw=raw,
            status_code=status_code,
        ) from e

    if isinstance(payload, dict) and "error" in payload:
        try:
            envelope = ApiErrorEnvelope.model_validate(payload)
        except ValidationError as e:
            raise BitMEXDecodeError(
                "Malformed error envelope",
                raw=raw,
                status_code=status_code,
            ) from e
        raise BitMEXAPIError(
            envelope.error.message,
            name=envelope.error.name,
            status_code=status_code,
        )

    try:
        return type_adapter(response_type).validate_python(payload)
    except ValidationError as e:
        logger.debug(f"Response does not match {response_type!r}: {raw}")
        raise BitMEXDecodeError(
            f"Response does not match expected schema: {e.error_count()} validation error(s)",
            raw=raw,
            status_code=status_code,
            details={"errors": e.errors(include_url=False)},
        ) from e


def retry_on_transport_error(
    base_delay: float = 0.3,
    max_delay: float = 60.0,
    max_retries: int = 3,
    jitter: bool = True,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Exponential backoff decorator for callers of the transport.

    The transport itself never retries; wrap a coroutine with this to retry
    it on transport failures. API and decode errors are raised at once.

    Args:
        base_delay: Delay before the first retry, in seconds
        max_delay: Maximum delay in seconds
        max_retries: Maximum number of retries
        jitter: Whether to add full jitter

    Returns:
        Backoff decorator
    """
    return backoff.on_exception(
        backoff.expo,
        BitMEXTransportError,
        factor=base_delay,
        max_value=max_delay,
        max_tries=max_retries + 1,  # backoff counts initial attempt
        jitter=backoff.full_jitter if jitter else None,
        logger=logger,
    )
