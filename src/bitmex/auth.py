"""Request signing for the BitMEX API."""

from __future__ import annotations

import hashlib
import hmac
from typing import Optional
from typing import Tuple
from urllib.parse import urlsplit

from bitmex.errors import BitMEXConfigurationError
from bitmex.models import Credential


class Signer:
    """HMAC-SHA256 signer over BitMEX's canonical request message.

    The message is ``VERB + PATH [+ "?" + QUERY] + EXPIRES + BODY``, with
    PATH and QUERY taken verbatim (still percent-encoded) from the URL and
    BODY being the exact string sent on the wire.
    """

    def __init__(self, credential: Optional[Credential] = None) -> None:
        """Initialize signer.

        Args:
            credential: API credential; signing fails without one
        """
        self.credential = credential

    def _check_key(self) -> Credential:
        if self.credential is None:
            raise BitMEXConfigurationError("No API credential configured")
        return self.credential

    @staticmethod
    def message(method: str, expires: int, url: str, body: str = "") -> str:
        """Build the canonical message for a request.

        Args:
            method: HTTP verb
            expires: Unix timestamp after which the signature is rejected
            url: Absolute request URL
            body: Serialized request body, empty when there is none

        Returns:
            The string the signature is computed over
        """
        parts = urlsplit(url)
        path = parts.path
        if parts.query:
            path = f"{path}?{parts.query}"
        return f"{method.upper()}{path}{expires}{body}"

    def signature(
        self,
        method: str,
        expires: int,
        url: str,
        body: str = "",
    ) -> Tuple[str, str]:
        """Sign a request.

        Args:
            method: HTTP verb
            expires: Unix timestamp after which the signature is rejected
            url: Absolute request URL
            body: Serialized request body, empty when there is none

        Returns:
            Tuple of (api key, lowercase hex signature)

        Raises:
            BitMEXConfigurationError: No credential configured
        """
        credential = self._check_key()
        signature = hmac.new(
            credential.secret.encode("utf-8"),
            self.message(method, expires, url, body).encode("utf-8"),
            hashlib.sha256,
        ).hexdigest()
        return credential.key, signature
