"""BitMEX Python SDK - signed async transport for the BitMEX REST API."""

__version__ = "1.0.0"

from .auth import Signer
from .client import BitMEXClient
from .errors import BitMEXAPIError
from .errors import BitMEXConfigurationError
from .errors import BitMEXDecodeError
from .errors import BitMEXError
from .errors import BitMEXRequestError
from .errors import BitMEXTimeoutError
from .errors import BitMEXTransportError
from .errors import BitMEXURLError
from .models import Credential
from .models import HTTPConfig
from .transport import Transport, create_transport

__all__ = [
    "BitMEXAPIError",
    "BitMEXClient",
    "BitMEXConfigurationError",
    "BitMEXDecodeError",
    "BitMEXError",
    "BitMEXRequestError",
    "BitMEXTimeoutError",
    "BitMEXTransportError",
    "BitMEXURLError",
    "Credential",
    "HTTPConfig",
    "Signer",
    "Transport",
    "create_transport",
    "__version__",
]
