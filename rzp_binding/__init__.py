"""
Async Python binding for the Razorpay REST API.

Layout:
- resources/: one wrapper per API resource family (request shaping only)
- transport/: the httpx-backed APIClient that performs the calls
- utils/: date/notes normalization and future/callback delivery
- config.py: ClientConfig and the env/YAML loader
- errors.py: PreconditionError and TransportError families
"""
from .client import RazorpayClient
from .config import ClientConfig, load_client_config
from .errors import (
    ArgumentTypeError,
    ConfigurationError,
    MissingIdentifierError,
    PreconditionError,
    RazorpayAPIError,
    RazorpayError,
    TransportError,
)
from .resources import SubscriptionResource
from .transport import APIClient, TransportProtocol

__all__ = [
    "RazorpayClient",
    "ClientConfig", "load_client_config",
    "APIClient", "TransportProtocol",
    "SubscriptionResource",
    # errors
    "RazorpayError", "PreconditionError", "MissingIdentifierError",
    "ArgumentTypeError", "ConfigurationError", "TransportError", "RazorpayAPIError",
]
