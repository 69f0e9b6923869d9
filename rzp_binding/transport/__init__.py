"""
HTTP transport layer.

Resource wrappers never talk to httpx directly; they hand request descriptors to a
transport. APIClient is the real implementation; tests inject fakes that follow
TransportProtocol.
"""
from .api_client import APIClient
from .interfaces import TransportProtocol

__all__ = ["APIClient", "TransportProtocol"]
