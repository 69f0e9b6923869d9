from typing import Any, Mapping, Optional, Protocol

from rzp_binding.utils.futures import Callback


class TransportProtocol(Protocol):
    """What a resource wrapper needs from its transport.

    ``descriptor`` is ``{"url": str}`` with an optional ``"data"`` mapping.
    Both methods return an asyncio.Future and attach ``callback`` to it when given.
    """

    def get(self, descriptor: Mapping[str, Any], callback: Optional[Callback] = None):
        ...

    def post(self, descriptor: Mapping[str, Any], callback: Optional[Callback] = None):
        ...
