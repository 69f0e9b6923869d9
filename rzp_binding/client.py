"""
Client entry point.

Wires one APIClient transport into every resource wrapper:

    async with RazorpayClient("rzp_test_xxx", "secret") as client:
        subscription = await client.subscriptions.fetch("sub_00000000000001")
"""
from __future__ import annotations

from typing import Optional

import httpx

from rzp_binding.config import ClientConfig, load_client_config
from rzp_binding.errors import ConfigurationError
from rzp_binding.resources.subscriptions import SubscriptionResource
from rzp_binding.transport.api_client import APIClient


class RazorpayClient:
    def __init__(
        self,
        key_id: Optional[str] = None,
        key_secret: Optional[str] = None,
        *,
        config: Optional[ClientConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        if config is None:
            config = ClientConfig() if key_id and key_secret else load_client_config()
        overrides = {}
        if key_id:
            overrides["key_id"] = key_id
        if key_secret:
            overrides["key_secret"] = key_secret
        if overrides:
            config = ClientConfig(**{**config.model_dump(), **overrides})

        if not config.has_credentials:
            raise ConfigurationError(
                "key_id and key_secret are required (pass them or set RAZORPAY_KEY_ID / RAZORPAY_KEY_SECRET)."
            )

        self.config = config
        self.api = APIClient(config, http_client=http_client)
        self.subscriptions = SubscriptionResource(self.api)

    async def aclose(self) -> None:
        await self.api.aclose()

    async def __aenter__(self) -> "RazorpayClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
