"""
Subscriptions resource.

Docs: https://razorpay.com/docs/api/payments/subscriptions/

Builds request descriptors for /subscriptions and hands them to the transport.
The API validates business fields; this module only checks identifiers and the
type of the cancel flag.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from rzp_binding.errors import ArgumentTypeError, MissingIdentifierError
from rzp_binding.transport.interfaces import TransportProtocol
from rzp_binding.utils.futures import Callback, rejected
from rzp_binding.utils.normalizers import coerce_int, normalize_date, normalize_notes

BASE_URL = "/subscriptions"
MISSING_ID_ERROR = "Subscription ID is mandatory"
CANCEL_FLAG_TYPE_ERROR = "The second parameter, Cancel at the end of cycle should be a Boolean"

DEFAULT_COUNT = 10
DEFAULT_SKIP = 0


class SubscriptionResource:
    """
    Request shaping for /subscriptions.

    Every method returns an asyncio.Future. ``callback``, when given, is attached
    with ``add_done_callback``: it is called once with that settled future, not with
    the response, so read the outcome via ``future.result()`` or
    ``future.exception()``. Argument errors reject the future the same way.
    """

    def __init__(self, api: TransportProtocol) -> None:
        self.api = api

    def create(self, params: Optional[Mapping[str, Any]] = None, callback: Optional[Callback] = None):
        """
        Create a subscription.

        ``notes`` is sent flattened as ``notes[key]`` fields next to the rest of
        ``params``. ``callback`` receives the settled future.
        """
        data = dict(params or {})
        notes = data.pop("notes", None)
        data.update(normalize_notes(notes))

        return self.api.post({"url": BASE_URL, "data": data}, callback)

    def fetch(self, subscription_id: str, callback: Optional[Callback] = None):
        """Fetch a subscription by id; ``callback`` receives the settled future."""
        if not subscription_id:
            return rejected(MissingIdentifierError(MISSING_ID_ERROR), callback)

        return self.api.get({"url": f"{BASE_URL}/{subscription_id}"}, callback)

    def all(self, params: Optional[Mapping[str, Any]] = None, callback: Optional[Callback] = None):
        """
        List subscriptions.

        Args:
            params: optional ``from``/``to`` (dates or epoch seconds), ``count``,
                ``skip`` and any other filter the API accepts
            callback: optional done-callback; called with the settled future
        """
        data: Dict[str, Any] = dict(params or {})

        for key in ("from", "to"):
            if data.get(key):
                data[key] = normalize_date(data[key])

        data["count"] = coerce_int(data.get("count"), DEFAULT_COUNT)
        data["skip"] = coerce_int(data.get("skip"), DEFAULT_SKIP)

        return self.api.get({"url": BASE_URL, "data": data}, callback)

    def cancel(
        self,
        subscription_id: str,
        cancel_at_cycle_end: bool = False,
        callback: Optional[Callback] = None,
    ):
        """
        Cancel a subscription, immediately or at the end of the current cycle.

        The body is only sent when ``cancel_at_cycle_end`` is True. ``callback``
        receives the settled future, including for a missing id or non-bool flag.
        """
        if not subscription_id:
            return rejected(MissingIdentifierError(MISSING_ID_ERROR), callback)

        if not isinstance(cancel_at_cycle_end, bool):
            return rejected(
                ArgumentTypeError(
                    CANCEL_FLAG_TYPE_ERROR,
                    payload={"cancel_at_cycle_end": cancel_at_cycle_end},
                ),
                callback,
            )

        descriptor: Dict[str, Any] = {"url": f"{BASE_URL}/{subscription_id}/cancel"}
        if cancel_at_cycle_end:
            descriptor["data"] = {"cancel_at_cycle_end": 1}

        return self.api.post(descriptor, callback)

    def create_addon(
        self,
        subscription_id: str,
        params: Optional[Mapping[str, Any]] = None,
        callback: Optional[Callback] = None,
    ):
        """Add an addon to a subscription; ``callback`` receives the settled future."""
        if not subscription_id:
            return rejected(MissingIdentifierError(MISSING_ID_ERROR), callback)

        return self.api.post(
            {"url": f"{BASE_URL}/{subscription_id}/addons", "data": dict(params or {})},
            callback,
        )
