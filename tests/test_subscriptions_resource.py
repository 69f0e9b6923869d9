"""Tests for request shaping in SubscriptionResource."""

import asyncio
from datetime import date, datetime, timezone

import pytest

from rzp_binding.errors import (
    ArgumentTypeError,
    MissingIdentifierError,
    PreconditionError,
    RazorpayAPIError,
)
from rzp_binding.resources.subscriptions import SubscriptionResource
from rzp_binding.utils.normalizers import normalize_date


@pytest.fixture
def subscriptions(transport):
    return SubscriptionResource(transport)


@pytest.mark.asyncio
async def test_create_flattens_notes_into_body(subscriptions, transport):
    params = {"plan_id": "x", "total_count": 6, "notes": {"a": "b", "c": 1}}

    result = await subscriptions.create(params)

    assert result == {"id": "sub_test"}
    assert transport.calls == [
        (
            "POST",
            {
                "url": "/subscriptions",
                "data": {"plan_id": "x", "total_count": 6, "notes[a]": "b", "notes[c]": 1},
            },
        )
    ]
    assert "notes" not in transport.calls[0][1]["data"]
    # caller's mapping is left alone
    assert params["notes"] == {"a": "b", "c": 1}


@pytest.mark.asyncio
async def test_create_without_params_posts_empty_body(subscriptions, transport):
    await subscriptions.create()

    assert transport.calls == [("POST", {"url": "/subscriptions", "data": {}})]


@pytest.mark.asyncio
async def test_fetch_gets_subscription_path(subscriptions, transport):
    await subscriptions.fetch("sub_123")

    assert transport.calls == [("GET", {"url": "/subscriptions/sub_123"})]


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["", None])
async def test_fetch_without_id_rejects_without_calling_transport(subscriptions, transport, missing):
    future = subscriptions.fetch(missing)

    assert isinstance(future, asyncio.Future)
    with pytest.raises(MissingIdentifierError, match="Subscription ID is mandatory"):
        await future
    assert transport.calls == []


@pytest.mark.asyncio
async def test_all_applies_pagination_defaults(subscriptions, transport):
    await subscriptions.all({"count": "abc", "plan_id": "plan_1"})

    method, descriptor = transport.calls[0]
    assert method == "GET"
    assert descriptor["url"] == "/subscriptions"
    assert descriptor["data"] == {"count": 10, "skip": 0, "plan_id": "plan_1"}
    assert "from" not in descriptor["data"]
    assert "to" not in descriptor["data"]


@pytest.mark.asyncio
async def test_all_coerces_numeric_strings(subscriptions, transport):
    await subscriptions.all({"count": "25", "skip": "50"})

    data = transport.calls[0][1]["data"]
    assert data["count"] == 25
    assert data["skip"] == 50


@pytest.mark.asyncio
async def test_all_normalizes_dates_to_epoch_seconds(subscriptions, transport):
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    end = date(2024, 2, 1)

    await subscriptions.all({"from": start, "to": end})

    data = transport.calls[0][1]["data"]
    assert data["from"] == normalize_date(start) == 1704067200
    assert data["to"] == normalize_date(end) == 1706745600


@pytest.mark.asyncio
async def test_all_without_params(subscriptions, transport):
    await subscriptions.all()

    assert transport.calls == [("GET", {"url": "/subscriptions", "data": {"count": 10, "skip": 0}})]


@pytest.mark.asyncio
async def test_cancel_at_cycle_end_sends_flag(subscriptions, transport):
    await subscriptions.cancel("sub_1", True)

    assert transport.calls == [
        ("POST", {"url": "/subscriptions/sub_1/cancel", "data": {"cancel_at_cycle_end": 1}})
    ]


@pytest.mark.asyncio
async def test_cancel_immediately_sends_no_body(subscriptions, transport):
    await subscriptions.cancel("sub_1")
    await subscriptions.cancel("sub_2", False)

    assert transport.calls == [
        ("POST", {"url": "/subscriptions/sub_1/cancel"}),
        ("POST", {"url": "/subscriptions/sub_2/cancel"}),
    ]
    assert all("data" not in descriptor for _, descriptor in transport.calls)


@pytest.mark.asyncio
async def test_cancel_rejects_non_boolean_flag(subscriptions, transport):
    with pytest.raises(ArgumentTypeError, match="should be a Boolean"):
        await subscriptions.cancel("sub_1", "yes")
    with pytest.raises(TypeError):
        await subscriptions.cancel("sub_1", 1)

    assert transport.calls == []


@pytest.mark.asyncio
async def test_cancel_requires_id(subscriptions, transport):
    with pytest.raises(MissingIdentifierError):
        await subscriptions.cancel("", True)

    assert transport.calls == []


@pytest.mark.asyncio
async def test_create_addon_posts_params_unmodified(subscriptions, transport):
    params = {"item": {"name": "Extra seats", "amount": 30000, "currency": "INR"}, "quantity": 2}

    await subscriptions.create_addon("sub_9", params)

    method, descriptor = transport.calls[0]
    assert method == "POST"
    assert descriptor == {"url": "/subscriptions/sub_9/addons", "data": params}
    assert descriptor["data"] is not params


@pytest.mark.asyncio
async def test_create_addon_requires_id(subscriptions, transport):
    with pytest.raises(PreconditionError):
        await subscriptions.create_addon(None, {"item": {}})

    assert transport.calls == []


@pytest.mark.asyncio
async def test_callback_sees_same_result_as_future(subscriptions):
    seen = []

    future = subscriptions.fetch("sub_1", seen.append)
    result = await future
    await asyncio.sleep(0)

    assert result == {"id": "sub_test"}
    assert seen == [future]
    assert seen[0].result() == result


@pytest.mark.asyncio
async def test_callback_fires_once_for_precondition_error(subscriptions):
    seen = []

    future = subscriptions.cancel("sub_1", "no", seen.append)
    with pytest.raises(ArgumentTypeError):
        await future
    await asyncio.sleep(0)

    assert seen == [future]
    assert isinstance(seen[0].exception(), ArgumentTypeError)


@pytest.mark.asyncio
async def test_transport_errors_propagate_unchanged(transport):
    error = RazorpayAPIError("Bad request", status_code=400, code="BAD_REQUEST_ERROR")
    transport.error = error
    subscriptions = SubscriptionResource(transport)

    with pytest.raises(RazorpayAPIError) as exc_info:
        await subscriptions.fetch("sub_1")

    assert exc_info.value is error


@pytest.mark.asyncio
async def test_create_passes_nested_note_values_through(subscriptions, transport):
    await subscriptions.create({"plan_id": "x", "notes": {"meta": {"tier": "gold"}, "tags": ["a", "b"]}})

    data = transport.calls[0][1]["data"]
    assert data == {"plan_id": "x", "notes[meta]": {"tier": "gold"}, "notes[tags]": ["a", "b"]}


@pytest.mark.asyncio
async def test_all_leaves_epoch_dates_unchanged(subscriptions, transport):
    await subscriptions.all({"from": 1704067200, "to": 1706745600})

    data = transport.calls[0][1]["data"]
    assert data["from"] == 1704067200
    assert data["to"] == 1706745600


@pytest.mark.asyncio
@pytest.mark.parametrize("falsy", [0, ""])
async def test_all_sends_falsy_dates_as_given(subscriptions, transport, falsy):
    await subscriptions.all({"from": falsy, "to": falsy})

    data = transport.calls[0][1]["data"]
    assert data["from"] == falsy
    assert data["to"] == falsy
