"""Pytest fixtures for resource and transport tests."""

import pytest

from rzp_binding.utils.futures import deliver


class FakeTransport:
    """Records every descriptor it is handed and answers with a canned response."""

    def __init__(self, response=None, error=None):
        self.calls = []
        self.response = response if response is not None else {"id": "sub_test"}
        self.error = error

    async def _respond(self):
        if self.error is not None:
            raise self.error
        return self.response

    def get(self, descriptor, callback=None):
        self.calls.append(("GET", descriptor))
        return deliver(self._respond(), callback)

    def post(self, descriptor, callback=None):
        self.calls.append(("POST", descriptor))
        return deliver(self._respond(), callback)


@pytest.fixture
def transport():
    return FakeTransport()
