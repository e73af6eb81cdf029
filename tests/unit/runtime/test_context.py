"""Unit tests for the per-request Context."""

import time
from unittest.mock import AsyncMock, Mock

import pytest

from methodapi.runtime.context import Context


class TestContext:
    """Tests for deadline and cancellation handling."""

    def test_no_timeout_means_no_deadline(self, make_request):
        ctx = Context.from_request(make_request())

        assert ctx.deadline is None
        assert ctx.time_remaining() is None
        assert not ctx.expired
        assert not ctx.cancelled

    def test_timeout_sets_deadline(self, make_request):
        before = time.monotonic()
        ctx = Context.from_request(make_request(), timeout=30)

        assert ctx.deadline >= before + 30
        assert 0 < ctx.time_remaining() <= 30
        assert not ctx.expired

    def test_past_deadline_is_cancelled(self, make_request):
        ctx = Context(make_request(), deadline=time.monotonic() - 1)

        assert ctx.expired
        assert ctx.cancelled
        assert ctx.time_remaining() == 0.0

    def test_cancel(self, make_request):
        ctx = Context.from_request(make_request())

        ctx.cancel()

        assert ctx.cancelled

    def test_state_is_request_state(self, make_request):
        request = make_request()
        ctx = Context.from_request(request)

        ctx.state.user = "alice"

        assert request.state.user == "alice"

    @pytest.mark.asyncio
    async def test_disconnect_cancels(self):
        request = Mock()
        request.is_disconnected = AsyncMock(return_value=True)
        ctx = Context(request)

        assert await ctx.is_disconnected() is True
        assert ctx.cancelled

    @pytest.mark.asyncio
    async def test_connected_client_not_cancelled(self):
        request = Mock()
        request.is_disconnected = AsyncMock(return_value=False)
        ctx = Context(request)

        assert await ctx.is_disconnected() is False
        assert not ctx.cancelled
