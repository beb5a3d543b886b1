"""Unit tests for RequestExecutor.

The transport is a mock and ``_delay`` is patched, so retry sequencing is
verified without sleeping.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from congressgov.core import (
    CancellationToken,
    ClientOptions,
    DeserializationError,
    HttpError,
    InvalidArgumentError,
    RateLimitError,
    RequestCancelledError,
    RetryPolicy,
    TransportError,
)
from congressgov.models import BillDetailPage, BillsListPage
from congressgov.runtime.rest import HttpRequest, HttpResponse, RequestExecutor, parse_retry_after

BASE = "https://api.congress.gov/v3/"


def _response(status=200, body=b"{}", headers=None, reason=None):
    return HttpResponse(status=status, reason=reason, headers=headers or {}, body=body)


def _executor(responses, *, retry=None, force_json_format=True, rng=lambda: 0.5):
    http = MagicMock()
    http.send = AsyncMock(side_effect=responses)
    options = ClientOptions(
        retry=retry or RetryPolicy(max_retries=3, base_delay=1.0, jitter_factor=0.2),
        force_json_format=force_json_format,
    )
    executor = RequestExecutor(http, "secret", options, rng=rng)
    executor._delay = AsyncMock()
    return executor, http


class TestConstruction:
    """Test RequestExecutor argument validation."""

    @pytest.mark.parametrize("api_key", ["", "   "])
    def test_blank_api_key_rejected(self, api_key):
        """Test an empty or whitespace key is rejected."""
        with pytest.raises(InvalidArgumentError):
            RequestExecutor(MagicMock(), api_key, ClientOptions())

    def test_missing_options_rejected(self):
        """Test options are required."""
        with pytest.raises(InvalidArgumentError):
            RequestExecutor(MagicMock(), "key", None)  # type: ignore[arg-type]


class TestUrlBuilding:
    """Test auth/format injection and URL composition."""

    def test_build_url_keeps_version_segment(self):
        """Test leading slashes do not drop the /v3/ segment."""
        executor, _ = _executor([])
        url = executor.build_url("/bill/118", {"limit": "20"})
        assert url == f"{BASE}bill/118?limit=20&api_key=secret&format=json"

    def test_caller_cannot_override_key_or_format(self):
        """Test caller api_key/format in any case are replaced."""
        executor, _ = _executor([])
        url = executor.build_url("bill", {"API_KEY": "other", "Format": "xml", "limit": "5"})
        assert url == f"{BASE}bill?api_key=secret&format=json&limit=5"

    def test_ensure_auth_and_format_idempotent(self):
        """Test applying injection twice changes nothing."""
        executor, _ = _executor([])
        once = executor.ensure_auth_and_format(f"{BASE}bill?offset=250&api_key=old")
        assert executor.ensure_auth_and_format(once) == once
        assert once.count("api_key=") == 1
        assert once.count("format=") == 1

    def test_format_passthrough_when_not_forced(self):
        """Test caller format is kept when JSON is not forced."""
        executor, _ = _executor([], force_json_format=False)
        url = executor.build_url("bill", {"format": "xml"})
        assert url == f"{BASE}bill?format=xml&api_key=secret"

    def test_relative_and_missing_urls_resolved(self):
        """Test relative URLs resolve under the base URL."""
        executor, _ = _executor([])
        assert (
            executor.ensure_auth_and_format("member") == f"{BASE}member?api_key=secret&format=json"
        )
        assert executor.ensure_auth_and_format(None) == f"{BASE}?api_key=secret&format=json"

    def test_empty_path_rejected(self):
        """Test build_url requires a path."""
        executor, _ = _executor([])
        with pytest.raises(InvalidArgumentError):
            executor.build_url("  ")


class TestRetryLoop:
    """Test the retry/backoff state machine."""

    @pytest.mark.asyncio
    async def test_success_first_try(self):
        """Test a 2xx returns without delays."""
        executor, http = _executor([_response(200)])

        response = await executor.send(HttpRequest("GET", f"{BASE}bill"))

        assert response.status == 200
        executor._delay.assert_not_awaited()
        sent = http.send.call_args.args[0]
        assert sent.url == f"{BASE}bill?api_key=secret&format=json"

    @pytest.mark.asyncio
    async def test_retries_transient_then_succeeds(self):
        """Test 429, 429, 200 makes three attempts and two delays."""
        executor, http = _executor([_response(429), _response(429), _response(200)])

        response = await executor.send(HttpRequest("GET", f"{BASE}bill"))

        assert response.status == 200
        assert http.send.await_count == 3
        assert executor._delay.await_count == 2
        delays = [c.args[0] for c in executor._delay.await_args_list]
        assert delays == pytest.approx([1.1, 2.2])

    @pytest.mark.asyncio
    async def test_exhausted_rate_limit(self):
        """Test four 429s with max_retries=3 raise after three delays."""
        executor, http = _executor([_response(429, body=b"slow down")] * 4)

        with pytest.raises(RateLimitError) as exc_info:
            await executor.send(HttpRequest("GET", f"{BASE}bill"))

        assert http.send.await_count == 4
        assert executor._delay.await_count == 3
        assert exc_info.value.status_code == 429
        assert exc_info.value.body == "slow down"

    @pytest.mark.asyncio
    async def test_exhausted_server_error(self):
        """Test 5xx exhaustion raises HttpError that is not a RateLimitError."""
        executor, http = _executor(
            [_response(503)] * 2, retry=RetryPolicy(max_retries=1, base_delay=0.0)
        )

        with pytest.raises(HttpError) as exc_info:
            await executor.send(HttpRequest("GET", f"{BASE}bill"))

        assert not isinstance(exc_info.value, RateLimitError)
        assert exc_info.value.is_transient
        assert http.send.await_count == 2

    @pytest.mark.asyncio
    async def test_non_transient_not_retried(self):
        """Test 404 fails on the first attempt with diagnostics."""
        executor, http = _executor(
            [
                _response(
                    404,
                    reason="Not Found",
                    headers={"X-Request-Id": "req-42"},
                    body=b'{"error": "missing"}',
                )
            ]
        )

        with pytest.raises(HttpError) as exc_info:
            await executor.send(HttpRequest("GET", f"{BASE}bill/1/xx/1"))

        error = exc_info.value
        assert http.send.await_count == 1
        executor._delay.assert_not_awaited()
        assert error.status_code == 404
        assert error.request_id == "req-42"
        assert error.body == '{"error": "missing"}'
        assert "api_key=***" in error.url
        assert "secret" not in str(error)
        assert "Request-Id: req-42" in str(error)

    @pytest.mark.asyncio
    async def test_retry_after_seconds_honored(self):
        """Test Retry-After: 5 yields a 5 second delay."""
        executor, _ = _executor([_response(429, headers={"Retry-After": "5"}), _response(200)])

        await executor.send(HttpRequest("GET", f"{BASE}bill"))

        executor._delay.assert_awaited_once()
        assert executor._delay.await_args.args[0] == 5.0

    @pytest.mark.asyncio
    async def test_retry_after_ignored_when_disabled(self):
        """Test backoff is used when Retry-After is not respected."""
        executor, _ = _executor(
            [_response(429, headers={"Retry-After": "5"}), _response(200)],
            retry=RetryPolicy(base_delay=2.0, jitter_factor=0.0, respect_retry_after=False),
        )

        await executor.send(HttpRequest("GET", f"{BASE}bill"))

        assert executor._delay.await_args.args[0] == 2.0

    @pytest.mark.asyncio
    async def test_rate_limit_error_carries_retry_after(self):
        """Test terminal 429 exposes the parsed Retry-After."""
        executor, _ = _executor(
            [_response(429, headers={"Retry-After": "7"})], retry=RetryPolicy(max_retries=0)
        )

        with pytest.raises(RateLimitError) as exc_info:
            await executor.send(HttpRequest("GET", f"{BASE}bill"))

        assert exc_info.value.retry_after == 7.0

    @pytest.mark.asyncio
    async def test_transport_error_retried(self):
        """Test transport failures are retried with backoff."""
        executor, http = _executor([TransportError("reset", method="GET"), _response(200)])

        response = await executor.send(HttpRequest("GET", f"{BASE}bill"))

        assert response.status == 200
        assert http.send.await_count == 2
        assert executor._delay.await_args.args[0] == pytest.approx(1.1)

    @pytest.mark.asyncio
    async def test_transport_error_propagates_when_exhausted(self):
        """Test the last transport error surfaces with a redacted URL."""
        executor, http = _executor(
            [TransportError("reset", method="GET")] * 2, retry=RetryPolicy(max_retries=1)
        )

        with pytest.raises(TransportError) as exc_info:
            await executor.send(HttpRequest("GET", f"{BASE}bill"))

        assert http.send.await_count == 2
        assert exc_info.value.url == f"{BASE}bill?api_key=***&format=json"

    @pytest.mark.asyncio
    async def test_zero_retries_single_attempt(self):
        """Test max_retries=0 allows exactly one attempt."""
        executor, http = _executor([_response(500)], retry=RetryPolicy(max_retries=0))

        with pytest.raises(HttpError):
            await executor.send(HttpRequest("GET", f"{BASE}bill"))

        assert http.send.await_count == 1
        executor._delay.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_retry_logged(self, caplog):
        """Test retries and terminal failures are logged with context."""
        caplog.set_level(logging.DEBUG, logger="congressgov")
        executor, _ = _executor([_response(503), _response(400)])

        with pytest.raises(HttpError):
            await executor.send(HttpRequest("GET", f"{BASE}bill"))

        retry = next(r for r in caplog.records if r.getMessage() == "request_retry")
        failed = next(r for r in caplog.records if r.getMessage() == "request_failed")
        assert retry.attempt == 1
        assert retry.status == 503
        assert failed.levelno == logging.WARNING
        assert failed.status == 400
        assert "secret" not in retry.url


class TestCancellation:
    """Test cancellation inside the executor."""

    @pytest.mark.asyncio
    async def test_pre_cancelled_token_sends_nothing(self):
        """Test a fired token stops the request before any I/O."""
        executor, http = _executor([_response(200)])
        token = CancellationToken()
        token.cancel()

        with pytest.raises(RequestCancelledError):
            await executor.send(HttpRequest("GET", f"{BASE}bill"), token)

        http.send.assert_not_called()

    @pytest.mark.asyncio
    async def test_cancel_during_backoff(self):
        """Test a cancel aborts the wait between attempts."""
        token = CancellationToken()

        async def send(request):
            token.cancel("user")
            return _response(503)

        http = MagicMock()
        http.send = AsyncMock(side_effect=send)
        executor = RequestExecutor(
            http, "secret", ClientOptions(retry=RetryPolicy(base_delay=30.0))
        )

        with pytest.raises(RequestCancelledError):
            await asyncio.wait_for(executor.send(HttpRequest("GET", f"{BASE}bill"), token), 5)

        assert http.send.await_count == 1

    @pytest.mark.asyncio
    async def test_cancel_aborts_in_flight_request(self):
        """Test a cancel interrupts a hanging transport call."""
        token = CancellationToken()

        async def send(request):
            await asyncio.sleep(30)

        http = MagicMock()
        http.send = send
        executor = RequestExecutor(http, "secret", ClientOptions())
        asyncio.get_running_loop().call_later(0.01, token.cancel)

        with pytest.raises(RequestCancelledError):
            await asyncio.wait_for(executor.send(HttpRequest("GET", f"{BASE}bill"), token), 5)


class TestGetJson:
    """Test JSON decoding."""

    @pytest.mark.asyncio
    async def test_decodes_into_model(self):
        """Test the body validates into the requested page model."""
        body = b'{"bills": [{"number": 1, "type": "HR", "congress": "118"}], "pagination": {}}'
        executor, http = _executor([_response(200, body=body)])

        page = await executor.get_json(
            "bill/118", {"offset": "0", "limit": "1"}, model=BillsListPage
        )

        assert page.bills[0].number == "1"
        assert page.bills[0].congress == 118
        assert page.extension_data == {"pagination": {}}
        assert http.send.call_args.args[0] == HttpRequest(
            "GET", f"{BASE}bill/118?offset=0&limit=1&api_key=secret&format=json"
        )

    @pytest.mark.asyncio
    async def test_raw_json_without_model(self):
        """Test parsed JSON is returned when no model is given."""
        executor, _ = _executor([_response(200, body=b'{"congress": {"number": 118}}')])
        assert await executor.get_json("congress/current") == {"congress": {"number": 118}}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [b"", b"   ", b"null", b"{not json"])
    async def test_unusable_body(self, body):
        """Test empty, null and malformed bodies fail."""
        executor, _ = _executor([_response(200, body=body)])

        with pytest.raises(DeserializationError) as exc_info:
            await executor.get_json("bill", model=BillsListPage)

        assert exc_info.value.target == "BillsListPage"
        assert "secret" not in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_shape_mismatch(self):
        """Test validation errors are wrapped with the cause chained."""
        executor, _ = _executor([_response(200, body=b'{"unexpected": true}')])

        with pytest.raises(DeserializationError) as exc_info:
            await executor.get_json("bill/118/hr/1", model=BillDetailPage)

        assert exc_info.value.__cause__ is not None


class TestDelays:
    """Test delay computation."""

    def test_compute_backoff(self):
        """Test base * 2^(attempt-1) plus scaled jitter."""
        executor, _ = _executor(
            [], retry=RetryPolicy(base_delay=1.0, jitter_factor=0.5), rng=lambda: 1.0
        )
        assert executor.compute_backoff(1) == 1.5
        assert executor.compute_backoff(2) == 3.0
        assert executor.compute_backoff(3) == 6.0

    def test_compute_backoff_clamps_jitter(self):
        """Test out-of-range jitter is clamped to 1."""
        executor, _ = _executor(
            [], retry=RetryPolicy(base_delay=2.0, jitter_factor=9.0), rng=lambda: 1.0
        )
        assert executor.compute_backoff(1) == 4.0

    def test_past_http_date_falls_back_to_backoff(self):
        """Test a Retry-After date in the past uses backoff."""
        executor, _ = _executor([], retry=RetryPolicy(base_delay=1.0, jitter_factor=0.0))
        response = _response(503, headers={"Retry-After": "Wed, 21 Oct 2015 07:28:00 GMT"})
        assert executor.retry_delay(response, 2) == 2.0


class TestParseRetryAfter:
    """Test Retry-After parsing."""

    def test_delta_seconds(self):
        """Test numeric values are seconds."""
        assert parse_retry_after("5") == 5.0
        assert parse_retry_after(" 2.5 ") == 2.5

    @pytest.mark.parametrize("value", [None, "", "-1", "nan", "inf", "soon"])
    def test_unusable_values(self, value):
        """Test invalid values are ignored."""
        assert parse_retry_after(value) is None

    def test_http_date(self):
        """Test HTTP-dates become the delta from now."""
        now = datetime(2015, 10, 21, 7, 27, 50, tzinfo=UTC)
        assert parse_retry_after("Wed, 21 Oct 2015 07:28:00 GMT", now=now) == 10.0

    def test_http_date_in_past(self):
        """Test dates not in the future yield None."""
        now = datetime(2015, 10, 21, 8, 0, 0, tzinfo=UTC)
        assert parse_retry_after("Wed, 21 Oct 2015 07:28:00 GMT", now=now) is None
