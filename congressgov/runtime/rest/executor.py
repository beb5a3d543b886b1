"""Request executor: auth injection, retry/backoff and JSON decoding.

Architecture:
    Every outbound request passes through ``RequestExecutor.send``, which
    guarantees ``api_key`` (and ``format=json`` when configured) on the final
    URL and drives a small state machine per logical request:

        Attempting -> Success       (2xx, returned to the caller)
                   -> Retryable     (429 / 5xx / transport error, sleep and retry)
                   -> NonRetryable  (any other status, raised immediately)

    Retryable outcomes become failures once the attempt number exceeds
    ``RetryPolicy.max_retries``. The cancellation token is checked at the top
    of every attempt and aborts both the in-flight HTTP call and the backoff
    sleep.

Design Decisions:
    - The executor holds no mutable state, so one instance serves any number
      of concurrent pagination runs.
    - Retry-After wins over exponential backoff when the policy allows it and
      the header yields a positive delay.
    - Transport errors only use exponential backoff; they have no headers.
"""

from __future__ import annotations

import json
import math
import random
from collections.abc import Callable, Mapping
from dataclasses import replace
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime
from typing import Any, TypeVar, overload
from urllib.parse import urljoin, urlsplit

from pydantic import BaseModel, ValidationError

from ...core.cancellation import CancellationToken
from ...core.exceptions import (
    DeserializationError,
    HttpError,
    InvalidArgumentError,
    RateLimitError,
    RequestCancelledError,
    TransportError,
    is_transient_status,
    truncate_body,
)
from ...core.options import ClientOptions, RetryPolicy
from .http_client import HTTPClient, HttpRequest, HttpResponse
from .query import QueryParams, inject_auth_and_format, redact_api_key, with_query
from .telemetry import log_request_cancelled, log_request_failed, log_request_retry

ModelT = TypeVar("ModelT", bound=BaseModel)

REQUEST_ID_HEADER = "x-request-id"
RETRY_AFTER_HEADER = "Retry-After"


class RequestExecutor:
    """Issues authenticated GET requests with transparent retries.

    Example:
        >>> executor = RequestExecutor(HTTPClient(), "my-key", ClientOptions())
        >>> page = await executor.get_json("bill", {"limit": "20"}, model=BillsListPage)
    """

    def __init__(
        self,
        http: HTTPClient,
        api_key: str,
        options: ClientOptions,
        *,
        rng: Callable[[], float] | None = None,
    ) -> None:
        """Initialize the executor.

        Args:
            http: Transport used for every round trip
            api_key: Key injected into every request
            options: Shared client options (base URL, retry policy, format)
            rng: Uniform [0, 1) source for jitter, ``random.random`` by default
        """
        if http is None:
            raise InvalidArgumentError("http transport is required")
        if not api_key or not api_key.strip():
            raise InvalidArgumentError("API key cannot be empty or whitespace")
        if options is None:
            raise InvalidArgumentError("options are required")
        self._http = http
        self._api_key = api_key
        self._options = options
        self._rng = rng or random.random

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def options(self) -> ClientOptions:
        return self._options

    @property
    def retry_policy(self) -> RetryPolicy:
        return self._options.retry

    # ------------------------------------------------------------------
    # URL building
    # ------------------------------------------------------------------

    def build_url(self, relative_path: str, query: Mapping[str, Any] | None = None) -> str:
        """Resolve ``relative_path`` against the base URL and merge ``query``.

        Caller-supplied ``api_key``/``format`` values are always replaced by
        the executor's own.
        """
        if not relative_path or not relative_path.strip():
            raise InvalidArgumentError("relative_path is required")
        url = urljoin(self._options.base_url, relative_path.strip().lstrip("/"))
        params = QueryParams.parse(urlsplit(url).query)
        params.update(query)
        return with_query(url, self._inject(params))

    def ensure_auth_and_format(self, url: str | None) -> str:
        """Rewrite ``url`` so it carries the executor's api_key and format.

        Relative URLs are resolved against the base URL; a missing URL maps to
        the base URL itself.
        """
        if not url:
            url = self._options.base_url
        elif not urlsplit(url).scheme:
            url = urljoin(self._options.base_url, url.lstrip("/"))
        params = QueryParams.parse(urlsplit(url).query)
        return with_query(url, self._inject(params))

    def _inject(self, params: QueryParams) -> QueryParams:
        return inject_auth_and_format(
            params,
            api_key=self._api_key,
            force_json_format=self._options.force_json_format,
        )

    # ------------------------------------------------------------------
    # Sending
    # ------------------------------------------------------------------

    async def send(
        self, request: HttpRequest, token: CancellationToken | None = None
    ) -> HttpResponse:
        """Send ``request`` with auth injection and retries.

        Returns:
            The first 2xx response

        Raises:
            HttpError: Non-transient status, or transient status after retries ran out
            RateLimitError: HTTP 429 after retries ran out
            TransportError: Connection failure after retries ran out
            RequestCancelledError: ``token`` fired
        """
        if request is None:
            raise InvalidArgumentError("request is required")
        token = token or CancellationToken()
        request = replace(request, url=self.ensure_auth_and_format(request.url))
        safe_url = redact_api_key(request.url)
        max_retries = self.retry_policy.max_retries
        attempt = 0

        try:
            while True:
                token.raise_if_cancelled()
                attempt += 1

                try:
                    response = await token.run(self._http.send(request))
                except TransportError as exc:
                    exc.url = safe_url
                    if attempt > max_retries:
                        log_request_failed(
                            method=request.method,
                            url=safe_url,
                            attempts=attempt,
                            error_type=type(exc.__cause__ or exc).__name__,
                        )
                        raise
                    delay = self.compute_backoff(attempt)
                    log_request_retry(
                        method=request.method,
                        url=safe_url,
                        attempt=attempt,
                        delay=delay,
                        error_type=type(exc.__cause__ or exc).__name__,
                    )
                    await self._delay(delay, token)
                    continue

                if response.ok:
                    return response

                if not is_transient_status(response.status) or attempt > max_retries:
                    error = self._http_error(request, response, safe_url)
                    log_request_failed(
                        method=request.method,
                        url=safe_url,
                        attempts=attempt,
                        status=response.status,
                        request_id=error.request_id,
                    )
                    raise error

                delay = self.retry_delay(response, attempt)
                log_request_retry(
                    method=request.method,
                    url=safe_url,
                    attempt=attempt,
                    delay=delay,
                    status=response.status,
                )
                await self._delay(delay, token)
        except RequestCancelledError:
            log_request_cancelled(method=request.method, url=safe_url, attempt=attempt)
            raise

    @overload
    async def get_json(
        self,
        relative_path: str,
        query: Mapping[str, Any] | None = ...,
        *,
        model: type[ModelT],
        token: CancellationToken | None = ...,
    ) -> ModelT: ...

    @overload
    async def get_json(
        self,
        relative_path: str,
        query: Mapping[str, Any] | None = ...,
        *,
        model: None = ...,
        token: CancellationToken | None = ...,
    ) -> Any: ...

    async def get_json(
        self,
        relative_path: str,
        query: Mapping[str, Any] | None = None,
        *,
        model: type[ModelT] | None = None,
        token: CancellationToken | None = None,
    ) -> ModelT | Any:
        """GET ``relative_path`` and decode the JSON body.

        Args:
            relative_path: Path under the base URL (e.g. "bill/118")
            query: Extra query parameters; api_key/format are injected on top
            model: Pydantic model to validate into; raw JSON is returned when omitted
            token: Cancellation token

        Raises:
            DeserializationError: Empty, null or malformed body, or shape mismatch
        """
        url = self.build_url(relative_path, query)
        response = await self.send(HttpRequest(method="GET", url=url), token)
        return self._decode(response, model, redact_api_key(url))

    # ------------------------------------------------------------------
    # Delay computation
    # ------------------------------------------------------------------

    def compute_backoff(self, attempt: int) -> float:
        """Exponential backoff with jitter, in seconds.

        ``base_delay * 2 ** (attempt - 1)`` plus up to ``jitter_factor`` of
        that value drawn uniformly. ``attempt`` is 1 for the first retry.
        """
        policy = self.retry_policy
        delay = policy.base_delay * (2 ** max(0, attempt - 1))
        return delay + delay * policy.clamped_jitter * self._rng()

    def retry_delay(self, response: HttpResponse, attempt: int) -> float:
        """Delay before retrying after a transient ``response``."""
        if self.retry_policy.respect_retry_after:
            retry_after = parse_retry_after(response.headers.get(RETRY_AFTER_HEADER))
            if retry_after is not None:
                return retry_after
        return self.compute_backoff(attempt)

    async def _delay(self, seconds: float, token: CancellationToken) -> None:
        await token.sleep(seconds)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _http_error(self, request: HttpRequest, response: HttpResponse, safe_url: str) -> HttpError:
        request_id = response.headers.get(REQUEST_ID_HEADER)
        body = truncate_body(response.text())
        message = (
            f"HTTP {response.status} {response.reason or ''} for {request.method} {safe_url}. "
            f"Request-Id: {request_id or 'n/a'}. Body: {body}"
        )
        kwargs: dict[str, Any] = {
            "status_code": response.status,
            "reason": response.reason,
            "method": request.method,
            "url": safe_url,
            "request_id": request_id,
            "body": body,
        }
        if response.status == 429:
            return RateLimitError(
                message,
                retry_after=parse_retry_after(response.headers.get(RETRY_AFTER_HEADER)),
                **kwargs,
            )
        return HttpError(message, **kwargs)

    @staticmethod
    def _decode(response: HttpResponse, model: type[ModelT] | None, safe_url: str) -> Any:
        target = model.__name__ if model is not None else "JSON"
        if not response.body or not response.body.strip():
            raise DeserializationError(
                f"Empty response body for GET {safe_url}", url=safe_url, target=target
            )
        try:
            data = json.loads(response.body)
        except ValueError as exc:
            raise DeserializationError(
                f"Malformed JSON for GET {safe_url}: {exc}", url=safe_url, target=target
            ) from exc
        if data is None:
            raise DeserializationError(
                f"Failed to deserialize response body for GET {safe_url} into {target}: null",
                url=safe_url,
                target=target,
            )
        if model is None:
            return data
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise DeserializationError(
                f"Failed to deserialize response body for GET {safe_url} into {target}: {exc}",
                url=safe_url,
                target=target,
            ) from exc


def parse_retry_after(value: str | None, *, now: datetime | None = None) -> float | None:
    """Parse a Retry-After header into seconds.

    Accepts delta-seconds or an HTTP-date. Returns None when the header is
    absent, unparseable, or names a moment that is not in the future.
    """
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    try:
        seconds = float(value)
    except ValueError:
        pass
    else:
        return seconds if math.isfinite(seconds) and seconds >= 0 else None

    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=UTC)
    delta = (when - (now or datetime.now(UTC))).total_seconds()
    return delta if delta > 0 else None
