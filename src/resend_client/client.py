# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Async client for the Resend email API.

Each operation issues one HTTP request and returns the decoded JSON object,
or raises a subclass of :class:`resend_client.exceptions.ResendError`.
Nothing is retried: rate limits and network failures surface to the caller.

Usage:
    >>> from resend_client import EmailRequest, ResendClient
    >>> async with ResendClient("re_xxxxxxxxx") as client:
    ...     email = EmailRequest(
    ...         to=["delivered@resend.dev"],
    ...         from_addr="Acme <onboarding@resend.dev>",
    ...         subject="Hello",
    ...         html="<p>Hi</p>",
    ...     )
    ...     await client.send_email(email)
    {'id': '49a3999c-0ce1-4ea6-ab68-afcd6dc2e794'}

Example:
    Scheduling and rescheduling::

        sent = await client.schedule_email(email.model_copy(update={"scheduled_at": "in 1 hour"}))
        await client.reschedule_email(sent["id"], "in 2 hours")
        await client.cancel_email(sent["id"])
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Sequence
from typing import Any

import aiohttp

from .config_loader import DEFAULT_BASE_URL, ClientConfig
from .exceptions import ApiError, ApiErrorKind, RateLimitError, ValidationError
from .logger import get_logger
from .models import EmailRequest

MAX_BATCH_SIZE = 100

# Fixed messages for statuses the API documents.
_STATUS_ERRORS: dict[int, tuple[str, ApiErrorKind]] = {
    400: ("Bad request", ApiErrorKind.BAD_REQUEST),
    401: ("Missing API key", ApiErrorKind.MISSING_API_KEY),
    403: ("Invalid API key", ApiErrorKind.INVALID_API_KEY),
    404: ("Resource not found", ApiErrorKind.NOT_FOUND),
}

logger = get_logger("ResendClient")


def classify_response(status: int, body: str) -> dict[str, Any]:
    """Turn an HTTP status and body into a result or a typed error.

    Args:
        status: HTTP status code.
        body: Raw response text.

    Returns:
        The decoded JSON object for 200 and 201 responses.

    Raises:
        RateLimitError: On 429.
        ApiError: On any other status, or when a success body is not a JSON object.
    """
    if status in (200, 201):
        try:
            data = json.loads(body)
        except json.JSONDecodeError as exc:
            raise ApiError(f"Network error: {exc}", body=body) from exc
        if not isinstance(data, dict):
            raise ApiError("Network error: expected a JSON object", body=body)
        return data
    if status == 429:
        raise RateLimitError("Rate limit exceeded", 429, body=body)
    if status in _STATUS_ERRORS:
        message, kind = _STATUS_ERRORS[status]
        raise ApiError(message, status, kind=kind, body=body)
    raise ApiError(f"Server error: {body}", status, kind=ApiErrorKind.SERVER, body=body)


class ResendClient:
    """Client for the Resend email API.

    The HTTP session is opened on first use and reused by every call, so
    concurrent operations on one client share its connection pool. Release it
    with :meth:`close` or by using the client as an async context manager.

    Attributes:
        base_url: API endpoint, without trailing slash.
        timeout: Total request timeout in seconds for the owned session,
            None to keep aiohttp's default.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        *,
        session: aiohttp.ClientSession | None = None,
        timeout: float | None = None,
    ):
        """Initialize the client.

        Args:
            api_key: Resend API key, sent as a bearer token.
            base_url: API endpoint, override for test servers.
            session: Existing session to use. The caller keeps ownership
                and must close it.
            timeout: Total timeout for requests on the owned session.

        Raises:
            ValidationError: If ``api_key`` is empty.
        """
        if not api_key:
            raise ValidationError("api_key is required.")
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session
        self._owns_session = session is None
        self._closed = False

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> ResendClient:
        """Create a client from a :class:`ClientConfig`.

        Raises:
            ValidationError: If the configuration has no API key.
        """
        if not config.api_key:
            raise ValidationError("No API key configured (set RESEND_API_KEY).")
        return cls(config.api_key, config.base_url, timeout=config.timeout, **kwargs)

    @property
    def closed(self) -> bool:
        return self._closed

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    def _get_session(self) -> aiohttp.ClientSession:
        if self._closed:
            raise RuntimeError("ResendClient is closed")
        if self._session is None:
            kwargs: dict[str, Any] = {}
            if self.timeout:
                kwargs["timeout"] = aiohttp.ClientTimeout(total=self.timeout)
            self._session = aiohttp.ClientSession(**kwargs)
            logger.debug("Opened HTTP session for %s", self.base_url)
        return self._session

    async def _request(self, method: str, path: str, payload: Any = None) -> dict[str, Any]:
        """Send one request and classify the response."""
        session = self._get_session()
        url = f"{self.base_url}{path}"
        data = json.dumps(payload) if payload is not None else None
        logger.debug("%s %s", method, path)
        try:
            async with session.request(method, url, data=data, headers=self._headers()) as response:
                status = response.status
                body = await response.text(errors="replace")
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as exc:
            raise ApiError(f"Network error: {exc}") from exc
        return classify_response(status, body)

    async def send_email(self, email: EmailRequest) -> dict[str, Any]:
        """Send a single email.

        Returns:
            API response, e.g. ``{"id": "..."}``.
        """
        return await self._request("POST", "/emails", email.to_dict())

    async def schedule_email(self, email: EmailRequest) -> dict[str, Any]:
        """Send an email for delivery at ``email.scheduled_at``.

        Raises:
            ValidationError: If ``scheduled_at`` is not set. No request is sent.
        """
        if email.scheduled_at is None:
            raise ValidationError("scheduled_at is required for scheduling emails.")
        return await self._request("POST", "/emails", email.to_dict())

    async def reschedule_email(self, email_id: str, scheduled_at: str) -> dict[str, Any]:
        """Move a scheduled email to a new time (ISO-8601 or natural language)."""
        return await self._request("PATCH", f"/emails/{email_id}", {"scheduled_at": scheduled_at})

    async def cancel_email(self, email_id: str) -> dict[str, Any]:
        """Cancel a scheduled email."""
        return await self._request("POST", f"/emails/{email_id}/cancel", {})

    async def send_batch_emails(self, emails: Sequence[EmailRequest]) -> dict[str, Any]:
        """Send up to 100 emails in a single API call.

        Raises:
            ValidationError: If more than 100 emails are given. No request is sent.
        """
        if len(emails) > MAX_BATCH_SIZE:
            raise ValidationError(
                f"Batch emails cannot exceed {MAX_BATCH_SIZE} per request."
            )
        return await self._request("POST", "/emails/batch", [e.to_dict() for e in emails])

    async def retrieve_email(self, email_id: str) -> dict[str, Any]:
        """Fetch a single email by ID."""
        return await self._request("GET", f"/emails/{email_id}")

    async def close(self) -> None:
        """Close the owned HTTP session. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        if self._owns_session and self._session is not None:
            await self._session.close()
            logger.debug("Closed HTTP session for %s", self.base_url)
        self._session = None

    async def __aenter__(self) -> ResendClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def __repr__(self) -> str:
        status = "closed" if self._closed else "open"
        return f"<ResendClient '{self.base_url}' ({status})>"
