# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Exception hierarchy for the Resend client.

Every error raised by this package derives from :class:`ResendError`.
Local precondition failures (:class:`ValidationError`,
:class:`UnsupportedOperationError`, :class:`NotFoundError`) are raised before
any network call. Remote and transport failures are reported as
:class:`ApiError`, tagged with an :class:`ApiErrorKind` so callers can match
on the kind instead of the class.

Example:
    Backing off on rate limits only::

        try:
            await client.send_email(email)
        except RateLimitError:
            await asyncio.sleep(1)
        except ApiError as exc:
            if exc.kind is ApiErrorKind.NETWORK:
                ...
"""

from __future__ import annotations

from enum import Enum


class ResendError(Exception):
    """Base class for all errors raised by the Resend client."""


class ValidationError(ResendError):
    """A local precondition was violated (bad attachment, batch too large...)."""


class UnsupportedOperationError(ResendError):
    """The operation is not available in the current runtime."""


class NotFoundError(ResendError):
    """A local file referenced by the caller does not exist."""


class ApiErrorKind(str, Enum):
    """Classification of a failed API call.

    Attributes:
        BAD_REQUEST: HTTP 400.
        MISSING_API_KEY: HTTP 401.
        INVALID_API_KEY: HTTP 403.
        NOT_FOUND: HTTP 404.
        RATE_LIMITED: HTTP 429, retryable after backoff.
        SERVER: Any other non-success status.
        NETWORK: No usable response (DNS, connection, timeout, malformed body).
    """

    BAD_REQUEST = "bad_request"
    MISSING_API_KEY = "missing_api_key"
    INVALID_API_KEY = "invalid_api_key"
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    SERVER = "server"
    NETWORK = "network"


class ApiError(ResendError):
    """The API rejected the request or the transport failed.

    Attributes:
        message: Human readable description.
        status_code: HTTP status, or None for transport failures.
        kind: Failure classification.
        body: Raw response text when a response was received.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        *,
        kind: ApiErrorKind | None = None,
        body: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        if kind is None:
            kind = ApiErrorKind.NETWORK if status_code is None else ApiErrorKind.SERVER
        self.kind = kind
        self.body = body

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (status {self.status_code})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, status_code={self.status_code!r})"


class RateLimitError(ApiError):
    """HTTP 429: the caller exceeded the API rate limit."""

    def __init__(self, message: str, status_code: int | None = 429, *, body: str | None = None):
        super().__init__(message, status_code, kind=ApiErrorKind.RATE_LIMITED, body=body)
