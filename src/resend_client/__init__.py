# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Async client for the Resend transactional email API.

Features:
    - Send, schedule, reschedule, cancel and retrieve emails
    - Batch sending (up to 100 emails per call)
    - Remote, inline and local-file attachments with extension checks
    - Typed errors, with rate limits distinguished from other failures

Example::

    from resend_client import Attachment, EmailRequest, ResendClient

    async with ResendClient("re_xxxxxxxxx") as client:
        invoice = await Attachment.from_local_file("invoice.pdf")
        email = EmailRequest(
            to=["delivered@resend.dev"],
            from_addr="Acme <onboarding@resend.dev>",
            subject="Receipt",
            text="Thanks for the payment",
            attachments=[invoice],
        )
        await client.send_email(email)
"""

from .client import MAX_BATCH_SIZE, ResendClient, classify_response
from .config_loader import DEFAULT_BASE_URL, ClientConfig, load_client_config
from .exceptions import (
    ApiError,
    ApiErrorKind,
    NotFoundError,
    RateLimitError,
    ResendError,
    UnsupportedOperationError,
    ValidationError,
)
from .models import Attachment, AttachmentSource, EmailRequest

__all__ = [
    "DEFAULT_BASE_URL",
    "MAX_BATCH_SIZE",
    "ApiError",
    "ApiErrorKind",
    "Attachment",
    "AttachmentSource",
    "ClientConfig",
    "EmailRequest",
    "NotFoundError",
    "RateLimitError",
    "ResendClient",
    "ResendError",
    "UnsupportedOperationError",
    "ValidationError",
    "classify_response",
    "load_client_config",
]
