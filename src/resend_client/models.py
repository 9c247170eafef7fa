# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Pydantic models for outbound emails.

Models:
    - Attachment: A single attachment, remote (``path``) or inline (``content``)
    - EmailRequest: One outbound email, serializable to the API wire format

Both models are frozen. Validation failures specific to this package raise
:class:`resend_client.exceptions.ValidationError`; a missing required field
is reported by pydantic itself.
"""

from __future__ import annotations

import asyncio
import base64
import os
from enum import Enum
from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from . import runtime
from .exceptions import NotFoundError, UnsupportedOperationError, ValidationError

MAX_LOCAL_FILE_SIZE = 40 * 1024 * 1024

# Extensions the API refuses to deliver.
DENIED_EXTENSIONS = frozenset({
    "adp", "app", "asp", "bas", "bat", "cer", "chm", "cmd", "com", "cpl",
    "crt", "csh", "der", "exe", "fxp", "gadget", "hlp", "hta", "inf", "ins",
    "isp", "its", "js", "jse", "ksh", "lib", "lnk", "mad", "maf", "mag",
    "mam", "maq", "mar", "mas", "mat", "mau", "mav", "maw", "mda", "mdb",
    "mde", "mdt", "mdw", "mdz", "msc", "msh", "msh1", "msh2", "mshxml",
    "msh1xml", "msh2xml", "msi", "msp", "mst", "ops", "pcd", "pif", "plg",
    "prf", "prg", "reg", "scf", "scr", "sct", "shb", "shs", "sys", "ps1",
    "ps1xml", "ps2", "ps2xml", "psc1", "psc2", "tmp", "url", "vb", "vbe",
    "vbs", "vps", "vsmacros", "vss", "vst", "vsw", "vxd", "ws", "wsc",
    "wsf", "wsh", "xnk",
})


def file_extension(filename: str) -> str:
    """Lowercased text after the last dot (the whole name if there is none)."""
    return filename.rsplit(".", 1)[-1].lower()


def check_extension(filename: str) -> None:
    """Raise ValidationError when ``filename`` has a denied extension."""
    extension = file_extension(filename)
    if extension in DENIED_EXTENSIONS:
        raise ValidationError(f"File extension .{extension} is not supported.")


class AttachmentSource(str, Enum):
    """Where the attachment bytes come from.

    Attributes:
        REMOTE: URL fetched by the API server.
        INLINE: Base64 content supplied by the caller.
    """

    REMOTE = "remote"
    INLINE = "inline"


class Attachment(BaseModel):
    """Email attachment.

    Exactly one of ``path`` (URL) or ``content`` (Base64) must be given.

    Attributes:
        path: Remote URL of the attachment.
        content: Base64-encoded attachment content.
        filename: Name shown to the recipient.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: Annotated[
        str | None,
        Field(default=None, description="Remote URL of the attachment")
    ]
    content: Annotated[
        str | None,
        Field(default=None, description="Base64-encoded content")
    ]
    filename: Annotated[
        str,
        Field(description="Attachment filename")
    ]

    @model_validator(mode="after")
    def check_source_and_extension(self) -> Attachment:
        if (self.path is None) == (self.content is None):
            raise ValidationError("Exactly one of path or content must be provided.")
        check_extension(self.filename)
        return self

    @property
    def source(self) -> AttachmentSource:
        if self.path is not None:
            return AttachmentSource.REMOTE
        return AttachmentSource.INLINE

    @classmethod
    async def from_local_file(
        cls,
        path: str | os.PathLike[str],
        filename: str | None = None,
        *,
        local_files: bool | None = None,
    ) -> Attachment:
        """Build an inline attachment from a file on disk.

        Args:
            path: Local file to attach.
            filename: Name shown to the recipient. Defaults to the file's name.
            local_files: Override the runtime capability check; when None,
                :data:`resend_client.runtime.LOCAL_FILES_SUPPORTED` is used.

        Returns:
            Attachment with Base64 ``content``.

        Raises:
            UnsupportedOperationError: The runtime has no local filesystem.
            NotFoundError: ``path`` is not an existing file.
            ValidationError: The file exceeds 40 MiB or has a denied extension.
        """
        if local_files is None:
            local_files = runtime.LOCAL_FILES_SUPPORTED
        if not local_files:
            raise UnsupportedOperationError(
                "Local file attachments are not supported in this runtime."
            )

        file_path = Path(path)
        if not await asyncio.to_thread(file_path.is_file):
            raise NotFoundError(f"File does not exist: {file_path}")

        size = (await asyncio.to_thread(file_path.stat)).st_size
        if size > MAX_LOCAL_FILE_SIZE:
            raise ValidationError("File size exceeds 40MB limit.")

        check_extension(file_path.name)

        data = await asyncio.to_thread(file_path.read_bytes)
        return cls(
            content=base64.b64encode(data).decode("ascii"),
            filename=filename if filename is not None else file_path.name,
        )

    def to_dict(self) -> dict[str, Any]:
        """Wire representation: ``filename`` plus ``path`` or ``content``."""
        return self.model_dump(mode="json", exclude_none=True)


class EmailRequest(BaseModel):
    """One outbound email.

    Attributes:
        to: Recipient addresses.
        from_addr: Sender address (wire key ``from``).
        subject: Subject line.
        html: HTML body.
        text: Plain text body.
        bcc: BCC addresses.
        cc: CC addresses.
        reply_to: Reply-To addresses.
        attachments: Attachments.
        scheduled_at: Delivery time, ISO-8601 or natural language
            ("in 1 min"). Interpreted by the API, not validated here.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    to: Annotated[
        tuple[str, ...],
        Field(description="Recipient address(es)")
    ]
    from_addr: Annotated[
        str,
        Field(alias="from", description="Sender email address")
    ]
    subject: Annotated[
        str,
        Field(description="Email subject")
    ]
    html: Annotated[
        str | None,
        Field(default=None, description="HTML body")
    ]
    text: Annotated[
        str | None,
        Field(default=None, description="Plain text body")
    ]
    bcc: Annotated[
        tuple[str, ...],
        Field(default=(), description="BCC address(es)")
    ]
    cc: Annotated[
        tuple[str, ...],
        Field(default=(), description="CC address(es)")
    ]
    reply_to: Annotated[
        tuple[str, ...],
        Field(default=(), description="Reply-To address(es)")
    ]
    attachments: Annotated[
        tuple[Attachment, ...],
        Field(default=(), description="List of attachments")
    ]
    scheduled_at: Annotated[
        str | None,
        Field(default=None, description="Scheduled delivery time")
    ]

    @field_validator("to", "bcc", "cc", "reply_to", mode="before")
    @classmethod
    def normalize_recipients(cls, v: Any) -> Any:
        """Accept a single address as a one-element sequence."""
        if isinstance(v, str):
            return (v,)
        return v

    def to_dict(self) -> dict[str, Any]:
        """Wire payload; ``html``, ``text`` and ``scheduled_at`` only when set."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
