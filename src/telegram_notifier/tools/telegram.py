"""The four Telegram notification tools.

One tool sends text; the three media tools share ``MediaTool``, which is
parametrized by a MediaKind and runs resolve -> build request -> post.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel

from ..foundation.core import BaseTool, ToolMetadata
from ..foundation.errors import ErrorCode, ToolResult
from ..io import TelegramClient
from ..media import MediaKind, ResolvedKind, build_media_request, build_message_request, resolve
from ..runtime.observability import get_logger
from .params import SendDocumentParams, SendMessageParams, SendPhotoParams, SendVideoParams

log = get_logger("tools")


class TelegramTool(BaseTool[BaseModel]):
    """Base for tools that post through a shared TelegramClient."""

    def __init__(self, client: TelegramClient) -> None:
        self.client = client


class SendMessageTool(TelegramTool):
    metadata = ToolMetadata(
        name="send_markdown_message_as_telegram_bot",
        title="Send Telegram Message in Markdown format",
        description="Send a message using Telegram bot in Markdown format",
    )
    params_schema = SendMessageParams

    async def _async_run_result(self, params: SendMessageParams) -> ToolResult:  # type: ignore[override]
        log.info("tool invoked", tool=self.metadata.name, transport="json", parse_mode=params.parse_mode)
        result = await self.client.post(build_message_request(params.message_text, params.parse_mode))
        return result.match(ok=lambda _: self._ok("Message sent successfully"), err=self._lift)


class MediaTool(TelegramTool):
    """Send one media reference of ``kind``: remote URL as JSON, local file as upload."""

    kind: ClassVar[MediaKind]

    async def _async_run_result(self, params: BaseModel) -> ToolResult:
        ref: str = getattr(params, self.kind.value)
        resolved = resolve(ref)
        if resolved is ResolvedKind.UNRESOLVABLE:
            log.info("reference unresolvable", tool=self.metadata.name)
            return self._err(
                f"{self.kind.label} not found: {ref}. Provide a valid file path or HTTP URL.",
                ErrorCode.NOT_FOUND,
                recoverable=False,
            )

        request = build_media_request(
            self.kind,
            resolved,
            ref,
            caption=getattr(params, "caption", None),
            filename=getattr(params, "filename", None),
            parse_mode=params.parse_mode,  # type: ignore[attr-defined]
        )
        log.info("tool invoked", tool=self.metadata.name, transport="multipart" if request.is_multipart else "json")
        result = await self.client.post(request)
        return result.match(ok=lambda _: self._ok(f"{self.kind.label} sent successfully"), err=self._lift)


class SendPhotoTool(MediaTool):
    kind = MediaKind.PHOTO
    metadata = ToolMetadata(
        name="send_telegram_photo",
        title="Send Telegram Photo",
        description="Send a photo/image via Telegram bot",
    )
    params_schema = SendPhotoParams


class SendDocumentTool(MediaTool):
    kind = MediaKind.DOCUMENT
    metadata = ToolMetadata(
        name="send_telegram_document",
        title="Send Telegram Document",
        description="Send a document/file via Telegram bot",
    )
    params_schema = SendDocumentParams


class SendVideoTool(MediaTool):
    kind = MediaKind.VIDEO
    metadata = ToolMetadata(
        name="send_telegram_video",
        title="Send Telegram Video",
        description="Send a video via Telegram bot",
    )
    params_schema = SendVideoParams
