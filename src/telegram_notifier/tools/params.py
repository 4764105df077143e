"""Input schemas for the four Telegram tools.

Property names on the wire are camelCase (``messageText``, ``parseMode``);
the snake_case attribute names are accepted too.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from .formatting import TEXT_FORMATTING_REFERENCE

ParseMode = Literal["Markdown", "MarkdownV2", "HTML"]
DEFAULT_PARSE_MODE: ParseMode = "MarkdownV2"

_CAPTION_MODE = "Caption formatting mode"


class _Params(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class SendMessageParams(_Params):
    message_text: Annotated[str, Field(alias="messageText", min_length=1, description=TEXT_FORMATTING_REFERENCE)]
    parse_mode: ParseMode = Field(
        default=DEFAULT_PARSE_MODE,
        alias="parseMode",
        description="Message formatting mode: Markdown (legacy), MarkdownV2 (comprehensive), or HTML (tag-based)",
    )


class SendPhotoParams(_Params):
    photo: Annotated[str, Field(min_length=1, description="File path or HTTP URL to the photo")]
    caption: str | None = Field(default=None, description="Photo caption with formatting support")
    parse_mode: ParseMode = Field(default=DEFAULT_PARSE_MODE, alias="parseMode", description=_CAPTION_MODE)


class SendDocumentParams(_Params):
    document: Annotated[str, Field(min_length=1, description="File path or HTTP URL to the document")]
    caption: str | None = Field(default=None, description="Document caption with formatting support")
    filename: str | None = Field(default=None, min_length=1, description="Custom filename for the document")
    parse_mode: ParseMode = Field(default=DEFAULT_PARSE_MODE, alias="parseMode", description=_CAPTION_MODE)


class SendVideoParams(_Params):
    video: Annotated[str, Field(min_length=1, description="File path or HTTP URL to the video")]
    caption: str | None = Field(default=None, description="Video caption with formatting support")
    filename: str | None = Field(default=None, min_length=1, description="Custom filename for the video")
    parse_mode: ParseMode = Field(default=DEFAULT_PARSE_MODE, alias="parseMode", description=_CAPTION_MODE)
