"""Build the Bot API request for a message or a resolved media reference.

Remote references and text go out as JSON; local files go out as
multipart/form-data with the file streamed from disk. ``chat_id`` is not set
here: the client adds it from its configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .kinds import MediaKind
from .resolver import ResolvedKind


@dataclass(frozen=True, slots=True)
class Upload:
    """A local file to stream as one multipart part."""
    part: str
    path: Path
    filename: str | None = None


@dataclass(frozen=True, slots=True)
class HttpRequestSpec:
    """Transport-neutral description of one Bot API call."""
    method: str
    fields: dict[str, str] = field(default_factory=dict)
    upload: Upload | None = None

    @property
    def is_multipart(self) -> bool:
        return self.upload is not None


def build_message_request(text: str, parse_mode: str) -> HttpRequestSpec:
    return HttpRequestSpec("sendMessage", {"text": text, "parse_mode": parse_mode})


def build_media_request(
    kind: MediaKind,
    resolved: ResolvedKind,
    ref: str,
    *,
    caption: str | None = None,
    filename: str | None = None,
    parse_mode: str = "MarkdownV2",
) -> HttpRequestSpec:
    """Select JSON or multipart transport for a media reference.

    ``caption`` and ``parse_mode`` are sent only together, and only for a
    non-empty caption. ``filename`` only applies to local document and video
    uploads.

    Raises:
        ValueError: ``resolved`` is UNRESOLVABLE.
    """
    fields: dict[str, str] = {}
    if caption:
        fields["caption"] = caption
        fields["parse_mode"] = parse_mode

    match resolved:
        case ResolvedKind.REMOTE:
            return HttpRequestSpec(kind.api_method, {kind.value: ref, **fields})
        case ResolvedKind.LOCAL:
            name = filename if kind.accepts_filename and filename else None
            return HttpRequestSpec(kind.api_method, fields, Upload(kind.value, Path(ref), name))
        case _:
            raise ValueError(f"cannot build a request for unresolvable {kind.value} reference {ref!r}")
