"""The three media kinds the Bot API accepts for uploads."""

from __future__ import annotations

from enum import StrEnum


class MediaKind(StrEnum):
    """Media kind, valued by the Bot API field that carries the file."""

    PHOTO = "photo"
    DOCUMENT = "document"
    VIDEO = "video"

    @property
    def api_method(self) -> str:
        """Bot API method name, e.g. ``sendPhoto``."""
        return f"send{self.value.capitalize()}"

    @property
    def label(self) -> str:
        """Capitalized kind for messages, e.g. ``Photo``."""
        return self.value.capitalize()

    @property
    def accepts_filename(self) -> bool:
        """Whether a custom upload filename is honoured for this kind."""
        return self is not MediaKind.PHOTO
