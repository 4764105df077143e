"""Media reference resolution and transport selection."""

from .kinds import MediaKind
from .resolver import ResolvedKind, exists_locally, is_remote, resolve
from .transport import HttpRequestSpec, Upload, build_media_request, build_message_request

__all__ = [
    "MediaKind",
    "ResolvedKind", "resolve", "is_remote", "exists_locally",
    "HttpRequestSpec", "Upload", "build_media_request", "build_message_request",
]
