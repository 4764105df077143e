"""Classify a caller-supplied media reference.

A reference is either an absolute URL the Bot API fetches itself, or a path
to a local file that has to be uploaded. The URL check always runs first.
"""

from __future__ import annotations

import os
from enum import Enum
from urllib.parse import urlsplit


class ResolvedKind(Enum):
    REMOTE = "remote"
    LOCAL = "local"
    UNRESOLVABLE = "unresolvable"


def is_remote(ref: str) -> bool:
    """True when ``ref`` is an absolute URL with both scheme and authority.

    ``C:\\x.png`` parses with scheme ``c`` but no authority, and
    ``file:///x`` has an empty authority; neither counts.
    """
    try:
        parts = urlsplit(ref)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc)


def exists_locally(ref: str) -> bool:
    """Filesystem existence probe. A probe that raises counts as missing."""
    try:
        return os.path.exists(ref)
    except (OSError, ValueError):
        return False


def resolve(ref: str) -> ResolvedKind:
    """Classify ``ref`` as REMOTE, LOCAL or UNRESOLVABLE."""
    if is_remote(ref):
        return ResolvedKind.REMOTE
    if exists_locally(ref):
        return ResolvedKind.LOCAL
    return ResolvedKind.UNRESOLVABLE
