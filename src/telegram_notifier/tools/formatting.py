"""Formatting guidance embedded in the message tool's input schema."""

from __future__ import annotations

from functools import lru_cache
from importlib.resources import files

_HEADER = """Message text with formatting. Examples:
HTML: <b>bold</b>, <i>italic</i>, <u>underline</u>, <s>strike</s>, <code>code</code>
Markdown: *bold*, _italic_, `code`, [link](url)
MarkdownV2: *bold*, _italic_, __underline__, ~strike~, ||spoiler||, `code`

Prefer MarkdownV2.

Read the documentation on MarkdownV2 formatting below:

"""


@lru_cache(maxsize=1)
def markdownv2_reference() -> str:
    """The MarkdownV2 rules shipped as package data."""
    return files("telegram_notifier.tools").joinpath("resources/markdownv2.md").read_text(encoding="utf-8")


def text_formatting_reference() -> str:
    """Cheat-sheet for all three parse modes followed by the MarkdownV2 rules."""
    return _HEADER + markdownv2_reference()


TEXT_FORMATTING_REFERENCE = text_formatting_reference()
