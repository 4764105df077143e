"""Test doubles for the Bot API."""

from .fake_api import FakeResponse, FakeTelegramAPI, RecordedCall

__all__ = ["FakeResponse", "FakeTelegramAPI", "RecordedCall"]
