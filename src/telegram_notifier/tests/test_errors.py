"""Tests for error codes, ToolError rendering and the Result/ToolError bridge."""

from __future__ import annotations

import pytest
from pydantic import BaseModel, ValidationError

from telegram_notifier.foundation.errors import (
    ErrorCode,
    Err,
    Ok,
    ToolError,
    classify_exception,
    code_for_status,
    format_validation_error,
    result_to_string,
    to_tool_error,
    trace,
)


@pytest.mark.parametrize(
    ("status", "code"),
    [
        (400, ErrorCode.INVALID_PARAMS),
        (401, ErrorCode.API_KEY_INVALID),
        (403, ErrorCode.PERMISSION_DENIED),
        (404, ErrorCode.NOT_FOUND),
        (413, ErrorCode.INVALID_PARAMS),
        (429, ErrorCode.RATE_LIMITED),
        (500, ErrorCode.EXTERNAL_SERVICE_ERROR),
        (502, ErrorCode.EXTERNAL_SERVICE_ERROR),
        (418, ErrorCode.UNKNOWN),
    ],
)
def test_code_for_status(status: int, code: ErrorCode) -> None:
    assert code_for_status(status) is code


def test_classify_exception() -> None:
    assert classify_exception(FileNotFoundError(2, "No such file or directory")) is ErrorCode.NOT_FOUND
    assert classify_exception(PermissionError(13, "Permission denied")) is ErrorCode.PERMISSION_DENIED
    assert classify_exception(TimeoutError("read timeout")) is ErrorCode.TIMEOUT
    assert classify_exception(RuntimeError("weird")) is ErrorCode.EXTERNAL_SERVICE_ERROR


# ═════════════════════════════════════════════════════════════════════════════
# Rendering
# ═════════════════════════════════════════════════════════════════════════════


def test_render_plain_error() -> None:
    err = ToolError.create("send_telegram_video", "Video not found: clip.mp4", ErrorCode.NOT_FOUND, recoverable=False)
    assert err.render() == "**Tool Error (send_telegram_video):** Video not found: clip.mp4"
    assert str(err) == err.render()
    assert err.is_transient is False


def test_render_transient_hint_only_when_recoverable() -> None:
    transient = ToolError.create("t_tool", "slow down", ErrorCode.RATE_LIMITED)
    assert "may be transient" in transient.render()
    final = ToolError.create("t_tool", "slow down", ErrorCode.RATE_LIMITED, recoverable=False)
    assert "may be transient" not in final.render()


def test_from_exception_uses_context() -> None:
    err = ToolError.from_exception("t_tool", ValueError("bad json payload"), "Execution failed")
    assert err.message == "Execution failed: bad json payload"
    assert err.code is ErrorCode.PARSE_ERROR


def test_format_validation_error_lists_fields() -> None:
    class Params(BaseModel):
        photo: str

    with pytest.raises(ValidationError) as info:
        Params.model_validate({})
    text = format_validation_error(info.value)
    assert text.startswith("Invalid parameters: ")
    assert "photo" in text


# ═════════════════════════════════════════════════════════════════════════════
# Result bridge
# ═════════════════════════════════════════════════════════════════════════════


def test_result_to_string_ok_passthrough() -> None:
    assert result_to_string(Ok("Photo sent successfully"), "send_telegram_photo") == "Photo sent successfully"


def test_result_to_string_err_keeps_message_verbatim() -> None:
    message = 'Failed to send photo: Request failed with status code 403\nResponse: {"ok":false}'
    result = Err(trace(message, code="PERMISSION_DENIED", status=403, recoverable=False).with_operation("telegram:sendPhoto"))
    assert result_to_string(result, "send_telegram_photo") == f"**Tool Error (send_telegram_photo):** {message}"


def test_to_tool_error_maps_code_and_rejects_ok() -> None:
    err = to_tool_error(Err(trace("gone", code=ErrorCode.NOT_FOUND.value, recoverable=False)), "t_tool")
    assert err.code is ErrorCode.NOT_FOUND
    assert err.recoverable is False
    with pytest.raises(RuntimeError):
        to_tool_error(Ok("fine"), "t_tool")


def test_unknown_code_string_becomes_unknown() -> None:
    err = to_tool_error(Err(trace("odd", code="NOT_A_CODE")), "t_tool")
    assert err.code is ErrorCode.UNKNOWN


def test_error_trace_keeps_status_through_contexts() -> None:
    t = trace("x", code="RATE_LIMITED", status=429).with_operation("telegram:sendMessage").with_operation("tool:send")
    assert t.status == 429
    assert t.root_operation == "telegram:sendMessage"
    assert [c.operation for c in t.contexts] == ["telegram:sendMessage", "tool:send"]
    assert "(status 429)" in t.format()
