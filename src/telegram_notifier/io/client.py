"""Async Bot API client.

Performs one HTTPS POST per HttpRequestSpec and reports the outcome as an
OperationResult. Expected failures (HTTP errors, ``"ok": false`` bodies,
network errors, timeouts, unreadable upload files) come back as Err and are
never raised. The bot token is part of the URL path only; it is redacted from
every message this module produces and never logged.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

import httpx
import orjson

from ..foundation.errors import (
    ErrorCode,
    Err,
    ErrorTrace,
    Ok,
    OperationResult,
    classify_exception,
    code_for_status,
    trace,
)
from ..runtime.observability import get_logger

if TYPE_CHECKING:
    from types import TracebackType

    from ..foundation.config import TelegramConfig
    from ..media import HttpRequestSpec

log = get_logger("telegram.client")

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_TRANSIENT = frozenset({ErrorCode.RATE_LIMITED, ErrorCode.TIMEOUT, ErrorCode.NETWORK_ERROR})


def operation_name(method: str) -> str:
    """Human form of a Bot API method: ``sendPhoto`` -> ``send photo``."""
    return _CAMEL_BOUNDARY.sub(" ", method).lower()


def _serialize_body(response: httpx.Response) -> str:
    """JSON bodies are re-serialized compactly; anything else is passed through as text."""
    try:
        return orjson.dumps(orjson.loads(response.content)).decode()
    except orjson.JSONDecodeError:
        return response.text


class TelegramClient:
    """Pooled httpx client bound to one bot and one chat.

    Example:
        >>> async with TelegramClient(config) as client:
        ...     result = await client.post(build_message_request("*hi*", "MarkdownV2"))
    """

    __slots__ = ("_config", "_timeout", "_transport", "_client", "_closed")

    def __init__(
        self,
        config: TelegramConfig,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._closed = False

    @property
    def chat_id(self) -> str:
        return self._config.chat_id

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the httpx async client."""
        if self._closed:
            raise RuntimeError("TelegramClient is closed")
        if self._client is None:
            kwargs: dict[str, object] = {"base_url": self._config.api_base}
            if self._timeout is not None:
                kwargs["timeout"] = self._timeout
            if self._transport is not None:
                kwargs["transport"] = self._transport
            self._client = httpx.AsyncClient(**kwargs)  # type: ignore[arg-type]
        return self._client

    async def aclose(self) -> None:
        """Close the pooled connection. Further posts raise RuntimeError."""
        self._closed = True
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> TelegramClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    # ─────────────────────────────────────────────────────────────────
    # Requests
    # ─────────────────────────────────────────────────────────────────

    async def post(self, request: HttpRequestSpec) -> OperationResult:
        """Send one Bot API call. Returns Ok(decoded body) or Err(ErrorTrace)."""
        client = self._get_client()
        url = f"/bot{self._config.token.get_secret_value()}/{request.method}"
        payload = {"chat_id": self._config.chat_id, **request.fields}
        op = operation_name(request.method)
        log.debug("upstream call", method=request.method, transport="multipart" if request.is_multipart else "json")

        try:
            if request.upload is None:
                response = await client.post(url, json=payload)
            else:
                upload = request.upload
                with upload.path.open("rb") as fh:
                    file = (upload.filename, fh) if upload.filename else fh
                    response = await client.post(url, data=payload, files={upload.part: file})
        except httpx.TimeoutException as e:
            return self._failure(request.method, trace(
                f"Failed to {op}: {self._redact(str(e)) or 'timeout exceeded'}",
                code=ErrorCode.TIMEOUT.value,
                recoverable=True,
            ))
        except httpx.HTTPError as e:
            return self._failure(request.method, trace(
                f"Failed to {op}: {self._redact(str(e)) or type(e).__name__}",
                code=ErrorCode.NETWORK_ERROR.value,
                recoverable=True,
            ))
        except OSError as e:
            return self._failure(request.method, trace(
                f"Failed to {op}: {e}",
                code=classify_exception(e).value,
                recoverable=False,
            ))

        return self._interpret(request.method, response)

    def _interpret(self, method: str, response: httpx.Response) -> OperationResult:
        op = operation_name(method)
        status = response.status_code
        if not response.is_success:
            code = code_for_status(status)
            return self._failure(method, trace(
                f"Failed to {op}: Request failed with status code {status}\nResponse: {self._redact(_serialize_body(response))}",
                code=code.value,
                status=status,
                recoverable=code in _TRANSIENT,
            ))

        try:
            body = orjson.loads(response.content)
        except orjson.JSONDecodeError:
            return self._failure(method, trace(
                f"Failed to {op}: Bot API returned a non-JSON body\nResponse: {self._redact(response.text)}",
                code=ErrorCode.PARSE_ERROR.value,
                status=status,
                recoverable=False,
            ))

        if isinstance(body, dict) and body.get("ok") is False:
            upstream = body.get("error_code")
            code = code_for_status(upstream) if isinstance(upstream, int) else ErrorCode.EXTERNAL_SERVICE_ERROR
            reason = body.get("description") or "Bot API reported failure"
            return self._failure(method, trace(
                f"Failed to {op}: {reason}\nResponse: {self._redact(orjson.dumps(body).decode())}",
                code=code.value,
                status=status,
                recoverable=code in _TRANSIENT,
            ))

        log.debug("upstream ok", method=method, status=status)
        return Ok(body)

    def _failure(self, method: str, err: ErrorTrace) -> OperationResult:
        log.warning("upstream failure", method=method, status=err.status, code=err.error_code)
        return Err(err.with_operation(f"telegram:{method}"))

    def _redact(self, text: str) -> str:
        token = self._config.token.get_secret_value()
        return text.replace(token, "<token>") if token else text
