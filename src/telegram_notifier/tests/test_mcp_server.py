"""Tests for the MCP tool listing and invocation adapter."""

from __future__ import annotations

import pytest
from mcp import types

from telegram_notifier import __version__
from telegram_notifier.ext.mcp import SERVER_NAME, MCPServer, get_tool_schema
from telegram_notifier.foundation.registry import ToolRegistry
from telegram_notifier.foundation.testing import FakeTelegramAPI


@pytest.fixture
def server(registry: ToolRegistry) -> MCPServer:
    return MCPServer(registry)


def test_server_identity(server: MCPServer) -> None:
    assert server.name == SERVER_NAME == "telegram-notifier"
    assert server.server.name == "telegram-notifier"
    assert server.server.version == __version__ == "0.1.0"


def test_lists_four_tools_with_titles(server: MCPServer) -> None:
    tools = server.list_tools()
    assert [(t.name, t.title) for t in tools] == [
        ("send_markdown_message_as_telegram_bot", "Send Telegram Message in Markdown format"),
        ("send_telegram_photo", "Send Telegram Photo"),
        ("send_telegram_document", "Send Telegram Document"),
        ("send_telegram_video", "Send Telegram Video"),
    ]
    assert all(isinstance(t, types.Tool) for t in tools)
    assert tools[1].description == "Send a photo/image via Telegram bot"


def test_schema_uses_wire_names_without_titles(registry: ToolRegistry) -> None:
    schema = get_tool_schema(registry["send_telegram_document"])

    assert schema["type"] == "object"
    assert "title" not in schema
    props = schema["properties"]
    assert set(props) == {"document", "caption", "filename", "parseMode"}
    assert all("title" not in p for p in props.values())
    assert schema["required"] == ["document"]
    assert props["parseMode"]["enum"] == ["Markdown", "MarkdownV2", "HTML"]
    assert props["parseMode"]["default"] == "MarkdownV2"
    assert props["filename"]["description"] == "Custom filename for the document"


def test_message_schema_embeds_formatting_reference(registry: ToolRegistry) -> None:
    schema = get_tool_schema(registry["send_markdown_message_as_telegram_bot"])
    assert schema["required"] == ["messageText"]
    assert "Prefer MarkdownV2." in schema["properties"]["messageText"]["description"]


def test_photo_description_lists_only_paths_and_urls(registry: ToolRegistry) -> None:
    description = get_tool_schema(registry["send_telegram_photo"])["properties"]["photo"]["description"]
    assert description == "File path or HTTP URL to the photo"
    assert "base64" not in description


@pytest.mark.asyncio
async def test_invoke_answers_with_text(server: MCPServer, fake_api: FakeTelegramAPI) -> None:
    assert await server.invoke("send_markdown_message_as_telegram_bot", {"messageText": "hi"}) == "Message sent successfully"
    assert (await server.invoke("nope", None)).startswith("**Tool Error (nope):**")
    assert fake_api.request_count == 1


@pytest.mark.asyncio
async def test_list_tools_request_handler(server: MCPServer) -> None:
    handler = server.server.request_handlers[types.ListToolsRequest]
    result = await handler(types.ListToolsRequest(method="tools/list"))
    assert [t.name for t in result.root.tools][0] == "send_markdown_message_as_telegram_bot"


def test_both_request_handlers_registered(server: MCPServer) -> None:
    handlers = server.server.request_handlers
    assert types.ListToolsRequest in handlers
    assert types.CallToolRequest in handlers


def _call(name: str, arguments: dict[str, object]) -> types.CallToolRequest:
    return types.CallToolRequest(method="tools/call", params=types.CallToolRequestParams(name=name, arguments=arguments))


@pytest.mark.asyncio
async def test_call_tool_request_handler_sends(server: MCPServer, fake_api: FakeTelegramAPI) -> None:
    handler = server.server.request_handlers[types.CallToolRequest]
    result = (await handler(_call("send_telegram_video", {"video": "https://example.com/clip.mp4"}))).root

    assert len(result.content) == 1
    assert result.content[0].text == "Video sent successfully"
    fake_api.assert_endpoint_called("sendVideo")


@pytest.mark.asyncio
async def test_call_tool_request_handler_reports_bad_arguments_as_text(server: MCPServer, fake_api: FakeTelegramAPI) -> None:
    handler = server.server.request_handlers[types.CallToolRequest]
    result = (await handler(_call("send_telegram_photo", {"photo": 5}))).root

    assert len(result.content) == 1
    assert result.content[0].type == "text"
    assert "Invalid parameters" in result.content[0].text
    fake_api.assert_not_called()
