TOOLS = """
TOPIC: tools
============

send_markdown_message_as_telegram_bot
    messageText   (required) message body
    parseMode     Markdown | MarkdownV2 | HTML (default MarkdownV2)

send_telegram_photo
    photo         (required) file path or http(s) URL
    caption       optional caption
    parseMode     caption formatting mode (default MarkdownV2)

send_telegram_document
    document      (required) file path or http(s) URL
    caption       optional caption
    filename      optional upload filename (local files only)
    parseMode     caption formatting mode (default MarkdownV2)

send_telegram_video
    video         (required) file path or http(s) URL
    caption       optional caption
    filename      optional upload filename (local files only)
    parseMode     caption formatting mode (default MarkdownV2)

MEDIA REFERENCES:
    https://example.com/cat.png   URL with scheme and host: Telegram fetches it
    ./reports/Q3.pdf              existing local file: uploaded as multipart
    anything else                 "<Kind> not found: <ref>. ..." and no request

    parseMode is only sent together with a non-empty caption.

ANSWERS:
    Success     "Photo sent successfully" (and so on)
    Failure     **Tool Error (<tool>):** Failed to send photo: Request failed
                with status code 403
                Response: {"ok":false,"description":"Forbidden"}
"""
