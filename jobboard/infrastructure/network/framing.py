"""
Wire framing for the line protocol.

A response is its body split into lines, followed by the sentinel line.
Body lines that read exactly like the sentinel are indented so a
response can only end where the server ends it.
"""

SENTINEL = "END_RESPONSE"
LINE_TERMINATOR = "\n"
ESCAPED_SENTINEL = "  " + SENTINEL


def strip_terminator(line: str) -> str:
    """Drop a trailing LF or CRLF from a line read off the wire."""
    return line.rstrip("\r\n")


def frame_response(body: str) -> str:
    """Render a response body as wire text, sentinel included."""
    lines = [
        ESCAPED_SENTINEL if line == SENTINEL else line
        for line in body.splitlines() or [""]
    ]
    lines.append(SENTINEL)
    return LINE_TERMINATOR.join(lines) + LINE_TERMINATOR
