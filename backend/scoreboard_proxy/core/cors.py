"""
Permissive CORS headers for every outgoing response.

Starlette's CORSMiddleware only answers requests that carry an Origin
header, so the headers are added here unconditionally instead.
"""

from typing import Iterable, List, Tuple

from starlette.types import ASGIApp, Message, Receive, Scope, Send

RawHeaders = List[Tuple[bytes, bytes]]

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "*",
    "Access-Control-Allow-Headers": "*",
}

_CORS_RAW = [
    (name.lower().encode("latin-1"), value.encode("latin-1"))
    for name, value in CORS_HEADERS.items()
]
_CORS_NAMES = {name for name, _ in _CORS_RAW}


def with_cors_headers(headers: Iterable[Tuple[bytes, bytes]]) -> RawHeaders:
    """
    Return a new raw header list with the CORS headers set.

    Existing values for the same header names are replaced.
    """
    kept = [(name, value) for name, value in headers if name.lower() not in _CORS_NAMES]
    return kept + list(_CORS_RAW)


class CORSHeadersMiddleware:
    """ASGI middleware applying with_cors_headers to every HTTP response."""

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_cors(message: Message) -> None:
            if message["type"] == "http.response.start":
                message = {
                    **message,
                    "headers": with_cors_headers(message.get("headers", [])),
                }
            await send(message)

        await self.app(scope, receive, send_with_cors)
