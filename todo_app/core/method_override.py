# todo_app/core/method_override.py
from __future__ import annotations

import logging
from urllib.parse import parse_qs

from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

OVERRIDE_FIELD = "_method"
ALLOWED_METHODS = {"PUT", "DELETE"}
FORM_CONTENT_TYPE = b"application/x-www-form-urlencoded"


def _first(qs: str | bytes, field: str) -> str | None:
    if isinstance(qs, bytes):
        qs = qs.decode("latin-1")
    values = parse_qs(qs, keep_blank_values=False).get(field)
    return values[0] if values else None


def _content_type(scope: Scope) -> bytes:
    for name, value in scope.get("headers", []):
        if name == b"content-type":
            return value.split(b";", 1)[0].strip().lower()
    return b""


class MethodOverrideMiddleware:
    """
    Lets plain HTML forms send PUT/DELETE as POST.

    The override is read from the ``_method`` query parameter first, then from
    an url-encoded form body. The body is buffered and replayed unchanged to
    the application.
    """

    def __init__(self, app: ASGIApp, field: str = OVERRIDE_FIELD) -> None:
        self.app = app
        self.field = field

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["method"] != "POST":
            await self.app(scope, receive, send)
            return

        override = _first(scope.get("query_string", b""), self.field)

        if override is None and _content_type(scope) == FORM_CONTENT_TYPE:
            body = await self._read_body(receive)
            override = _first(body, self.field)
            receive = self._replay(body, receive)

        if override is not None:
            method = override.strip().upper()
            if method in ALLOWED_METHODS:
                logger.debug("Method override POST -> %s %s", method, scope["path"])
                scope = dict(scope, method=method)

        await self.app(scope, receive, send)

    @staticmethod
    async def _read_body(receive: Receive) -> bytes:
        chunks = []
        more_body = True
        while more_body:
            message = await receive()
            if message["type"] != "http.request":
                break
            chunks.append(message.get("body", b""))
            more_body = message.get("more_body", False)
        return b"".join(chunks)

    @staticmethod
    def _replay(body: bytes, receive: Receive) -> Receive:
        sent = False

        async def _receive() -> Message:
            nonlocal sent
            if not sent:
                sent = True
                return {"type": "http.request", "body": body, "more_body": False}
            return await receive()

        return _receive
