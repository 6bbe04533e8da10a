from typing import Tuple

from fastapi import HTTPException
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send


class RequestBodyTooLarge(HTTPException):
    def __init__(self):
        super().__init__(status_code=413, detail="Request body too large")


class BodySizeLimitMiddleware:
    """Reject JSON and urlencoded bodies larger than ``max_bytes``.

    The declared Content-Length is checked up front; bodies without one
    (chunked) are counted as they are received. Uploads go to disk and
    are not limited here.
    """

    def __init__(
        self,
        app: ASGIApp,
        max_bytes: int,
        content_types: Tuple[str, ...] = ("application/json", "application/x-www-form-urlencoded"),
    ):
        self.app = app
        self.max_bytes = max_bytes
        self.content_types = content_types

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = Headers(scope=scope)
        content_type = headers.get("content-type", "").strip().lower()
        if not content_type.startswith(self.content_types):
            await self.app(scope, receive, send)
            return

        content_length = headers.get("content-length", "").strip()
        if content_length.isdigit() and int(content_length) > self.max_bytes:
            response = JSONResponse(status_code=413, content={"error": "Request body too large"})
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_bytes:
                    # raised inside body parsing, mapped to 413 by the app's handler
                    raise RequestBodyTooLarge()
            return message

        await self.app(scope, limited_receive, send)
