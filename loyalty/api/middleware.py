from __future__ import annotations

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware


class RemoteUserMiddleware(BaseHTTPMiddleware):
    """
    Exposes the authenticated caller as ``request.state.user``.

    Authentication happens in front of the service; the proxy passes the
    user id in a trusted header. No header means an anonymous caller.
    """

    def __init__(self, app, header: str = "X-Remote-User"):
        super().__init__(app)
        self.header = header

    async def dispatch(self, request: Request, call_next):
        uid = (request.headers.get(self.header) or "").strip()
        request.state.user = {"id": uid} if uid else None
        return await call_next(request)
