#!/usr/bin/env python3
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Receive, Scope, Send

from realip.lib.cache import TrustCache
from realip.lib.config import Configuration
from realip.lib.resolver import Resolver


class RealIPMiddleware:
    """
    ASGI middleware which writes the resolved client address into the
    configured destination request header before calling the next app.

        app.add_middleware(RealIPMiddleware, config=config)

    When nothing can be resolved the request is passed on untouched.
    """

    def __init__(
        self, app: ASGIApp, config: Configuration, cache: TrustCache = None
    ) -> None:
        self.app = app
        self.config = config
        self.resolver = Resolver(config, cache=cache)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] not in ("http", "websocket"):
            await self.app(scope, receive, send)
            return

        client = scope.get("client")
        peer_addr = client[0] if client else ""
        real_ip = self.resolver.resolve(peer_addr, Headers(scope=scope))
        if real_ip != "":
            scope["headers"] = set_header(
                scope.get("headers", []), self.config.destination_header, real_ip
            )
        await self.app(scope, receive, send)


def set_header(raw_headers, name: str, value: str) -> list:
    # Replaces every existing value of `name`, like http.Header.Set
    key = name.lower().encode("latin-1")
    headers = [(k, v) for k, v in raw_headers if k.lower() != key]
    headers.append((key, value.encode("latin-1")))
    return headers


def wrap(app: ASGIApp, config: Configuration, cache: TrustCache = None) -> ASGIApp:
    return RealIPMiddleware(app, config=config, cache=cache)
