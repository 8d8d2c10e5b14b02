#!/usr/bin/env python3
import asyncio

from realip.const import HEADER_X_FORWARDED_FOR
from realip.lib.config import new
from realip.lib.middleware import RealIPMiddleware, set_header, wrap


class CaptureApp:
    def __init__(self):
        self.scope = None

    async def __call__(self, scope, receive, send):
        self.scope = scope


async def receive():  # pragma: no cover
    return {"type": "http.request", "body": b""}


async def send(message):  # pragma: no cover
    pass


def call(middleware, scope):
    asyncio.run(middleware(scope, receive, send))


def http_scope(client=("127.0.0.1", 54321), headers=None, type="http"):
    return {
        "type": type,
        "client": client,
        "headers": [(k.lower().encode("latin-1"), v.encode("latin-1")) for k, v in (headers or [])],
    }


def test_set_header():
    raw = [(b"x-real-ip", b"1.1.1.1"), (b"X-Real-IP", b"2.2.2.2"), (b"host", b"example")]
    assert set_header(raw, "X-Real-IP", "3.3.3.3") == [
        (b"host", b"example"),
        (b"x-real-ip", b"3.3.3.3"),
    ]


def test_writes_destination_header():
    inner = CaptureApp()
    config = new().add_trusted_ranges("192.168.0.0/16").build()
    call(
        RealIPMiddleware(inner, config=config),
        http_scope(headers=[("X-Real-IP", "1.1.1.1")]),
    )
    assert inner.scope["headers"] == [(b"x-real-ip", b"127.0.0.1")]


def test_custom_destination_header():
    inner = CaptureApp()
    config = (
        new()
        .set_source_header("X-Forwarded-For")
        .set_destination_header("X-Client-IP")
        .add_trusted_ranges("127.0.0.1/32", "192.168.0.0/16")
        .set_recursive(True)
        .build()
    )
    call(
        wrap(inner, config),
        http_scope(headers=[("X-Forwarded-For", "1.2.3.4, 1.1.1.1, 192.168.0.1")]),
    )
    assert (b"x-client-ip", b"1.1.1.1") in inner.scope["headers"]
    assert (b"x-forwarded-for", b"1.2.3.4, 1.1.1.1, 192.168.0.1") in inner.scope["headers"]


def test_websocket_scope():
    inner = CaptureApp()
    config = new().set_source_header(HEADER_X_FORWARDED_FOR).build()
    call(
        RealIPMiddleware(inner, config=config),
        http_scope(headers=[("X-Forwarded-For", "192.168.0.1")], type="websocket"),
    )
    assert inner.scope["headers"][-1] == (b"x-real-ip", b"192.168.0.1")


def test_nothing_resolved_passes_through():
    inner = CaptureApp()
    scope = http_scope(client=None, headers=[("Host", "example")])
    call(RealIPMiddleware(inner, config=new().build()), scope)
    assert inner.scope["headers"] == [(b"host", b"example")]


def test_lifespan_passes_through():
    inner = CaptureApp()
    scope = {"type": "lifespan"}
    call(RealIPMiddleware(inner, config=new().build()), scope)
    assert inner.scope == {"type": "lifespan"}


def test_empty_destination_header_name():
    inner = CaptureApp()
    config = new().set_destination_header("").build()
    call(
        RealIPMiddleware(inner, config=config),
        http_scope(headers=[("X-Real-IP", "1.1.1.1")]),
    )
    assert inner.scope["headers"] == [(b"x-real-ip", b"1.1.1.1"), (b"", b"1.1.1.1")]
