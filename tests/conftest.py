"""Shared fixtures: a temporary asset root and a client serving it."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from mostro_web.app import create_app
from mostro_web.models import ServerSettings


@pytest.fixture
def asset_root(tmp_path):
    """web/ with the reference files, next to a file that must never be served."""
    root = tmp_path / "web"
    (root / "sub").mkdir(parents=True)
    (root / "index.html").write_bytes(b"<html>hi</html>")
    (root / "style.css").write_bytes(b"body{}")
    (root / "sub" / "page.html").write_bytes(b"<p>x</p>")
    (tmp_path / "secret.txt").write_bytes(b"top secret")
    return root


@pytest.fixture
def settings(asset_root):
    return ServerSettings(asset_dir=asset_root)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    return TestClient(app)


def send_raw(app, path, method="GET", query_string=b""):
    """Call the ASGI app with an undecoded-by-client path.

    httpx collapses dot segments and reads "//host" as an authority, so
    paths like "/../x" or "//docs" only reach the app this way.
    Returns (status, headers, body) with lower-case str header names.
    """
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method,
        "scheme": "http",
        "path": path,
        "raw_path": path.encode(),
        "root_path": "",
        "query_string": query_string,
        "headers": [(b"host", b"127.0.0.1:3000")],
        "client": ("127.0.0.1", 50000),
        "server": ("127.0.0.1", 3000),
    }
    messages = []

    async def receive():
        return {"type": "http.request", "body": b"", "more_body": False}

    async def send(message):
        messages.append(message)

    asyncio.run(app(scope, receive, send))

    start = messages[0]
    headers = {name.decode().lower(): value.decode() for name, value in start["headers"]}
    body = b"".join(m.get("body", b"") for m in messages[1:])
    return start["status"], headers, body


@pytest.fixture
def raw_get(app):
    def get(path, **kwargs):
        return send_raw(app, path, **kwargs)
    return get
