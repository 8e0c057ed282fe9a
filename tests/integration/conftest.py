from __future__ import annotations

import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import TYPE_CHECKING

import httpx
import pytest
from websockets.sync.server import ServerConnection, serve

from tests.helpers import echo_app

if TYPE_CHECKING:
    from collections.abc import Generator


class EchoRequestHandler(BaseHTTPRequestHandler):
    """Serve ``echo_app`` over a real socket."""

    def handle_any(self) -> None:
        length = int(self.headers.get("Content-Length") or 0)
        host, port = self.server.server_address[:2]
        request = httpx.Request(
            self.command,
            f"http://{host}:{port}{self.path}",
            headers=list(self.headers.items()),
            content=self.rfile.read(length),
        )
        response = echo_app(request)
        self.send_response(response.status_code)
        for name, value in response.headers.multi_items():
            if name != "content-length":
                self.send_header(name, value)
        self.send_header("Content-Length", str(len(response.content)))
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(response.content)

    do_GET = do_POST = do_PUT = do_PATCH = do_DELETE = do_HEAD = handle_any

    def log_message(self, format: str, *args: object) -> None:  # noqa: A002
        pass


def websocket_handler(connection: ServerConnection) -> None:
    if connection.request.path == "/c":
        connection.send("OK")
    elif connection.request.path == "/headers":
        connection.send(json.dumps(connection.request.headers.get_all("X-Token")))


@pytest.fixture(scope="module")
def http_server() -> Generator[str, None, None]:
    """Start the echo application on an ephemeral port and return its
    base URL."""
    server = ThreadingHTTPServer(("127.0.0.1", 0), EchoRequestHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()
    thread.join()


@pytest.fixture(scope="module")
def websocket_server() -> Generator[str, None, None]:
    """Start a websocket server on an ephemeral port and return its
    ``http://`` base URL."""
    server = serve(websocket_handler, "127.0.0.1", 0)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.socket.getsockname()[1]}"
    server.shutdown()
    thread.join()
