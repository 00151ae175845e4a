"""Shared fixtures for the cavy test suite."""

import json
import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from unittest.mock import AsyncMock

import pytest

from cavy.reporting.collector import CollectorReporter
from cavy.transport.http_client import PROBE_RESPONSE


class FakeHost:
    """Host double that records lifecycle calls into a shared event list."""

    def __init__(self, events: list):
        self.events = events
        self.clear_count = 0
        self.render_count = 0

    async def clear(self):
        self.clear_count += 1
        self.events.append("clear")

    def re_render(self):
        self.render_count += 1
        self.events.append("render")


@pytest.fixture
def events() -> list:
    return []


@pytest.fixture
def host(events: list) -> FakeHost:
    return FakeHost(events)


@pytest.fixture
def mock_reporter() -> AsyncMock:
    """Provides a reporter double so runner tests never touch the network."""
    reporter = AsyncMock(spec=CollectorReporter)
    reporter.probe_and_send.return_value = False
    return reporter


class CollectorServer:
    """In-process stand-in for cavy-cli, served on an ephemeral port."""

    def __init__(self, probe_body: str = PROBE_RESPONSE, report_status: int = 200):
        self.probe_body = probe_body
        self.report_status = report_status
        self.probes = 0
        self.reports: list[dict] = []
        self.content_types: list[str] = []
        self._server = ThreadingHTTPServer(("127.0.0.1", 0), self._make_handler())
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)

    @property
    def url(self) -> str:
        host, port = self._server.server_address[:2]
        return f"http://{host}:{port}"

    def _make_handler(self):
        collector = self

        class Handler(BaseHTTPRequestHandler):
            def do_GET(self):
                collector.probes += 1
                body = collector.probe_body.encode("utf-8")
                self.send_response(200)
                self.send_header("Content-Type", "text/plain")
                self.send_header("Content-Length", str(len(body)))
                self.end_headers()
                self.wfile.write(body)

            def do_POST(self):
                length = int(self.headers.get("Content-Length", 0))
                raw = self.rfile.read(length)
                if self.path == "/report":
                    collector.content_types.append(self.headers.get("Content-Type", ""))
                    collector.reports.append(json.loads(raw))
                self.send_response(collector.report_status)
                self.send_header("Content-Length", "0")
                self.end_headers()

            def log_message(self, format, *args):
                pass

        return Handler

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        self._server.shutdown()
        self._server.server_close()
        self._thread.join(timeout=5)


@pytest.fixture
def collector_server():
    server = CollectorServer()
    server.start()
    yield server
    server.stop()


@pytest.fixture
def unused_url() -> str:
    """URL of a local port nothing listens on."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return f"http://127.0.0.1:{port}"
