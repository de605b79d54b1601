import json
import socket
import threading

import pytest

from mcping import protocol

STATUS = {
    "version": {"name": "1.20.4", "protocol": 765},
    "players": {
        "max": 100,
        "online": 2,
        "sample": [
            {"id": "4566e69f-c907-48ee-8d71-d7ba5aa00d20", "name": "thinkofdeath"}
        ],
    },
    "description": {"text": "A Minecraft Server"},
    "favicon": "data:image/png;base64,AAAA",
}


def status_response(payload):
    """Frame raw JSON bytes as a status response packet."""
    body = protocol.pack_varint(0x00) + protocol.pack_data(payload)
    return protocol.pack_data(body)


class FakeServer:
    """Accepts one connection, records the request and replies."""

    def __init__(self, response):
        self.response = response
        self.request = b""
        self.sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self.sock.bind(("127.0.0.1", 0))
        self.sock.listen(1)
        self.host, self.port = self.sock.getsockname()
        self.thread = threading.Thread(target=self.serve, daemon=True)

    def serve(self):
        expected = len(protocol.status_packets(self.host, self.port))
        conn, _ = self.sock.accept()
        with conn:
            while len(self.request) < expected:
                chunk = conn.recv(4096)
                if not chunk:
                    break
                self.request += chunk
            conn.sendall(self.response)

    def __enter__(self):
        self.thread.start()
        return self

    def __exit__(self, *exc):
        self.thread.join(timeout=5)
        self.sock.close()


@pytest.fixture
def status_json():
    return json.dumps(STATUS).encode("utf-8")


@pytest.fixture
def fake_server():
    servers = []

    def start(response):
        server = FakeServer(response)
        servers.append(server)
        return server

    yield start

    for server in servers:
        server.sock.close()
