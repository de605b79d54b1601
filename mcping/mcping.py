#!/usr/bin/env python3
# vim:fileencoding=utf-8:ts=8:et:sw=4:sts=4:tw=79

"""
mcping.py

Query Minecraft server status using the Server List Ping protocol.

A ServerStatus owns exactly one blocking TCP round trip per query. Only
connecting is bounded by the configured timeout, reads after the handshake
block until the server answers or closes the connection.

Copyright (c) 2015 Twisted Pear <tp at pump19 dot eu>
See the file LICENSE for copying permission.
"""

import contextlib
import logging
import socket

from dataclasses import dataclass

import mcping.protocol as protocol

from mcping.errors import (AddressResolutionError, ConnectError,
                           NotQueriedError, ResponseTooLargeError,
                           TransportError)
from mcping.status import parse_status

MAX_PACKET_SIZE = 10 * 1048576
DEFAULT_TIMEOUT = 5.0

logger = logging.getLogger("mcping")
logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class QueryConfig:
    host: str
    port: int
    timeout: float = DEFAULT_TIMEOUT
    max_size: int = MAX_PACKET_SIZE

    def __post_init__(self):
        if not 0 <= self.port <= 0xFFFF:
            raise ValueError("Port {0} is out of range.".format(self.port))
        if self.timeout <= 0:
            raise ValueError("Timeout must be positive.")
        if self.max_size < 0:
            raise ValueError("Maximum response size must not be negative.")


class NotQueried:
    """State of a ServerStatus that has no response yet."""

    def __repr__(self):
        return "NOT_QUERIED"


NOT_QUERIED = NotQueried()


@dataclass(frozen=True)
class Queried:
    """State of a ServerStatus holding the raw JSON of a response."""
    raw: bytes


class ServerStatus:
    """Status of a single Minecraft server."""

    def __init__(self, host, port, timeout=None, max_size=None):
        self.config = QueryConfig(
            host, port,
            timeout=DEFAULT_TIMEOUT if timeout is None else timeout,
            max_size=MAX_PACKET_SIZE if max_size is None else max_size)
        self.state = NOT_QUERIED

    @classmethod
    def from_config(cls, config):
        return cls(config.host, config.port,
                   timeout=config.timeout, max_size=config.max_size)

    @property
    def queried(self):
        return isinstance(self.state, Queried)

    @property
    def raw(self):
        """The raw JSON bytes received by the last successful query."""
        if not self.queried:
            raise NotQueriedError()
        return self.state.raw

    def _resolve(self):
        host, port = self.config.host, self.config.port
        try:
            addresses = socket.getaddrinfo(host, port,
                                           type=socket.SOCK_STREAM)
        except (OSError, ValueError) as exc:
            # gaierror, IDNA failures and NUL bytes in the host name
            raise AddressResolutionError(
                "Could not resolve {0}:{1}.".format(host, port)) from exc

        if not addresses:
            raise AddressResolutionError(
                "No address found for {0}:{1}.".format(host, port))

        logger.debug("Resolved %s:%d to %s.", host, port, addresses[0][4])
        return addresses[0]

    def _connect(self, address):
        (family, kind, proto, _, sockaddr) = address
        sock = None
        try:
            sock = socket.socket(family, kind, proto)
            sock.settimeout(self.config.timeout)
            sock.connect(sockaddr)
            # no timeout once connected
            sock.settimeout(None)
        except OSError as exc:
            if sock is not None:
                sock.close()
            logger.error("Error connecting to %s:%d",
                         self.config.host, self.config.port)
            raise ConnectError("Could not connect to {0}:{1}: {2}".format(
                self.config.host, self.config.port, exc)) from exc

        logger.info("Established connection to %s:%d",
                    self.config.host, self.config.port)
        return sock

    def _read_response(self, stream):
        # outer length and packet ID are not validated
        length = protocol.unpack_varint(stream)
        logger.debug("Answer to status request is %d bytes long.", length)
        packet_id = protocol.unpack_varint(stream)
        logger.debug("Answer to status request has packet ID %d.", packet_id)

        json_length = protocol.unpack_varint(stream)
        if json_length > self.config.max_size:
            raise ResponseTooLargeError(json_length, self.config.max_size)

        raw = stream.read(json_length)
        if len(raw) != json_length:
            raise TransportError(
                "Connection closed after {0} of {1} bytes.".format(
                    len(raw), json_length))

        logger.debug("Received %d bytes of status JSON.", json_length)
        return raw

    def query(self):
        """
        Perform the network round trip and store the raw response.
        On failure the previous state is left untouched.
        """
        address = self._resolve()
        packet = protocol.status_packets(self.config.host, self.config.port)
        sock = self._connect(address)

        # make sure to close the socket when we're done
        with contextlib.closing(sock), sock.makefile("rb") as stream:
            try:
                sock.sendall(packet)
                raw = self._read_response(stream)
            except OSError as exc:
                raise TransportError(
                    "Error talking to {0}:{1}: {2}".format(
                        self.config.host, self.config.port, exc)) from exc

        self.state = Queried(raw)

    def decode(self):
        """Decode the stored response into a StatusResponse."""
        return parse_status(self.raw)


def get_status(host, port, **kwargs):
    """Query a server and return its decoded status."""
    server = ServerStatus(host, port, **kwargs)
    server.query()
    return server.decode()
