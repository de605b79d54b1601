#!/usr/bin/env python3
# vim:fileencoding=utf-8:ts=8:et:sw=4:sts=4:tw=79

"""
errors.py

Exceptions raised while querying and decoding server status.

Copyright (c) 2015 Twisted Pear <tp at pump19 dot eu>
See the file LICENSE for copying permission.
"""


class PingError(Exception):
    """Base class for everything that can go wrong during a status ping."""


class AddressResolutionError(PingError):
    """The host name did not resolve to any socket address."""


class ConnectError(PingError):
    """The TCP connection was refused or timed out."""


class TransportError(PingError):
    """Writing to or reading from an established connection failed."""


class ProtocolError(PingError):
    """The server sent bytes that do not follow the protocol."""


class ResponseTooLargeError(PingError):
    """The announced status payload exceeds the configured maximum."""

    def __init__(self, length, max_size):
        super().__init__(
            "Status response of {0} bytes exceeds the maximum of {1} "
            "bytes.".format(length, max_size))
        self.length = length
        self.max_size = max_size


class NotQueriedError(PingError):
    """Decoding was requested before a successful query."""

    def __init__(self):
        super().__init__("No server response, did you forget to query?")


class InvalidUTF8Error(PingError):
    """The status payload is not valid UTF-8 text."""


class MalformedJSONError(PingError):
    """The status payload is not JSON of the expected shape."""
