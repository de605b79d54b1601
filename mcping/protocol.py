#!/usr/bin/env python3
# vim:fileencoding=utf-8:ts=8:et:sw=4:sts=4:tw=79

"""
protocol.py

The subset of the Minecraft protocol needed for a Server List Ping.

Copyright (c) 2015 Twisted Pear <tp at pump19 dot eu>
See the file LICENSE for copying permission.
"""

import logging

from struct import pack

from mcping.errors import ProtocolError, TransportError

logger = logging.getLogger("mcping.protocol")
logger.addHandler(logging.NullHandler())

# VarInts carry at most 32 bits, i.e. 5 groups of 7 bits
VARINT_MAX_BYTES = 5

HANDSHAKE_ID = 0x00
STATUS_REQUEST_ID = 0x00
NEXT_STATE_STATUS = 1


def pack_varint(value):
    if value < 0:
        raise ValueError("Cannot encode negative value {0} as VarInt.".format(
            value))

    packet = bytearray()
    while value >= 0x80:
        packet += pack("B", value & 0x7F | 0x80)
        value >>= 7
    packet += pack("B", value)
    return bytes(packet)


def varint_size(value):
    """Get the number of bytes pack_varint will produce for value."""
    return len(pack_varint(value))


def unpack_varint(stream):
    """
    Read a VarInt from a file-like object, one byte at a time.
    Raises ProtocolError if the value does not terminate within 5 bytes and
    TransportError if the stream ends before it terminates.
    """
    result = 0
    for i in range(VARINT_MAX_BYTES):
        part = stream.read(1)
        if not part:
            raise TransportError("Connection closed while reading VarInt.")
        part = ord(part)
        result |= (part & 0x7F) << (7 * i)
        if not part & 0x80:
            return result
    raise ProtocolError("Could not parse data as VarInt.")


def pack_data(data):
    """Prefix data with its length."""
    return pack_varint(len(data)) + bytes(data)


def pack_string(value):
    return pack_data(value.encode("utf-8"))


def handshake(hostname, port, protocol=0):
    """
    Build a handshake packet announcing the status state.
    Protocol version 0 is accepted by servers for status requests.
    """
    payload = bytearray()
    payload += pack_varint(HANDSHAKE_ID)  # packet ID
    payload += pack_varint(protocol)
    payload += pack_string(hostname)
    payload += pack(">H", port)
    payload += pack_varint(NEXT_STATE_STATUS)

    return pack_data(payload)


def status_request():
    return pack_data(pack_varint(STATUS_REQUEST_ID))


def status_packets(hostname, port, protocol=0):
    """Build the complete buffer sent to request a server's status."""
    packet = handshake(hostname, port, protocol) + status_request()
    logger.debug("Status request for %s:%d is %d bytes long.",
                 hostname, port, len(packet))
    return packet
