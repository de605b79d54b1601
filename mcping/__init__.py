# vim:fileencoding=utf-8:ts=8:et:sw=4:sts=4:tw=79

"""
mcping

Query Minecraft server status using the Server List Ping protocol.

Copyright (c) 2015 Twisted Pear <tp at pump19 dot eu>
See the file LICENSE for copying permission.
"""

from mcping.errors import (AddressResolutionError, ConnectError,
                           InvalidUTF8Error, MalformedJSONError,
                           NotQueriedError, PingError, ProtocolError,
                           ResponseTooLargeError, TransportError)
from mcping.mcping import (DEFAULT_TIMEOUT, MAX_PACKET_SIZE, NOT_QUERIED,
                           NotQueried, Queried, QueryConfig, ServerStatus,
                           get_status)
from mcping.status import (Description, Players, RawDescription, Sample,
                           StatusResponse, TextDescription, Version,
                           parse_status)

__version__ = "0.1.0"
