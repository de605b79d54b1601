#!/usr/bin/env python3
# vim:fileencoding=utf-8:ts=8:et:sw=4:sts=4:tw=79

"""
ping.py

The mcping entry point.
It sets up logging, queries a single server and prints its status as JSON.

Copyright (c) 2015 Twisted Pear <tp at pump19 dot eu>
See the file LICENSE for copying permission.
"""

import argparse
import json
import logging
import mcping
import sys

from mcping import config

LOG_FORMAT = "{levelname}({name}): {message}"


def parse_args(argv=None):
    defaults = config.get_config("ping")
    debug = config.get_config("log")["debug"]

    parser = argparse.ArgumentParser(
        description="Query the status of a Minecraft server.")
    parser.add_argument("host", nargs="?", default=defaults["host"])
    parser.add_argument("port", nargs="?", type=int, default=defaults["port"])
    parser.add_argument("--timeout", type=float, default=defaults["timeout"],
                        help="connect timeout in seconds")
    parser.add_argument("--max-size", type=int, default=defaults["max_size"],
                        help="largest status response accepted, in bytes")
    parser.add_argument("--debug", action="store_true", default=debug)
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO,
                        format=LOG_FORMAT, style="{")

    logger = logging.getLogger("ping")
    logger.info("Querying %s:%d.", args.host, args.port)

    try:
        server = mcping.ServerStatus(args.host, args.port,
                                     timeout=args.timeout,
                                     max_size=args.max_size)
    except ValueError as exc:
        logger.error("Invalid arguments: %s", exc)
        return 2

    try:
        server.query()
        status = server.decode()
    except mcping.PingError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return 1

    print(json.dumps(status.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
