#!/usr/bin/env python3
# vim:fenc=utf-8:ts=8:et:sw=4:sts=4:tw=79:ft=python

"""
config.py

The mcping configuration loader.
It reads configuration from environment variables and provides access to
component specific dictionaries.

Copyright (c) 2015 Twisted Pear <pear at twistedpear dot at>
See the file LICENSE for copying permission.
"""

from os import environ

DEFAULT_HOST = "mc.hypixel.net"
DEFAULT_PORT = 25565


def __get_ping_config():
    """Get a configuration dictionary for a ServerStatus instance."""
    return {"host": environ.get("MCPING_HOST", DEFAULT_HOST),
            "port": int(environ.get("MCPING_PORT", DEFAULT_PORT)),
            "timeout": float(environ.get("MCPING_TIMEOUT", 5.0)),
            "max_size": int(environ.get("MCPING_MAX_SIZE", 10 * 1048576))}


def __get_log_config():
    """Get a configuration dictionary for logging settings."""
    return {"debug": True if "MCPING_DEBUG" in environ else False}


def get_config(component):
    """
    Get a configuration dictionary for a specific component.
    Valid components are:
    - ping
    - log
    """
    if component == "ping":
        return __get_ping_config()
    elif component == "log":
        return __get_log_config()

    # we don't know that config
    raise KeyError("No such component: {0}".format(component))
