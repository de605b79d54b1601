#!/usr/bin/env python3
# vim:fileencoding=utf-8:ts=8:et:sw=4:sts=4:tw=79

"""
status.py

Structured representation of a Server List Ping status response.

Servers disagree on the shape of the description: Hypixel sends a bare
string while others send an object with a text member. Decoding tries the
object first and falls back to the string, every other member is checked
against the documented status schema.

Copyright (c) 2015 Twisted Pear <tp at pump19 dot eu>
See the file LICENSE for copying permission.
"""

import json

from dataclasses import dataclass, field

from mcping.errors import InvalidUTF8Error, MalformedJSONError


def _member(obj, key, kind, where):
    """Get obj[key] if it is present and of the requested kind."""
    try:
        value = obj[key]
    except KeyError:
        raise MalformedJSONError(
            "Missing member {0!r} in {1}.".format(key, where)) from None

    # bool is a subclass of int but never a valid count
    if not isinstance(value, kind) or (
            kind is int and isinstance(value, bool)):
        raise MalformedJSONError(
            "Member {0!r} in {1} has unexpected type {2}.".format(
                key, where, type(value).__name__))
    return value


def _object(value, where):
    if not isinstance(value, dict):
        raise MalformedJSONError("Expected an object for {0}.".format(where))
    return value


class Description:
    """The server's message of the day, in whichever shape it was sent."""

    @classmethod
    def from_value(cls, value):
        """Resolve the description, structured shape first."""
        for variant in (TextDescription, RawDescription):
            description = variant.from_value(value)
            if description is not None:
                return description

        raise MalformedJSONError(
            "Description is neither a string nor an object with text.")

    def __str__(self):
        return self.text


@dataclass(frozen=True)
class TextDescription(Description):
    text: str

    @classmethod
    def from_value(cls, value):
        if isinstance(value, dict) and isinstance(value.get("text"), str):
            return cls(value["text"])
        return None

    def to_dict(self):
        return {"text": self.text}


@dataclass(frozen=True)
class RawDescription(Description):
    text: str

    @classmethod
    def from_value(cls, value):
        if isinstance(value, str):
            return cls(value)
        return None

    def to_dict(self):
        return self.text


@dataclass(frozen=True)
class Sample:
    id: str
    name: str

    @classmethod
    def from_dict(cls, data):
        data = _object(data, "players.sample")
        return cls(id=_member(data, "id", str, "players.sample"),
                   name=_member(data, "name", str, "players.sample"))

    def to_dict(self):
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class Players:
    max: int
    online: int
    sample: list = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        data = _object(data, "players")
        sample = data.get("sample", [])
        if not isinstance(sample, list):
            raise MalformedJSONError("Expected a list for players.sample.")

        return cls(max=_member(data, "max", int, "players"),
                   online=_member(data, "online", int, "players"),
                   sample=[Sample.from_dict(entry) for entry in sample])

    def to_dict(self):
        return {"max": self.max,
                "online": self.online,
                "sample": [entry.to_dict() for entry in self.sample]}


@dataclass(frozen=True)
class Version:
    name: str
    protocol: int

    @classmethod
    def from_dict(cls, data):
        data = _object(data, "version")
        return cls(name=_member(data, "name", str, "version"),
                   protocol=_member(data, "protocol", int, "version"))

    def to_dict(self):
        return {"name": self.name, "protocol": self.protocol}


@dataclass(frozen=True)
class StatusResponse:
    description: Description
    players: Players
    version: Version
    favicon: str = ""

    @classmethod
    def from_dict(cls, data):
        data = _object(data, "status response")
        if "description" not in data:
            raise MalformedJSONError("Missing member 'description'.")

        favicon = data.get("favicon", "")
        if not isinstance(favicon, str):
            raise MalformedJSONError("Member 'favicon' is not a string.")

        return cls(description=Description.from_value(data["description"]),
                   players=Players.from_dict(
                       _member(data, "players", dict, "status response")),
                   version=Version.from_dict(
                       _member(data, "version", dict, "status response")),
                   favicon=favicon)

    def to_dict(self):
        return {"description": self.description.to_dict(),
                "favicon": self.favicon,
                "players": self.players.to_dict(),
                "version": self.version.to_dict()}


def _reject_constant(name):
    raise ValueError("Non-standard JSON constant {0}.".format(name))


def _unique_members(pairs):
    obj = {}
    for key, value in pairs:
        if key in obj:
            raise ValueError("Duplicate member {0!r}.".format(key))
        obj[key] = value
    return obj


def parse_status(raw):
    """
    Decode the raw JSON bytes of a status response.
    NaN, Infinity and duplicate object members are rejected.
    """
    try:
        text = bytes(raw).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidUTF8Error(
            "Status response is not valid UTF-8: {0}".format(exc)) from exc

    try:
        data = json.loads(text, parse_constant=_reject_constant,
                          object_pairs_hook=_unique_members)
    except (ValueError, RecursionError) as exc:
        raise MalformedJSONError(
            "Status response is not valid JSON: {0}".format(exc)) from exc

    return StatusResponse.from_dict(data)
