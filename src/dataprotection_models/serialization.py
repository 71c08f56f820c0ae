"""Serialization modes for model-to-JSON conversion."""

from __future__ import annotations

import enum


class SerializationMode(enum.Flag):
    NONE = 0
    INCLUDE_HEADERS = enum.auto()
    INCLUDE_READ_ONLY = enum.auto()
    INCLUDE_UNSET = enum.auto()
    INCLUDE_ALL = INCLUDE_HEADERS | INCLUDE_READ_ONLY | INCLUDE_UNSET

    @classmethod
    def parse(cls, value: str | None) -> SerializationMode:
        """Read a mode from a configuration string.

        Accepts flag names in kebab or snake case, optionally joined with
        ``|`` or ``,`` (``"include-headers|include-read-only"``), plus the
        ``"set-only"`` shorthand for headers and read-only fields without
        unset ones.
        """
        if value is None or value.strip() == "":
            return cls.INCLUDE_ALL

        mode = cls.NONE
        for part in value.replace(",", "|").split("|"):
            name = part.strip().lower().replace("-", "_")
            if not name:
                continue
            if name == "set_only":
                mode |= cls.INCLUDE_HEADERS | cls.INCLUDE_READ_ONLY
                continue
            try:
                mode |= cls[name.upper()]
            except KeyError as error:
                raise ValueError(f"invalid serialization mode {part.strip()!r}") from error
        return mode
