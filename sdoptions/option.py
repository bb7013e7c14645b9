"""Base class and enumerations for service discovery entry options."""

from __future__ import annotations

import abc
import enum
import struct


class OptionType(enum.IntEnum):
    """Entry option type as carried on the wire."""

    CONFIGURATION = 0x01
    LOAD_BALANCING = 0x02
    IPV4_ENDPOINT = 0x04
    IPV6_ENDPOINT = 0x06
    IPV4_MULTICAST = 0x14
    IPV6_MULTICAST = 0x16
    IPV4_SD_ENDPOINT = 0x24
    IPV6_SD_ENDPOINT = 0x26


class Layer4ProtocolType(enum.IntEnum):
    """OSI layer-4 protocol type."""

    TCP = 0x06
    UDP = 0x11


class Option(abc.ABC):
    """Abstract entry option.

    The serialized form starts with a 16-bit big-endian length, followed by
    the type byte and the discardable flag byte. The length counts every
    byte after the type byte.
    """

    __slots__ = ("_type", "_discardable")

    def __init__(self, option_type: OptionType, discardable: bool) -> None:
        self._type = OptionType(option_type)
        self._discardable = bool(discardable)

    @property
    def type(self) -> OptionType:
        """The option type."""
        return self._type

    @property
    def discardable(self) -> bool:
        """Whether the option may be discarded by the receiver."""
        return self._discardable

    @property
    @abc.abstractmethod
    def length(self) -> int:
        """Option length in bytes, as written into the length field."""

    @abc.abstractmethod
    def payload(self) -> bytes:
        """Serialize the option."""

    def _base_payload(self) -> bytes:
        return struct.pack(">HBB", self.length, self._type, self._discardable)

    @staticmethod
    def _unpack(fmt: str, payload: bytes, offset: int) -> tuple[tuple, int]:
        """Read big-endian fields at ``offset``; return them and the new offset."""
        if offset < 0:
            raise ValueError(f"offset must not be negative: {offset}")
        try:
            values = struct.unpack_from(fmt, payload, offset)
        except struct.error as exc:
            raise ValueError("option payload is truncated") from exc
        return values, offset + struct.calcsize(fmt)

    @staticmethod
    def _check_u16(name: str, value: int) -> int:
        value = int(value)
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"{name} must fit in 16 bits: {value}")
        return value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option) or type(other) is not type(self):
            return NotImplemented
        return self.payload() == other.payload()

    def __hash__(self) -> int:
        return hash((type(self), self.payload()))