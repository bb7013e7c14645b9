"""Service instance load balancing option."""

from __future__ import annotations

import struct

from sdoptions.option import Option, OptionType


class LoadBalancingOption(Option):
    """Load balancing option carrying a priority and a selection weight."""

    __slots__ = ("_priority", "_weight")

    _LENGTH = 5

    def __init__(self, discardable: bool, priority: int, weight: int) -> None:
        super().__init__(OptionType.LOAD_BALANCING, discardable)
        self._priority = self._check_u16("priority", priority)
        self._weight = self._check_u16("weight", weight)

    @property
    def length(self) -> int:
        return self._LENGTH

    @property
    def priority(self) -> int:
        """Service instance priority."""
        return self._priority

    @property
    def weight(self) -> int:
        """Service instance random selection weight."""
        return self._weight

    def payload(self) -> bytes:
        return self._base_payload() + struct.pack(">HH", self._priority, self._weight)

    @classmethod
    def deserialize(
        cls, payload: bytes, offset: int, discardable: bool
    ) -> tuple[LoadBalancingOption, int]:
        """Read the option body at ``offset``; return the option and the new offset."""
        (priority, weight), offset = cls._unpack(">HH", payload, offset)
        return cls(discardable, priority, weight), offset

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(discardable={self.discardable!r}, "
            f"priority={self._priority!r}, weight={self._weight!r})"
        )