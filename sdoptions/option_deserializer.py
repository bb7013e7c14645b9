"""Deserialization of an option from its wire form."""

from __future__ import annotations

from sdoptions.ipv4_endpoint_option import Ipv4EndpointOption
from sdoptions.loadbalancing_option import LoadBalancingOption
from sdoptions.option import Option, OptionType

_IPV4_TYPES = frozenset(
    {OptionType.IPV4_ENDPOINT, OptionType.IPV4_MULTICAST, OptionType.IPV4_SD_ENDPOINT}
)


def deserialize_option(payload: bytes, offset: int = 0) -> tuple[Option, int]:
    """Deserialize one option starting at ``offset``.

    Returns the option and the offset just past it. Raises ValueError when
    the option type is not supported or the data is truncated.
    """
    (raw_type, raw_discardable), offset = Option._unpack(">2xBB", payload, offset)
    discardable = bool(raw_discardable)

    try:
        option_type = OptionType(raw_type)
    except ValueError:
        option_type = None

    if option_type in _IPV4_TYPES:
        return Ipv4EndpointOption.deserialize(payload, offset, option_type, discardable)
    if option_type is OptionType.LOAD_BALANCING:
        return LoadBalancingOption.deserialize(payload, offset, discardable)
    raise ValueError("Option type is not supported for deserializing.")