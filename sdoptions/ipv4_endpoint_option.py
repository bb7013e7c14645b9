"""IPv4 endpoint options for generic and service discovery use."""

from __future__ import annotations

import ipaddress
import struct

from sdoptions.option import Layer4ProtocolType, Option, OptionType

_IPV4_TYPES = frozenset(
    {OptionType.IPV4_ENDPOINT, OptionType.IPV4_MULTICAST, OptionType.IPV4_SD_ENDPOINT}
)

DEFAULT_SD_PROTOCOL = Layer4ProtocolType.UDP
DEFAULT_SD_PORT = 30490


class Ipv4EndpointOption(Option):
    """IPv4 endpoint option: address, layer-4 protocol and port."""

    __slots__ = ("_ip_address", "_l4_proto", "_port")

    _LENGTH = 9

    def __init__(
        self,
        option_type: OptionType,
        discardable: bool,
        ip_address,
        protocol: Layer4ProtocolType,
        port: int,
    ) -> None:
        super().__init__(option_type, discardable)
        if self.type not in _IPV4_TYPES:
            raise ValueError(
                f"{self.type.name} does not belong to the IPv4 endpoint option series"
            )
        self._ip_address = ipaddress.IPv4Address(ip_address)
        self._l4_proto = Layer4ProtocolType(protocol)
        self._port = self._check_u16("port", port)

    @property
    def length(self) -> int:
        return self._LENGTH

    @property
    def ip_address(self) -> ipaddress.IPv4Address:
        """IPv4 address."""
        return self._ip_address

    @property
    def l4_proto(self) -> Layer4ProtocolType:
        """OSI layer-4 protocol."""
        return self._l4_proto

    @property
    def port(self) -> int:
        """Network port number."""
        return self._port

    def payload(self) -> bytes:
        return self._base_payload() + struct.pack(
            ">4sxBH", self._ip_address.packed, self._l4_proto, self._port
        )

    @classmethod
    def create_unicast_endpoint(
        cls, discardable: bool, ip_address, protocol: Layer4ProtocolType, port: int
    ) -> Ipv4EndpointOption:
        """Create a generic unicast IPv4 endpoint."""
        return cls(OptionType.IPV4_ENDPOINT, discardable, ip_address, protocol, port)

    @classmethod
    def create_multicast_endpoint(
        cls, discardable: bool, ip_address, port: int
    ) -> Ipv4EndpointOption:
        """Create a UDP multicast IPv4 endpoint.

        Raises ValueError if the address is outside 224.0.0.0-239.255.255.255.
        """
        address = ipaddress.IPv4Address(ip_address)
        if not address.is_multicast:
            raise ValueError("IP address is out of range.")
        return cls(
            OptionType.IPV4_MULTICAST, discardable, address, Layer4ProtocolType.UDP, port
        )

    @classmethod
    def create_sd_endpoint(
        cls,
        discardable: bool,
        ip_address,
        protocol: Layer4ProtocolType = DEFAULT_SD_PROTOCOL,
        port: int = DEFAULT_SD_PORT,
    ) -> Ipv4EndpointOption:
        """Create a service discovery IPv4 endpoint."""
        return cls(OptionType.IPV4_SD_ENDPOINT, discardable, ip_address, protocol, port)

    @classmethod
    def deserialize(
        cls, payload: bytes, offset: int, option_type: OptionType, discardable: bool
    ) -> tuple[Ipv4EndpointOption, int]:
        """Read the option body at ``offset``; return the option and the new offset.

        Raises ValueError if ``option_type`` is not an IPv4 endpoint type.
        """
        (packed, protocol, port), offset = cls._unpack(">4sxBH", payload, offset)
        address = ipaddress.IPv4Address(packed)

        if option_type == OptionType.IPV4_ENDPOINT:
            option = cls.create_unicast_endpoint(discardable, address, protocol, port)
        elif option_type == OptionType.IPV4_MULTICAST:
            option = cls.create_multicast_endpoint(discardable, address, port)
        elif option_type == OptionType.IPV4_SD_ENDPOINT:
            option = cls.create_sd_endpoint(discardable, address, protocol, port)
        else:
            raise ValueError(
                "The option type does not belong to IPv4 endpoint option series."
            )
        return option, offset

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(option_type={self.type.name}, "
            f"discardable={self.discardable!r}, ip_address='{self._ip_address}', "
            f"protocol={self._l4_proto.name}, port={self._port!r})"
        )