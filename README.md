# sdoptions

Build, encode and decode the options that SOME/IP service discovery entries
carry: load balancing options and IPv4 endpoint options (unicast, multicast
and service discovery endpoints).

## Installation

```
pip install sdoptions
```

## Option types

`sdoptions.option` defines:

- `OptionType`: the option type byte (`CONFIGURATION`, `LOAD_BALANCING`,
  `IPV4_ENDPOINT`, `IPV6_ENDPOINT`, `IPV4_MULTICAST`, `IPV6_MULTICAST`,
  `IPV4_SD_ENDPOINT`, `IPV6_SD_ENDPOINT`).
- `Layer4ProtocolType`: `TCP` (0x06) or `UDP` (0x11).
- `Option`: the abstract base with the `type`, `discardable` and `length`
  properties and the `payload()` method.

Every payload starts with a big-endian 16-bit length, then the type byte,
then a discardable flag byte. Two options compare equal when they are of the
same class and serialize to the same bytes; options are hashable.

## Load balancing

```python
from sdoptions.loadbalancing_option import LoadBalancingOption

option = LoadBalancingOption(discardable=False, priority=1, weight=2)
option.priority   # 1
option.weight     # 2
option.payload()  # b"\x00\x05\x02\x00\x00\x01\x00\x02"
```

Priority and weight must fit in 16 bits; otherwise `ValueError` is raised.

## IPv4 endpoints

Addresses may be given as `ipaddress.IPv4Address` objects or as anything
`IPv4Address` accepts, such as a dotted string; the `ip_address` property
always returns an `IPv4Address`.

```python
from ipaddress import IPv4Address
from sdoptions.ipv4_endpoint_option import Ipv4EndpointOption
from sdoptions.option import Layer4ProtocolType

unicast = Ipv4EndpointOption.create_unicast_endpoint(
    True, IPv4Address("127.0.0.1"), Layer4ProtocolType.TCP, 8080
)

# Service discovery endpoints default to UDP on port 30490.
sd = Ipv4EndpointOption.create_sd_endpoint(True, "192.168.1.254")
sd.payload()  # b"\x00\x09\x24\x01\xc0\xa8\x01\xfe\x00\x11\x77\x1a"

# Multicast endpoints always use UDP; the address must lie in
# 224.0.0.0-239.255.255.255, otherwise ValueError is raised.
multicast = Ipv4EndpointOption.create_multicast_endpoint(False, "224.0.0.1", 8090)
```

Each option exposes `ip_address`, `l4_proto`, `port`, `type`, `discardable`,
`length` (always 9) and `payload()`. The port must fit in 16 bits.

## Decoding

`deserialize_option` in `sdoptions.option_deserializer` reads one option
from a byte string at a given offset (default 0) and returns the option
together with the offset just past it:

```python
from sdoptions.option_deserializer import deserialize_option

option, offset = deserialize_option(unicast.payload(), 0)
assert option.port == 8080
assert offset == 12
```

Load balancing options and the three IPv4 endpoint types can be decoded.
Any other option type, a truncated payload, or a negative offset raises
`ValueError`; so does a multicast option whose address is not a multicast
address. The class methods `LoadBalancingOption.deserialize` and
`Ipv4EndpointOption.deserialize` read just the option body (after the
header) and also return the option and the new offset.

## What this package does not do

It handles options only. It has no service discovery entries, no SOME/IP
messages and no network transport, and it cannot build or decode
configuration options or any of the IPv6 option types.

## Running the tests

```
pip install "sdoptions[test]"
pytest
```