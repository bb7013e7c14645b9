"""Encoding and decoding of SOME/IP service discovery load balancing and IPv4 endpoint options."""

__version__ = "0.1.0"
__all__ = ["ipv4_endpoint_option", "loadbalancing_option", "option", "option_deserializer"]