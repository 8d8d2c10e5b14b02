#!/usr/bin/env python3
"""
Address helpers shared by the configuration and the resolver.
"""
import ipaddress
from typing import Optional, Union

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]
IPNetwork = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]


def split_host_port(addr: str) -> str:
    """
    Returns the host part of a peer address, dropping the port if present.

    Accepts "host:port", "[v6]:port", "[v6]" and bare IPv4 / IPv6 hosts.
    An unterminated bracket yields an empty string.
    """
    if not addr:
        return ""
    addr = addr.strip()
    if addr.startswith("["):
        end = addr.find("]")
        if end == -1:
            return ""
        return addr[1:end]
    if addr.count(":") == 1:
        return addr.split(":")[0]
    return addr


def parse_ip(value: str) -> Optional[IPAddress]:
    """
    Parses an address string, returning None when it is not an IP address.
    IPv4-mapped IPv6 addresses are returned as their IPv4 form.
    """
    if not value:
        return None
    try:
        ip = ipaddress.ip_address(value.strip())
    except ValueError:
        return None
    if ip.version == 6 and ip.ipv4_mapped is not None:
        return ip.ipv4_mapped
    return ip


def parse_network(value) -> IPNetwork:
    # Host bits are masked, a bare address becomes a single host network
    if isinstance(value, (ipaddress.IPv4Network, ipaddress.IPv6Network)):
        return value
    if isinstance(value, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return ipaddress.ip_network(value)
    return ipaddress.ip_network(str(value).strip(), strict=False)


def network_contains(network: IPNetwork, ip: IPAddress) -> bool:
    if ip is None or ip.version != network.version:
        return False
    return ip in network
