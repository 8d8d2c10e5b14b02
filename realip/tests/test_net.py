#!/usr/bin/env python3
import pytest
from ipaddress import ip_address, ip_network

from realip.util.net import network_contains, parse_ip, parse_network, split_host_port


@pytest.mark.parametrize(
    "addr,host",
    [
        ("127.0.0.1:8080", "127.0.0.1"),
        ("127.0.0.1", "127.0.0.1"),
        ("[::1]:8080", "::1"),
        ("[::1]", "::1"),
        ("::1", "::1"),
        ("localhost:80", "localhost"),
        ("[::1", ""),
        ("", ""),
    ],
)
def test_split_host_port(addr, host):
    assert split_host_port(addr) == host


def test_parse_ip():
    assert parse_ip("192.168.0.1") == ip_address("192.168.0.1")
    assert parse_ip(" 2001:db8::1 ") == ip_address("2001:db8::1")
    assert parse_ip("::ffff:192.168.0.1") == ip_address("192.168.0.1")
    assert parse_ip("1.2.3") is None
    assert parse_ip("unknown") is None
    assert parse_ip("") is None
    assert parse_ip(None) is None


def test_parse_network():
    net = ip_network("10.0.0.0/8")
    assert parse_network(net) is net
    assert parse_network(ip_address("10.0.0.1")) == ip_network("10.0.0.1/32")
    assert parse_network(" 10.9.8.7/8 ") == net
    with pytest.raises(ValueError):
        parse_network("10.0.0.0/40")


def test_network_contains():
    net = ip_network("192.168.0.0/16")
    assert network_contains(net, ip_address("192.168.3.4"))
    assert not network_contains(net, ip_address("10.0.0.1"))
    assert not network_contains(net, None)
    # different ip versions never match
    assert not network_contains(net, ip_address("c0a8:1::"))
    assert not network_contains(ip_network("::/0"), ip_address("192.168.0.1"))
