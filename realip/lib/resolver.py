#!/usr/bin/env python3
from typing import List, Optional, Sequence

from realip.const import HEADER_X_FORWARDED_FOR
from realip.lib.cache import TrustCache
from realip.lib.config import Configuration
from realip.util.logger import logger
from realip.util.net import IPAddress, network_contains, parse_ip, split_host_port


def split_chain(value: Optional[str]) -> List[str]:
    """Splits a forwarding header value into trimmed entries, oldest hop first."""
    if not value:
        return []
    return [i.strip() for i in value.split(",")]


class Resolver:
    """
    Works out the real client address of a request, much like nginx's
    `ngx_http_realip_module`.

    Resolution never fails: malformed or missing input falls back to the
    peer address, or to an empty string when there is nothing to report.

    Note that in non-recursive mode the last forwarding chain entry is
    returned as-is, without checking it against the trusted ranges. Any
    trusted peer can therefore assert an arbitrary client address.
    """

    def __init__(self, config: Configuration, cache: TrustCache = None):
        self.config = config
        if cache is None:
            cache = TrustCache()
        self.cache = cache

    def is_trusted(self, ip: Optional[IPAddress]) -> bool:
        if len(self.config.trusted_ranges) == 0:
            # trust everybody
            return True
        if ip is None:
            return False

        ip_str = str(ip)
        if ip_str in self.cache:
            return True

        for network in self.config.trusted_ranges:
            if network_contains(network, ip):
                self.cache.add(ip_str)
                return True
        return False

    def resolve_chain(self, entries: Sequence[str]) -> str:
        if len(entries) == 0:
            return ""

        if not self.config.recursive:
            return entries[-1]

        for entry in reversed(entries):
            if not self.is_trusted(parse_ip(entry)):
                return entry
        return entries[0]

    def resolve(self, peer_addr: str, headers) -> str:
        """
        Returns the address to write into the destination header, or an
        empty string when no header should be written.

        `headers` needs a case-insensitive `get(name)`, such as starlette's
        `Headers`.
        """
        raw_peer = split_host_port(peer_addr)
        peer_ip = parse_ip(raw_peer)
        if peer_ip is None:
            if raw_peer:
                logger.muted(f"Peer address {peer_addr!r} is not an IP address")
            raw_peer = ""

        if not self.is_trusted(peer_ip):
            logger.request(f"Untrusted peer {raw_peer}, ignoring headers")
            return raw_peer

        # source_header is guaranteed to be lower cased
        if self.config.source_header == HEADER_X_FORWARDED_FOR:
            real_ip = self.resolve_chain(
                split_chain(headers.get(HEADER_X_FORWARDED_FOR))
            )
        else:
            real_ip = headers.get(self.config.source_header) or ""

        if real_ip == "":
            real_ip = raw_peer
        logger.request(f"Resolved {real_ip} for peer {raw_peer}")
        return real_ip
