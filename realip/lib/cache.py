#!/usr/bin/env python3
from realip.util.logger import logger
from realip.util.rwlock import ReadWriteLock


class TrustCache:
    """
    Addresses already proven to lie inside a trusted range.

    Entries are only ever added, and stay valid for as long as the
    Configuration they were evaluated against. Lookups share a read lock,
    inserts take the write lock.
    """

    def __init__(self):
        self._lock = ReadWriteLock()
        self._items = set()

    def __contains__(self, ip_str: str) -> bool:
        with self._lock.read_lock():
            return ip_str in self._items

    def __len__(self) -> int:
        with self._lock.read_lock():
            return len(self._items)

    def add(self, ip_str: str) -> None:
        with self._lock.write_lock():
            # Two resolutions may race to insert the same address
            if ip_str in self._items:
                return
            self._items.add(ip_str)
        logger.trust(f"Cached trusted address {ip_str}")

    def snapshot(self) -> frozenset:
        with self._lock.read_lock():
            return frozenset(self._items)
