#!/usr/bin/env python3
from typing import Tuple, Union
from ipaddress import IPv4Network, IPv6Network
from pydantic import BaseModel, ConfigDict, field_validator

from realip.const import (
    HEADER_FORWARDED,
    HEADER_X_REAL_IP,
    REALIP_DESTINATION_HEADER,
    REALIP_RECURSIVE,
    REALIP_SOURCE_HEADER,
    REALIP_TRUSTED_RANGES,
)
from realip.util.exceptions import (
    ConfigurationError,
    InvalidTrustedRangeError,
    UnsupportedHeaderError,
)
from realip.util.logger import logger
from realip.util.net import parse_network


class Configuration(BaseModel):
    """
    Validated real ip settings, shared read-only by every request.
    Build instances with `ConfigBuilder` rather than directly.
    """

    model_config = ConfigDict(frozen=True)

    # where to read the real ip from, always lower cased
    source_header: str = HEADER_X_REAL_IP
    # where to write the resolved ip to
    destination_header: str = HEADER_X_REAL_IP
    # empty means every peer is trusted
    trusted_ranges: Tuple[Union[IPv4Network, IPv6Network], ...] = ()
    recursive: bool = False

    @field_validator("source_header")
    @classmethod
    def check_source_header(cls, v: str) -> str:
        lowered = v.strip().lower()
        if lowered == HEADER_FORWARDED:
            raise UnsupportedHeaderError(
                "`Forwarded` header is not supported as a source header"
            )
        return lowered

    @field_validator("destination_header")
    @classmethod
    def lower_destination_header(cls, v: str) -> str:
        return v.lower()

    def summary(self) -> dict:
        return {
            "source_header": self.source_header,
            "destination_header": self.destination_header,
            "trusted_ranges": [str(i) for i in self.trusted_ranges],
            "recursive": self.recursive,
        }


class ConfigBuilder:
    """
    Assembles a Configuration, similar to nginx's `ngx_http_realip_module`
    directives. Each step returns the builder so calls can be chained:

        config = (
            ConfigBuilder()
            .add_trusted_ranges("192.168.0.0/16")
            .set_source_header(HEADER_X_FORWARDED_FOR)
            .set_recursive(True)
            .build()
        )

    The first invalid step is remembered and later steps are ignored. The
    error is only raised by `build()`, wrapped in a ConfigurationError.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        self.error = None
        self._source_header = HEADER_X_REAL_IP
        self._destination_header = HEADER_X_REAL_IP
        self._trusted_ranges = []
        self._recursive = False
        return self

    def set_source_header(self, name: str):
        """
        Header to read the real ip from. Equivalent to `real_ip_header`.
        The structured `Forwarded` header is not supported.
        """
        if self.error is not None:
            return self
        lowered = name.strip().lower()
        if lowered == HEADER_FORWARDED:
            self.error = UnsupportedHeaderError(
                "`Forwarded` header is not supported as a source header"
            )
            return self
        self._source_header = lowered
        return self

    def set_destination_header(self, name: str):
        if self.error is not None:
            return self
        self._destination_header = name.lower()
        return self

    def add_trusted_ranges(self, *ranges):
        """
        Ranges trusted to supply the client address, as networks or CIDR
        strings. Equivalent to `set_real_ip_from`.
        """
        if self.error is not None:
            return self
        parsed = []
        for i in ranges:
            try:
                parsed.append(parse_network(i))
            except ValueError as e:
                self.error = InvalidTrustedRangeError(
                    f"Invalid trusted range {i!r}: {e}"
                )
                return self
        self._trusted_ranges += parsed
        return self

    def set_recursive(self, value: bool):
        """
        Look for the most recent untrusted address in the forwarding chain.
        Equivalent to `real_ip_recursive`.
        """
        if self.error is not None:
            return self
        self._recursive = bool(value)
        return self

    def build(self) -> Configuration:
        error = self.error
        config = None
        if error is None:
            config = Configuration(
                source_header=self._source_header,
                destination_header=self._destination_header,
                trusted_ranges=tuple(self._trusted_ranges),
                recursive=self._recursive,
            )
        self.reset()
        if error is not None:
            raise ConfigurationError(f"ConfigBuilder: {error}", error=error) from error
        return config


def new() -> ConfigBuilder:
    """
    Returns a builder with the default configuration: every peer is trusted
    and X-Real-IP is both the source and the destination header.
    """
    return ConfigBuilder()


def load_config() -> Configuration:
    config = (
        new()
        .add_trusted_ranges(*REALIP_TRUSTED_RANGES)
        .set_source_header(REALIP_SOURCE_HEADER)
        .set_destination_header(REALIP_DESTINATION_HEADER)
        .set_recursive(REALIP_RECURSIVE)
        .build()
    )
    logger.info(f"Loaded real ip config: {config.summary()}")
    return config
