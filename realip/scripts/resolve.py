#!/usr/bin/env python3
import sys
import argparse

from starlette.datastructures import Headers

from realip.const import HEADER_X_REAL_IP
from realip.lib.config import new
from realip.lib.resolver import Resolver
from realip.util.exceptions import ConfigurationError
from realip.util.logger import logger


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Resolve the real client address for a peer and set of request headers."
    )
    parser.add_argument("peer", help="Peer address, e.g. 127.0.0.1:8080")
    parser.add_argument(
        "-t",
        "--trusted",
        action="append",
        default=[],
        help="Trusted CIDR range, may be repeated",
    )
    parser.add_argument(
        "-s",
        "--source-header",
        default=HEADER_X_REAL_IP,
        help="Header to read the real ip from",
    )
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        help="Walk the forwarding chain for the most recent untrusted entry",
    )
    parser.add_argument(
        "-H",
        "--header",
        action="append",
        default=[],
        help="Request header as NAME=VALUE, may be repeated",
    )
    return parser.parse_args(argv)


def parse_headers(items):
    headers = []
    for i in items:
        name, _, value = i.partition("=")
        headers.append((name.strip().lower().encode("latin-1"), value.encode("latin-1")))
    return Headers(raw=headers)


def main(argv=None):
    args = parse_args(argv)
    try:
        config = (
            new()
            .add_trusted_ranges(*args.trusted)
            .set_source_header(args.source_header)
            .set_recursive(args.recursive)
            .build()
        )
    except ConfigurationError as e:
        logger.error(f"{e}")
        return 1
    try:
        headers = parse_headers(args.header)
    except UnicodeEncodeError as e:
        logger.error(f"Header values must be latin-1 encodable: {e}")
        return 1
    print(Resolver(config).resolve(args.peer, headers))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
