#!/usr/bin/env python3
import pytest
from starlette.datastructures import Headers

from realip.const import HEADER_X_FORWARDED_FOR
from realip.lib.cache import TrustCache
from realip.lib.config import new
from realip.lib.resolver import Resolver


def headers(**kwargs):
    # x_forwarded_for="..." -> X-Forwarded-For: ...
    return Headers(headers={k.replace("_", "-"): v for k, v in kwargs.items()})


@pytest.fixture
def setup_trust_all():
    yield Resolver(new().build())


@pytest.fixture
def setup_trusted_private():
    config = new().add_trusted_ranges("192.168.0.0/16").build()
    yield Resolver(config, cache=TrustCache())


@pytest.fixture
def setup_xff_recursive():
    config = (
        new()
        .set_source_header(HEADER_X_FORWARDED_FOR)
        .add_trusted_ranges("127.0.0.1/32", "192.168.0.0/16")
        .set_recursive(True)
        .build()
    )
    yield Resolver(config)


@pytest.fixture
def setup_xff():
    config = (
        new()
        .add_trusted_ranges("127.0.0.1/32", "192.168.0.0/16")
        .set_source_header(HEADER_X_FORWARDED_FOR)
        .build()
    )
    yield Resolver(config)
