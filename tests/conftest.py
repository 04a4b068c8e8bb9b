"""Shared fixtures."""

import pytest

from stringhasher import HasherConfig, StringHasher


@pytest.fixture()
def config() -> HasherConfig:
    return HasherConfig(signature="hash512", iterations=1000)


@pytest.fixture()
def hasher(config: HasherConfig) -> StringHasher:
    return StringHasher(config)
