"""Shared pytest fixtures for the setlistfm test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from doubles import StubTransport

from setlistfm.config.config import Config
from setlistfm.features.dispatch import RequestContext
from setlistfm.shared.language import Language


@pytest.fixture
def stub_transport() -> StubTransport:
    return StubTransport()


@pytest.fixture
def request_context(stub_transport: StubTransport) -> RequestContext:
    return RequestContext(api_key="test-key", language=Language.ENGLISH, transport=stub_transport)


@pytest.fixture(autouse=True)
def reset_config_singleton() -> Iterator[None]:
    """Keep cached configuration from leaking between tests."""

    Config.reset()
    yield
    Config.reset()
