"""Pytest fixtures for shortener tests."""

from collections.abc import Iterator

import pytest

from shorten_url.config import get_settings


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Make every test start from default settings.

    Environment overrides from the developer's shell are removed and the
    cached Settings instance is dropped before and after each test.
    """
    monkeypatch.delenv("SHORTEN_URL_DEFAULT_MAX_LEN", raising=False)
    monkeypatch.delenv("SHORTEN_URL_ELLIPSIS", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def ellipsis() -> str:
    """The default ellipsis marker."""
    return "…"


@pytest.fixture
def deep_path_url() -> str:
    """URL with many path segments and a trailing slash."""
    return "http://example.com/ultra/cool/page/that-is-really-deeply/nested/"


@pytest.fixture
def long_host_url() -> str:
    """URL consisting only of a scheme and a long host."""
    return "https://www.thisisasuperlonghostname.co.uk"


@pytest.fixture
def query_url() -> str:
    """URL with a root path and two query parameters."""
    return "https://www.reddit.com/?count=25&after=t3_76zjp1"
