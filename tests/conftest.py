"""Pytest fixtures for VK authorization tests."""

from pathlib import Path

import httpx
import pytest
from bs4 import BeautifulSoup

FIXTURES_DIR = Path(__file__).parent / "fixtures"

AUTHORIZE_URL = "https://oauth.vk.com/oauth/authorize"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def load_fixture():
    """Factory fixture to load HTML fixtures as text."""

    def _load(name: str) -> str:
        path = FIXTURES_DIR / name
        with open(path) as f:
            return f.read()

    return _load


@pytest.fixture
def authorize_html(load_fixture) -> str:
    """Load VK authorize page HTML."""
    return load_fixture("authorize.html")


@pytest.fixture
def authorize_document(authorize_html) -> BeautifulSoup:
    """Parsed VK authorize page."""
    return BeautifulSoup(authorize_html, "lxml")


@pytest.fixture
def token_redirect_html(load_fixture) -> str:
    """Load successful post-login page HTML."""
    return load_fixture("token_redirect.html")


@pytest.fixture
def login_retry_html(load_fixture) -> str:
    """Load login page VK renders after rejected credentials."""
    return load_fixture("login_retry.html")


class FakeVK:
    """Request handler for httpx.MockTransport serving a scripted login flow.

    Records every request so tests can inspect what was posted.
    """

    def __init__(self, authorize_page: str, result_page: str):
        self.authorize_page = authorize_page
        self.result_page = result_page
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "GET":
            return httpx.Response(
                200,
                text=self.authorize_page,
                headers={"Set-Cookie": "remixlang=3; Path=/; Domain=.vk.com"},
            )
        return httpx.Response(200, text=self.result_page)

    @property
    def posts(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == "POST"]


@pytest.fixture
def fake_vk():
    """Factory fixture building a FakeVK handler."""

    def _make(authorize_page: str, result_page: str) -> FakeVK:
        return FakeVK(authorize_page, result_page)

    return _make
