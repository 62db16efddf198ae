"""
Shared fixtures for the GrabPic tests: logging, credentials, photo records
and a fake aiohttp session.
"""

import json
import logging
import sys
import time
from pathlib import Path
from types import SimpleNamespace

import pytest

LOG_FILE = Path("test/test_output/logs/grabpic_tests.log")


def _configure_test_logging() -> None:
    """Send grabpic's debug output to the console and to LOG_FILE."""
    LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(
        "%(asctime)s %(levelname)-7s %(name)s: %(message)s", datefmt="%H:%M:%S"
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.INFO)
    for handler in (
        logging.FileHandler(LOG_FILE, mode="a", encoding="utf-8"),
        logging.StreamHandler(),
    ):
        handler.setFormatter(formatter)
        root.addHandler(handler)

    logging.getLogger("grabpic").setLevel(logging.DEBUG)
    for noisy in ("asyncio", "httpx"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def pytest_configure(config):  # pylint: disable=unused-argument
    _configure_test_logging()
    logging.getLogger("pytest").info(
        "grabpic test run on Python %s, logging to %s", sys.version.split()[0], LOG_FILE
    )


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Keep the call-phase report so fixtures can see whether the test failed."""
    outcome = yield
    report = outcome.get_result()
    if report.when == "call":
        item.call_report = report


@pytest.fixture(autouse=True)
def log_test_outcome(request):
    """Log each test with its outcome and duration."""
    log = logging.getLogger("test")
    started = time.perf_counter()
    yield
    report = getattr(request.node, "call_report", None)
    status = "FAILED" if report is not None and report.failed else "done"
    log.info("%s %s (%.2fs)", status, request.node.nodeid, time.perf_counter() - started)


# -------------------- Fixtures for photo search --------------------
@pytest.fixture
def access_key() -> str:
    """A structurally valid 64-character Unsplash access key."""
    return "a1B2c3D4" * 8


def make_photo(photo_id: str, **overrides) -> dict:
    """Unsplash photo record with all five size tiers."""
    urls = {
        size: f"https://images.unsplash.com/{photo_id}?size={size}"
        for size in ("raw", "full", "regular", "small", "thumb")
    }
    urls.update(overrides)
    return {
        "id": photo_id,
        "urls": {k: v for k, v in urls.items() if v is not None},
        "alt_description": f"photo {photo_id}",
        "description": None,
    }


@pytest.fixture
def photo_factory():
    return make_photo


class FakeResponse:
    """Minimal stand-in for aiohttp.ClientResponse used as an async context manager."""

    def __init__(self, status: int = 200, body=b"", reason: str = "OK"):
        self.status = status
        self.reason = reason
        if isinstance(body, (dict, list)):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode("utf-8")
        self._body = body

    async def read(self) -> bytes:
        return self._body

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Records GET calls and replays a single canned response or error."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None):
        self.response = response or FakeResponse()
        self.error = error
        self.calls = []
        self.closed = False

    def get(self, url, params=None, headers=None):
        self.calls.append(SimpleNamespace(url=url, params=dict(params or {}), headers=dict(headers or {})))
        if self.error is not None:
            raise self.error
        return self.response

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.closed = True
        return False


@pytest.fixture
def fake_session_factory():
    """Build a FakeSession answering with ``status``/``body`` or raising ``error``."""

    def factory(status: int = 200, body=None, reason: str = "OK", error: Exception | None = None):
        return FakeSession(FakeResponse(status, body if body is not None else b"", reason), error)

    return factory

