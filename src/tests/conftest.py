import io

import pandas as pd
import pytest
import requests

from nflverse_fetch.config import CacheMode, NFLReadConfig, reset_config, update_config
from nflverse_fetch.ingest import downloader as downloader_module
from nflverse_fetch.utils import cache as cache_module

NFLVERSE = "https://github.com/nflverse/nflverse-data/releases/download/"
DYNASTYPROCESS = "https://github.com/dynastyprocess/data/raw/master/files/"
FFOPPORTUNITY = "https://github.com/ffverse/ffopportunity/releases/download/"

ENV_VARS = [
    "NFLVERSE_CACHE",
    "NFLVERSE_CACHE_DIR",
    "NFLVERSE_CACHE_DURATION",
    "NFLVERSE_VERBOSE",
    "NFLVERSE_TIMEOUT",
    "NFLVERSE_USER_AGENT",
    "NFLVERSE_LOG_LEVEL",
]


class FakeClock:
    """Manually advanced replacement for time.time."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_response(url: str, status_code: int, content: bytes) -> requests.Response:
    response = requests.Response()
    response.url = url
    response.status_code = status_code
    response.reason = "OK" if status_code < 400 else "Not Found"
    response._content = content
    return response


class FakeSession:
    """Stands in for requests.Session, answering from a URL routing table."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []
        self.closed = 0

    def add(self, url, content, status_code=200):
        self.routes[url] = (status_code, content)

    def get(self, url, timeout=None, headers=None):
        self.calls.append({"url": url, "timeout": timeout, "headers": headers})
        outcome = self.routes.get(url)
        if outcome is None:
            return make_response(url, 404, b"")
        if isinstance(outcome, Exception):
            raise outcome
        status_code, content = outcome
        return make_response(url, status_code, content)

    def close(self):
        self.closed += 1

    @property
    def urls(self):
        return [call["url"] for call in self.calls]


def parquet_bytes(df: pd.DataFrame) -> bytes:
    buffer = io.BytesIO()
    df.to_parquet(buffer, index=False, engine="pyarrow")
    return buffer.getvalue()


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch):
    """Every test starts from a clean environment, configuration and memory cache."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    cache_module._shared_store.clear()
    yield
    reset_config()
    cache_module._shared_store.clear()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def memory_config(tmp_path):
    return NFLReadConfig(cache_mode=CacheMode.MEMORY, cache_dir=tmp_path / "cache", cache_duration=60)


@pytest.fixture
def filesystem_config(tmp_path):
    return NFLReadConfig(cache_mode=CacheMode.FILESYSTEM, cache_dir=tmp_path / "cache", cache_duration=60)


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def active_session(monkeypatch, memory_config):
    """Installs a memory-cache configuration and routes every new session to one fake."""
    fake = FakeSession()
    update_config(memory_config)
    monkeypatch.setattr(downloader_module.requests, "Session", lambda: fake)
    return fake


@pytest.fixture
def games_df():
    return pd.DataFrame(
        {
            "game_id": ["2022_01_BUF_LA", "2023_01_DET_KC", "2023_02_KC_JAX", "2023_18_KC_LV"],
            "season": [2022, 2023, 2023, 2023],
            "week": [1, 1, 2, 18],
            "roof": ["dome", "outdoors", "retractable", "closed"],
            "result": [21.0, -1.0, None, None],
        }
    )
