import httpx
import pytest

from coingecko_client import CoinGeckoClient


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep real COINGECKO_* variables and any local .env out of the tests"""
    for name in (
        "COINGECKO_PRO_API_KEY",
        "COINGECKO_BASE_URL",
        "COINGECKO_TIMEOUT_S",
        "COINGECKO_RETRIES",
        "COINGECKO_RETRY_BACKOFF_S",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class Recorder:
    """MockTransport handler that records requests and replays canned replies.

    Each reply is an exception to raise or a (status, kwargs) pair for
    httpx.Response. The last reply repeats once the queue runs dry.
    """

    def __init__(self, *replies):
        self.requests = []
        self.replies = list(replies) or [(200, {"json": {}})]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        if isinstance(reply, Exception):
            raise reply
        status, kwargs = reply
        return httpx.Response(status, **kwargs)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def make_client():
    def _make(recorder, **kwargs):
        kwargs.setdefault("retry_backoff_s", 0)
        return CoinGeckoClient(transport=httpx.MockTransport(recorder), **kwargs)

    return _make


@pytest.fixture
def stub_api():
    return Recorder
