"""Shared fixtures: a recording stand-in for requests.Session."""
import json

import pytest

from twitter_search import SearchClient

API_BASE = "https://api.test/"


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Replays queued responses and records every request made."""

    def __init__(self):
        self.calls = []
        self.queued = []
        self.closed = False

    def queue(self, response):
        self.queued.append(response)
        return self

    def _request(self, method, url, params=None, headers=None, **kwargs):
        self.calls.append({
            "method": method,
            "url": url,
            "params": params,
            "headers": headers,
            "timeout": kwargs.get("timeout"),
        })
        if not self.queued:
            raise AssertionError(f"unexpected {method} {url}")
        response = self.queued.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def get(self, url, **kwargs):
        return self._request("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._request("POST", url, **kwargs)

    def close(self):
        self.closed = True


def bearer_response(token="abc123"):
    return FakeResponse(200, {"token_type": "bearer", "access_token": token})


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def client(session):
    session.queue(bearer_response())
    return SearchClient(session, ("test_key", "test_secret"), api_base=API_BASE)
