"""Test configuration and fixtures.

Requests never leave the process: a stub transport adapter is mounted on a
real requests.Session, so URL/query preparation and JSON bodies go through
requests itself and can be asserted on the PreparedRequest.
"""
import json
from typing import Any, List, Optional, Tuple

import pytest
import requests
from requests.adapters import BaseAdapter

from tremendous import TESTFLIGHT_URL, TremendousAPI

TEST_API_KEY = "TEST_api-key-abc123"


class StubAdapter(BaseAdapter):
    """Returns queued canned responses and records every request sent."""

    def __init__(self):
        super().__init__()
        self.requests: List[requests.PreparedRequest] = []
        self._queue: List[Tuple[int, bytes]] = []
        self.error: Optional[Exception] = None

    def add(self, status: int = 200, body: Any = None, text: Optional[str] = None) -> None:
        if text is not None:
            raw = text.encode("utf-8")
        else:
            raw = json.dumps(body if body is not None else {}).encode("utf-8")
        self._queue.append((status, raw))

    def send(self, request, **kwargs):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        status, raw = self._queue.pop(0)
        resp = requests.Response()
        resp.status_code = status
        resp._content = raw
        resp.encoding = "utf-8"
        resp.url = request.url
        resp.request = request
        return resp

    def close(self):
        pass

    @property
    def last(self) -> requests.PreparedRequest:
        return self.requests[-1]


@pytest.fixture
def stub():
    return StubAdapter()


@pytest.fixture
def session(stub):
    s = requests.Session()
    s.mount("https://", stub)
    s.mount("http://", stub)
    yield s
    s.close()


@pytest.fixture
def api(session):
    return TremendousAPI(TEST_API_KEY, session=session)


@pytest.fixture
def base_url():
    return TESTFLIGHT_URL
