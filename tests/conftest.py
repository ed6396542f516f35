import json
from dataclasses import dataclass, field

import pytest
import requests
from requests.structures import CaseInsensitiveDict


def make_response(status: int, body=b"", headers: dict|None = None) -> requests.Response:
    """A requests.Response as the transport would hand it back, content already read."""
    r = requests.Response()
    r.status_code = status
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
        headers = dict(headers or {})
        headers.setdefault('Content-Type', "application/json; charset=UTF-8")
    r._content = body.encode("utf-8") if isinstance(body, str) else bytes(body)
    r._content_consumed = True
    r.encoding = "utf-8"
    r.headers = CaseInsensitiveDict(headers or {})
    return r


@dataclass
class Sent():
    method: str
    url: str
    params: list = field(default_factory=list)
    data: bytes|None = None
    headers: dict = field(default_factory=dict)
    timeout: float|None = None

    @property
    def full_url(self) -> str:
        return requests.Request(self.method, self.url, params=self.params).prepare().url


class FakeSession():
    """
    Stands in for the AuthorizedSession, replaying queued replies.
    A queued exception is raised, a queued callable is called with the Sent request.
    """
    def __init__(self, *replies) -> None:
        self.sent = []
        self.replies = list(replies)

    def queue(self, *replies) -> None:
        self.replies.extend(replies)

    def request(self, method, url, params=None, data=None, headers=None, timeout=None, stream=False):
        s = Sent(method, url, list(params or []), data, dict(headers or {}), timeout)
        self.sent.append(s)
        if not self.replies:
            raise AssertionError(f"unexpected request {method} {url}")
        r = self.replies.pop(0)
        if isinstance(r, BaseException):
            raise r
        if callable(r):
            return r(s)
        return r

    def put(self, url, data=None, headers=None, timeout=None, **kwargs):
        return self.request("PUT", url, data=data, headers=headers, timeout=timeout)

    def get(self, url, params=None, headers=None, timeout=None, **kwargs):
        return self.request("GET", url, params=params, headers=headers, timeout=timeout)


@pytest.fixture
def session():
    return FakeSession()
