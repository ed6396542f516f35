import json
from unittest import mock

import pytest

from gapibindings import storage
from gapibindings.access import gapi, service

from conftest import FakeSession, make_response


@pytest.fixture(autouse=True)
def fresh(tmp_path):
    gapi.reset()
    gapi.client_secrets = tmp_path / "secrets.json"
    gapi.cred_cache = tmp_path / "tokens.json"
    yield gapi
    gapi.reset()


def test_get_scope():
    assert(gapi.get_scope("storage-rw") == "https://www.googleapis.com/auth/devstorage.read_write")
    assert(gapi.get_scope("blogger-ro") == "https://www.googleapis.com/auth/blogger.readonly")
    assert(gapi.get_scope("https://www.googleapis.com/auth/coordinate") == "https://www.googleapis.com/auth/coordinate")
    assert(gapi.get_scope("bogus") == "")


def test_scopes_filtered():
    gapi.scopes = ["blogger", "bogus", "blogger"]
    assert(gapi.scopes == ["https://www.googleapis.com/auth/blogger"])
    gapi.scopes = "coordinate-ro"
    assert(gapi.scopes == ["https://www.googleapis.com/auth/coordinate.readonly"])
    gapi.scopes = None
    assert(gapi.scopes == [])


def test_config_roundtrip(tmp_path):
    gapi.config = {'scopes': ["storage-ro"], 'port': "8080", 'server': "127.0.0.1",
                   'developer_key': "KEY", 'user_agent': "myapp/2", 'secrets': str(tmp_path / "s.json")}
    c = gapi.config
    assert(c['scopes'] == ["https://www.googleapis.com/auth/devstorage.read_only"])
    assert(c['port'] == 8080)
    assert(c['server'] == "127.0.0.1")
    assert(c['developer_key'] == "KEY")
    assert(c['user_agent'] == "myapp/2")
    assert(c['secrets'] == str(tmp_path / "s.json"))
    json.dumps(c)


def test_connect_without_scopes():
    assert(gapi.connect() is False)
    assert(not gapi)


def test_connect_default_credentials():
    creds = mock.Mock(valid=True, refresh_token=None, scopes=["https://www.googleapis.com/auth/blogger"])
    gapi.scopes = ["blogger"]
    with mock.patch("google.auth.default", return_value=(creds, "project")) as m:
        assert(gapi.connect())
    m.assert_called_once_with(scopes=["https://www.googleapis.com/auth/blogger"])
    assert(gapi.connected)
    assert(gapi.scope_in_session("blogger"))
    assert(not gapi.scope_in_session("storage-rw"))


def test_unknown_api():
    with pytest.raises(ValueError):
        gapi.get_service("drive", "v3")


def test_get_service_not_connected():
    with mock.patch.object(gapi, "session", return_value=None):
        assert(gapi.get_service("storage", "v1beta2") is None)


def test_get_service_cached():
    session = FakeSession(make_response(200, {"name": "b"}))
    gapi.developer_key = "KEY"
    gapi.user_agent = "tool/1"
    with mock.patch.object(gapi, "session", return_value=session):
        s = gapi.get_service("storage", "v1beta2")
        assert(gapi.get_service("storage", "v1beta2") is s)
    assert(isinstance(s, storage.Service))
    assert(s.api_key == "KEY")
    s.buckets.get("b").do()
    assert(("key", "KEY") in session.sent[0].params)
    assert(session.sent[0].headers['User-Agent'].endswith(" tool/1"))


def test_service_decorator():
    @service("blogger", "v3")
    def blog_name(blog_id, service=None):
        return service.blogs.get(blog_id).do().name

    session = FakeSession(make_response(200, {"name": "My Blog"}))
    with mock.patch.object(gapi, "session", return_value=session):
        assert(blog_name("42") == "My Blog")
    assert(session.sent[0].url == "https://www.googleapis.com/blogger/v3/blogs/42")
