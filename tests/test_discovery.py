from unittest import mock

import pytest
import requests

from gapibindings import discovery
from gapibindings.discovery import parse_document, read_document
from gapibindings.errors import HTTPError, TransportError

from conftest import FakeSession, make_response
from test_generator import DISCOVERY, TINY


def test_parse_tiny():
    doc = parse_document(TINY)
    assert(doc.base_url == "https://tiny.example.com/tiny/v1/")
    assert([s.url for s in doc.scopes] == ["https://www.googleapis.com/auth/tiny",
                                           "https://www.googleapis.com/auth/tiny.readonly"])
    assert([m.id for m in doc.all_methods()] == ["tiny.things.get", "tiny.things.insert",
                                                 "tiny.things.list", "tiny.things.parts.delete"])
    lst = [m for m in doc.all_methods() if m.name == "list"][0]
    assert([p.name for p in lst.required_parameters] == ["owner"])
    assert([p.name for p in lst.optional_parameters] == ["pageToken", "since", "tag"])
    ins = [m for m in doc.all_methods() if m.name == "insert"][0]
    assert(ins.media_upload.simple_path == "/upload/tiny/v1/things")
    assert(doc.schemas["Thing"].properties[0].name == "class")


def test_base_url_only():
    d = {"name": "old", "version": "v1", "baseUrl": "https://www.googleapis.com/old/v1/"}
    doc = parse_document(d)
    assert(doc.root_url == "https://www.googleapis.com/")
    assert(doc.service_path == "old/v1/")
    assert(doc.id == "old:v1")


@pytest.mark.parametrize("d", [
    {"kind": "discovery#directoryList", "name": "x", "version": "v1"},
    {"name": "x", "rootUrl": "https://x/"},
    {"name": "x", "version": "v1"},
])
def test_invalid(d):
    with pytest.raises(ValueError):
        parse_document(d)


def test_bundled_documents():
    storage = read_document(DISCOVERY / "storage-v1beta2.json")
    assert(storage.service_path == "storage/v1beta2/")
    insert = [m for m in storage.all_methods() if m.id == "storage.objects.insert"][0]
    assert(insert.media_upload is not None)
    coordinate = read_document(DISCOVERY / "coordinate-v1.json")
    jobs_insert = [m for m in coordinate.all_methods() if m.id == "coordinate.jobs.insert"][0]
    assert([p.name for p in jobs_insert.required_parameters] == ["teamId", "address", "lat", "lng", "title"])


def test_fetch_uses_bundled_copy():
    with mock.patch.object(discovery.gapi_discovery_cache, "get_static_doc",
                           return_value='{"name": "tiny", "version": "v1", "rootUrl": "https://t/"}') as m:
        doc = discovery.fetch_document("tiny", "v1", FakeSession())
    m.assert_called_once_with("tiny", "v1")
    assert(doc.name == "tiny")


def test_fetch_from_service():
    s = FakeSession(make_response(200, TINY))
    with mock.patch.object(discovery.gapi_discovery_cache, "get_static_doc", return_value=None):
        doc = discovery.fetch_document("tiny", "v1", s)
    assert(doc.id == "tiny:v1")
    assert(s.sent[0].url == "https://www.googleapis.com/discovery/v1/apis/tiny/v1/rest")


def test_fetch_errors():
    with mock.patch.object(discovery.gapi_discovery_cache, "get_static_doc", return_value=None):
        with pytest.raises(HTTPError):
            discovery.fetch_document("nope", "v1", FakeSession(make_response(404, "Not Found")))
        with pytest.raises(TransportError):
            discovery.fetch_document("nope", "v1", FakeSession(requests.ConnectionError("down")))
