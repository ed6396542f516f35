import datetime

import pytest

from gapibindings.calls import ApiService, Call
from gapibindings.googleapi import combine_fields, expand, resolve_relative
from gapibindings.storage import Service

from conftest import FakeSession, make_response


def test_service_requires_session():
    with pytest.raises(ValueError):
        ApiService(None)


def test_root_url_override():
    svc = Service(FakeSession(), root_url="http://localhost:8080")
    assert(svc.base_path == "http://localhost:8080/storage/v1beta2/")
    assert(svc.upload_path == "http://localhost:8080/upload/storage/v1beta2/")


def test_format():
    assert(Call._format(True) == "true")
    assert(Call._format(False) == "false")
    assert(Call._format(12) == "12")
    assert(Call._format(datetime.datetime(2014, 1, 2, 3, 4, 5)) == "2014-01-02T03:04:05Z")
    utc = datetime.datetime(2014, 1, 2, 3, 4, 5, tzinfo=datetime.timezone.utc)
    assert(Call._format(utc) == "2014-01-02T03:04:05+00:00")


def test_setters_chain_and_replace():
    svc = Service(FakeSession(make_response(200, {})))
    call = svc.objects.list("b")
    assert(call.prefix("a") is call)
    call.prefix("b").maxResults(10)
    call.do()
    params = svc.session.sent[0].params
    assert(("prefix", "b") in params and ("prefix", "a") not in params)
    assert(("maxResults", "10") in params)


def test_fields_needs_a_selector():
    svc = Service(FakeSession())
    with pytest.raises(ValueError):
        svc.buckets.get("b").fields()
    assert(len(svc.session.sent) == 0)


def test_url_helpers():
    assert(resolve_relative("https://x.com/api/v1/", "b/{bucket}/o") == "https://x.com/api/v1/b/{bucket}/o")
    assert(expand("https://x.com/b/{bucket}/o/{object}", {"bucket": "b", "object": "a b/c"})
           == "https://x.com/b/b/o/a%20b%2Fc")
    assert(expand("https://x.com/{+path}", {"path": "a/b"}) == "https://x.com/a/b")
    assert(combine_fields(["kind", "items(id,name)"]) == "kind,items(id,name)")
