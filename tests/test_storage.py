import json

import pytest
import requests

from gapibindings import storage
from gapibindings.context import Context
from gapibindings.errors import CanceledError, HTTPError, ProtocolError, TransportError
from gapibindings.googleapi import USER_AGENT, is_not_modified
from gapibindings.media import MIN_CHUNK_SIZE
from gapibindings.resumable import RetryPolicy
from gapibindings.storage.resources import Bucket, ComposeRequest, ComposeRequestSourceObjects, Object

from conftest import FakeSession, make_response

BASE = "https://www.googleapis.com/storage/v1beta2/"
UPLOAD = "https://www.googleapis.com/upload/storage/v1beta2/"


@pytest.fixture
def svc(session):
    return storage.Service(session)


def object_json(**kwargs):
    d = {"kind": "storage#object", "bucket": "mybucket", "name": "hello.txt", "size": "5", "generation": "7"}
    d.update(kwargs)
    return d


def test_package_constants():
    assert(storage.BASE_PATH == BASE)
    assert(storage.DEVSTORAGE_READ_WRITE_SCOPE == "https://www.googleapis.com/auth/devstorage.read_write")
    assert(len(storage.SCOPES) == 3)


def test_get_metadata(svc, session):
    session.queue(make_response(200, object_json(), headers={'ETag': "abc"}))
    obj = svc.objects.get("mybucket", "dir/hello world.txt").projection("full").do()
    assert(isinstance(obj, Object))
    assert(obj.size == 5 and obj.generation == 7)
    assert(obj.server_response.http_status_code == 200)
    assert(obj.server_response.header['ETag'] == "abc")
    sent = session.sent[0]
    assert(sent.method == "GET")
    assert(sent.url == BASE + "b/mybucket/o/dir%2Fhello%20world.txt")
    assert(sent.params == [("alt", "json"), ("projection", "full")])
    assert(sent.headers['User-Agent'] == USER_AGENT)


def test_do_header(svc, session):
    session.queue(make_response(200, object_json(), headers={'X-GUploader-UploadID': "u1"}))
    obj, header = svc.objects.get("mybucket", "hello.txt").doHeader()
    assert(obj.name == "hello.txt")
    assert(header['X-GUploader-UploadID'] == "u1")


def test_invalid_enum_raises_before_sending(svc, session):
    with pytest.raises(ValueError):
        svc.objects.get("mybucket", "hello.txt").projection("everything")
    assert(session.sent == [])


def test_empty_path_parameter(svc):
    with pytest.raises(ValueError):
        svc.objects.get("", "hello.txt")


def test_if_none_match(svc, session):
    session.queue(make_response(304))
    with pytest.raises(HTTPError) as e:
        svc.objects.get("mybucket", "hello.txt").ifNoneMatch("etag1").do()
    assert(is_not_modified(e.value))
    assert(session.sent[0].headers['If-None-Match'] == "etag1")


def test_error_reply(svc, session):
    session.queue(make_response(404, {"error": {"code": 404, "message": "Not Found",
                                                "errors": [{"reason": "notFound", "message": "Not Found"}]}}))
    with pytest.raises(HTTPError) as e:
        svc.buckets.get("nope").do()
    assert(str(e.value) == "googleapi: Error 404: Not Found, notFound")


def test_transport_error(svc, session):
    session.queue(requests.ConnectionError("no route"))
    with pytest.raises(TransportError):
        svc.buckets.get("mybucket").do()


def test_cancelled_context(svc, session):
    ctx = Context.background().with_cancel()
    ctx.cancel()
    with pytest.raises(CanceledError):
        svc.buckets.get("mybucket").context(ctx).do()
    assert(session.sent == [])


def test_context_deadline_is_request_timeout(svc, session):
    session.queue(make_response(200, {"name": "mybucket"}))
    svc.buckets.get("mybucket").context(Context.background().with_timeout(30)).do()
    assert(0 < session.sent[0].timeout <= 30)


def test_delete_returns_none(svc, session):
    session.queue(make_response(204))
    assert(svc.objects.delete("mybucket", "hello.txt").generation(3).do() is None)
    assert(session.sent[0].method == "DELETE")
    assert(session.sent[0].params == [("alt", "json"), ("generation", "3")])


def test_insert_bucket_body(svc, session):
    session.queue(make_response(200, {"name": "newbucket", "metageneration": "1"}))
    b = svc.buckets.insert("my-project", Bucket(name="newbucket", location="EU")).do()
    assert(b.metageneration == 1)
    sent = session.sent[0]
    assert(sent.method == "POST")
    assert(sent.full_url == BASE + "b?alt=json&project=my-project")
    assert(json.loads(sent.data) == {"name": "newbucket", "location": "EU"})
    assert(sent.headers['Content-Type'] == "application/json; charset=utf-8")


def test_list_pages(svc, session):
    session.queue(make_response(200, {"items": [{"name": "a"}], "nextPageToken": "t1"}),
                  make_response(200, {"items": [{"name": "b"}]}))
    call = svc.objects.list("mybucket").prefix("logs/").maxResults(1)
    names = [o.name for page in call.pages() for o in page.items]
    assert(names == ["a", "b"])
    assert(("pageToken", "t1") not in session.sent[0].params)
    assert(("pageToken", "t1") in session.sent[1].params)
    assert(("prefix", "logs/") in session.sent[1].params)
    assert("pageToken" not in call._params)


def test_fields_and_api_key(session):
    svc = storage.Service(session, api_key="KEY", user_agent="myapp/1.0")
    session.queue(make_response(200, {"items": []}))
    svc.buckets.list("proj").fields("nextPageToken", "items(name)").do()
    sent = session.sent[0]
    assert(sent.params == [("alt", "json"), ("fields", "nextPageToken,items(name)"),
                           ("key", "KEY"), ("project", "proj")])
    assert(sent.headers['User-Agent'] == USER_AGENT + " myapp/1.0")


def test_compose(svc, session):
    session.queue(make_response(200, object_json(name="all.txt", componentCount=2)))
    req = ComposeRequest(destination=Object(contentType="text/plain"),
                         sourceObjects=[ComposeRequestSourceObjects(name="a.txt"),
                                        ComposeRequestSourceObjects(name="b.txt", generation=12)])
    obj = svc.objects.compose("mybucket", "all.txt", req).do()
    assert(obj.componentCount == 2)
    assert(session.sent[0].url == BASE + "b/mybucket/o/all.txt/compose")
    assert(json.loads(session.sent[0].data)["sourceObjects"][1] == {"name": "b.txt", "generation": "12"})


def test_download(svc, session):
    session.queue(make_response(200, b"file contents"))
    resp = svc.objects.get("mybucket", "hello.txt").generation(7).download()
    assert(resp.content == b"file contents")
    sent = session.sent[0]
    assert(sent.full_url == BASE + "b/mybucket/o/hello.txt?alt=media&generation=7")


def test_download_error(svc, session):
    session.queue(make_response(404, b"Not Found"))
    with pytest.raises(HTTPError) as e:
        svc.objects.get("mybucket", "missing").download()
    assert(e.value.code == 404)
    assert(e.value.body == "Not Found")


def test_multipart_upload(svc, session):
    session.queue(make_response(200, object_json()))
    obj = svc.objects.insert("mybucket", Object(name="hello.txt")).media(b"hello", "text/plain").do()
    assert(obj.name == "hello.txt")
    sent = session.sent[0]
    assert(sent.method == "POST")
    assert(sent.full_url == UPLOAD + "b/mybucket/o?alt=json&uploadType=multipart")
    ctype = sent.headers['Content-Type']
    assert(ctype.startswith("multipart/related; boundary="))
    boundary = ctype.split("boundary=")[1].encode()
    parts = sent.data.split(b"--" + boundary)
    assert(b'{"name": "hello.txt"}' in parts[1])
    assert(b"Content-Type: text/plain\r\n\r\nhello\r\n" in parts[2])


def test_simple_upload_without_metadata(svc, session):
    session.queue(make_response(200, object_json()))
    svc.objects.insert("mybucket", None).name("hello.txt").media(b"<html><body>hi</body></html>").do()
    sent = session.sent[0]
    assert(sent.full_url == UPLOAD + "b/mybucket/o?alt=json&name=hello.txt&uploadType=media")
    assert(sent.headers['Content-Type'] == "text/html; charset=utf-8")
    assert(sent.data == b"<html><body>hi</body></html>")


def test_resumable_upload(svc, session):
    size = 2 * MIN_CHUNK_SIZE + 100
    data = b"\x89PNG\r\n\x1a\n" + b"\x00" * (size - 8)
    location = UPLOAD + "b/mybucket/o?uploadType=resumable&upload_id=abc"
    session.queue(make_response(200, headers={'Location': location}),
                  make_response(308, headers={'Range': f"bytes=0-{MIN_CHUNK_SIZE - 1}"}),
                  make_response(308, headers={'Range': f"bytes=0-{2 * MIN_CHUNK_SIZE - 1}"}),
                  make_response(200, object_json(name="pic.png", size=str(size))))
    progress = []
    obj = (svc.objects.insert("mybucket", Object(name="pic.png"))
           .resumableMedia(data, size, chunk_size=1)
           .progressUpdater(progress.append)
           .do())
    assert(obj.size == size)
    assert(progress == [MIN_CHUNK_SIZE, 2 * MIN_CHUNK_SIZE, size])
    init = session.sent[0]
    assert(init.full_url == UPLOAD + "b/mybucket/o?alt=json&uploadType=resumable")
    assert(init.headers['X-Upload-Content-Type'] == "image/png")
    assert(init.headers['X-Upload-Content-Length'] == str(size))
    assert(json.loads(init.data) == {"name": "pic.png"})
    puts = session.sent[1:]
    assert([p.method for p in puts] == ["PUT", "PUT", "PUT"])
    assert(all(p.url == location for p in puts))
    assert(puts[2].headers['Content-Range'] == f"bytes {2 * MIN_CHUNK_SIZE}-{size - 1}/{size}")
    assert(all(p.headers['Content-Type'] == "image/png" for p in puts))


def test_resumable_without_location(svc, session):
    session.queue(make_response(200))
    with pytest.raises(ProtocolError):
        svc.objects.insert("mybucket", Object(name="x")).resumableMedia(b"abc", 3).do()


def test_resumable_retry_policy(svc, session):
    location = UPLOAD + "b/mybucket/o?upload_id=r"
    session.queue(make_response(200, headers={'Location': location}), make_response(503, "busy"))
    with pytest.raises(HTTPError):
        (svc.objects.insert("mybucket", Object(name="x"))
         .resumableMedia(b"abc", 3, retry=RetryPolicy.none()).do())
    assert(len(session.sent) == 2)


def test_resumable_bad_size(svc):
    with pytest.raises(ValueError):
        svc.objects.insert("mybucket", Object(name="x")).resumableMedia(b"abc", -1)
