import io
import math
import threading
import time

import pytest

from gapibindings.context import Context
from gapibindings.errors import (CanceledError, DeadlineExceededError, HTTPError, ProtocolError,
                                 TransportError, UploadError)
from gapibindings.media import MIN_CHUNK_SIZE, SizedMedia
from gapibindings.resumable import ResumableUploader, RetryPolicy, UploadState

from conftest import FakeSession, make_response

URI = "https://www.googleapis.com/upload/storage/v1beta2/b/bkt/o?uploadType=resumable&upload_id=xyz"
C = MIN_CHUNK_SIZE
NO_WAIT = RetryPolicy(max_attempts=3, initial=0.0, maximum=0.0)


def server(size: int, chunk: int, final_body: dict|None = None):
    """Replies acknowledging every chunk as a well behaved server would."""
    replies = []
    end = 0
    while True:
        end = min(end + chunk, size)
        if end >= size:
            replies.append(make_response(200, final_body or {"kind": "storage#object", "size": str(size)}))
            return replies
        replies.append(make_response(308, headers={'Range': f"bytes=0-{end - 1}"}))


def ranges(session: FakeSession) -> list[str]:
    return [s.headers['Content-Range'] for s in session.sent]


@pytest.mark.parametrize("size", [1, C - 1, C, C + 1, 3 * C, int(2.5 * C)])
def test_chunks_cover_the_source(size):
    data = bytes(i % 251 for i in range(size))
    s = FakeSession(*server(size, C))
    up = ResumableUploader(s, URI, data, size, media_type="application/octet-stream",
                           chunk_size=C, retry=NO_WAIT)
    resp = up.upload()
    assert(resp.status_code == 200)
    assert(len(s.sent) == math.ceil(size / C))
    assert(sum(len(x.data) for x in s.sent) == size)
    assert(b"".join(x.data for x in s.sent) == data)
    assert(ranges(s)[-1].endswith(f"-{size - 1}/{size}"))
    assert(all(x.method == "PUT" and x.url == URI for x in s.sent))
    assert(up.state is UploadState.COMPLETED)
    assert(up.offset == size)
    assert(up.progress == size)


def test_two_and_a_half_chunks():
    size = int(2.5 * C)
    s = FakeSession(*server(size, C))
    ResumableUploader(s, URI, b"x" * size, size, chunk_size=C, retry=NO_WAIT).upload()
    assert(ranges(s) == [f"bytes 0-{C - 1}/{size}",
                         f"bytes {C}-{2 * C - 1}/{size}",
                         f"bytes {2 * C}-{size - 1}/{size}"])
    assert(len(s.sent[2].data) == C // 2)


def test_empty_source():
    s = FakeSession(make_response(200, {"kind": "storage#object", "size": "0"}))
    progress = []
    up = ResumableUploader(s, URI, b"", 0, progress=progress.append)
    up.upload()
    assert(len(s.sent) == 1)
    assert(s.sent[0].data == b"")
    assert(s.sent[0].headers['Content-Range'] == "bytes */0")
    assert(progress == [0])
    assert(up.state is UploadState.COMPLETED)


def test_progress_strictly_increasing():
    size = 3 * C + 10
    s = FakeSession(*server(size, C))
    progress = []
    ResumableUploader(s, URI, b"p" * size, size, chunk_size=C, progress=progress.append,
                      retry=NO_WAIT).upload()
    assert(progress == [C, 2 * C, 3 * C, size])
    assert(all(a < b for a, b in zip(progress, progress[1:])))


def test_png_is_sniffed_before_sending():
    png = b"\x89PNG\r\n\x1a\n" + b"\x00" * 100
    s = FakeSession()
    up = ResumableUploader(s, URI, png, len(png))
    assert(up.media_type == "image/png")
    assert(len(s.sent) == 0)
    s.queue(make_response(200, {}))
    up.upload()
    assert(s.sent[0].headers['Content-Type'] == "image/png")


def test_given_media_type_is_kept():
    png = b"\x89PNG\r\n\x1a\n"
    up = ResumableUploader(FakeSession(), URI, png, len(png), media_type="application/x-custom")
    assert(up.media_type == "application/x-custom")


def test_non_retryable_error_stops_the_upload():
    size = 3 * C
    s = FakeSession(make_response(308, headers={'Range': f"bytes=0-{C - 1}"}),
                    make_response(403, {"error": {"code": 403, "message": "Forbidden",
                                                  "errors": [{"reason": "forbidden", "message": "Forbidden"}]}}))
    up = ResumableUploader(s, URI, b"z" * size, size, chunk_size=C, retry=NO_WAIT)
    with pytest.raises(HTTPError) as e:
        up.upload()
    assert(e.value.code == 403)
    assert(e.value.errors[0].reason == "forbidden")
    assert(len(s.sent) == 2)
    assert(up.state is UploadState.FAILED)


def test_retryable_status_is_retried():
    size = 2 * C
    s = FakeSession(make_response(503, "backend unavailable"),
                    make_response(308, headers={'Range': f"bytes=0-{C - 1}"}),
                    make_response(200, {"size": str(size)}))
    up = ResumableUploader(s, URI, b"r" * size, size, chunk_size=C, retry=NO_WAIT)
    up.upload()
    assert(ranges(s) == [f"bytes 0-{C - 1}/{size}", f"bytes 0-{C - 1}/{size}", f"bytes {C}-{size - 1}/{size}"])


def test_transport_error_is_retried_then_surfaced():
    import requests
    size = C
    s = FakeSession(requests.ConnectionError("reset"), requests.ConnectionError("reset"),
                    requests.ConnectionError("reset"))
    up = ResumableUploader(s, URI, b"t" * size, size, chunk_size=C, retry=NO_WAIT)
    with pytest.raises(TransportError):
        up.upload()
    assert(len(s.sent) == 3)
    assert(up.state is UploadState.FAILED)


def test_no_retry_surfaces_first_error():
    size = C
    s = FakeSession(make_response(500, "oops"))
    up = ResumableUploader(s, URI, b"n" * size, size, chunk_size=C, retry=RetryPolicy.none())
    with pytest.raises(HTTPError) as e:
        up.upload()
    assert(e.value.code == 500)
    assert(len(s.sent) == 1)


def test_offset_mismatch():
    size = 2 * C
    s = FakeSession(make_response(308, headers={'Range': "bytes=0-99"}))
    up = ResumableUploader(s, URI, b"m" * size, size, chunk_size=C, retry=NO_WAIT)
    with pytest.raises(ProtocolError):
        up.upload()
    assert(len(s.sent) == 1)


def test_malformed_range():
    size = 2 * C
    s = FakeSession(make_response(308, headers={'Range': "bytes 0-x"}))
    with pytest.raises(ProtocolError):
        ResumableUploader(s, URI, b"m" * size, size, chunk_size=C, retry=NO_WAIT).upload()


def test_incomplete_after_final_chunk():
    s = FakeSession(make_response(308, headers={'Range': "bytes=0-9"}))
    with pytest.raises(ProtocolError):
        ResumableUploader(s, URI, b"f" * 20, 20, chunk_size=C, retry=NO_WAIT).upload()


def test_completed_early():
    size = 2 * C
    s = FakeSession(make_response(200, {}))
    with pytest.raises(ProtocolError):
        ResumableUploader(s, URI, b"e" * size, size, chunk_size=C, retry=NO_WAIT).upload()


def test_unexpected_status():
    s = FakeSession(make_response(204))
    with pytest.raises(ProtocolError):
        ResumableUploader(s, URI, b"u", 1, retry=NO_WAIT).upload()


def test_cancel_between_chunks():
    size = 3 * C
    ctx = Context.background().with_cancel()
    progress = []

    def cancel_after(n):
        progress.append(n)
        ctx.cancel()

    s = FakeSession(*server(size, C))
    up = ResumableUploader(s, URI, b"c" * size, size, chunk_size=C, progress=cancel_after, retry=NO_WAIT)
    with pytest.raises(CanceledError):
        up.upload(ctx)
    assert(len(s.sent) == 1)
    assert(progress == [C])
    assert(up.state is UploadState.CANCELED)


def test_cancel_during_request_completes_the_chunk():
    size = 2 * C
    ctx = Context.background().with_cancel()

    def reply(sent):
        ctx.cancel()
        return make_response(308, headers={'Range': f"bytes=0-{C - 1}"})

    s = FakeSession(reply)
    up = ResumableUploader(s, URI, b"d" * size, size, chunk_size=C, retry=NO_WAIT)
    with pytest.raises(CanceledError):
        up.upload(ctx)
    assert(len(s.sent) == 1)
    assert(up.offset == C)
    assert(up.progress == C)


def test_cancel_cuts_retry_pause_short():
    ctx = Context.background().with_cancel()
    s = FakeSession(make_response(503, "backend unavailable"))
    up = ResumableUploader(s, URI, b"w" * C, C, chunk_size=C,
                           retry=RetryPolicy(max_attempts=3, initial=30.0, maximum=30.0))
    timer = threading.Timer(0.1, ctx.cancel)
    timer.start()
    start = time.monotonic()
    try:
        with pytest.raises(CanceledError):
            up.upload(ctx)
    finally:
        timer.cancel()
    assert(time.monotonic() - start < 10)
    assert(len(s.sent) == 1)
    assert(up.state is UploadState.CANCELED)


def test_expired_context():
    ctx = Context.background().with_timeout(0)
    s = FakeSession()
    up = ResumableUploader(s, URI, b"x", 1)
    with pytest.raises(DeadlineExceededError):
        up.upload(ctx)
    assert(len(s.sent) == 0)
    assert(up.state is UploadState.CANCELED)


def test_upload_only_once():
    s = FakeSession(make_response(200, {}))
    up = ResumableUploader(s, URI, b"1", 1)
    up.upload()
    with pytest.raises(UploadError):
        up.upload()


def test_file_source(tmp_path):
    p = tmp_path / "blob.bin"
    data = b"0123456789" * 1000
    p.write_bytes(data)
    s = FakeSession(make_response(200, {}))
    with open(p, "rb") as f:
        f.seek(10)
        ResumableUploader(s, URI, SizedMedia(f), len(data) - 10).upload()
    assert(s.sent[0].data == data[10:])


def test_short_file_rejected_before_sending():
    s = FakeSession()
    with pytest.raises(ValueError):
        ResumableUploader(s, URI, SizedMedia(io.BytesIO(b"a" * (C + 10)), 2 * C + 5), 2 * C + 5,
                          chunk_size=C, retry=NO_WAIT)
    assert(len(s.sent) == 0)


@pytest.mark.parametrize("args", [
    dict(uri="", size=1),
    dict(uri=URI, size=-1),
    dict(uri=URI, size=1, chunk_size=0),
    dict(uri=URI, size=10),
])
def test_bad_input(args):
    s = FakeSession()
    chunk_size = args.pop('chunk_size', C)
    with pytest.raises(ValueError):
        ResumableUploader(s, args['uri'], b"1", args['size'], chunk_size=chunk_size)
    assert(len(s.sent) == 0)


def test_retry_policy_validation():
    with pytest.raises(ValueError):
        RetryPolicy(max_attempts=0)
    assert(RetryPolicy.none().max_attempts == 1)
