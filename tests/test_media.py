import io

import pytest

from gapibindings.media import (DEFAULT_MEDIA_TYPE, MIN_CHUNK_SIZE, SizedMedia, detect_content_type,
                                detect_media_type, multipart_related, round_chunk_size)


@pytest.mark.parametrize("data, expected", [
    (b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR", "image/png"),
    (b"\xff\xd8\xff\xe0\x00\x10JFIF", "image/jpeg"),
    (b"GIF89a\x01\x00", "image/gif"),
    (b"%PDF-1.7\n", "application/pdf"),
    (b"PK\x03\x04\x14\x00", "application/zip"),
    (b"RIFF\x24\x00\x00\x00WAVEfmt ", "audio/wave"),
    (b"\x00\x00\x00\x18ftypmp42\x00\x00\x00\x00mp42isom", "video/mp4"),
    (b"  <!DOCTYPE html>\n<html>", "text/html; charset=utf-8"),
    (b"<html><body>", "text/html; charset=utf-8"),
    (b"<?xml version='1.0'?>", "text/xml; charset=utf-8"),
    (b"hello, world\n", "text/plain; charset=utf-8"),
    (b"\x00\x01\x02\x03binary", DEFAULT_MEDIA_TYPE),
])
def test_detect_content_type(data, expected):
    assert(detect_content_type(data) == expected)


def test_html_tag_needs_terminator():
    # <b followed by a letter is not the <b> tag
    assert(detect_content_type(b"<bogus") == "text/plain; charset=utf-8")


def test_round_chunk_size():
    assert(round_chunk_size(1) == MIN_CHUNK_SIZE)
    assert(round_chunk_size(MIN_CHUNK_SIZE) == MIN_CHUNK_SIZE)
    assert(round_chunk_size(MIN_CHUNK_SIZE + 1) == 2 * MIN_CHUNK_SIZE)
    assert(round_chunk_size(0) == 0)


def test_sized_media_bytes():
    m = SizedMedia(b"abcdef", 4)
    assert(len(m) == 4)
    assert(m.read_at(2, 10) == b"cd")
    assert(m.read_at(4, 1) == b"")
    assert(m.read_all() == b"abcd")


def test_sized_media_file_relative_to_position():
    f = io.BytesIO(b"headerPAYLOAD")
    f.seek(6)
    m = SizedMedia(f)
    assert(m.size == 7)
    assert(m.read_at(0, 3) == b"PAY")
    assert(m.read_all() == b"PAYLOAD")


def test_sized_media_bad_input():
    with pytest.raises(ValueError):
        SizedMedia("not bytes")
    with pytest.raises(ValueError):
        SizedMedia(b"abc", 4)
    with pytest.raises(ValueError):
        SizedMedia(b"abc").read_at(-1, 1)


def test_sized_media_short_file():
    with pytest.raises(ValueError):
        SizedMedia(io.BytesIO(b"abc"), 10)
    f = io.BytesIO(b"0123456789")
    f.seek(4)
    with pytest.raises(ValueError):
        SizedMedia(f, 7)
    assert(f.tell() == 4)
    assert(SizedMedia(f, 6).read_all() == b"456789")


def test_detect_media_type_empty():
    assert(detect_media_type(SizedMedia(b"")) == DEFAULT_MEDIA_TYPE)


def test_multipart_related():
    payload, ctype = multipart_related(b'{"name":"o"}', b"DATA", "text/plain", boundary="B0UND")
    assert(ctype == "multipart/related; boundary=B0UND")
    assert(payload == (b"--B0UND\r\n"
                       b"Content-Type: application/json; charset=utf-8\r\n\r\n"
                       b'{"name":"o"}\r\n'
                       b"--B0UND\r\n"
                       b"Content-Type: text/plain\r\n\r\n"
                       b"DATA\r\n"
                       b"--B0UND--\r\n"))


def test_random_boundary():
    _, a = multipart_related(b"{}", b"", "text/plain")
    _, b = multipart_related(b"{}", b"", "text/plain")
    assert(a != b)
