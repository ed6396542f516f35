"""
Media handling for uploads: content type sniffing, random access sources and
multipart/related bodies.
"""
from typing import BinaryIO, Tuple
import os
import secrets

MIN_CHUNK_SIZE = 256 * 1024
DEFAULT_CHUNK_SIZE = 8 * 1024 * 1024
SNIFF_LEN = 512

DEFAULT_MEDIA_TYPE = "application/octet-stream"

# leading whitespace allowed before these
_HTML_TAGS = [b"<!DOCTYPE HTML", b"<HTML", b"<HEAD", b"<SCRIPT", b"<IFRAME", b"<H1", b"<DIV",
              b"<FONT", b"<TABLE", b"<A", b"<STYLE", b"<TITLE", b"<B", b"<BODY", b"<BR", b"<P", b"<!--"]

# exact prefix matches, first match wins
_SIGNATURES = [
    (b"%PDF-", "application/pdf"),
    (b"%!PS-Adobe-", "application/postscript"),
    (b"\xFE\xFF", "text/plain; charset=utf-16be"),
    (b"\xFF\xFE", "text/plain; charset=utf-16le"),
    (b"\xEF\xBB\xBF", "text/plain; charset=utf-8"),
    (b"\x00\x00\x01\x00", "image/x-icon"),
    (b"\x00\x00\x02\x00", "image/x-icon"),
    (b"BM", "image/bmp"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"\x89PNG\x0D\x0A\x1A\x0A", "image/png"),
    (b"\xFF\xD8\xFF", "image/jpeg"),
    (b"ID3", "audio/mpeg"),
    (b"OggS\x00", "application/ogg"),
    (b"MThd\x00\x00\x00\x06", "audio/midi"),
    (b"\x1A\x45\xDF\xA3", "video/webm"),
    (b"\x00\x01\x00\x00", "font/ttf"),
    (b"OTTO", "font/otf"),
    (b"ttcf", "font/collection"),
    (b"wOFF", "font/woff"),
    (b"wOF2", "font/woff2"),
    (b"\x1F\x8B\x08", "application/x-gzip"),
    (b"PK\x03\x04", "application/zip"),
    (b"Rar!\x1A\x07\x00", "application/x-rar-compressed"),
    (b"Rar!\x1A\x07\x01\x00", "application/x-rar-compressed"),
    (b"\x00asm", "application/wasm"),
]

# RIFF and FORM containers, the form type lives at bytes 8:12
_CONTAINERS = [
    (b"RIFF", b"WEBP", "image/webp"),
    (b"RIFF", b"WAVE", "audio/wave"),
    (b"RIFF", b"AVI ", "video/avi"),
    (b"FORM", b"AIFF", "audio/aiff"),
]

_BINARY = set(range(0x00, 0x09)) | {0x0B} | set(range(0x0E, 0x1B)) | set(range(0x1C, 0x20))
_WHITESPACE = b"\t\n\x0c\r "


def _is_mp4(data: bytes) -> bool:
    if len(data) < 12:
        return False
    box = int.from_bytes(data[:4], "big")
    if box % 4 != 0 or len(data) < box or data[4:8] != b"ftyp":
        return False
    for i in range(8, box, 4):
        if i == 12:
            # skip the minor version
            continue
        if data[i:i + 3] == b"mp4":
            return True
    return False


def detect_content_type(data: bytes) -> str:
    """
    Sniff the media type of some content from its leading bytes.
    Implements the signature table from https://mimesniff.spec.whatwg.org/ and never fails,
    unrecognized content is 'text/plain; charset=utf-8' or 'application/octet-stream'
    depending on whether it looks like text.
    """
    data = bytes(data[:SNIFF_LEN])
    stripped = data.lstrip(_WHITESPACE)
    upper = stripped.upper()
    for tag in _HTML_TAGS:
        if upper.startswith(tag) and len(stripped) > len(tag) and stripped[len(tag)] in b" >":
            return "text/html; charset=utf-8"
    if stripped.startswith(b"<?xml"):
        return "text/xml; charset=utf-8"
    for sig, mtype in _SIGNATURES:
        if data.startswith(sig):
            return mtype
    for head, form, mtype in _CONTAINERS:
        if data.startswith(head) and data[8:12] == form:
            return mtype
    if _is_mp4(data):
        return "video/mp4"
    if any(b in _BINARY for b in data):
        return DEFAULT_MEDIA_TYPE
    return "text/plain; charset=utf-8"


def round_chunk_size(size: int) -> int:
    """
    Smallest multiple of 256KiB >= size as required by Cloud Storage for every chunk but the last.
    0 and negative values are returned unmodified.
    """
    if size <= 0 or size % MIN_CHUNK_SIZE == 0:
        return size
    return (size // MIN_CHUNK_SIZE + 1) * MIN_CHUNK_SIZE


class SizedMedia():
    """
    Random access, fixed size byte source for uploads.
    Wraps bytes (or anything supporting the buffer protocol) or a seekable binary file.
    For a file the size defaults to what's left from the current position, reads are relative to it.
    """
    def __init__(self, src: bytes|bytearray|memoryview|BinaryIO, size: int|None = None) -> None:
        if isinstance(src, (bytes, bytearray, memoryview)):
            self._data = memoryview(src)
            self._file = None
            self._base = 0
            self._size = len(self._data) if size is None else int(size)
            if self._size > len(self._data):
                raise ValueError(f"SizedMedia size {self._size} larger than the {len(self._data)} bytes available")
        elif hasattr(src, 'read') and hasattr(src, 'seek'):
            self._data = None
            self._file = src
            self._base = src.tell()
            end = src.seek(0, os.SEEK_END)
            src.seek(self._base)
            available = end - self._base
            self._size = available if size is None else int(size)
            if self._size > available:
                raise ValueError(f"SizedMedia size {self._size} larger than the {available} bytes left in the file")
        else:
            raise ValueError(f"SizedMedia source must be bytes or a seekable binary file not: {type(src)}")
        if self._size < 0:
            raise ValueError(f"SizedMedia size must be >= 0 not: {self._size}")

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{str(self.__class__)}:{self._size}"

    @property
    def size(self) -> int:
        return self._size

    def read_at(self, offset: int, n: int) -> bytes:
        """
        Up to n bytes from offset, short only at the end of the source.
        """
        if offset < 0 or n < 0:
            raise ValueError(f"SizedMedia::read_at() offset and length must be >= 0: {offset}, {n}")
        n = max(0, min(n, self._size - offset))
        if n == 0:
            return b""
        if self._data is not None:
            return bytes(self._data[offset:offset + n])
        self._file.seek(self._base + offset)
        buf = self._file.read(n)
        if len(buf) != n:
            raise ValueError(f"SizedMedia source ended early: wanted {n} bytes at {offset} got {len(buf)}")
        return buf

    def read_all(self) -> bytes:
        return self.read_at(0, self._size)


def detect_media_type(media: SizedMedia) -> str:
    """
    Sniff the type of a random access source without disturbing it.
    Empty content is 'application/octet-stream'.
    """
    if media.size == 0:
        return DEFAULT_MEDIA_TYPE
    return detect_content_type(media.read_at(0, SNIFF_LEN))


def new_boundary() -> str:
    return secrets.token_hex(16)


def multipart_related(body: bytes, media: bytes, media_type: str,
                      boundary: str|None = None) -> Tuple[bytes, str]:
    """
    multipart/related payload for a metadata+media upload, JSON metadata part first.
    Returns the payload and the Content-Type header for it.
    https://cloud.google.com/storage/docs/uploading-objects#multipart-upload
    """
    b = (boundary or new_boundary()).encode("ascii")
    crlf = b"\r\n"
    payload = (b"--" + b + crlf
               + b"Content-Type: application/json; charset=utf-8" + crlf + crlf
               + body + crlf
               + b"--" + b + crlf
               + b"Content-Type: " + media_type.encode("utf-8") + crlf + crlf
               + media + crlf
               + b"--" + b + b"--" + crlf)
    return payload, f"multipart/related; boundary={b.decode('ascii')}"
