"""
Resumable upload of a fixed size source to a session URI obtained from an initiating request.
https://cloud.google.com/storage/docs/performing-resumable-uploads

The source is sent in sequential chunks, each a PUT with a Content-Range header.  The server
answers 308 with a Range header acknowledging what it has so far, until the final chunk which
gets a 200/201 carrying the created resource.  Only one request is ever in flight.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Self
import logging
import re

import requests
from tenacity import Retrying, RetryCallState, retry_if_exception, stop_after_attempt, wait_exponential

from .context import Context
from .errors import CanceledError, HTTPError, ProtocolError, TransportError, UploadError
from .googleapi import STATUS_RESUME_INCOMPLETE, USER_AGENT, check_response
from .media import DEFAULT_CHUNK_SIZE, SizedMedia, detect_media_type

log = logging.getLogger(__name__)

# $1 is the index of the last byte the server holds
_RANGE_RE = re.compile(r"^bytes=0-(\d+)$")

RETRYABLE_STATUS = (429, 500, 502, 503, 504)


def _retryable(e: BaseException) -> bool:
    if isinstance(e, TransportError):
        return True
    return isinstance(e, HTTPError) and e.code in RETRYABLE_STATUS


@dataclass
class RetryPolicy():
    """
    Bounded exponential backoff applied to each chunk.
    Waits initial, initial*multiplier, initial*multiplier^2... seconds capped at maximum,
    for at most max_attempts sends of the same chunk.
    """
    max_attempts: int = field(default=3)
    initial: float = field(default=1.0)
    maximum: float = field(default=30.0)
    multiplier: float = field(default=2.0)

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"RetryPolicy max_attempts must be >= 1 not: {self.max_attempts}")

    @classmethod
    def none(cls) -> Self:
        """Single attempt, the first failure is surfaced."""
        return cls(max_attempts=1, initial=0.0, maximum=0.0)


class UploadState(Enum):
    NOT_STARTED = "not_started"
    UPLOADING = "uploading"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELED = "canceled"


class ResumableUploader():
    """
    Drives a single upload session.  The media type is sniffed from the source at construction
    if not given, so it is known before any network activity.
    progress, if given, is called with the cumulative number of bytes the server has acknowledged
    after every chunk.  It runs on the upload path so keep it cheap.
    """
    def __init__(self, session: requests.Session, uri: str,
                 media: SizedMedia|bytes|bytearray, size: int,
                 media_type: str = "",
                 chunk_size: int = DEFAULT_CHUNK_SIZE,
                 progress: Callable[[int], None]|None = None,
                 user_agent: str = USER_AGENT,
                 retry: RetryPolicy|None = None) -> None:
        if not uri:
            raise ValueError("ResumableUploader requires a session URI")
        if size is None or size < 0:
            raise ValueError(f"ResumableUploader size must be >= 0 not: {size}")
        if chunk_size <= 0:
            raise ValueError(f"ResumableUploader chunk_size must be > 0 not: {chunk_size}")
        if session is None:
            raise ValueError("ResumableUploader requires a session")
        self._session = session
        self._uri = uri
        if isinstance(media, SizedMedia):
            if media.size < size:
                raise ValueError(f"ResumableUploader size {size} larger than the media: {media.size}")
            self._media = media
        else:
            self._media = SizedMedia(media, size)
        self._size = int(size)
        self._chunk_size = int(chunk_size)
        self._progress_cb = progress
        self._user_agent = user_agent
        self._retry = retry if retry is not None else RetryPolicy()
        self._media_type = media_type or detect_media_type(self._media)
        self._offset = 0
        self._progress = 0
        self._reported = False
        self._state = UploadState.NOT_STARTED

    def __repr__(self) -> str:
        return f"{str(self.__class__)}:{self._state.value}:{self._offset}/{self._size}"

    @property
    def uri(self) -> str:
        return self._uri

    @property
    def size(self) -> int:
        return self._size

    @property
    def media_type(self) -> str:
        return self._media_type

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    @property
    def state(self) -> UploadState:
        return self._state

    @property
    def offset(self) -> int:
        """Offset of the next byte to send."""
        return self._offset

    @property
    def progress(self) -> int:
        """Bytes acknowledged by the server so far."""
        return self._progress

    def upload(self, ctx: Context|None = None) -> requests.Response:
        """
        Send the whole source and return the final response, whose body is the resource JSON.
        The context is checked before every chunk and cuts retry pauses short, a chunk already
        sent is never interrupted.
        Raises CanceledError, HTTPError, TransportError or ProtocolError and the uploader is
        left FAILED or CANCELED.
        """
        if self._state is not UploadState.NOT_STARTED:
            raise UploadError(f"upload already {self._state.value}")
        ctx = ctx if ctx is not None else Context.background()
        self._state = UploadState.UPLOADING
        try:
            resp = self._transfer(ctx)
        except CanceledError:
            self._state = UploadState.CANCELED
            raise
        except Exception:
            self._state = UploadState.FAILED
            raise
        self._state = UploadState.COMPLETED
        return resp

    def _transfer(self, ctx: Context) -> requests.Response:
        while True:
            ctx.check()
            n = min(self._chunk_size, self._size - self._offset)
            final = self._offset + n >= self._size
            data = self._media.read_at(self._offset, n)
            resp = self._send_chunk(ctx, self._offset, data)
            if resp.status_code == STATUS_RESUME_INCOMPLETE:
                acked = self._acknowledged(resp)
                if final:
                    raise ProtocolError(f"server acknowledged {acked} of {self._size} bytes after the final chunk")
                if acked != self._offset + n:
                    raise ProtocolError(f"server acknowledged {acked} bytes, expected {self._offset + n}")
                self._offset = acked
                self._report(acked)
                continue
            if resp.status_code in (200, 201):
                if not final:
                    raise ProtocolError(f"upload completed after {self._offset + n} of {self._size} bytes")
                self._offset = self._size
                self._report(self._size)
                return resp
            check_response(resp)
            raise ProtocolError(f"unexpected status {resp.status_code} during resumable upload")

    def _content_range(self, offset: int, n: int) -> str:
        if n == 0:
            return f"bytes */{self._size}"
        return f"bytes {offset}-{offset + n - 1}/{self._size}"

    def _send_chunk(self, ctx: Context, offset: int, data: bytes) -> requests.Response:
        headers = {
            'Content-Range': self._content_range(offset, len(data)),
            'Content-Type': self._media_type,
            'User-Agent': self._user_agent,
        }
        retrying = Retrying(stop=stop_after_attempt(self._retry.max_attempts),
                            wait=wait_exponential(multiplier=self._retry.initial,
                                                  exp_base=self._retry.multiplier,
                                                  max=self._retry.maximum),
                            retry=retry_if_exception(_retryable),
                            before_sleep=self._before_sleep,
                            sleep=ctx.sleep,
                            reraise=True)
        return retrying(self._put, ctx, headers, data)

    def _put(self, ctx: Context, headers: dict, data: bytes) -> requests.Response:
        ctx.check()
        log.debug(f"PUT {self._uri} {headers['Content-Range']}")
        try:
            resp = self._session.put(self._uri, data=data, headers=headers, timeout=ctx.remaining())
        except requests.RequestException as e:
            raise TransportError(f"upload chunk {headers['Content-Range']} failed: {str(e)}") from e
        if resp.status_code in RETRYABLE_STATUS:
            check_response(resp)
        return resp

    def _before_sleep(self, state: RetryCallState) -> None:
        e = state.outcome.exception() if state.outcome else None
        log.warning(f"retrying upload chunk at offset {self._offset} "
                    f"(attempt {state.attempt_number} of {self._retry.max_attempts}): {str(e)}")

    def _acknowledged(self, resp: requests.Response) -> int:
        """Bytes held by the server per the Range header of a 308, 0 if there is none."""
        r = resp.headers.get('Range', None)
        if r is None:
            return 0
        m = _RANGE_RE.match(r.strip())
        if not m:
            raise ProtocolError(f"malformed Range header in resumable upload response: {r}")
        return int(m.group(1)) + 1

    def _report(self, n: int) -> None:
        if self._reported and n == self._progress:
            return
        self._progress = n
        self._reported = True
        if self._progress_cb is not None:
            self._progress_cb(n)
