"""
Runtime for the generated call builders.

Each API method is a Call subclass that accumulates its optional parameters through
chained setters and terminates with do():
    blog = service.blogs.get("1234").maxPosts(5).fields("id", "posts").do()
Setters mirror the API parameter names so the reference docs read straight across.
"""
from typing import Callable, Iterator, List, Self, Tuple
import datetime
import json
import logging

import requests

from .context import Context
from .errors import ProtocolError, TransportError
from .googleapi import (USER_AGENT, ServerResponse, check_media_response, check_response,
                        combine_fields, expand, resolve_relative)
from .media import (DEFAULT_CHUNK_SIZE, SizedMedia, detect_media_type, multipart_related,
                    round_chunk_size)
from .resources import GoogleAPIResourceBase
from .resumable import ResumableUploader, RetryPolicy

log = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


class ApiService():
    """
    Base of the generated Service classes, one per API.
    session is expected to be a requests.Session carrying the credentials, typically
    google.auth.transport.requests.AuthorizedSession as handed out by gapibindings.access.
    """
    _root_url = "https://www.googleapis.com/"
    _service_path = ""

    def __init__(self, session: requests.Session, root_url: str|None = None,
                 user_agent: str = "", api_key: str|None = None) -> None:
        if session is None:
            raise ValueError("A session is required to build a service")
        self.session = session
        root = root_url or self._root_url
        self.root_url = root if root.endswith("/") else root + "/"
        self.user_agent_fragment = user_agent
        self.api_key = api_key

    def __repr__(self) -> str:
        return f"{str(self.__class__)}:{self.base_path}"

    @property
    def base_path(self) -> str:
        return self.root_url + self._service_path

    @property
    def upload_path(self) -> str:
        return self.root_url + "upload/" + self._service_path

    @property
    def user_agent(self) -> str:
        if not self.user_agent_fragment:
            return USER_AGENT
        return USER_AGENT + " " + self.user_agent_fragment


class ResourceService():
    """Groups the calls of one API resource, e.g. service.objects"""
    def __init__(self, service: ApiService) -> None:
        self._s = service


class Call():
    """
    Base call builder.  Subclasses set the class level method description.
    """
    _method_id = ""
    _http_method = "GET"
    _path = ""
    _response = None

    def __init__(self, service: ApiService, path_params: dict|None = None,
                 body: GoogleAPIResourceBase|None = None) -> None:
        if service is None:
            raise ValueError(f"{self._method_id} requires a service")
        self._s = service
        self._path_params = dict(path_params) if path_params else {}
        for k, v in self._path_params.items():
            if v is None or v == "":
                raise ValueError(f"{self._method_id}: path parameter {k} must be set")
        self._params = {}
        self._headers = {}
        self._body = body
        self._ctx = None

    def __repr__(self) -> str:
        return f"{str(self.__class__)}:{self._method_id}"

    @staticmethod
    def _format(value) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, datetime.datetime):
            return value.isoformat() if value.tzinfo else value.isoformat() + "Z"
        return str(value)

    def _check(self, name: str, value, choices: Tuple[str, ...]|None) -> None:
        if choices and str(value) not in choices:
            raise ValueError(f"Invalid {self._method_id}() {name}: {value}, expected one of {', '.join(choices)}")

    def _set(self, name: str, value, choices: Tuple[str, ...]|None = None) -> Self:
        self._check(name, value, choices)
        self._params[name] = [self._format(value)]
        return self

    def _add(self, name: str, values, choices: Tuple[str, ...]|None = None) -> Self:
        """Repeated parameter, sent once per value."""
        for v in values:
            self._check(name, v, choices)
        self._params[name] = [self._format(v) for v in values]
        return self

    def _header(self, name: str, value: str) -> Self:
        self._headers[name] = str(value)
        return self

    def fields(self, *selectors: str) -> Self:
        """
        Partial response, only the listed fields are returned, e.g.
        .fields("nextPageToken", "items(id,updated)")
        https://developers.google.com/gdata/docs/2.0/basics#PartialResponse
        """
        if not selectors:
            raise ValueError(f"{self.__class__.__name__}::fields() requires at least one selector")
        return self._set("fields", combine_fields(selectors))

    def context(self, ctx: Context) -> Self:
        """
        Context to check before sending and to bound the request time.
        """
        self._ctx = ctx
        return self

    def _url(self, base: str|None = None) -> str:
        return expand(resolve_relative(base or self._s.base_path, self._path), self._path_params)

    def _query(self, alt: str = "json", upload_type: str = "") -> List[Tuple[str, str]]:
        q = [("alt", alt)]
        for k, vals in self._params.items():
            q.extend((k, v) for v in vals)
        if upload_type:
            q.append(("uploadType", upload_type))
        if self._s.api_key:
            q.append(("key", self._s.api_key))
        # stable, so repeated values keep their order
        return sorted(q, key=lambda kv: kv[0])

    def _json_body(self) -> bytes|None:
        if self._body is None:
            return None
        return json.dumps(self._body.trim()).encode("utf-8")

    def _request(self, method: str, url: str, query: List[Tuple[str, str]],
                 data: bytes|None = None, headers: dict|None = None, stream: bool = False) -> requests.Response:
        ctx = self._ctx if self._ctx is not None else Context.background()
        ctx.check()
        h = dict(self._headers)
        h.update(headers or {})
        h['User-Agent'] = self._s.user_agent
        log.debug(f"{method} {url}")
        try:
            return self._s.session.request(method, url, params=query, data=data, headers=h,
                                           timeout=ctx.remaining(), stream=stream)
        except requests.RequestException as e:
            raise TransportError(f"{self._method_id}: {str(e)}") from e

    def _do_request(self, alt: str = "json", stream: bool = False) -> requests.Response:
        body = self._json_body()
        headers = {'Content-Type': JSON_CONTENT_TYPE} if body is not None else {}
        return self._request(self._http_method, self._url(), self._query(alt), body, headers, stream)

    def _decode(self, resp: requests.Response):
        if self._response is None:
            return None
        data = resp.json() if resp.content else {}
        ret = self._response.from_base(data)
        ret.server_response = ServerResponse.from_response(resp)
        return ret

    def doHeader(self) -> Tuple[object, dict]:
        """
        Execute the call returning the decoded response and the response headers.
        Any non 2xx status raises HTTPError, which also carries the headers.
        """
        resp = self._do_request("json")
        check_response(resp)
        return self._decode(resp), dict(resp.headers)

    def do(self):
        """
        Execute the call returning the decoded response resource, None for methods without one.
        Raises HTTPError for any non 2xx status (including 304, see googleapi.is_not_modified),
        TransportError if the server couldn't be reached and CanceledError if the context is done.
        """
        return self.doHeader()[0]


class PagedCall(Call):
    """
    Calls on list methods that page with pageToken/nextPageToken.
    """
    def pages(self) -> Iterator:
        """
        Iterate over every page of results starting at the current pageToken.
        The call's own pageToken is restored when done.
        """
        original = self._params.get("pageToken", None)
        try:
            while True:
                page = self.do()
                yield page
                token = getattr(page, "nextPageToken", None)
                if not token:
                    break
                self._set("pageToken", token)
        finally:
            if original is None:
                self._params.pop("pageToken", None)
            else:
                self._params["pageToken"] = original


class MediaDownloadCall(Call):
    def download(self) -> requests.Response:
        """
        Fetch the media (alt=media) rather than the metadata.
        The response is streamed, read it with iter_content() and close it when done.
        """
        resp = self._do_request("media", stream=True)
        try:
            check_media_response(resp)
        except Exception:
            resp.close()
            raise
        return resp


class MediaUploadCall(Call):
    """
    Calls that can upload media along with the metadata body.
    media() sends everything in a single request, resumableMedia() in chunks
    that survive transient failures.
    """
    def __init__(self, service: ApiService, path_params: dict|None = None,
                 body: GoogleAPIResourceBase|None = None) -> None:
        super().__init__(service, path_params, body)
        self._media = None
        self._media_type = ""
        self._resumable = None
        self._chunk_size = DEFAULT_CHUNK_SIZE
        self._retry = None
        self._progress = None

    def media(self, src: bytes|SizedMedia, media_type: str = "") -> Self:
        """
        Upload src in the same request, multipart/related with the metadata when there is a body.
        The media type is sniffed from the content if not given.
        """
        self._media = src if isinstance(src, SizedMedia) else SizedMedia(src)
        self._media_type = media_type or detect_media_type(self._media)
        self._resumable = None
        return self

    def resumableMedia(self, src: bytes|SizedMedia, size: int, media_type: str = "",
                       chunk_size: int = DEFAULT_CHUNK_SIZE, retry: RetryPolicy|None = None) -> Self:
        """
        Upload size bytes of src as a resumable upload.  chunk_size is rounded up to a
        multiple of 256KiB.  The media type is sniffed from the content if not given.
        """
        if size < 0:
            raise ValueError(f"resumableMedia() size must be >= 0 not: {size}")
        if chunk_size <= 0:
            raise ValueError(f"resumableMedia() chunk_size must be > 0 not: {chunk_size}")
        self._resumable = src if isinstance(src, SizedMedia) else SizedMedia(src, size)
        self._size = int(size)
        self._media_type = media_type or detect_media_type(self._resumable)
        self._chunk_size = round_chunk_size(chunk_size)
        self._retry = retry
        self._media = None
        return self

    def progressUpdater(self, cb: Callable[[int], None]) -> Self:
        """
        Called with the cumulative number of bytes uploaded after each chunk of a resumable upload.
        """
        self._progress = cb
        return self

    def _do_request(self, alt: str = "json", stream: bool = False) -> requests.Response:
        if self._media is None and self._resumable is None:
            return super()._do_request(alt, stream)
        url = self._url(self._s.upload_path)
        body = self._json_body()
        if self._media is not None:
            data = self._media.read_all()
            if body is None:
                return self._request(self._http_method, url, self._query(alt, "media"), data,
                                     {'Content-Type': self._media_type}, stream)
            payload, ctype = multipart_related(body, data, self._media_type)
            return self._request(self._http_method, url, self._query(alt, "multipart"), payload,
                                 {'Content-Type': ctype}, stream)
        headers = {
            'X-Upload-Content-Type': self._media_type,
            'X-Upload-Content-Length': str(self._size),
        }
        if body is not None:
            headers['Content-Type'] = JSON_CONTENT_TYPE
        resp = self._request(self._http_method, url, self._query(alt, "resumable"), body or b"", headers)
        check_response(resp)
        location = resp.headers.get('Location', None)
        if not location:
            raise ProtocolError(f"{self._method_id}: no Location for the resumable upload session")
        log.debug(f"{self._method_id}: resumable session {location}")
        uploader = ResumableUploader(self._s.session, location, self._resumable, self._size,
                                     media_type=self._media_type, chunk_size=self._chunk_size,
                                     progress=self._progress, user_agent=self._s.user_agent,
                                     retry=self._retry)
        return uploader.upload(self._ctx)
