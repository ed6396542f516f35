"""
Helpers shared by all the generated bindings: URL building, response checking,
partial response field selectors.
"""
from dataclasses import dataclass, field
from typing import Iterable
from urllib.parse import urljoin
import json
import logging

import requests
import uritemplate

from .errors import HTTPError

log = logging.getLogger(__name__)

VERSION = "0.5"
USER_AGENT = "gapibindings/" + VERSION

# returned by the Google uploader while a resumable transfer is not yet complete
STATUS_RESUME_INCOMPLETE = 308


@dataclass
class ServerResponse():
    """
    HTTP status and headers of the reply a resource was decoded from.
    Every resource returned by a do() carries one as .server_response
    """
    http_status_code: int = field(default=0)
    header: dict = field(default_factory=dict)

    @classmethod
    def from_response(cls, resp: requests.Response) -> "ServerResponse":
        return cls(resp.status_code, dict(resp.headers))


def combine_fields(fields: Iterable[str]) -> str:
    """
    Combine partial response selectors into the value of the 'fields' query parameter, e.g.
    combine_fields(["nextPageToken", "items(id,updated)"]) -> "nextPageToken,items(id,updated)"
    https://developers.google.com/gdata/docs/2.0/basics#PartialResponse
    """
    return ",".join(str(f) for f in fields)


def resolve_relative(base: str, rel: str) -> str:
    """
    Join a method path onto the API base path, leaving {template} braces intact.
    """
    u = urljoin(base, rel)
    return u.replace("%7B", "{").replace("%7D", "}")


def expand(url: str, params: dict) -> str:
    """
    RFC 6570 expansion of the path parameters of a URL template.
    Simple {var} expansion escapes reserved characters so an object name like 'a/b'
    becomes 'a%2Fb', {+var} leaves them alone.
    """
    return uritemplate.expand(url, {k: str(v) for k, v in params.items()})


def _body_text(resp: requests.Response) -> str:
    try:
        return resp.text
    except (requests.RequestException, UnicodeDecodeError):
        return ""


def check_response(resp: requests.Response) -> None:
    """
    Raise HTTPError if the response is not a 2xx.
    A JSON error reply populates message and errors, the code defaults to the HTTP status.
    """
    if 200 <= resp.status_code <= 299:
        return
    body = _body_text(resp)
    header = dict(resp.headers)
    try:
        reply = json.loads(body) if body else None
    except ValueError:
        reply = None
    if isinstance(reply, dict) and isinstance(reply.get('error', None), dict):
        raise HTTPError.from_reply(reply['error'], resp.status_code, body, header)
    raise HTTPError(resp.status_code, body=body, header=header)


def check_media_response(resp: requests.Response) -> None:
    """
    As check_response but for media downloads, where the body is never a JSON error reply.
    Only a small prefix of the body is read so a failed large download is not slurped.
    """
    if 200 <= resp.status_code <= 299:
        return
    body = ""
    try:
        body = next(resp.iter_content(1 << 10), b"").decode("utf-8", errors="replace")
    except requests.RequestException as e:
        log.debug(f"unable to read media error body: {str(e)}")
    raise HTTPError(resp.status_code, body=body, header=dict(resp.headers))


def is_not_modified(err: BaseException) -> bool:
    """
    True if err reports a 304 Not Modified, as returned for a GET with a matching If-None-Match.
    """
    return isinstance(err, HTTPError) and err.code == 304
