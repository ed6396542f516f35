"""
Exceptions raised by the generated bindings and the upload machinery.
Bad caller input is reported with the builtin ValueError, the same as elsewhere in the package.
"""
from dataclasses import dataclass, field
from typing import List


class GoogleAPIError(Exception):
    """Root of everything raised by gapibindings."""
    pass


@dataclass
class ErrorItem():
    """
    Detailed error code and message from the Google API frontend.
    https://cloud.google.com/apis/design/errors#http_mapping
    """
    reason: str = field(default="")
    message: str = field(default="")


class HTTPError(GoogleAPIError):
    """
    Error response from the server.
    code is always populated, message and errors only when the server sent a JSON error reply.
    body is the raw response text which is often, but not always, JSON.
    """
    def __init__(self, code: int, message: str = "", body: str = "",
                 errors: List[ErrorItem]|None = None, header: dict|None = None) -> None:
        self.code = int(code)
        self.message = message or ""
        self.body = body or ""
        self.errors = list(errors) if errors else []
        self.header = dict(header) if header else {}
        super().__init__(str(self))

    def __str__(self) -> str:
        if not self.errors and not self.message:
            return f"googleapi: got HTTP response code {self.code} with body: {self.body}"
        s = f"googleapi: Error {self.code}: {self.message}"
        if not self.errors:
            return s.strip()
        if len(self.errors) == 1 and self.errors[0].message == self.message:
            return f"{s}, {self.errors[0].reason}"
        s += "\nMore details:\n"
        for e in self.errors:
            s += f"Reason: {e.reason}, Message: {e.message}\n"
        return s

    def __repr__(self) -> str:
        return f"{str(self.__class__)}:{self.code}"

    @classmethod
    def from_reply(cls, reply: dict, status: int, body: str = "", header: dict|None = None) -> "HTTPError":
        """
        Build from the 'error' member of a JSON error reply:
        {"error": {"code": 404, "message": "...", "errors": [{"reason": "...", "message": "..."}]}}
        """
        items = [ErrorItem(reason=str(e.get('reason', "")), message=str(e.get('message', "")))
                 for e in reply.get('errors', []) or [] if isinstance(e, dict)]
        code = reply.get('code', 0) or status
        return cls(code, str(reply.get('message', "")), body, items, header)


class TransportError(GoogleAPIError):
    """Connection failure, timeout or other failure below HTTP."""
    pass


class UploadError(GoogleAPIError):
    pass


class ProtocolError(UploadError):
    """
    The server broke the resumable upload protocol: unexpected status, malformed Range header,
    acknowledged offset not matching what was sent, or no Location for the session.
    """
    pass


class CanceledError(GoogleAPIError):
    """The operation's context was cancelled."""
    pass


class DeadlineExceededError(CanceledError):
    """The operation's context deadline passed."""
    pass
