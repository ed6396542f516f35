"""
Cooperative cancellation for calls and uploads.
A Context is checked at well defined points (before a request is sent, between upload chunks),
it never interrupts a request that is already in flight.
Typical use:
    ctx = Context.background().with_timeout(30)
    obj = service.objects.get("bucket", "name").context(ctx).do()
"""
import threading
import time
import weakref
from typing import Self

from .errors import CanceledError, DeadlineExceededError


class Context():
    def __init__(self, parent: Self|None = None, deadline: float|None = None) -> None:
        self._parent = parent
        self._event = threading.Event()
        self._children = weakref.WeakSet()
        self._deadline = deadline
        if parent is not None:
            parent._children.add(self)
            if parent.cancelled:
                self._event.set()
            if parent.deadline is not None and (self._deadline is None or parent.deadline < self._deadline):
                self._deadline = parent.deadline

    def __repr__(self) -> str:
        return f"{str(self.__class__)}:{'done' if self.done else 'active'}"

    @classmethod
    def background(cls) -> Self:
        """Root context, never cancelled and without deadline."""
        return cls()

    def with_cancel(self) -> Self:
        return Context(self)

    def with_timeout(self, seconds: float) -> Self:
        """
        Child context that expires after the given number of seconds.
        """
        if seconds < 0:
            raise ValueError(f"Context::with_timeout() seconds must be >= 0 not: {seconds}")
        return Context(self, time.monotonic() + seconds)

    @property
    def deadline(self) -> float|None:
        """Deadline as a time.monotonic() value or None."""
        return self._deadline

    def cancel(self) -> None:
        """Cancel this context and every context derived from it."""
        self._event.set()
        for c in list(self._children):
            c.cancel()

    @property
    def cancelled(self) -> bool:
        if self._event.is_set():
            return True
        return self._parent is not None and self._parent.cancelled

    @property
    def expired(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline

    @property
    def done(self) -> bool:
        return self.cancelled or self.expired

    def error(self) -> CanceledError|None:
        """
        The error to surface for a done context, None while still active.
        Explicit cancellation wins over an expired deadline.
        """
        if self.cancelled:
            return CanceledError("context canceled")
        if self.expired:
            return DeadlineExceededError("context deadline exceeded")
        return None

    def check(self) -> None:
        """Raise if the context is done."""
        err = self.error()
        if err is not None:
            raise err

    def sleep(self, seconds: float) -> None:
        """
        Wait the given number of seconds, returning early by raising once the context is done.
        """
        timeout = seconds
        left = self.remaining()
        if left is not None:
            timeout = min(timeout, left)
        self._event.wait(max(0.0, timeout))
        self.check()

    def remaining(self) -> float|None:
        """
        Seconds left until the deadline, None if there is no deadline.
        Useful as a per-request timeout.
        """
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())
