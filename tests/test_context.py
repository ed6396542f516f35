import threading
import time

import pytest

from gapibindings.context import Context
from gapibindings.errors import CanceledError, DeadlineExceededError


def test_background():
    ctx = Context.background()
    assert(not ctx.done)
    assert(ctx.error() is None)
    assert(ctx.remaining() is None)
    ctx.check()


def test_cancel_propagates_to_children():
    parent = Context.background().with_cancel()
    child = parent.with_cancel()
    parent.cancel()
    assert(child.cancelled)
    with pytest.raises(CanceledError):
        child.check()


def test_child_cancel_leaves_parent():
    parent = Context.background().with_cancel()
    child = parent.with_cancel()
    child.cancel()
    assert(not parent.done)


def test_deadline_inherited():
    parent = Context.background().with_timeout(5)
    child = parent.with_timeout(60)
    assert(child.deadline == parent.deadline)
    assert(0 < child.remaining() <= 5)


def test_expired():
    ctx = Context.background().with_timeout(0.01)
    time.sleep(0.02)
    assert(ctx.expired)
    assert(ctx.remaining() == 0.0)
    assert(isinstance(ctx.error(), DeadlineExceededError))


def test_cancel_wins_over_deadline():
    ctx = Context.background().with_timeout(0)
    ctx.cancel()
    err = ctx.error()
    assert(isinstance(err, CanceledError) and not isinstance(err, DeadlineExceededError))


def test_negative_timeout():
    with pytest.raises(ValueError):
        Context.background().with_timeout(-1)


def test_sleep_runs_out():
    ctx = Context.background().with_cancel()
    start = time.monotonic()
    ctx.sleep(0.05)
    assert(time.monotonic() - start >= 0.04)


def test_sleep_ends_on_parent_cancel():
    parent = Context.background().with_cancel()
    child = parent.with_cancel()
    timer = threading.Timer(0.05, parent.cancel)
    timer.start()
    start = time.monotonic()
    with pytest.raises(CanceledError):
        child.sleep(30)
    assert(time.monotonic() - start < 10)


def test_sleep_bounded_by_deadline():
    ctx = Context.background().with_timeout(0.05)
    with pytest.raises(DeadlineExceededError):
        ctx.sleep(30)


def test_child_of_cancelled_parent():
    parent = Context.background().with_cancel()
    parent.cancel()
    with pytest.raises(CanceledError):
        parent.with_cancel().sleep(30)
