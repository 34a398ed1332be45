import threading
import time

import pytest

from dining.errors import Interrupted
from dining.forks import ForkSet


def wait_until(predicate, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return False


def test_acquire_and_release_track_holder():
    forks = ForkSet(3)
    assert forks.all_free()

    forks.acquire(1, holder=0)
    assert forks.is_held(1)
    assert forks[1].held_by == 0
    assert forks.snapshot() == {"held": {1: 0}, "waiting": {}}

    forks.release(1)
    assert not forks.is_held(1)
    assert forks[1].held_by is None
    assert forks.all_free()


def test_second_acquirer_blocks_until_release():
    forks = ForkSet(2)
    forks.acquire(0, holder=0)
    acquired = threading.Event()

    def contender():
        forks.acquire(0, holder=1)
        acquired.set()

    thread = threading.Thread(target=contender)
    thread.start()
    assert wait_until(lambda: forks.snapshot()["waiting"] == {1: 0})
    assert not acquired.is_set()

    forks.release(0)
    thread.join(timeout=2)
    assert acquired.is_set()
    assert forks[0].held_by == 1
    forks.release(0)


def test_disjoint_forks_do_not_block_each_other():
    forks = ForkSet(4)
    forks.acquire(0, holder=0)
    forks.acquire(1, holder=0)
    done = threading.Event()

    def other_pair():
        forks.acquire(2, holder=2)
        forks.acquire(3, holder=2)
        done.set()

    thread = threading.Thread(target=other_pair)
    thread.start()
    thread.join(timeout=2)
    assert done.is_set()
    for index in range(4):
        forks.release(index)
    assert forks.all_free()


def test_cancelled_wait_leaves_fork_with_its_holder():
    forks = ForkSet(2)
    forks.acquire(0, holder=1)
    cancel = threading.Event()
    errors = []

    def contender():
        try:
            forks.acquire(0, holder=0, cancel=cancel)
        except Interrupted as e:
            errors.append(e)

    thread = threading.Thread(target=contender)
    thread.start()
    assert wait_until(lambda: 0 in forks.snapshot()["waiting"])
    cancel.set()
    thread.join(timeout=2)

    assert len(errors) == 1
    assert forks[0].held_by == 1
    assert forks.snapshot()["waiting"] == {}
    forks.release(0)


def test_cancel_already_set_does_not_take_free_fork():
    forks = ForkSet(1)
    cancel = threading.Event()
    cancel.set()
    with pytest.raises(Interrupted):
        forks.acquire(0, holder=0, cancel=cancel)
    assert forks.all_free()
