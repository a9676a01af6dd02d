import threading

import pytest

from app.core.exceptions import StorageUnavailable
from app.core.locks import KeyedLocks, field_key, membership_key


def test_same_key_is_exclusive_and_times_out():
    locks = KeyedLocks()
    held = threading.Event()
    release = threading.Event()

    def holder():
        with locks.hold(field_key(1)):
            held.set()
            release.wait(5)

    t = threading.Thread(target=holder)
    t.start()
    held.wait(5)
    try:
        with pytest.raises(StorageUnavailable):
            with locks.hold(field_key(1), timeout=0.05):
                pass
    finally:
        release.set()
        t.join()


def test_different_keys_do_not_block():
    locks = KeyedLocks()
    with locks.hold(field_key(1)):
        with locks.hold(field_key(2), timeout=0.05):
            pass
        with locks.hold(membership_key(1, 1), timeout=0.05):
            pass


def test_lock_is_released_on_error():
    locks = KeyedLocks()
    with pytest.raises(RuntimeError):
        with locks.hold(field_key(3)):
            raise RuntimeError("boom")
    with locks.hold(field_key(3), timeout=0.05):
        pass


def test_unused_entries_are_dropped():
    locks = KeyedLocks()
    with locks.hold(field_key(4)):
        assert len(locks) == 1
    assert len(locks) == 0
