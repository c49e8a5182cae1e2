import threading

import pytest

from toolbench.rwlock import ReadWriteLock


def test_many_readers_share_the_lock():
    lock = ReadWriteLock()
    lock.read_lock()
    assert lock.try_read_lock() is True
    assert lock.readers == 2
    lock.read_unlock()
    lock.read_unlock()
    assert lock.readers == 0


def test_writer_excludes_readers_and_writers():
    lock = ReadWriteLock()
    lock.write_lock()
    assert lock.try_read_lock() is False
    assert lock.try_write_lock() is False
    lock.write_unlock()
    assert lock.try_write_lock() is True
    lock.write_unlock()
    assert lock.write_locked is False


def test_reader_blocks_try_write():
    lock = ReadWriteLock()
    with lock.reading():
        assert lock.try_write_lock() is False
    assert lock.try_write_lock() is True
    lock.write_unlock()


def test_writing_context_sets_and_clears_state():
    lock = ReadWriteLock()
    with lock.writing() as held:
        assert held is lock
        assert lock.write_locked is True
    assert lock.write_locked is False


def test_context_releases_on_exception():
    lock = ReadWriteLock()
    with pytest.raises(KeyError):
        with lock.reading():
            raise KeyError("boom")
    assert lock.readers == 0


def test_unlock_without_lock_raises():
    lock = ReadWriteLock()
    with pytest.raises(RuntimeError):
        lock.read_unlock()
    with pytest.raises(RuntimeError):
        lock.write_unlock()


def test_writer_waits_for_reader_release():
    lock = ReadWriteLock()
    lock.read_lock()
    acquired = threading.Event()

    def writer():
        lock.write_lock()
        acquired.set()
        lock.write_unlock()

    thread = threading.Thread(target=writer)
    thread.start()
    assert acquired.wait(0.2) is False
    lock.read_unlock()
    assert acquired.wait(5) is True
    thread.join(5)
    assert lock.write_locked is False


def test_reader_waits_for_writer_release():
    lock = ReadWriteLock()
    lock.write_lock()
    acquired = threading.Event()

    def reader():
        with lock.reading():
            acquired.set()

    thread = threading.Thread(target=reader)
    thread.start()
    assert acquired.wait(0.2) is False
    lock.write_unlock()
    assert acquired.wait(5) is True
    thread.join(5)
    assert lock.readers == 0


def test_concurrent_writers_keep_counter_consistent():
    lock = ReadWriteLock()
    counter = {"value": 0}
    observed = []

    def work():
        for _ in range(200):
            with lock.writing() as held:
                observed.append((held is lock, lock.write_locked, lock.readers))
                current = counter["value"]
                counter["value"] = current + 1

    threads = [threading.Thread(target=work) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(10)
    assert counter["value"] == 800
    assert len(observed) == 800
    assert all(state == (True, True, 0) for state in observed)
    assert lock.write_locked is False
    assert lock.readers == 0
    assert lock.try_write_lock() is True
    lock.write_unlock()