import threading

import pytest

from toolbench.sync import BoundedQueue, Semaphore


def test_semaphore_rejects_negative_initial_count():
    with pytest.raises(ValueError):
        Semaphore(-1)


def test_semaphore_acquire_takes_a_permit():
    sem = Semaphore(2)
    sem.acquire()
    assert sem.value == 1


def test_semaphore_release_adds_permits():
    sem = Semaphore()
    sem.release(3)
    assert sem.value == 3
    sem.release()
    assert sem.value == 4


def test_semaphore_release_zero_is_noop():
    sem = Semaphore(1)
    sem.release(0)
    assert sem.value == 1


def test_semaphore_release_negative_raises():
    sem = Semaphore()
    with pytest.raises(ValueError):
        sem.release(-1)


def test_semaphore_acquire_blocks_until_release():
    sem = Semaphore()
    done = threading.Event()

    def worker():
        sem.acquire()
        done.set()

    thread = threading.Thread(target=worker)
    thread.start()
    assert not done.wait(0.1)
    sem.release()
    thread.join(2)
    assert done.is_set()
    assert sem.value == 0


def test_semaphore_release_many_wakes_many():
    sem = Semaphore()
    threads = [threading.Thread(target=sem.acquire) for _ in range(3)]
    for thread in threads:
        thread.start()
    sem.release(3)
    for thread in threads:
        thread.join(2)
    assert not any(thread.is_alive() for thread in threads)
    assert sem.value == 0


def test_semaphore_context_manager_returns_permit():
    sem = Semaphore(1)
    with sem:
        assert sem.value == 0
    assert sem.value == 1


def test_queue_rejects_non_positive_size():
    with pytest.raises(ValueError):
        BoundedQueue(0)


def test_queue_is_fifo():
    queue = BoundedQueue(5)
    for item in ["a", "b", "c"]:
        queue.produce(item)
    assert len(queue) == 3
    assert [queue.consume() for _ in range(3)] == ["a", "b", "c"]
    assert len(queue) == 0


def test_produce_blocks_when_full():
    queue = BoundedQueue(1)
    queue.produce(1)
    thread = threading.Thread(target=queue.produce, args=(2,))
    thread.start()
    thread.join(0.1)
    assert thread.is_alive()
    assert queue.consume() == 1
    thread.join(2)
    assert not thread.is_alive()
    assert queue.consume() == 2


def test_consume_blocks_when_empty():
    queue = BoundedQueue(2)
    results = []
    thread = threading.Thread(target=lambda: results.append(queue.consume()))
    thread.start()
    thread.join(0.1)
    assert thread.is_alive()
    queue.produce("x")
    thread.join(2)
    assert results == ["x"]


def test_many_producers_and_consumers_keep_every_item():
    queue = BoundedQueue(3)
    consumed = []
    lock = threading.Lock()

    def producer(start):
        for value in range(start, start + 20):
            queue.produce(value)

    def consumer():
        for _ in range(20):
            value = queue.consume()
            with lock:
                consumed.append(value)

    threads = [threading.Thread(target=producer, args=(n * 100,)) for n in range(5)]
    threads += [threading.Thread(target=consumer) for _ in range(5)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(5)
    expected = sorted(v for n in range(5) for v in range(n * 100, n * 100 + 20))
    assert sorted(consumed) == expected
    assert len(queue) == 0