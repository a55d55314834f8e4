from __future__ import annotations

import threading
import time

from pydebounce import debounce, throttle


def test_default_scheduler_coalesces_burst_on_timer_thread():
    calls = []
    done = threading.Event()

    def persist(value):
        calls.append(value)
        done.set()

    debounced = debounce(persist, 30)
    for value in range(5):
        debounced(value)

    assert done.wait(2.0)
    time.sleep(0.1)
    assert calls == [4]
    assert debounced.pending() is False


def test_flush_from_caller_thread_preempts_timer():
    calls = []
    debounced = debounce(calls.append, 500)
    debounced("a")
    assert debounced.flush() is None
    assert calls == ["a"]
    time.sleep(0.05)
    assert debounced.pending() is False


def test_concurrent_callers_never_overlap_invocations():
    active = 0
    max_active = 0
    lock = threading.Lock()

    def work(_value):
        nonlocal active, max_active
        with lock:
            active += 1
            max_active = max(max_active, active)
        time.sleep(0.002)
        with lock:
            active -= 1

    throttled = throttle(work, 5)

    def caller():
        for value in range(50):
            throttled(value)
            time.sleep(0.001)

    threads = [threading.Thread(target=caller) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(5.0)
    time.sleep(0.05)
    throttled.cancel()

    assert max_active == 1
