"""Threading lessons: shared counters, channels and shared read-only data."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from queue import SimpleQueue


@dataclass
class JobStatus:
    """A counter updated by several threads."""

    jobs_completed: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def _record(self) -> None:
        with self._lock:
            self.jobs_completed += 1


def run_jobs(count: int, delay: float) -> JobStatus:
    """Start count threads that each wait and then record a finished job."""
    status = JobStatus()

    def job() -> None:
        time.sleep(delay)
        status._record()

    threads = [threading.Thread(target=job) for _ in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return status


@dataclass
class Queue:
    """Numbers to send, split into two halves."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])


_DONE = object()


def send_queue(queue: Queue, delay: float) -> Iterator[int]:
    """Send both halves from two threads and yield values as they arrive."""
    channel: SimpleQueue = SimpleQueue()

    def sender(values: list[int]) -> None:
        for value in values:
            channel.put(value)
            time.sleep(delay)
        channel.put(_DONE)

    senders = [
        threading.Thread(target=sender, args=(half,), daemon=True)
        for half in (queue.first_half, queue.second_half)
    ]
    for thread in senders:
        thread.start()
    finished = 0
    while finished < len(senders):
        item = channel.get()
        if item is _DONE:
            finished += 1
        else:
            yield item


def offset_sums(numbers: Iterable[int], workers: int) -> list[int]:
    """Sum, in one thread per offset, the numbers n with n % workers == offset."""
    shared = tuple(numbers)

    def total(offset: int) -> int:
        return sum(n for n in shared if n % workers == offset)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(total, range(workers)))