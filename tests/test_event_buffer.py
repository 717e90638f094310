import random
import threading
import unittest

from netpulse.capture.event_buffer import EventBuffer

from helpers import make_event


class EventBufferTests(unittest.TestCase):
    def test_starts_empty(self):
        buffer = EventBuffer(capacity=5)
        self.assertEqual(len(buffer), 0)
        self.assertEqual(buffer.snapshot(), ())

    def test_rejects_non_positive_capacity(self):
        with self.assertRaises(ValueError):
            EventBuffer(capacity=0)

    def test_append_keeps_order(self):
        buffer = EventBuffer(capacity=10)
        buffer.append([make_event(1), make_event(2)])
        buffer.append([make_event(3)])
        self.assertEqual([e.event_id for e in buffer.snapshot()], [1, 2, 3])

    def test_evicts_oldest_first(self):
        buffer = EventBuffer(capacity=3)
        buffer.append([make_event(i) for i in range(1, 3)])
        evicted = buffer.append([make_event(i) for i in range(3, 6)])
        self.assertEqual(evicted, 2)
        self.assertEqual([e.event_id for e in buffer.snapshot()], [3, 4, 5])

    def test_batch_larger_than_capacity(self):
        buffer = EventBuffer(capacity=2)
        buffer.append([make_event(i) for i in range(1, 6)])
        self.assertEqual([e.event_id for e in buffer.snapshot()], [4, 5])

    def test_always_holds_suffix_of_arrivals(self):
        rng = random.Random(7)
        capacity = 17
        buffer = EventBuffer(capacity=capacity)
        arrivals = []
        next_id = 1
        for _ in range(200):
            batch = [make_event(next_id + i) for i in range(rng.randint(0, 6))]
            next_id += len(batch)
            arrivals.extend(batch)
            buffer.append(batch)
            self.assertLessEqual(len(buffer), capacity)
            self.assertEqual(list(buffer.snapshot()), arrivals[-capacity:])

    def test_clear(self):
        buffer = EventBuffer(capacity=3)
        buffer.append([make_event(1)])
        buffer.clear()
        self.assertEqual(len(buffer), 0)

    def test_snapshot_is_detached_copy(self):
        buffer = EventBuffer(capacity=3)
        buffer.append([make_event(1)])
        snapshot = buffer.snapshot()
        buffer.append([make_event(2)])
        self.assertEqual(len(snapshot), 1)

    def test_concurrent_readers_see_whole_batches(self):
        buffer = EventBuffer(capacity=1000)
        batch_size = 4
        stop = threading.Event()
        errors = []

        def reader():
            while not stop.is_set():
                if len(buffer.snapshot()) % batch_size:
                    errors.append("partial batch observed")

        threads = [threading.Thread(target=reader) for _ in range(3)]
        for t in threads:
            t.start()
        for n in range(100):
            buffer.append([make_event(n * batch_size + i) for i in range(batch_size)])
        stop.set()
        for t in threads:
            t.join()
        self.assertEqual(errors, [])


if __name__ == "__main__":
    unittest.main()
