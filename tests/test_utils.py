import threading
import unittest

from Binscope.utils import format_size, run_in_thread


class TestUtils(unittest.TestCase):
    def test_format_size(self):
        self.assertEqual(format_size(0), '0.0 B')
        self.assertEqual(format_size(8192), '8.0 KB')
        self.assertEqual(format_size(3 * 1024 ** 3), '3.0 GB')

    def test_run_in_thread_returns_started_daemon(self):
        done = threading.Event()
        seen = []

        @run_in_thread
        def work(value):
            seen.append((value, threading.current_thread().name))
            done.set()

        thread = work(7)
        self.assertTrue(thread.daemon)
        self.assertTrue(done.wait(2.0))
        thread.join(2.0)
        self.assertEqual(seen, [(7, 'Binscope-work')])


if __name__ == '__main__':
    unittest.main()
