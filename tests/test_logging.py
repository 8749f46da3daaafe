import re
import threading
import unittest

from Binscope.utils import LogBuffer


class TestLogBuffer(unittest.TestCase):
    def test_entries_are_timestamped_and_categorised(self):
        buffer = LogBuffer()
        buffer.log('Hex', 'Loaded page 0')
        entries = buffer.get_all()
        self.assertEqual(len(entries), 1)
        self.assertRegex(entries[0], r'^\[\d\d:\d\d:\d\d\] \[Hex\] Loaded page 0$')

    def test_empty_and_clear(self):
        buffer = LogBuffer()
        self.assertEqual(buffer.get_text(), 'No logs yet.')
        buffer.log('App', 'a')
        buffer.log('App', 'b')
        self.assertEqual(len(re.findall(r'\[App\]', buffer.get_text())), 2)
        buffer.clear()
        self.assertEqual(buffer.get_all(), [])

    def test_callbacks_are_batched(self):
        buffer = LogBuffer(batch_window=0.2)
        notified = threading.Event()
        calls = []

        def on_log():
            calls.append(len(buffer.get_all()))
            notified.set()

        buffer.add_callback(on_log)
        for i in range(5):
            buffer.log('App', str(i))

        self.assertTrue(notified.wait(2.0))
        self.assertEqual(calls, [5])

    def test_failing_callback_does_not_block_others(self):
        buffer = LogBuffer(batch_window=0.01)
        notified = threading.Event()

        def broken():
            raise RuntimeError('listener bug')

        buffer.add_callback(broken)
        buffer.add_callback(notified.set)
        buffer.log('App', 'x')
        self.assertTrue(notified.wait(2.0))

        buffer.remove_callback(broken)
        buffer.remove_callback(broken)

    def test_filter_by_category(self):
        buffer = LogBuffer()
        buffer.log('Hex', 'Loaded page 0')
        buffer.log('Config', 'Saved')
        buffer.log('Hex', 'Loaded page 1')

        self.assertEqual(buffer.categories(), ['Config', 'Hex'])
        self.assertEqual([e.message for e in buffer.entries('Hex')], ['Loaded page 0', 'Loaded page 1'])
        self.assertEqual(buffer.get_text('Missing'), 'No logs yet.')

    def test_oldest_entries_drop_off_but_sequence_keeps_counting(self):
        buffer = LogBuffer(max_entries=3)
        for i in range(5):
            buffer.log('App', str(i))

        self.assertEqual([e.message for e in buffer.entries()], ['2', '3', '4'])
        self.assertEqual(buffer.sequence, 5)
        buffer.clear()
        self.assertEqual(buffer.sequence, 6)


if __name__ == '__main__':
    unittest.main()
