import unittest

from common import create_qapp
from PyQt6.QtWidgets import QScrollBar

from Binscope.hex import ViewportMonitor, is_near_end


class TestIsNearEnd(unittest.TestCase):
    def test_fires_within_threshold(self):
        self.assertTrue(is_near_end(890, 100, 1000, threshold=10))
        self.assertTrue(is_near_end(900, 100, 1000, threshold=10))
        self.assertFalse(is_near_end(889, 100, 1000, threshold=10))

    def test_content_shorter_than_viewport(self):
        self.assertTrue(is_near_end(0, 500, 200))

    def test_zero_threshold(self):
        self.assertFalse(is_near_end(899, 100, 1000, threshold=0))
        self.assertTrue(is_near_end(900, 100, 1000, threshold=0))


class TestViewportMonitor(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = create_qapp()

    def setUp(self):
        self.bar = QScrollBar()
        self.bar.setRange(0, 900)
        self.bar.setPageStep(100)
        self.monitor = ViewportMonitor(self.bar, threshold=10)
        self.signals = []
        self.monitor.near_end.connect(lambda: self.signals.append(self.bar.value()))

    def test_scrolling_to_bottom_emits(self):
        self.bar.setValue(500)
        self.assertEqual(self.signals, [])
        self.bar.setValue(895)
        self.assertEqual(self.signals, [895])

    def test_range_growth_is_reevaluated(self):
        self.bar.setValue(900)
        self.signals.clear()
        # More content arrived below the viewport
        self.bar.setRange(0, 2000)
        self.assertEqual(self.signals, [])
        self.assertFalse(self.monitor.check())

    def test_disabled_monitor_stays_quiet(self):
        self.monitor.enabled = False
        self.bar.setValue(900)
        self.assertEqual(self.signals, [])
        self.monitor.enabled = True
        self.assertTrue(self.monitor.check())
        self.assertEqual(self.signals, [900])


if __name__ == '__main__':
    unittest.main()
