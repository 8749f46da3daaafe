import unittest

from common import ManualFetcher, create_qapp

from Binscope.gui import build_directory_tree
from Binscope.hex import HexWorkspace, MemoryByteSource, ReadFailure

HELLO = b'Hello, World!!' + b'\x00' * 4


class TestHexWorkspace(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = create_qapp()

    def setUp(self):
        self.fetcher = ManualFetcher()
        self.workspace = HexWorkspace(self.fetcher, page_size=16, timeout_ms=0)

    def tearDown(self):
        self.workspace.deleteLater()

    def test_first_page_is_rendered(self):
        self.workspace.open_source(MemoryByteSource(HELLO), 'hello.bin')
        self.assertEqual(self.workspace.status_label.text(), 'Loading more...')

        self.fetcher.complete()

        text = self.workspace.text_view.toPlainText()
        self.assertEqual(
            text.splitlines(),
            ['00000000  48 65 6c 6c 6f 2c 20 57 6f 72 6c 64 21 21 00 00  Hello, World!!..'],
        )
        self.assertIn('hello.bin', self.workspace.header_label.text())
        self.assertIn('1/2', self.workspace.header_label.text())

    def test_next_page_is_appended(self):
        self.workspace.open_source(MemoryByteSource(HELLO), 'hello.bin')
        self.fetcher.complete()
        self.workspace.controller.on_viewport_near_end()
        self.fetcher.complete()

        lines = self.workspace.text_view.toPlainText().splitlines()
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[1].startswith('00000010  00 00'))
        self.assertTrue(self.workspace.status_label.text().startswith('End of data'))

    def test_error_replaces_loading_indicator(self):
        self.workspace.open_source(MemoryByteSource(HELLO), 'hello.bin')
        self.fetcher.deliver(error=ReadFailure('unplugged'))
        self.assertIn('unplugged', self.workspace.status_label.text())
        self.assertEqual(self.workspace.text_view.toPlainText(), '')

    def test_new_source_replaces_content(self):
        self.workspace.open_source(MemoryByteSource(b'A' * 16), 'a')
        self.fetcher.complete()
        self.workspace.open_source(MemoryByteSource(b'B' * 16), 'b')
        self.fetcher.complete()

        lines = self.workspace.text_view.toPlainText().splitlines()
        self.assertEqual(len(lines), 1)
        self.assertTrue(lines[0].endswith('B' * 16))

    def test_empty_source(self):
        self.workspace.open_source(MemoryByteSource(b''), 'empty')
        self.fetcher.complete()
        self.assertEqual(self.workspace.text_view.toPlainText(), '')
        self.assertFalse(self.workspace.controller.has_more)
        self.assertEqual(self.workspace.status_label.text(), 'End of data (0 bytes)')


class TestDirectoryTree(unittest.TestCase):
    def test_nesting(self):
        tree = build_directory_tree(['a/b/C.class', 'a/D.class', 'E.txt'])
        self.assertEqual(tree, {'a': {'b': {'C.class': None}, 'D.class': None}, 'E.txt': None})

    def test_empty(self):
        self.assertEqual(build_directory_tree([]), {})


if __name__ == '__main__':
    unittest.main()
