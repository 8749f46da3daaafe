import unittest

from Binscope.hex import DisplayLine, render, render_text, to_ascii

HELLO = b'Hello, World!!' + b'\x00' * 4


class TestDisplayLine(unittest.TestCase):
    def test_full_line_layout(self):
        line = DisplayLine(0, HELLO[:16])
        self.assertEqual(
            line.text(),
            '00000000  48 65 6c 6c 6f 2c 20 57 6f 72 6c 64 21 21 00 00  Hello, World!!..',
        )

    def test_short_line_keeps_ascii_column_aligned(self):
        full = DisplayLine(0, bytes(range(0x41, 0x51))).text()
        short = DisplayLine(16, b'\x00\x00').text()
        self.assertEqual(short, '00000010  00 00' + ' ' * 42 + '  ..')
        self.assertEqual(full.index('ABCD'), short.index('..'))

    def test_ascii_printable_range_is_inclusive(self):
        self.assertEqual(to_ascii(bytes([0x1F, 0x20, 0x7E, 0x7F, 0xFF])), '. ~..')

    def test_hex_is_lowercase_and_space_separated(self):
        line = DisplayLine(0, bytes([0xAB, 0x0C, 0xFF]))
        self.assertEqual(line.hex_text, 'ab 0c ff')

    def test_offset_is_eight_hex_digits(self):
        self.assertEqual(DisplayLine(0x1A2B0, b'').offset_text, '0001a2b0')


class TestRender(unittest.TestCase):
    def test_hello_world_two_pages(self):
        pages = [HELLO[:16], HELLO[16:]]
        lines = render(pages, 16)
        self.assertEqual([line.offset for line in lines], [0, 16])
        self.assertEqual(lines[0].ascii_text, 'Hello, World!!..')
        self.assertEqual(lines[1].offset_text, '00000010')
        self.assertEqual(lines[1].data, b'\x00\x00')

    def test_offsets_are_absolute_across_pages(self):
        pages = [bytes(32), bytes(32), bytes(20)]
        offsets = [line.offset for line in render(pages, 32)]
        self.assertEqual(offsets, [0, 16, 32, 48, 64, 80])

    def test_page_size_not_multiple_of_line_width(self):
        # Lines restart at every page boundary
        offsets = [line.offset for line in render([bytes(20), bytes(20)], 20)]
        self.assertEqual(offsets, [0, 16, 20, 36])

    def test_empty_pages_render_nothing(self):
        self.assertEqual(render([], 16), [])
        self.assertEqual(render([b''], 16), [])
        self.assertEqual(render_text(render([b''], 16)), '')

    def test_start_page_renders_only_later_pages(self):
        pages = [bytes(16), b'\x01' * 16]
        lines = render(pages, 16, start_page=1)
        self.assertEqual(len(lines), 1)
        self.assertEqual(lines[0].offset, 16)

    def test_render_is_deterministic(self):
        pages = [bytes(range(256)), bytes(range(100))]
        self.assertEqual(render_text(render(pages, 256)), render_text(render(pages, 256)))
        self.assertEqual(render(pages, 256), render(pages, 256))


if __name__ == '__main__':
    unittest.main()
