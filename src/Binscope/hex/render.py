"""Offset/hex/ASCII rendering of loaded pages."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from ..utils import BYTES_PER_LINE

HEX_COLUMN_WIDTH = BYTES_PER_LINE * 3 - 1


def to_ascii(data: bytes) -> str:
    """Printable ASCII as-is, everything else as '.'."""
    return ''.join(chr(b) if 0x20 <= b <= 0x7E else '.' for b in data)


@dataclass(frozen=True)
class DisplayLine:
    """One rendered row: up to 16 bytes at an absolute offset."""

    offset: int
    data: bytes

    @property
    def offset_text(self) -> str:
        return f'{self.offset:08x}'

    @property
    def hex_text(self) -> str:
        return ' '.join(f'{b:02x}' for b in self.data)

    @property
    def ascii_text(self) -> str:
        return to_ascii(self.data)

    def text(self) -> str:
        return f'{self.offset_text}  {self.hex_text:<{HEX_COLUMN_WIDTH}}  {self.ascii_text}'


def iter_lines(pages: Sequence[bytes], page_size: int, start_page: int = 0) -> Iterable[DisplayLine]:
    for page_index in range(start_page, len(pages)):
        page = pages[page_index]
        base = page_index * page_size
        for i in range(0, len(page), BYTES_PER_LINE):
            yield DisplayLine(base + i, bytes(page[i:i + BYTES_PER_LINE]))


def render(pages: Sequence[bytes], page_size: int, start_page: int = 0) -> list[DisplayLine]:
    """Render pages[start_page:] into display lines.

    Offsets are absolute: page p starts at p * page_size, so the output
    depends only on the pages and the page size.
    """
    return list(iter_lines(pages, page_size, start_page))


def render_text(lines: Iterable[DisplayLine]) -> str:
    return '\n'.join(line.text() for line in lines)
