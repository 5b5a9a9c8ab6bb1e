"""Character-cell displays that turn brightness values into text."""

from __future__ import annotations

from abc import ABC, abstractmethod

_RAMP_3_BIT = "  -:iX8@"
_RAMP_4_BIT = " .,^~:=!/*&#%8$@"


def val_to_char_3_bit(value: int) -> str:
    """Map a 0-255 brightness to one of eight characters."""
    return _RAMP_3_BIT[(value & 0xFF) >> 5]


def val_to_char_4_bit(value: int) -> str:
    """Map a 0-255 brightness to one of sixteen characters."""
    return _RAMP_4_BIT[(value & 0xFF) >> 4]


class Display(ABC):
    """A grid of byte-sized brightness values addressed by (row, column)."""

    @abstractmethod
    def width(self) -> int: ...

    @abstractmethod
    def height(self) -> int: ...

    @abstractmethod
    def __getitem__(self, key: tuple[int, int]) -> int: ...

    @abstractmethod
    def __setitem__(self, key: tuple[int, int], value: int) -> None: ...


class TerminalDisplay(Display):
    """A display drawn as text, each pixel repeated ``char_per_pixel`` times."""

    def __init__(self, width: int, height: int, char_per_pixel: int = 1) -> None:
        self._char_per_pixel = char_per_pixel
        self._width = width // char_per_pixel
        self._height = height
        self._pixels = bytearray(self._width * self._height)

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    def resize(self, width: int, height: int) -> None:
        """Change the size, keeping the stored values in row-major order."""
        self._width = width // self._char_per_pixel
        self._height = height
        size = self._width * self._height
        kept = self._pixels[:size]
        self._pixels = kept + bytearray(size - len(kept))

    def _offset(self, key: tuple[int, int]) -> int:
        row, column = key
        if not (0 <= row < self._height and 0 <= column < self._width):
            raise IndexError(f"pixel out of range: {key!r}")
        return column + row * self._width

    def __getitem__(self, key: tuple[int, int]) -> int:
        return self._pixels[self._offset(key)]

    def __setitem__(self, key: tuple[int, int], value: int) -> None:
        self._pixels[self._offset(key)] = int(value) & 0xFF

    def _rows(self):
        for start in range(0, self._width * self._height, self._width or 1):
            row = self._pixels[start : start + self._width]
            yield "".join(val_to_char_3_bit(v) * self._char_per_pixel for v in row)

    def render_to_str(self) -> str:
        """The frame as text, one newline-terminated line per row."""
        if self._width == 0:
            return "\n" * self._height
        return "".join(f"{line}\n" for line in self._rows())

    def render_to_buffer(self) -> bytes:
        """The frame as bytes with the final newline replaced by a NUL."""
        rendered = self.render_to_str().encode("ascii")
        return rendered[:-1] + b"\0" if rendered else b""

    def clear(self) -> None:
        self._pixels[:] = bytes(len(self._pixels))