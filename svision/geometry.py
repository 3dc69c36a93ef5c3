"""Basic geometry values: positions, sizes and layout spacing."""

from __future__ import annotations

from dataclasses import dataclass, replace


def _tdiv(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


@dataclass
class LayoutParams:
    """Spacing on each side of a box: used for paddings and margins."""

    top: int = 0
    bottom: int = 0
    start: int = 0
    end: int = 0

    def set_horizontal(self, value: int) -> None:
        self.start = value
        self.end = value

    def set_vertical(self, value: int) -> None:
        self.top = value
        self.bottom = value

    def set(self, value: int) -> None:
        self.set_horizontal(value)
        self.set_vertical(value)

    def horizontal(self) -> int:
        """Total spacing along the x axis."""
        return self.start + self.end

    def vertical(self) -> int:
        """Total spacing along the y axis."""
        return self.top + self.bottom

    def is_valid(self) -> bool:
        """True when any side has non-zero spacing."""
        return any((self.top, self.bottom, self.start, self.end))


@dataclass(frozen=True)
class Position:
    x: int = 0
    y: int = 0

    def __add__(self, delta: int) -> Position:
        if not isinstance(delta, int):
            return NotImplemented
        return Position(self.x + delta, self.y + delta)

    def __sub__(self, delta: int) -> Position:
        if not isinstance(delta, int):
            return NotImplemented
        return Position(self.x - delta, self.y - delta)


@dataclass(frozen=True)
class Size:
    width: int = 0
    height: int = 0

    def __add__(self, other: Size | int) -> Size:
        # Adding another size yields the difference of the two.
        if isinstance(other, Size):
            return Size(self.width - other.width, self.height - other.height)
        if isinstance(other, int):
            return Size(self.width + other, self.height + other)
        return NotImplemented

    def __sub__(self, other: Size | int) -> Size:
        if isinstance(other, Size):
            return Size(self.width - other.width, self.height - other.height)
        if isinstance(other, int):
            return Size(self.width - other, self.height - other)
        return NotImplemented

    def __truediv__(self, ratio: int) -> Size:
        if not isinstance(ratio, int):
            return NotImplemented
        return Size(_tdiv(self.width, ratio), _tdiv(self.height, ratio))

    def __mul__(self, ratio: int) -> Size:
        if not isinstance(ratio, int):
            return NotImplemented
        return Size(self.width * ratio, self.height * ratio)

    def centered(self, other: Size, padding: int = 0) -> Position:
        """Position that centres ``other`` inside this size, honouring padding."""
        diff = self - other
        diff = replace(diff, width=diff.width - padding * 2, height=diff.height - padding * 2)
        return Position(_tdiv(diff.width, 2) + padding, _tdiv(diff.height, 2) + padding)

    def centered_x(self, other: Size, padding: int = 0) -> Position:
        """Centre horizontally; the padding becomes the y coordinate."""
        diff = self - other
        return Position(_tdiv(diff.width, 2), padding)

    def centered_y(self, other: Size, padding: int = 0) -> Position:
        """Centre vertically; the padding becomes the x coordinate."""
        diff = self - other
        return Position(padding, _tdiv(diff.height, 2))

    def padded_center_x(self, padding: LayoutParams | None = None) -> Position:
        padding = padding or LayoutParams()
        return Position(_tdiv(self.width - padding.horizontal(), 2), padding.top)

    def padded_center_y(self, padding: LayoutParams | None = None) -> Position:
        padding = padding or LayoutParams()
        return Position(padding.start, _tdiv(self.height - padding.vertical(), 2))