"""An in-memory ARGB raster with simple drawing primitives."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from svision.colors import Gradient, blend_colors, get_alpha
from svision.geometry import Position, Size


def _roundf(value: float) -> int:
    """Round to nearest, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _dims(width: int | Size, height: int | None) -> tuple[int, int]:
    if isinstance(width, Size):
        return width.width, width.height
    if height is None:
        raise TypeError("height is required when width is not a Size")
    return width, height


@dataclass
class Bitmap:
    """A row-major buffer of 32-bit ARGB pixels."""

    size: Size = field(default_factory=Size)
    buffer: list[int] = field(default_factory=list)
    background_color: int = 0

    def __post_init__(self) -> None:
        if not self.buffer:
            self.buffer = [0] * (self.size.width * self.size.height)

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.size.width and 0 <= y < self.size.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the bitmap are ignored."""
        if self._inside(x, y):
            self.buffer[y * self.size.width + x] = color

    def get_pixel(self, x: int, y: int) -> int:
        """Read one pixel; coordinates outside the bitmap read as 0."""
        if not self._inside(x, y):
            return 0
        return self.buffer[y * self.size.width + x]

    def copy_from(self, other: Bitmap) -> None:
        self.buffer = list(other.buffer)
        self.size = other.size

    def blend_pixel(self, x: int, y: int, color: int, alpha: int) -> None:
        """Blend ``color`` over the existing pixel with the given alpha weight."""
        if not self._inside(x, y):
            return
        self.put_pixel(x, y, blend_colors(color, self.get_pixel(x, y), alpha))

    def resize(self, width: int | Size, height: int | None = None) -> None:
        """Change the dimensions; pixel content is not rearranged."""
        width, height = _dims(width, height)
        if width == self.size.width and height == self.size.height:
            return
        count = width * height
        if count != self.size.width * self.size.height:
            if count < len(self.buffer):
                del self.buffer[count:]
            else:
                self.buffer.extend([0] * (count - len(self.buffer)))
        self.size = Size(width, height)

    def _sampled(self, source: Bitmap, width: int, height: int) -> list[int]:
        scale_x = 1000 * source.size.width // width
        scale_y = 1000 * source.size.height // height
        return [
            source.get_pixel(x * scale_x // 1000, y * scale_y // 1000)
            for y in range(height)
            for x in range(width)
        ]

    def rescale(self, width: int | Size, height: int | None = None) -> None:
        """Nearest-neighbour scale of this bitmap to a new size."""
        width, height = _dims(width, height)
        self.buffer = self._sampled(self, width, height)
        self.size = Size(width, height)

    def rescale_from(self, other: Bitmap, width: int | Size, height: int | None = None) -> None:
        """Fill this bitmap with a nearest-neighbour scaled copy of ``other``."""
        width, height = _dims(width, height)
        self.resize(width, height)
        self.buffer[: width * height] = self._sampled(other, width, height)

    def fill(self, color: int) -> None:
        self.buffer[:] = [color] * len(self.buffer)

    def _write_span(self, offset: int, count: int, color: int) -> None:
        start = max(0, offset)
        end = min(len(self.buffer), offset + count)
        if end > start:
            self.buffer[start:end] = [color] * (end - start)

    def fill_rect(self, x: int, y: int, w: int, h: int, color: int) -> None:
        w = min(w, self.size.width)
        h = min(h, self.size.height)
        if w <= 0:
            return
        offset = y * self.size.width + x
        for _ in range(h):
            self._write_span(offset, w, color)
            offset += self.size.width

    def fill_rounded_rect(self, x: int, y: int, w: int, h: int, color: int) -> None:
        """Fill a rectangle; corners are currently drawn square."""
        self.fill_rect(x, y, w, h, color)

    def fill_rect_gradient(
        self, x: int, y: int, w: int, h: int, color1: int, color2: int
    ) -> None:
        """Fill a rectangle with a vertical gradient from ``color1`` to ``color2``."""
        if h == 0 or w == 0:
            return
        gradient = Gradient(color1, color2, h)
        offset = y * self.size.width + x
        for _ in range(h):
            self._write_span(offset, w, gradient.color())
            gradient.advance()
            offset += self.size.width

    def fill_circle(self, x: int, y: int, r: int, color: int) -> None:
        for dy in range(-r, r):
            for dx in range(-r, r):
                if dx * dx + dy * dy <= r * r:
                    self.put_pixel(x + dx, y + dy, color)

    def fill_ellipse(self, x: int, y: int, width: int, height: int, color: int) -> None:
        limit = height * height * width * width
        for yy in range(-height, height + 1):
            for xx in range(-width, width + 1):
                if xx * xx * height * height + yy * yy * width * width <= limit:
                    self.put_pixel(xx + x, yy + y, color)

    def line(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        """Draw a one-pixel line between two points, both ends included."""
        dx = abs(x1 - x0)
        sx = 1 if x0 < x1 else -1
        dy = -abs(y1 - y0)
        sy = 1 if y0 < y1 else -1
        err = dx + dy
        while True:
            self.put_pixel(x0, y0, color)
            if x0 == x1 and y0 == y1:
                break
            e2 = 2 * err
            if e2 >= dy:
                err += dy
                x0 += sx
            if e2 <= dx:
                err += dx
                y0 += sy

    def line_thickness(
        self, x0: int, y0: int, x1: int, y1: int, thickness: int, color: int
    ) -> None:
        """Draw a line of the given thickness; a zero-length line draws nothing."""
        dx = float(x1 - x0)
        dy = float(y1 - y0)
        length = math.hypot(dx, dy)
        if length == 0:
            return
        nx = dx / length
        ny = dy / length
        half = thickness / 2.0
        x_min = min(x0 - half, x1 - half)
        y_min = min(y0 - half, y1 - half)
        x_max = max(x0 + half, x1 + half)
        y_max = max(y0 + half, y1 + half)
        for x in range(_roundf(x_min), _roundf(x_max) + 1):
            for y in range(_roundf(y_min), _roundf(y_max) + 1):
                if abs((x - x0) * ny - (y - y0) * nx) <= half:
                    self.put_pixel(x, y, color)

    def draw_rectangle(
        self, x: int, y: int, width: int, height: int, color1: int, color2: int
    ) -> None:
        """Draw a frame: top and left edges in ``color1``, bottom and right in ``color2``."""
        if x + width > self.size.width:
            width = self.size.width - x
        if y + height > self.size.height:
            height = self.size.height - y
        self.line(x, y, x + width - 2, y, color1)
        self.line(x, y, x, y + height - 2, color1)
        self.line(x + width - 1, y, x + width - 1, y + height - 1, color2)
        self.line(x, y + height - 1, x + width - 1, y + height - 1, color2)

    def draw_rounded_rectangle(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        radius: int,
        color1: int,
        color2: int,
    ) -> None:
        """Draw a frame; corners are currently drawn square."""
        self.draw_rectangle(x, y, width, height, color1, color2)

    def draw_circle(self, x: int, y: int, r: int, color: int) -> None:
        xx = -r
        yy = 0
        err = 2 - 2 * r
        while True:
            self.put_pixel(x - xx, y + yy, color)
            self.put_pixel(x - yy, y - xx, color)
            self.put_pixel(x + xx, y - yy, color)
            self.put_pixel(x + yy, y + xx, color)
            r = err
            if r <= yy:
                yy += 1
                err += yy * 2 + 1
            if r > xx or err > yy:
                xx += 1
                err += xx * 2 + 1
            if xx >= 0:
                break

    def draw_ellipse(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        """Draw the outline of the ellipse inscribed in the given corner points."""
        a = abs(x1 - x0)
        b = abs(y1 - y0)
        b1 = b & 1
        dx = 4 * (1 - a) * b * b
        dy = 4 * (b1 + 1) * a * a
        err = dx + dy + b1 * a * a

        if x0 > x1:
            x0 = x1
            x1 += a
        if y0 > y1:
            y0 = y1
        y0 += (b + 1) // 2
        y1 = y0 - b1
        a *= 8 * a
        b1 = 8 * b * b

        while True:
            self.put_pixel(x1, y0, color)
            self.put_pixel(x0, y0, color)
            self.put_pixel(x0, y1, color)
            self.put_pixel(x1, y1, color)
            e2 = 2 * err
            if e2 <= dy:
                y0 += 1
                y1 -= 1
                dy += a
                err += dy
            if e2 >= dx or 2 * err > dy:
                x0 += 1
                x1 -= 1
                dx += b1
                err += dx
            if x0 > x1:
                break

        while y0 - y1 < b:
            self.put_pixel(x0 - 1, y0, color)
            self.put_pixel(x1 + 1, y0, color)
            y0 += 1
            self.put_pixel(x0 - 1, y1, color)
            self.put_pixel(x1 + 1, y1, color)
            y1 -= 1

    def draw_bezier(
        self, x0: int, y0: int, x1: int, y1: int, x2: int, y2: int, color: int
    ) -> None:
        """Draw a quadratic Bezier segment whose gradient does not change sign."""
        sx = x2 - x1
        sy = y2 - y1
        xx = x0 - x1
        yy = y0 - y1
        cur = float(xx * sy - yy * sx)
        if not (xx * sx <= 0 and yy * sy <= 0):
            raise ValueError("the curve's gradient changes sign")

        if sx * sx + sy * sy > xx * xx + yy * yy:
            x2 = x0
            x0 = sx + x1
            y2 = y0
            y0 = sy + y1
            cur = -cur

        if cur != 0:
            xx += sx
            sx = 1 if x0 < x2 else -1
            xx *= sx
            yy += sy
            sy = 1 if y0 < y2 else -1
            yy *= sy
            xy = 2 * xx * yy
            xx *= xx
            yy *= yy
            if cur * sx * sy < 0:
                xx, yy, xy, cur = -xx, -yy, -xy, -cur
            dx = 4.0 * sy * cur * (x1 - x0) + xx - xy
            dy = 4.0 * sx * cur * (y0 - y1) + yy - xy
            xx += xx
            yy += yy
            err = dx + dy + xy
            while True:
                self.put_pixel(x0, y0, color)
                if x0 == x2 and y0 == y2:
                    return
                y_step = 2 * err < dx
                if 2 * err > dy:
                    x0 += sx
                    dx -= xy
                    dy += yy
                    err += dy
                if y_step:
                    y0 += sy
                    dy -= xy
                    dx += xx
                    err += dx
                if not dy < dx:
                    break
        self.line(x0, y0, x2, y2, color)

    def flood_fill(self, x: int, y: int, old: int, color: int) -> None:
        """Replace the 4-connected region of ``old`` around (x, y) with ``color``."""
        if old == color:
            return
        pending = [(x, y)]
        while pending:
            px, py = pending.pop()
            if not self._inside(px, py) or self.get_pixel(px, py) != old:
                continue
            self.put_pixel(px, py, color)
            pending.extend(((px - 1, py), (px + 1, py), (px, py - 1), (px, py + 1)))

    def draw(self, position: Position, other: Bitmap, alpha_blending: bool = False) -> None:
        """Copy ``other`` onto this bitmap at ``position``, clipping to the bounds."""
        width = self.size.width
        for y in range(other.size.height):
            yy = y + position.y
            if not 0 <= yy < self.size.height:
                continue
            for x in range(other.size.width):
                xx = x + position.x
                if not 0 <= xx < width:
                    continue
                source = other.buffer[y * other.size.width + x]
                index = yy * width + xx
                if alpha_blending:
                    self.buffer[index] = blend_colors(
                        source, self.buffer[index], get_alpha(source)
                    )
                else:
                    self.buffer[index] = source