import pytest

from svision.bitmap import Bitmap
from svision.colors import Gradient, blend_colors, make_color
from svision.geometry import Position, Size

RED = make_color(255, 0, 0)
BLUE = make_color(0, 0, 255)
GREEN = make_color(0, 255, 0)


def _set_pixels(bitmap, color):
    return {
        (x, y)
        for y in range(bitmap.height)
        for x in range(bitmap.width)
        if bitmap.get_pixel(x, y) == color
    }


def test_new_bitmap_allocates_buffer():
    bitmap = Bitmap(Size(4, 3))
    assert len(bitmap.buffer) == 12
    assert all(p == 0 for p in bitmap.buffer)


def test_put_and_get_pixel():
    bitmap = Bitmap(Size(5, 5))
    bitmap.put_pixel(2, 3, RED)
    assert bitmap.get_pixel(2, 3) == RED
    assert bitmap.buffer[3 * 5 + 2] == RED


def test_out_of_bounds_pixels_are_ignored():
    bitmap = Bitmap(Size(3, 3))
    for x, y in [(-1, 0), (0, -1), (3, 0), (0, 3)]:
        bitmap.put_pixel(x, y, RED)
        assert bitmap.get_pixel(x, y) == 0
    assert all(p == 0 for p in bitmap.buffer)


def test_fill_sets_every_pixel():
    bitmap = Bitmap(Size(4, 4))
    bitmap.fill(BLUE)
    assert set(bitmap.buffer) == {BLUE}


def test_fill_rect_covers_exact_area():
    bitmap = Bitmap(Size(6, 6))
    bitmap.fill_rect(1, 2, 3, 2, RED)
    expected = {(x, y) for x in range(1, 4) for y in range(2, 4)}
    assert _set_pixels(bitmap, RED) == expected


def test_fill_rect_gradient_rows_follow_gradient():
    bitmap = Bitmap(Size(4, 4))
    bitmap.fill_rect_gradient(0, 0, 4, 4, RED, BLUE)
    gradient = Gradient(RED, BLUE, 4)
    for y in range(4):
        row = {bitmap.get_pixel(x, y) for x in range(4)}
        assert row == {gradient.color()}
        gradient.advance()
    assert bitmap.get_pixel(0, 0) == RED


def test_fill_rect_gradient_zero_height_does_nothing():
    bitmap = Bitmap(Size(4, 4))
    bitmap.fill_rect_gradient(0, 0, 4, 0, RED, BLUE)
    assert set(bitmap.buffer) == {0}


def test_resize_keeps_buffer_when_area_matches():
    bitmap = Bitmap(Size(2, 6))
    bitmap.fill(RED)
    bitmap.resize(6, 2)
    assert bitmap.size == Size(6, 2)
    assert bitmap.buffer == [RED] * 12


def test_resize_changes_buffer_length():
    bitmap = Bitmap(Size(2, 2))
    bitmap.resize(Size(3, 5))
    assert bitmap.size == Size(3, 5)
    assert len(bitmap.buffer) == 15


def test_rescale_up_and_down_round_trips():
    bitmap = Bitmap(Size(2, 2))
    bitmap.buffer = [RED, GREEN, BLUE, 0]
    original = list(bitmap.buffer)
    bitmap.rescale(4, 4)
    assert bitmap.size == Size(4, 4)
    assert bitmap.get_pixel(0, 0) == RED
    assert bitmap.get_pixel(3, 0) == GREEN
    assert bitmap.get_pixel(0, 3) == BLUE
    bitmap.rescale(2, 2)
    assert bitmap.buffer == original


def test_rescale_from_copies_scaled_image():
    source = Bitmap(Size(2, 1))
    source.buffer = [RED, BLUE]
    target = Bitmap()
    target.rescale_from(source, 4, 2)
    assert target.size == Size(4, 2)
    assert [target.get_pixel(x, 1) for x in range(4)] == [RED, RED, BLUE, BLUE]


def test_copy_from_is_independent():
    source = Bitmap(Size(3, 2))
    source.fill(GREEN)
    copy = Bitmap()
    copy.copy_from(source)
    assert copy.size == source.size
    copy.put_pixel(0, 0, RED)
    assert source.get_pixel(0, 0) == GREEN


def test_blend_pixel_extremes():
    bitmap = Bitmap(Size(2, 1))
    bitmap.fill(BLUE)
    bitmap.blend_pixel(0, 0, RED, 255)
    bitmap.blend_pixel(1, 0, RED, 0)
    assert bitmap.get_pixel(0, 0) == RED
    assert bitmap.get_pixel(1, 0) == BLUE
    bitmap.blend_pixel(5, 5, RED, 255)
    assert bitmap.buffer == [RED, BLUE]


def test_horizontal_line_includes_both_ends():
    bitmap = Bitmap(Size(10, 3))
    bitmap.line(7, 1, 2, 1, RED)
    assert _set_pixels(bitmap, RED) == {(x, 1) for x in range(2, 8)}


def test_diagonal_line():
    bitmap = Bitmap(Size(5, 5))
    bitmap.line(0, 0, 4, 4, RED)
    assert _set_pixels(bitmap, RED) == {(i, i) for i in range(5)}


def test_line_thickness_zero_length_draws_nothing():
    bitmap = Bitmap(Size(5, 5))
    bitmap.line_thickness(2, 2, 2, 2, 3, RED)
    assert _set_pixels(bitmap, RED) == set()


def test_line_thickness_covers_centre_line():
    bitmap = Bitmap(Size(12, 8))
    bitmap.line_thickness(1, 4, 10, 4, 3, RED)
    pixels = _set_pixels(bitmap, RED)
    assert {(x, 4) for x in range(1, 11)} <= pixels
    assert all(abs(y - 4) <= 1 for _, y in pixels)


def test_draw_rectangle_frame_colors():
    bitmap = Bitmap(Size(6, 6))
    bitmap.draw_rectangle(0, 0, 6, 6, RED, BLUE)
    assert bitmap.get_pixel(0, 0) == RED
    assert bitmap.get_pixel(5, 5) == BLUE
    assert bitmap.get_pixel(5, 0) == BLUE
    assert bitmap.get_pixel(0, 5) == BLUE
    assert bitmap.get_pixel(2, 2) == 0


def test_fill_circle_is_symmetric():
    bitmap = Bitmap(Size(20, 20))
    bitmap.fill_circle(10, 10, 4, RED)
    pixels = _set_pixels(bitmap, RED)
    assert (10, 10) in pixels
    assert all((20 - x - 1, y) in pixels or x == 6 for x, y in pixels)
    assert all((x - 10) ** 2 + (y - 10) ** 2 <= 16 for x, y in pixels)


def test_fill_ellipse_stays_inside_bounds():
    bitmap = Bitmap(Size(20, 20))
    bitmap.fill_ellipse(10, 10, 5, 3, RED)
    pixels = _set_pixels(bitmap, RED)
    assert {(5, 10), (15, 10), (10, 7), (10, 13)} <= pixels
    assert all(abs(x - 10) <= 5 and abs(y - 10) <= 3 for x, y in pixels)
    assert all((20 - x, 20 - y) in pixels for x, y in pixels)


def test_draw_circle_cardinal_points_and_symmetry():
    bitmap = Bitmap(Size(21, 21))
    bitmap.draw_circle(10, 10, 5, RED)
    pixels = _set_pixels(bitmap, RED)
    assert {(15, 10), (5, 10), (10, 15), (10, 5)} <= pixels
    assert all((20 - x, y) in pixels and (x, 20 - y) in pixels for x, y in pixels)
    assert (10, 10) not in pixels


def test_draw_ellipse_is_symmetric():
    bitmap = Bitmap(Size(12, 10))
    bitmap.draw_ellipse(2, 2, 8, 6, RED)
    pixels = _set_pixels(bitmap, RED)
    assert {(2, 4), (8, 4)} <= pixels
    assert all((10 - x, y) in pixels and (x, 8 - y) in pixels for x, y in pixels)
    assert min(y for _, y in pixels) == 2
    assert max(y for _, y in pixels) == 6


def test_draw_bezier_collinear_is_a_line():
    bitmap = Bitmap(Size(12, 3))
    bitmap.draw_bezier(0, 0, 5, 0, 10, 0, RED)
    assert _set_pixels(bitmap, RED) == {(x, 0) for x in range(11)}


def test_draw_bezier_curve_reaches_both_ends():
    bitmap = Bitmap(Size(12, 12))
    bitmap.draw_bezier(0, 0, 0, 10, 10, 10, RED)
    pixels = _set_pixels(bitmap, RED)
    assert {(0, 0), (10, 10)} <= pixels
    assert (10, 0) not in pixels


def test_draw_bezier_rejects_sign_change():
    bitmap = Bitmap(Size(10, 10))
    with pytest.raises(ValueError):
        bitmap.draw_bezier(0, 0, 5, 0, 3, 0, RED)


def test_flood_fill_stops_at_border():
    bitmap = Bitmap(Size(7, 7))
    bitmap.draw_rectangle(1, 1, 5, 5, RED, RED)
    bitmap.flood_fill(3, 3, 0, BLUE)
    inside = {(x, y) for x in range(2, 5) for y in range(2, 5)}
    assert _set_pixels(bitmap, BLUE) == inside
    assert bitmap.get_pixel(0, 0) == 0


def test_flood_fill_same_color_is_noop():
    bitmap = Bitmap(Size(3, 3))
    bitmap.fill(RED)
    bitmap.flood_fill(1, 1, RED, RED)
    assert set(bitmap.buffer) == {RED}


def test_draw_copies_and_clips():
    target = Bitmap(Size(4, 4))
    source = Bitmap(Size(3, 3))
    source.fill(GREEN)
    target.draw(Position(2, -1), source)
    assert _set_pixels(target, GREEN) == {(x, y) for x in (2, 3) for y in (0, 1)}


def test_draw_with_alpha_blending():
    target = Bitmap(Size(2, 1))
    target.fill(BLUE)
    source = Bitmap(Size(2, 1))
    half = make_color(255, 0, 0, 128)
    source.buffer = [make_color(255, 0, 0, 0), half]
    target.draw(Position(0, 0), source, alpha_blending=True)
    assert target.get_pixel(0, 0) == BLUE
    assert target.get_pixel(1, 0) == blend_colors(half, BLUE, 128)