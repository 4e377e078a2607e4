import pytest

from catboy.screen import (
    HEIGHT,
    WIDTH,
    DrawList,
    Viewport,
    border_rects,
    compute_viewport,
    quad_coords,
)


def test_native_size_has_no_margins():
    assert compute_viewport(WIDTH, HEIGHT) == Viewport(0, 0, WIDTH, HEIGHT)


def test_scaled_native_aspect_has_no_margins():
    assert compute_viewport(WIDTH * 2, HEIGHT * 2) == Viewport(0, 0, WIDTH, HEIGHT)


@pytest.mark.parametrize("size", [(1920, 600), (400, 1000), (1000, 1000)])
def test_viewport_keeps_window_aspect_and_contains_game(size):
    w, h = size
    vp = compute_viewport(w, h)
    assert vp.w / vp.h == pytest.approx(w / h)
    assert vp.w >= WIDTH and vp.h >= HEIGHT
    assert vp.x == pytest.approx((vp.w - WIDTH) / 2)
    assert vp.y == pytest.approx((vp.h - HEIGHT) / 2)
    assert vp.x == 0 or vp.y == 0


def test_wide_window_letterboxes_horizontally():
    vp = compute_viewport(WIDTH * 4, HEIGHT)
    assert vp.h == HEIGHT
    assert vp.x > 0


def test_zero_window_does_not_divide_by_zero():
    vp = compute_viewport(0, 0)
    assert vp.w > 0 and vp.h > 0


def test_border_rects_cover_margins():
    vp = compute_viewport(WIDTH * 4, HEIGHT)
    rects = border_rects(vp)
    assert len(rects) == 4
    left = rects[1]
    right = rects[3]
    assert left[2] - left[0] == pytest.approx(vp.x)
    assert right[2] - right[0] == pytest.approx(vp.x)
    assert right[0] == WIDTH


def test_quad_without_texture():
    tex, dst = quad_coords(None, 10, 20, 30, 40, 1, 2, 3, 4)
    assert tex == (0.0, 0.0, 0.0, 0.0)
    assert dst == (10, 20, 40, 60)


def test_quad_full_texture_spans_unit_square():
    tex, _ = quad_coords((64, 32), 0, 0, 64, 32, 0, 0, 64, 32)
    assert tex == (0.0, 0.0, 1.0, 1.0)


def test_quad_negative_width_is_mirrored_over_same_area():
    _, (x1, y1, x2, y2) = quad_coords(None, 10, 0, -16, 8, 0, 0, 0, 0)
    assert x1 > x2
    assert min(x1, x2) == 10
    assert abs(x1 - x2) == 16
    assert (y1, y2) == (0, 8)


def test_drawlist_records_commands_with_current_color():
    dl = DrawList()
    first = dl.append(None, 0, 0, 10, 10)
    dl.set_color(0x0000007F)
    second = dl.append("tex", 1, 2, 3, 4, 5, 6, 7, 8)
    label = dl.text(4, 5, "Start Game")
    assert first.color == 0xFFFFFFFF
    assert second.color == 0x0000007F
    assert (second.srcx, second.srcy, second.srcw, second.srch) == (5, 6, 7, 8)
    assert label.text == "Start Game"
    assert list(dl) == [first, second, label]
    assert len(dl) == 3


def test_drawlist_clear():
    dl = DrawList()
    dl.append(None, 0, 0, 1, 1)
    dl.clear()
    assert len(dl) == 0
    assert list(dl) == []