import pytest

from catboy.math_util import (
    clamp,
    cubic_in,
    cubic_in_out,
    cubic_out,
    elastic_in,
    elastic_in_out,
    elastic_out,
    expo_in,
    expo_out,
    in_out,
    lerp,
    linear,
    quad_in,
    quad_in_out,
    quad_out,
    sin_in,
    sin_in_out,
    sin_out,
    wrap,
)


def test_clamp_limits():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp(2, 0, 3) == 2


@pytest.mark.parametrize("x", [725, -30, 360, 0, 1000.5])
def test_wrap_lands_in_range_by_whole_periods(x):
    r = wrap(x, 0, 360)
    assert 0 <= r <= 360
    assert (x - r) % 360 == 0


def test_wrap_empty_range_raises():
    with pytest.raises(ValueError):
        wrap(5, 3, 3)


def test_wrap_empty_range_inside_returns_value():
    assert wrap(3, 3, 3) == 3


def test_lerp_endpoints_and_midpoint():
    assert lerp(0, 2, 6) == 2
    assert lerp(1, 2, 6) == 6
    assert lerp(0.5, 2, 6) == pytest.approx(4)


def test_easing_start_points():
    starts = [
        linear(0.0), sin_in(0.0), sin_out(0.0), sin_in_out(0.0),
        quad_in(0.0), quad_out(0.0), quad_in_out(0.0),
        cubic_in(0.0), cubic_out(0.0), cubic_in_out(0.0),
        elastic_in(0.0), elastic_out(0.0), elastic_in_out(0.0),
    ]
    assert starts == pytest.approx([0.0] * len(starts), abs=1e-9)


def test_easing_end_points():
    ends = [
        linear(1.0), sin_in(1.0), sin_out(1.0), sin_in_out(1.0),
        quad_in(1.0), quad_out(1.0), quad_in_out(1.0),
        cubic_in(1.0), cubic_out(1.0), cubic_in_out(1.0),
        elastic_in(1.0), elastic_out(1.0), elastic_in_out(1.0),
    ]
    assert ends == pytest.approx([1.0] * len(ends), abs=1e-9)


@pytest.mark.parametrize("x", [0.1, 0.3, 0.45])
def test_in_out_is_point_symmetric(x):
    assert sin_in_out(x) + sin_in_out(1 - x) == pytest.approx(1.0)
    assert quad_in_out(x) + quad_in_out(1 - x) == pytest.approx(1.0)
    assert cubic_in_out(x) + cubic_in_out(1 - x) == pytest.approx(1.0)
    assert elastic_in_out(x) + elastic_in_out(1 - x) == pytest.approx(1.0)


def test_in_out_uses_given_curves():
    assert in_out(0.25, linear, linear) == pytest.approx(0.25)
    assert in_out(0.75, quad_in, quad_out) == pytest.approx(quad_in_out(0.75))


@pytest.mark.parametrize("x", [0.0, 0.2, 0.5, 0.9])
def test_expo_matches_named_curves(x):
    assert expo_in(x, 2) == pytest.approx(quad_in(x))
    assert expo_in(x, 3) == pytest.approx(cubic_in(x))
    assert expo_out(x, 2) == pytest.approx(quad_out(x))
    assert expo_out(x, 3) == pytest.approx(cubic_out(x))


def test_quad_in_value():
    assert quad_in(0.5) == pytest.approx(0.25)


@pytest.mark.parametrize("x", [0.1, 0.4, 0.7])
def test_out_mirrors_in(x):
    assert elastic_out(x) == pytest.approx(1 - elastic_in(1 - x))
    assert sin_out(x) == pytest.approx(1 - sin_in(1 - x))


def test_elastic_undershoots_and_overshoots():
    assert elastic_in(0.2) < 0
    assert elastic_out(0.8) > 1


@pytest.mark.parametrize("ease", [sin_in, sin_out, quad_in, quad_out, cubic_in, cubic_out])
def test_monotonic(ease):
    values = [ease(i / 20) for i in range(21)]
    assert values == sorted(values)