from __future__ import annotations

import random

import polars as pl
import pytest

from lakeviz.analysis import fit_frame, linear_regression, trend_line
from lakeviz.core.errors import InsufficientDataError


def test_exact_line_has_unit_r_squared() -> None:
    fit = linear_regression([(1, 2), (2, 4), (3, 6)])
    assert abs(fit.slope - 2.0) < 1e-9
    assert abs(fit.intercept) < 1e-9
    assert abs(fit.r_squared - 1.0) < 1e-9
    assert fit.n == 3
    assert fit.predict(10) == pytest.approx(20.0)


def test_noisy_fit_matches_closed_form() -> None:
    fit = linear_regression([(0, 1), (1, 2), (2, 2), (3, 4)])
    # slope = (4*18 - 6*9) / (4*14 - 36) = 18/20
    assert fit.slope == pytest.approx(0.9)
    assert fit.intercept == pytest.approx(0.9)
    assert 0.0 < fit.r_squared < 1.0


def test_constant_y_reports_perfect_fit() -> None:
    fit = linear_regression([(1, 5), (2, 5), (4, 5)])
    assert fit.slope == pytest.approx(0.0)
    assert fit.r_squared == 1.0


@pytest.mark.parametrize("points", [[], [(1.0, 2.0)], [(3.0, 1.0), (3.0, 2.0), (3.0, 9.0)]])
def test_insufficient_or_degenerate_input_raises(points) -> None:
    with pytest.raises(InsufficientDataError):
        linear_regression(points)


def test_fit_is_deterministic_for_the_same_sequence() -> None:
    rng = random.Random(42)
    pts = [(rng.uniform(0, 25), rng.uniform(4, 12)) for _ in range(50)]
    assert linear_regression(pts) == linear_regression(list(pts))


def test_fit_frame_and_trend_line() -> None:
    df = pl.DataFrame({"x": [0.0, 1.0, 2.0], "y": [1.0, 3.0, 5.0]})
    fit = fit_frame(df)
    line = trend_line(fit, 0.0, 2.0)
    assert line.get_column("x").to_list() == [0.0, 2.0]
    assert line.get_column("y").to_list() == pytest.approx([1.0, 5.0])
