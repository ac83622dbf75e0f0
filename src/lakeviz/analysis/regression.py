"""
Ordinary least squares for trend overlays.

    slope     = (nΣxy − ΣxΣy) / (nΣx² − (Σx)²)
    intercept = (Σy − slope·Σx) / n
    R²        = 1 − SS_res / SS_tot

Sums are accumulated left to right in input order, so identical inputs always produce
bit-identical results. When every y is equal (SS_tot == 0) the horizontal fit is exact and
R² is reported as 1.0.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import polars as pl

from lakeviz.core.errors import InsufficientDataError

__all__ = [
    "RegressionFit",
    "linear_regression",
    "fit_frame",
    "trend_line",
]


@dataclass(frozen=True)
class RegressionFit:
    """
    Result of a least-squares fit.

    Attributes:
        slope (float): Fitted slope.
        intercept (float): Fitted intercept.
        r_squared (float): Coefficient of determination.
        n (int): Number of points used.
    """

    slope: float
    intercept: float
    r_squared: float
    n: int

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept


def linear_regression(points: Iterable[tuple[float, float]]) -> RegressionFit:
    """
    Fit y = slope·x + intercept by ordinary least squares.

    Args:
        points (Iterable[tuple[float, float]]): (x, y) pairs.

    Returns:
        RegressionFit: slope, intercept, R², n.

    Raises:
        InsufficientDataError: If fewer than 2 points are given or all x are equal.
    """
    xs: list[float] = []
    ys: list[float] = []
    for x, y in points:
        xs.append(float(x))
        ys.append(float(y))
    n = len(xs)
    if n < 2:
        raise InsufficientDataError(f"need at least 2 points for a trend line (got {n})")

    sum_x = 0.0
    sum_y = 0.0
    sum_xy = 0.0
    sum_xx = 0.0
    for x, y in zip(xs, ys):
        sum_x += x
        sum_y += y
        sum_xy += x * y
        sum_xx += x * x

    denom = n * sum_xx - sum_x * sum_x
    if denom == 0.0 or min(xs) == max(xs):
        raise InsufficientDataError("x values are degenerate (zero variance)")

    slope = (n * sum_xy - sum_x * sum_y) / denom
    intercept = (sum_y - slope * sum_x) / n

    y_mean = sum_y / n
    ss_tot = 0.0
    ss_res = 0.0
    for x, y in zip(xs, ys):
        ss_tot += (y - y_mean) ** 2
        ss_res += (y - (slope * x + intercept)) ** 2
    r_squared = 1.0 if ss_tot == 0.0 else 1.0 - ss_res / ss_tot

    return RegressionFit(slope=slope, intercept=intercept, r_squared=r_squared, n=n)


def fit_frame(df: pl.DataFrame, x: str = "x", y: str = "y") -> RegressionFit:
    """Fit the (x, y) columns of a DataFrame in row order."""
    return linear_regression(zip(df.get_column(x).to_list(), df.get_column(y).to_list()))


def trend_line(fit: RegressionFit, x_min: float, x_max: float) -> pl.DataFrame:
    """Two-point line spanning [x_min, x_max] for drawing the overlay."""
    return pl.DataFrame(
        {
            "x": [float(x_min), float(x_max)],
            "y": [fit.predict(float(x_min)), fit.predict(float(x_max))],
        }
    )
