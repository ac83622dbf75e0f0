from __future__ import annotations

import altair as alt
import polars as pl

from lakeviz.analysis.regression import RegressionFit, fit_frame, trend_line
from lakeviz.core.errors import InsufficientDataError
from lakeviz.viz.base import to_values
from lakeviz.viz.legend import LakeSummary


# Uniform chart defaults for a professional look
def _apply_chart_defaults(ch: alt.TopLevelMixin) -> alt.TopLevelMixin:
    try:
        return (
            ch.configure_axis(labelFontSize=12, titleFontSize=12, grid=True)
            .configure_legend(labelFontSize=12, titleFontSize=12)
            .configure_title(fontSize=14)
            .configure_view(strokeOpacity=0)
        )
    except Exception:
        # If configuration fails (e.g., non-top-level), return chart as-is
        return ch


def placeholder_chart(message: str) -> alt.TopLevelMixin:
    """Empty chart carrying a message (used when a view has no visible data)."""
    return _apply_chart_defaults(
        alt.Chart(alt.Data(values=[{"msg": message}])).mark_text(size=14).encode(text="msg:N")
    )


def _lake_color_scale(lakes: list[LakeSummary]) -> alt.Scale:
    return alt.Scale(domain=[s.lake for s in lakes], range=[s.color for s in lakes])


_SESSION_TOOLTIP = [
    alt.Tooltip("lake:N", title="Lake"),
    alt.Tooltip("date:T", title="Date", format="%b %d, %Y"),
    alt.Tooltip("weather:N", title="Weather"),
    alt.Tooltip("air_temp:Q", title="Air Temp (°C)"),
]


# ----------------------------
# Time series (depth-band averages)
# ----------------------------


def time_series_chart(
    df: pl.DataFrame,
    *,
    lakes: list[LakeSummary],
    value_label: str,
    title: str,
) -> alt.TopLevelMixin:
    """Line + points of depth-band averages per lake over sampling dates.

    Args:
        df (pl.DataFrame): Output of lakeviz.analysis.depth_bucket_average.
        lakes (list[LakeSummary]): Visible lakes (domain and lead colors).
        value_label (str): Y axis title.
        title (str): Chart title (depth band name).
    """
    if df.height == 0:
        return placeholder_chart("No visible data for this depth range")
    base = alt.Chart(alt.Data(values=to_values(df.sort(["lake", "date"])))).encode(
        x=alt.X("date:T", title="Date"),
        y=alt.Y("value:Q", title=value_label, scale=alt.Scale(zero=False)),
        color=alt.Color("lake:N", title="Lake", scale=_lake_color_scale(lakes)),
    )
    line = base.mark_line(strokeWidth=2)
    points = base.mark_circle(size=60).encode(
        tooltip=[alt.Tooltip("value:Q", title=value_label, format=".2f"), *_SESSION_TOOLTIP]
    )
    return _apply_chart_defaults(alt.layer(line, points).properties(title=title))


# ----------------------------
# Depth profiles (raw per-session lines)
# ----------------------------


def depth_profile_chart(
    df: pl.DataFrame,
    *,
    value_label: str,
    title: str,
    horizontal: bool = False,
) -> alt.TopLevelMixin:
    """One line per visible session; depth on y (inverted) or, when horizontal, on x.

    Args:
        df (pl.DataFrame): raw_depth_series output with series_id/color columns attached.
        value_label (str): Parameter axis title.
        title (str): Chart title (lake name).
        horizontal (bool): Put depth on the x axis.
    """
    if df.height == 0:
        return placeholder_chart("No visible data for this lake")
    depth_axis = alt.Scale(reverse=not horizontal, zero=True)
    depth_enc = ("depth:Q", "Depth (m)", depth_axis)
    value_enc = ("value:Q", value_label, alt.Scale(zero=False))
    x_field, x_title, x_scale = depth_enc if horizontal else value_enc
    y_field, y_title, y_scale = value_enc if horizontal else depth_enc

    base = alt.Chart(alt.Data(values=to_values(df))).encode(
        x=alt.X(x_field, title=x_title, scale=x_scale),
        y=alt.Y(y_field, title=y_title, scale=y_scale),
        color=alt.Color("color:N", scale=None),
        detail="series_id:N",
        order="measurement_index:Q",
    )
    line = base.mark_line(strokeWidth=2, opacity=0.8)
    points = base.mark_circle(size=30, stroke="white", strokeWidth=1).encode(
        tooltip=[
            alt.Tooltip("date:T", title="Date", format="%b %d, %Y"),
            alt.Tooltip("depth:Q", title="Depth (m)"),
            alt.Tooltip("value:Q", title=value_label, format=".2f"),
        ]
    )
    return _apply_chart_defaults(alt.layer(line, points).properties(title=title))


# ----------------------------
# Correlation scatter with trend overlay
# ----------------------------


def fit_or_none(df: pl.DataFrame) -> RegressionFit | None:
    """Least-squares fit of (x, y), or None when no trend line can be drawn."""
    try:
        return fit_frame(df)
    except InsufficientDataError:
        return None


def trend_overlay(df: pl.DataFrame, fit: RegressionFit) -> alt.LayerChart:
    """Dashed regression line across the x extent plus an R² label."""
    xs = df.get_column("x")
    line_df = trend_line(fit, float(xs.min()), float(xs.max()))  # type: ignore[arg-type]
    line = (
        alt.Chart(alt.Data(values=to_values(line_df)))
        .mark_line(color="#333", strokeDash=[5, 5], strokeWidth=2, opacity=0.8)
        .encode(x="x:Q", y="y:Q")
    )
    label = (
        alt.Chart(alt.Data(values=[{"label": f"R² = {fit.r_squared:.3f}"}]))
        .mark_text(align="right", baseline="top", dx=-10, dy=10, color="#666", fontSize=12)
        .encode(text="label:N", x=alt.value(500), y=alt.value(0))
    )
    return alt.layer(line, label)  # type: ignore


def correlation_chart(
    df: pl.DataFrame,
    *,
    x_label: str,
    y_label: str,
    title: str,
    with_depth: bool = True,
) -> alt.TopLevelMixin:
    """Scatter of paired values colored by the time gradient, with trend overlay.

    Args:
        df (pl.DataFrame): Frame with x, y, lake, date, weather, air_temp and a color column.
        x_label (str): X axis title.
        y_label (str): Y axis title.
        title (str): Chart title.
        with_depth (bool): Include depth in the tooltip.

    Notes:
        The overlay is omitted when lakeviz.analysis.regression raises InsufficientDataError.
    """
    if df.height == 0:
        return placeholder_chart("No data available")
    tooltip = [
        *_SESSION_TOOLTIP[:2],
        alt.Tooltip("x:Q", title=x_label, format=".2f"),
        alt.Tooltip("y:Q", title=y_label, format=".2f"),
    ]
    if with_depth and "depth" in df.columns:
        tooltip.append(alt.Tooltip("depth:Q", title="Depth (m)"))
    tooltip += _SESSION_TOOLTIP[2:]
    points = (
        alt.Chart(alt.Data(values=to_values(df)))
        .mark_circle(size=60, opacity=0.8, stroke="white", strokeWidth=1)
        .encode(
            x=alt.X("x:Q", title=x_label, scale=alt.Scale(zero=False)),
            y=alt.Y("y:Q", title=y_label, scale=alt.Scale(zero=False)),
            color=alt.Color("color:N", scale=None),
            tooltip=tooltip,
        )
    )
    fit = fit_or_none(df)
    chart: alt.TopLevelMixin = points
    if fit is not None:
        chart = alt.layer(points, trend_overlay(df, fit))
    return _apply_chart_defaults(chart.properties(title=title))


# ----------------------------
# Secchi depth
# ----------------------------


def secchi_time_series_chart(df: pl.DataFrame, *, lakes: list[LakeSummary]) -> alt.TopLevelMixin:
    """Secchi means over time: a line per lake, points colored by season.

    Args:
        df (pl.DataFrame): secchi_time_series output with a season color column.
        lakes (list[LakeSummary]): Visible lakes (line colors).
    """
    if df.height == 0:
        return placeholder_chart("No Secchi depth data available")
    values = to_values(df)
    line = (
        alt.Chart(alt.Data(values=values))
        .mark_line(strokeWidth=3, interpolate="monotone", opacity=0.8)
        .encode(
            x=alt.X("timestamp:T", title="Date", axis=alt.Axis(format="%b %Y")),
            y=alt.Y("value:Q", title="Secchi Depth (m)", scale=alt.Scale(zero=True)),
            color=alt.Color("lake:N", title="Lake", scale=_lake_color_scale(lakes)),
        )
    )
    points = (
        alt.Chart(alt.Data(values=values))
        .mark_circle(size=80, stroke="white", strokeWidth=2)
        .encode(
            x="timestamp:T",
            y="value:Q",
            color=alt.Color("color:N", scale=None),
            tooltip=[
                alt.Tooltip("lake:N", title="Lake"),
                alt.Tooltip("date:T", title="Date", format="%b %d, %Y"),
                alt.Tooltip("value:Q", title="Secchi Depth (m)", format=".2f"),
                alt.Tooltip("surface_temp:Q", title="Surface Temp (°C)", format=".1f"),
                alt.Tooltip("surface_do:Q", title="Surface DO (mg/L)", format=".2f"),
                alt.Tooltip("surface_ph:Q", title="Surface pH", format=".2f"),
                alt.Tooltip("weather:N", title="Weather"),
                alt.Tooltip("air_temp:Q", title="Air Temp (°C)"),
            ],
        )
    )
    return _apply_chart_defaults(
        alt.layer(line, points).properties(title="Secchi Depth Time Series Analysis")
    )


def secchi_correlation_chart(df: pl.DataFrame, *, x_label: str) -> alt.TopLevelMixin:
    """Surface parameter (x) against Secchi depth (y), season-colored, with trend overlay."""
    return correlation_chart(
        df,
        x_label=x_label,
        y_label="Secchi Depth (m)",
        title=f"Secchi Depth vs {x_label}",
        with_depth=False,
    )
