"""Chart and window parameters, and helpers for 2D chart drawing."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from robokin.angles import AngleUnits
from robokin.config import ConfigError, read_config
from robokin.transforms import FrameTransform3

__all__ = [
    "Color",
    "WindowParams",
    "ChartParams",
    "AnimationParams",
    "Config",
    "load_config",
    "closed_polygon",
    "mouse_chart_position",
]

Color = tuple[int, int, int]
Point2 = tuple[float, float]


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = data.get(name)
    if not isinstance(value, Mapping):
        raise ConfigError(f"missing or invalid table `{name}`")
    return value


def _field(section: Mapping[str, Any], name: str) -> Any:
    try:
        return section[name]
    except KeyError:
        raise ConfigError(f"missing field `{name}`") from None


def _int(value: Any, name: str, *, minimum: int | None = None, maximum: int | None = None) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"field `{name}` must be an integer, got {value!r}")
    if minimum is not None and value < minimum:
        raise ConfigError(f"field `{name}` must be at least {minimum}, got {value}")
    if maximum is not None and value > maximum:
        raise ConfigError(f"field `{name}` must be at most {maximum}, got {value}")
    return value


def _float(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"field `{name}` must be a number, got {value!r}")
    return float(value)


def _str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"field `{name}` must be a string, got {value!r}")
    return value


def _sequence(value: Any, name: str, length: int) -> Sequence[Any]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence) or len(value) != length:
        raise ConfigError(f"field `{name}` must hold exactly {length} values, got {value!r}")
    return value


def _color(value: Any, name: str) -> Color:
    red, green, blue = (
        _int(channel, name, minimum=0, maximum=255) for channel in _sequence(value, name, 3)
    )
    return (red, green, blue)


def _range(value: Any, name: str) -> tuple[float, float]:
    low, high = (_float(bound, name) for bound in _sequence(value, name, 2))
    return (low, high)


@dataclass(frozen=True)
class WindowParams:
    """Parameters to make a window."""

    title: str
    width: int
    height: int

    @classmethod
    def _from_mapping(cls, data: Mapping[str, Any]) -> WindowParams:
        return cls(
            title=_str(_field(data, "title"), "title"),
            width=_int(_field(data, "width"), "width", minimum=0),
            height=_int(_field(data, "height"), "height", minimum=0),
        )


@dataclass(frozen=True)
class ChartParams:
    """Parameters to make a chart; colours are RGB triples in [0, 255]."""

    background_color: Color
    label_color: Color
    margin: int
    label_size: int
    label_font: str
    label_font_size: int
    x_range: tuple[float, float]
    y_range: tuple[float, float]

    @classmethod
    def _from_mapping(cls, data: Mapping[str, Any]) -> ChartParams:
        return cls(
            background_color=_color(_field(data, "background_color"), "background_color"),
            label_color=_color(_field(data, "label_color"), "label_color"),
            margin=_int(_field(data, "margin"), "margin"),
            label_size=_int(_field(data, "label_size"), "label_size"),
            label_font=_str(_field(data, "label_font"), "label_font"),
            label_font_size=_int(_field(data, "label_font_size"), "label_font_size"),
            x_range=_range(_field(data, "x_range"), "x_range"),
            y_range=_range(_field(data, "y_range"), "y_range"),
        )


@dataclass(frozen=True)
class AnimationParams:
    """Sampling and frame rates for an animation."""

    sample_rate: float
    frame_rate: float

    @classmethod
    def _from_mapping(cls, data: Mapping[str, Any]) -> AnimationParams:
        return cls(
            sample_rate=_float(_field(data, "sample_rate"), "sample_rate"),
            frame_rate=_float(_field(data, "frame_rate"), "frame_rate"),
        )


@dataclass(frozen=True)
class Config:
    """Window, chart and animation parameters together."""

    window_params: WindowParams
    chart_params: ChartParams
    animation_params: AnimationParams

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Config:
        """Build a configuration from nested mappings, as read from TOML.

        Raises:
            ConfigError: if a table or field is missing or has the wrong type.
        """
        return cls(
            window_params=WindowParams._from_mapping(_section(data, "window_params")),
            chart_params=ChartParams._from_mapping(_section(data, "chart_params")),
            animation_params=AnimationParams._from_mapping(_section(data, "animation_params")),
        )


def load_config(config_path: str | Path) -> Config:
    """Read a TOML file and build a :class:`Config` from it."""
    return Config.from_mapping(read_config(config_path))


def closed_polygon(points: Sequence[Point2]) -> list[Point2]:
    """Return the points with the first one repeated at the end, closing the outline.

    Raises:
        ValueError: if ``points`` is empty.
    """
    if not points:
        raise ValueError("a polygon needs at least one point")
    outline = [tuple(point) for point in points]
    outline.append(outline[0])
    return outline


def mouse_chart_position(
    position: Point2, window_params: WindowParams, chart_params: ChartParams
) -> Point2:
    """Convert a window pixel position to chart axis coordinates.

    Window axes run +x right and +y down; chart axes run +x right and +y up.
    The axes are assumed linear.

    Raises:
        ValueError: if an axis range is not strictly increasing.
    """
    x_low, x_high = chart_params.x_range
    y_low, y_high = chart_params.y_range
    if not x_low < x_high:
        raise ValueError(f"x range {chart_params.x_range!r} must be increasing")
    if not y_low < y_high:
        raise ValueError(f"y range {chart_params.y_range!r} must be increasing")

    width = float(window_params.width)
    height = float(window_params.height)
    label = float(chart_params.label_size)
    margin = float(chart_params.margin)

    x0_fraction = -x_low / (x_high - x_low)
    y0_fraction = -y_low / (y_high - y_low)

    x_offset = (
        width * x0_fraction
        + label * (1.0 - x0_fraction)
        + margin * (1.0 - 2.0 * x0_fraction)
    )
    y_offset = (
        height * (1.0 - y0_fraction)
        - label * (1.0 - y0_fraction)
        - margin * (1.0 - 2.0 * y0_fraction)
    )

    # Flip the window's y axis and move the origin to the chart's (0, 0).
    transform = FrameTransform3(
        [-x_offset, y_offset, 0.0, math.pi, 0.0, 0.0], AngleUnits.RADIAN
    )
    point = transform.point_b_to_i([position[0], position[1], 0.0])

    x_scale = (width - label - margin * 2.0) / (x_high - x_low)
    y_scale = (height - label - margin * 2.0) / (y_high - y_low)
    return (float(point[0] / x_scale), float(point[1] / y_scale))