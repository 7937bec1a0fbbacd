# robokin

Small numerical building blocks for robotics and kinematics work:

- single-step explicit Runge-Kutta integrators of orders 1 to 4 for
  `dx/dt = f(x, t)`, and a fixed-step loop over an interval,
- rigid-body frame transforms between a body frame and an inertial frame
  (points, angles, angular and linear velocities and accelerations),
- planar geometry helpers: clamping, angle wrapping, and the corners of a
  heading-aligned rectangle or the end points of a line,
- TOML configuration loading and chart coordinate helpers.

## Installation

```
pip install robokin
```

numpy is the only runtime dependency. Python 3.11 or later is required.

## Integrating an ODE

`robokin.integrators` provides `rk1` (Euler), `rk2`, `rk3` and `rk4`, all with
the signature `(func, x0, t0, tf)`. Each advances the state `x0` from `t0` to
`tf` in one step and returns a new NumPy array. `func(x, t)` returns dx/dt.

`robokin.stepping.integrate(integrator, func, x0, start, end, step)` repeats
steps of size `step` while the end of the next step does not pass `end`; a
final partial step is never taken. It raises `ValueError` if `step` is not
greater than zero.

```python
import math
import numpy as np
from robokin.integrators import rk4
from robokin.stepping import integrate

def dxdt(x, t):
    return np.array([math.cos(t)])

x = rk4(dxdt, np.array([0.0]), 0.0, 0.1)
final = integrate(rk4, dxdt, np.array([0.0]), 0.0, math.pi, 0.01)
```

## Angles

`robokin.angles` has the `AngleUnits` enum (`RADIAN`, `DEGREE`) and the
conversions `rad_to_deg` and `deg_to_rad`, which accept numbers or NumPy arrays.

## Frame transforms

`robokin.transforms.FrameTransform3` takes six offsets
`[x, y, z, roll, pitch, yaw]` and an optional unit. Angles are taken as
degrees unless `AngleUnits.RADIAN` is given; the same unit is assumed for the
angular rates passed to the velocity and acceleration transforms.

```python
from robokin.angles import AngleUnits
from robokin.transforms import FrameTransform3

tf = FrameTransform3([1, 2, 3, 90, 90, 90], AngleUnits.DEGREE)
inertial = tf.point_b_to_i([1, 2, 3])
body = tf.point_i_to_b(inertial)
```

Methods come in `_b_to_i` / `_i_to_b` pairs: `point`, `angle`,
`angular_velocity`, `angular_acceleration`, `linear_velocity` and
`linear_acceleration`. The linear velocity and acceleration transforms add
the lever-arm terms of the translation, e.g.
`tf.linear_velocity_b_to_i(velocity, angular_velocity)`.

The lower-level `UnitQuaternion` (with `from_euler_angles`, `rotate`,
`inverse`) and `Isometry` (with `transform_point`, `inverse`) live in
`robokin.rigid`.

## Geometry helpers

```python
import math
from robokin.angles import AngleUnits
from robokin.geometry import (
    bound_value,
    bound_polar_value,
    calculate_rectangle_points,
    calculate_line_endpoints,
)

bound_value(10, 1, 5)                               # 5
bound_polar_value(8 * math.pi, -math.pi, math.pi)   # about 0.0
calculate_line_endpoints((1.0, 1.0), 5.0, 90.0, AngleUnits.DEGREE)
# about [(1.0, 1.0), (1.0, 6.0)]
calculate_rectangle_points((1.0, 1.0), 3.0, 2.0, 1.0, 2.0, 90.0, AngleUnits.DEGREE)
# about [(0.0, 4.0), (3.0, 4.0), (3.0, -1.0), (0.0, -1.0)]
```

Rectangle corners come back as front left, front right, rear right, rear left.
`bound_value` raises `ValueError` if the lower bound is above the upper bound;
`bound_polar_value` wraps into `[lower, upper)` and raises `ValueError` unless
the lower bound is strictly below the upper bound.

## Configuration and charts

`robokin.config.read_config(path)` reads a TOML file into a dictionary and
raises `ConfigError` when the file cannot be read or parsed.

`robokin.chart.load_config(path)` builds a `Config` holding `WindowParams`,
`ChartParams` and `AnimationParams` from the tables `window_params`,
`chart_params` and `animation_params`; `Config.from_mapping` does the same from
an already parsed mapping. Missing or mistyped fields raise `ConfigError`.

```toml
[window_params]
title = "Demo"
width = 800
height = 600

[chart_params]
background_color = [255, 255, 255]
label_color = [0, 0, 0]
margin = 10
label_size = 40
label_font = "sans-serif"
label_font_size = 12
x_range = [-10.0, 10.0]
y_range = [-10.0, 10.0]

[animation_params]
sample_rate = 100.0
frame_rate = 30.0
```

`closed_polygon(points)` repeats the first point at the end of an outline, and
`mouse_chart_position(position, window_params, chart_params)` maps a window
pixel position (+y down) to chart axis units (+y up).

## What this package does not do

It does not open windows, draw charts or render shapes. The chart module only
holds the parameters and coordinate arithmetic; drawing is left to whatever
plotting library you use. There is no command-line program.