[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "robokin"
version = "0.1.0"
description = "Runge-Kutta integrators, 3D frame transforms and planar geometry helpers for robotics work"
requires-python = ">=3.11"
dependencies = [
    "numpy",
]
keywords = ["robotics", "runge-kutta", "integration", "kinematics", "frame transforms", "quaternion"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["robokin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"
