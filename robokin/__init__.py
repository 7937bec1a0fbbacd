"""Runge-Kutta integrators, frame transforms, geometry and configuration helpers for robotics."""

__version__ = "0.1.0"