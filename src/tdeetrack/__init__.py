"""Adaptive TDEE estimation from daily weight and calorie logs."""

__version__ = "0.1.0"
