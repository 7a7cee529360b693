"""A step-by-step questionnaire about childhood, school and youth, run in the terminal."""

__version__ = "0.1.0"
__all__ = ["state", "results", "childhood", "school", "youth", "app"]