"""Lesson marketplace status workflows."""

__version__ = "1.0.0"
