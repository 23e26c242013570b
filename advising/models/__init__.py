"""
Data models for the advising assistant.

This package contains the dataclasses passed between the data layer and
the presentation layer.
"""

from .course import Course

__all__ = ["Course"]
