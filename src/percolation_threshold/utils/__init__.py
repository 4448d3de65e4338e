"""Shared utilities."""

from .timing import format_duration, seconds_since

__all__ = ['format_duration', 'seconds_since']
