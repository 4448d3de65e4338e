"""Sweep run definitions."""

from .config import SweepConfig

__all__ = ['SweepConfig']
