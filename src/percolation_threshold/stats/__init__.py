"""Monte Carlo threshold estimation and grid size sweeps."""

from .estimator import PercolationStats, run_trial, CONFIDENCE_95
from .sweep import run_sweep, extrapolate_threshold, save_sweep

__all__ = [
    'PercolationStats',
    'run_trial',
    'CONFIDENCE_95',
    'run_sweep',
    'extrapolate_threshold',
    'save_sweep',
]
