"""
Percolation Threshold - Monte Carlo estimation of the site percolation threshold.

This package provides tools for:
- Incremental grid connectivity tracking without backwash
- Monte Carlo threshold estimation with confidence intervals
- Grid size sweeps with finite-size extrapolation
- Replaying and rendering pre-recorded open-site sequences
"""

__version__ = "1.0.0"
