"""
Threshold sweeps across grid sizes.

Runs PercolationStats for a series of grid sizes, collects the summaries
into a DataFrame and extrapolates the infinite-lattice threshold from the
finite-size means.
"""

import time
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

import numpy as np
import pandas as pd
from scipy.stats import linregress

from .estimator import PercolationStats
from ..exceptions import InvalidArgumentError
from ..utils.timing import format_duration, seconds_since

SWEEP_COLUMNS = ['n', 'trials', 'mean', 'stddev', 'confidence_lo', 'confidence_hi',
                 'elapsed_seconds']


def run_sweep(
    grid_sizes: Iterable[int],
    trials: int,
    seed: Optional[int] = None,
    workers: int = 1,
) -> pd.DataFrame:
    """
    Estimate the threshold for each grid size.

    Each size gets its own child seed so the rows are independent and
    reproducible for a given seed.

    Args:
        grid_sizes: Grid sizes n to simulate
        trials: Trials per grid size
        seed: Base seed (None for fresh entropy)
        workers: Worker processes per estimator

    Returns:
        DataFrame with one row per grid size, columns SWEEP_COLUMNS
    """
    grid_sizes = [int(n) for n in grid_sizes]
    if not grid_sizes:
        raise InvalidArgumentError("grid_sizes must not be empty")

    child_seeds = np.random.SeedSequence(seed).spawn(len(grid_sizes))

    print(f"Running sweep over {len(grid_sizes)} grid sizes, {trials} trials each")

    rows = []
    for n, child in zip(grid_sizes, child_seeds):
        start = time.perf_counter()
        ps = PercolationStats(n, trials, seed=int(child.generate_state(1)[0]), workers=workers)
        elapsed = seconds_since(start)

        row = ps.summary()
        row['elapsed_seconds'] = elapsed
        rows.append(row)

        print(f"  n={n:<5d} mean={row['mean']:.6f} stddev={row['stddev']:.6f} "
              f"({format_duration(elapsed)})")

    return pd.DataFrame(rows, columns=SWEEP_COLUMNS)


def extrapolate_threshold(df: pd.DataFrame, exponent: float = -0.75) -> Dict[str, float]:
    """
    Extrapolate the threshold to an infinite grid.

    Fits mean = pc_inf + slope * n**exponent by least squares; the intercept
    is the threshold estimate at n -> infinity. The default exponent is
    -1/nu with nu = 4/3 for 2D percolation.

    Args:
        df: Sweep results with 'n' and 'mean' columns
        exponent: Finite-size scaling exponent

    Returns:
        Dict with 'pc_inf', 'slope', 'r_squared'
    """
    if df['n'].nunique() < 2:
        raise ValueError("Extrapolation needs at least two distinct grid sizes")

    x = df['n'].to_numpy(dtype=np.float64) ** exponent
    y = df['mean'].to_numpy(dtype=np.float64)
    fit = linregress(x, y)

    return {
        'pc_inf': float(fit.intercept),
        'slope': float(fit.slope),
        'r_squared': float(fit.rvalue ** 2),
    }


def save_sweep(df: pd.DataFrame, output_file: Union[str, Path]) -> Path:
    """Write sweep results to CSV, creating parent directories."""
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_file, index=False)
    return output_file
