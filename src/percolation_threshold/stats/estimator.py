"""
Monte Carlo estimation of the percolation threshold.

Each trial opens uniformly random sites on a fresh n-by-n grid until it
percolates and records the fraction of open sites at that moment. The
trial fractions are summarized by their mean, sample standard deviation and
a 95% confidence interval under the normal approximation.
"""

import math
from concurrent.futures import ProcessPoolExecutor
from typing import Any, Dict, Optional

import numpy as np

from ..exceptions import InvalidArgumentError
from ..percolation.grid import Percolation

CONFIDENCE_95 = 1.96


def run_trial(n: int, rng: np.random.Generator) -> float:
    """
    Run one percolation trial.

    Row and column are drawn independently and uniformly from [1, n] on every
    iteration. Already-open sites may be drawn again; opening them is a no-op.

    Args:
        n: Grid size
        rng: Random generator to draw sites from

    Returns:
        Fraction of sites open when the system first percolates
    """
    perc = Percolation(n)
    while not perc.percolates():
        row = int(rng.integers(1, n, endpoint=True))
        col = int(rng.integers(1, n, endpoint=True))
        perc.open(row, col)
    return perc.number_of_open_sites() / (n * n)


def _run_seeded_trial(n: int, seed_seq: np.random.SeedSequence) -> float:
    return run_trial(n, np.random.default_rng(seed_seq))


class PercolationStats:
    """
    Run independent percolation trials on an n-by-n grid.

    All trials run eagerly in the constructor; the accessors only reduce the
    stored fractions.

    Randomness comes from either an injected numpy Generator (all trials draw
    from it in order) or a seed. With a seed, one child SeedSequence is
    spawned per trial, so results do not depend on the number of workers.

    Example:
        ps = PercolationStats(200, 100, seed=42)
        print(ps.mean(), ps.confidence_lo(), ps.confidence_hi())
    """

    def __init__(self, n: int, trials: int, rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None, workers: int = 1):
        """
        Perform `trials` independent experiments on an n-by-n grid.

        Args:
            n: Grid size (> 0)
            trials: Number of trials (> 0)
            rng: Generator shared by all trials, run sequentially in-process;
                cannot be combined with seed or workers > 1
            seed: Seed for per-trial generators
            workers: Number of worker processes
        """
        if n <= 0 or trials <= 0:
            raise InvalidArgumentError(
                f"grid size and trial count must be greater than 0, got n={n}, trials={trials}"
            )
        if workers <= 0:
            raise InvalidArgumentError(f"workers must be greater than 0, got {workers}")
        if rng is not None and (seed is not None or workers > 1):
            raise InvalidArgumentError("rng cannot be combined with seed or workers > 1")

        self.n = n
        self.trials = trials

        if rng is not None:
            fractions = [run_trial(n, rng) for _ in range(trials)]
        else:
            children = np.random.SeedSequence(seed).spawn(trials)
            if workers > 1:
                with ProcessPoolExecutor(max_workers=workers) as ex:
                    # map() yields in submission order
                    fractions = list(ex.map(_run_seeded_trial, [n] * trials, children))
            else:
                fractions = [_run_seeded_trial(n, child) for child in children]

        self.thresholds = np.asarray(fractions, dtype=np.float64)

    def mean(self) -> float:
        """Sample mean of the percolation threshold."""
        return float(np.mean(self.thresholds))

    def stddev(self) -> float:
        """
        Sample standard deviation of the percolation threshold.

        Undefined for a single trial; returns nan in that case.
        """
        if self.trials < 2:
            return float('nan')
        return float(np.std(self.thresholds, ddof=1))

    def _half_width(self) -> float:
        return CONFIDENCE_95 * self.stddev() / math.sqrt(self.trials)

    def confidence_lo(self) -> float:
        """Low endpoint of the 95% confidence interval."""
        return self.mean() - self._half_width()

    def confidence_hi(self) -> float:
        """High endpoint of the 95% confidence interval."""
        return self.mean() + self._half_width()

    def summary(self) -> Dict[str, Any]:
        return {
            'n': self.n,
            'trials': self.trials,
            'mean': self.mean(),
            'stddev': self.stddev(),
            'confidence_lo': self.confidence_lo(),
            'confidence_hi': self.confidence_hi(),
        }
