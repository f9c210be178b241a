"""
Monte Carlo estimation of the percolation threshold.

Each trial opens uniformly random sites of a fresh grid until it
percolates and records the fraction of open sites. Repeated trials are
summarised by mean, sample standard deviation and a 95% confidence interval.
"""

import numbers
import time
from typing import Any, Dict, Iterable, Optional, Union

import numpy as np
import pandas as pd

from .grid_percolation import InvalidArgumentError, Percolation

CONFIDENCE_95 = 1.96

SeedLike = Union[None, int, np.random.SeedSequence]


def run_trial(n: int, rng: np.random.Generator) -> float:
    """
    Run a single percolation trial.

    Coordinates are drawn with replacement, so a draw may hit a site that is
    already open; those draws are no-ops.

    Args:
        n: Grid size
        rng: Source of uniform coordinates

    Returns:
        Fraction of open sites at the moment the grid first percolates
    """
    p = Percolation(n)

    while not p.percolates():
        # Draw coordinates in batches, checking after every open
        coords = rng.integers(1, n + 1, size=(n * n, 2))
        for row, col in coords:
            p.open(int(row), int(col))
            if p.percolates():
                break

    return p.number_of_open_sites() / (n * n)


class PercolationStats:
    """
    Repeated independent percolation trials on an n-by-n grid.

    Example:
        ps = PercolationStats(20, 100, seed=42)
        ps.mean(), ps.stddev()
        ps.confidence_lo(), ps.confidence_hi()
    """

    def __init__(self, n: int, trials: int, seed: SeedLike = None):
        """
        Run ``trials`` experiments on an n-by-n grid.

        Args:
            n: Grid size, at least 1
            trials: Number of independent trials, at least 1
            seed: Seed for ``numpy.random.default_rng`` (None for fresh entropy)

        Raises:
            InvalidArgumentError: If n or trials is not a positive integer
        """
        for name, value in (('n', n), ('trials', trials)):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
        if n <= 0 or trials <= 0:
            raise InvalidArgumentError(
                f"n and trials must be positive, got n={n}, trials={trials}"
            )

        self.n = n
        self.trials = trials

        rng = np.random.default_rng(seed)

        start_time = time.time()
        self.fractions = np.array([run_trial(n, rng) for _ in range(trials)])
        self.elapsed_seconds = time.time() - start_time

        self._mean = float(np.mean(self.fractions))
        # Sample standard deviation is undefined for a single trial
        if trials > 1:
            self._stddev = float(np.std(self.fractions, ddof=1))
        else:
            self._stddev = float('nan')

    def mean(self) -> float:
        """Sample mean of the percolation threshold."""
        return self._mean

    def stddev(self) -> float:
        """Sample standard deviation of the percolation threshold."""
        return self._stddev

    def _half_width(self) -> float:
        return CONFIDENCE_95 * self._stddev / np.sqrt(self.trials)

    def confidence_lo(self) -> float:
        """Low endpoint of the 95% confidence interval."""
        return self._mean - self._half_width()

    def confidence_hi(self) -> float:
        """High endpoint of the 95% confidence interval."""
        return self._mean + self._half_width()

    def summary(self) -> Dict[str, Any]:
        return {
            'n': self.n,
            'trials': self.trials,
            'mean': self.mean(),
            'stddev': self.stddev(),
            'confidence_lo': self.confidence_lo(),
            'confidence_hi': self.confidence_hi(),
            'elapsed_seconds': self.elapsed_seconds,
        }


def sweep_grid_sizes(
    grid_sizes: Iterable[int],
    trials: int,
    seed: Optional[int] = None,
    verbose: bool = False,
) -> pd.DataFrame:
    """
    Estimate the threshold for several grid sizes.

    Each grid size gets its own child of a ``SeedSequence`` built from
    ``seed``; the i-th size always receives the same random stream for a
    given seed.

    Args:
        grid_sizes: Grid sizes to simulate
        trials: Number of trials per grid size
        seed: Root seed (None for fresh entropy)
        verbose: Print a line per finished grid size

    Returns:
        DataFrame with one row per grid size and the columns of
        ``PercolationStats.summary``
    """
    grid_sizes = list(grid_sizes)
    if not grid_sizes:
        raise InvalidArgumentError("At least one grid size is required")

    children = np.random.SeedSequence(seed).spawn(len(grid_sizes))

    rows = []
    for n, child in zip(grid_sizes, children):
        ps = PercolationStats(n, trials, seed=child)
        rows.append(ps.summary())
        if verbose:
            print(f"  n={n}: mean={ps.mean():.6f}, stddev={ps.stddev():.6f} "
                  f"({trials} trials)")

    return pd.DataFrame(rows)
