"""Site percolation model and Monte Carlo threshold estimation."""

from .union_find import WeightedQuickUnionUF
from .grid_percolation import Percolation, InvalidArgumentError
from .stats import PercolationStats, run_trial, sweep_grid_sizes

__all__ = [
    'WeightedQuickUnionUF',
    'Percolation',
    'InvalidArgumentError',
    'PercolationStats',
    'run_trial',
    'sweep_grid_sizes',
]
