"""
Percolation Threshold - Monte Carlo estimation of the site percolation threshold.

This package provides tools for:
- Incremental site percolation on an n-by-n grid (union-find backed)
- Repeated random trials with mean, stddev and 95% confidence interval
- Sweeps over several grid sizes driven from the CLI or a YAML run config
"""

__version__ = "1.0.0"
