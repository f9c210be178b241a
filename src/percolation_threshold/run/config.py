"""
Run configuration.

A RunConfig loads a YAML run definition naming the grid sizes, trial
count and seed of a threshold sweep, plus an optional summary CSV path.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional


def _is_int(value: Any) -> bool:
    # YAML booleans load as bool, which is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


class RunConfig:
    """
    Loads and validates a run configuration YAML.

    Example:
        config = RunConfig.from_yaml('config/run_small.yaml')
        print(config.run_name)
        print(config.grid_sizes, config.trials)
    """

    def __init__(self, data: Dict[str, Any]):
        self._data = data
        self._validate()

    @classmethod
    def from_yaml(cls, path: str) -> 'RunConfig':
        """Load run config from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Run config not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Run config must be a mapping: {path}")

        return cls(data)

    def _validate(self):
        """Validate required config sections and simulation values."""
        required_sections = ['run_name', 'simulation']
        for section in required_sections:
            if section not in self._data:
                raise ValueError(f"Missing required config section: '{section}'")

        sim = self._data['simulation']
        if not isinstance(sim, dict):
            raise ValueError("Config section 'simulation' must be a mapping")
        if 'grid_sizes' not in sim:
            raise ValueError("Missing required simulation key: 'grid_sizes'")
        if 'trials' not in sim:
            raise ValueError("Missing required simulation key: 'trials'")

        sizes = sim['grid_sizes']
        if not _is_int(sizes) and (not isinstance(sizes, list) or not sizes):
            raise ValueError(
                f"grid_sizes must be an integer or a non-empty list, got {sizes!r}"
            )

        for n in self.grid_sizes:
            if not _is_int(n) or n < 1:
                raise ValueError(f"Grid sizes must be integers >= 1, got {n!r}")

        if not _is_int(sim['trials']) or sim['trials'] < 1:
            raise ValueError(f"trials must be an integer >= 1, got {sim['trials']!r}")

        seed = sim.get('seed')
        if seed is not None and (not _is_int(seed) or seed < 0):
            raise ValueError(f"seed must be a non-negative integer, got {seed!r}")

    # --- Properties ---

    @property
    def run_name(self) -> str:
        return self._data['run_name']

    @property
    def description(self) -> str:
        return self._data.get('description', '')

    # --- Simulation ---

    @property
    def grid_sizes(self) -> List[int]:
        """Grid sizes to sweep; a single int is accepted as a one-element list."""
        sizes = self._data['simulation']['grid_sizes']
        if _is_int(sizes):
            return [sizes]
        return list(sizes)

    @property
    def trials(self) -> int:
        return self._data['simulation']['trials']

    @property
    def seed(self) -> Optional[int]:
        return self._data['simulation'].get('seed')

    # --- Output ---

    @property
    def summary_csv(self) -> Optional[Path]:
        path = (self._data.get('output') or {}).get('summary_csv')
        return Path(path) if path else None
