"""
Sweep run configuration.

A SweepConfig loads a YAML run definition describing which grid sizes to
simulate, how many trials to run per size, and where to write results.

Example YAML:
    run_name: square_lattice
    description: Site percolation on square grids
    sweep:
      grid_sizes: [50, 100, 200]
      trials: 200
      seed: 42
      workers: 4
      exponent: -0.75
    output:
      base_dir: results
      results_csv: thresholds.csv
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


class SweepConfig:
    """
    Loads and validates a sweep configuration YAML.

    Example:
        config = SweepConfig.from_yaml('config/square_lattice.yaml')
        print(config.run_name)
        print(config.grid_sizes)
    """

    def __init__(self, data: Dict[str, Any]):
        self._data = data
        self._validate()

    @classmethod
    def from_yaml(cls, path: str) -> 'SweepConfig':
        """Load sweep config from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Sweep config not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Sweep config must be a mapping: {path}")

        return cls(data)

    def _validate(self):
        """Validate required config sections and sweep parameters."""
        required_sections = ['run_name', 'sweep']
        for section in required_sections:
            if section not in self._data:
                raise ValueError(f"Missing required config section: '{section}'")

        sweep = self._data['sweep']
        if not isinstance(sweep, dict):
            raise ValueError("'sweep' section must be a mapping")

        for key in ['grid_sizes', 'trials']:
            if key not in sweep:
                raise ValueError(f"Missing required sweep parameter: '{key}'")

        grid_sizes = sweep['grid_sizes']
        if not isinstance(grid_sizes, list) or not grid_sizes:
            raise ValueError("'grid_sizes' must be a non-empty list")
        if not all(_is_positive_int(n) for n in grid_sizes):
            raise ValueError(f"'grid_sizes' must hold positive integers, got {grid_sizes}")

        if not _is_positive_int(sweep['trials']):
            raise ValueError(f"'trials' must be a positive integer, got {sweep['trials']}")

        seed = sweep.get('seed')
        if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool) or seed < 0):
            raise ValueError(f"'seed' must be a non-negative integer, got {seed}")

        workers = sweep.get('workers', 1)
        if not _is_positive_int(workers):
            raise ValueError(f"'workers' must be a positive integer, got {workers}")

        exponent = sweep.get('exponent', -0.75)
        if not isinstance(exponent, (int, float)) or isinstance(exponent, bool):
            raise ValueError(f"'exponent' must be a number, got {exponent}")

        output = self._data.get('output')
        if output is not None and not isinstance(output, dict):
            raise ValueError("'output' section must be a mapping")

    # --- Properties ---

    @property
    def run_name(self) -> str:
        return self._data['run_name']

    @property
    def description(self) -> str:
        return self._data.get('description', '')

    # --- Sweep parameters ---

    @property
    def grid_sizes(self) -> List[int]:
        return [int(n) for n in self._data['sweep']['grid_sizes']]

    @property
    def trials(self) -> int:
        return int(self._data['sweep']['trials'])

    @property
    def seed(self) -> Optional[int]:
        return self._data['sweep'].get('seed')

    @property
    def workers(self) -> int:
        return int(self._data['sweep'].get('workers', 1))

    @property
    def exponent(self) -> float:
        return float(self._data['sweep'].get('exponent', -0.75))

    # --- Output paths ---

    @property
    def _output(self) -> Dict[str, Any]:
        return self._data.get('output') or {}

    @property
    def base_dir(self) -> Path:
        return Path(self._output.get('base_dir', '.'))

    @property
    def results_csv(self) -> Path:
        name = self._output.get('results_csv', f"{self.run_name}_thresholds.csv")
        return self.base_dir / name


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
