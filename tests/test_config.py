"""Tests for sweep run configuration."""

from pathlib import Path

import pytest
import yaml

from percolation_threshold.run.config import SweepConfig


def _minimal_config(**sweep_overrides):
    sweep = {'grid_sizes': [10, 20], 'trials': 50}
    sweep.update(sweep_overrides)
    return {'run_name': 'test_run', 'sweep': sweep}


class TestSweepConfig:
    """Tests for SweepConfig loading and validation."""

    def test_defaults(self):
        config = SweepConfig(_minimal_config())

        assert config.run_name == 'test_run'
        assert config.description == ''
        assert config.grid_sizes == [10, 20]
        assert config.trials == 50
        assert config.seed is None
        assert config.workers == 1
        assert config.exponent == pytest.approx(-0.75)
        assert config.results_csv == Path('.') / 'test_run_thresholds.csv'

    def test_from_yaml(self, tmp_path):
        data = _minimal_config(seed=7, workers=2)
        data['output'] = {'base_dir': str(tmp_path / 'results'), 'results_csv': 'out.csv'}
        path = tmp_path / 'sweep.yaml'
        path.write_text(yaml.safe_dump(data))

        config = SweepConfig.from_yaml(str(path))

        assert config.seed == 7
        assert config.workers == 2
        assert config.results_csv == tmp_path / 'results' / 'out.csv'

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            SweepConfig.from_yaml(str(tmp_path / 'missing.yaml'))

    def test_non_mapping_yaml(self, tmp_path):
        path = tmp_path / 'list.yaml'
        path.write_text("- 1\n- 2\n")

        with pytest.raises(ValueError):
            SweepConfig.from_yaml(str(path))

    @pytest.mark.parametrize('section', ['run_name', 'sweep'])
    def test_missing_section(self, section):
        data = _minimal_config()
        del data[section]

        with pytest.raises(ValueError, match=section):
            SweepConfig(data)

    @pytest.mark.parametrize('overrides', [
        {'grid_sizes': []},
        {'grid_sizes': [10, 0]},
        {'grid_sizes': 10},
        {'grid_sizes': [True]},
        {'trials': 0},
        {'trials': 2.5},
        {'workers': 0},
        {'seed': 'abc'},
        {'seed': -1},
        {'exponent': 'abc'},
        {'exponent': None},
    ])
    def test_invalid_values(self, overrides):
        with pytest.raises(ValueError):
            SweepConfig(_minimal_config(**overrides))

    def test_empty_output_section_uses_defaults(self, tmp_path):
        """An 'output:' key with no body falls back to the default paths."""
        path = tmp_path / 'sweep.yaml'
        path.write_text("run_name: empty_out\nsweep:\n  grid_sizes: [4]\n  trials: 2\noutput:\n")

        config = SweepConfig.from_yaml(str(path))

        assert config.base_dir == Path('.')
        assert config.results_csv == Path('.') / 'empty_out_thresholds.csv'

    def test_output_must_be_mapping(self):
        data = _minimal_config()
        data['output'] = ['results']

        with pytest.raises(ValueError, match='output'):
            SweepConfig(data)

    def test_integer_exponent(self):
        config = SweepConfig(_minimal_config(exponent=-1))

        assert config.exponent == -1.0
