"""Tests for the command-line interface."""

import pandas as pd
import pytest
import yaml
from click.testing import CliRunner

from percolation_threshold.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def backwash_file(tmp_path):
    path = tmp_path / 'backwash3.txt'
    path.write_text("3\n2 3\n3 3\n1 1\n2 1\n3 1\n")
    return path


class TestStatsCommand:
    """Tests for 'perc-threshold stats'."""

    def test_prints_statistics(self, runner):
        result = runner.invoke(cli, ['stats', '5', '10', '--seed', '1'])

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[0].startswith('mean                    = ')
        assert lines[1].startswith('stddev                  = ')
        assert lines[2].startswith('95% confidence interval = [')

    def test_invalid_arguments(self, runner):
        result = runner.invoke(cli, ['stats', '0', '10'])

        assert result.exit_code == 2
        assert 'greater than 0' in result.output


class TestReplayCommand:
    """Tests for 'perc-threshold replay'."""

    def test_flag_model(self, runner, backwash_file):
        result = runner.invoke(cli, ['replay', str(backwash_file)])

        assert result.exit_code == 0
        assert 'Open sites:    5' in result.output
        assert 'Full sites:    3' in result.output
        assert 'Percolates:    yes' in result.output

    def test_virtual_model_shows_backwash(self, runner, backwash_file):
        result = runner.invoke(cli, ['replay', str(backwash_file), '--model', 'virtual'])

        assert result.exit_code == 0
        assert 'Full sites:    5' in result.output

    def test_out_of_range_site(self, runner, tmp_path):
        path = tmp_path / 'bad.txt'
        path.write_text("2\n3 1\n")

        result = runner.invoke(cli, ['replay', str(path)])

        assert result.exit_code == 2
        assert 'Invalid site' in result.output


class TestRenderCommand:
    """Tests for 'perc-threshold render'."""

    def test_render(self, runner, backwash_file, tmp_path):
        output = tmp_path / 'grid.png'

        result = runner.invoke(cli, ['render', str(backwash_file), '-o', str(output)])

        assert result.exit_code == 0
        assert output.exists()


class TestSweepCommand:
    """Tests for 'perc-threshold sweep'."""

    def test_sweep(self, runner, tmp_path):
        config = {
            'run_name': 'cli_test',
            'sweep': {'grid_sizes': [3, 4, 5], 'trials': 4, 'seed': 0},
            'output': {'base_dir': str(tmp_path / 'results')},
        }
        config_path = tmp_path / 'sweep.yaml'
        config_path.write_text(yaml.safe_dump(config))

        result = runner.invoke(cli, ['sweep', '--config', str(config_path)])

        assert result.exit_code == 0
        assert 'Extrapolated threshold' in result.output
        df = pd.read_csv(tmp_path / 'results' / 'cli_test_thresholds.csv')
        assert list(df['n']) == [3, 4, 5]

    def test_single_size_skips_extrapolation(self, runner, tmp_path):
        config = {'run_name': 'one', 'sweep': {'grid_sizes': [3], 'trials': 2, 'seed': 0}}
        config_path = tmp_path / 'sweep.yaml'
        config_path.write_text(yaml.safe_dump(config))
        output = tmp_path / 'one.csv'

        result = runner.invoke(cli, ['sweep', '-c', str(config_path), '-o', str(output)])

        assert result.exit_code == 0
        assert 'Skipping extrapolation' in result.output
        assert output.exists()

    def test_non_numeric_exponent(self, runner, tmp_path):
        config = {'run_name': 'bad', 'sweep': {'grid_sizes': [3, 4], 'trials': 2,
                                               'exponent': 'abc'}}
        config_path = tmp_path / 'sweep.yaml'
        config_path.write_text(yaml.safe_dump(config))

        result = runner.invoke(cli, ['sweep', '-c', str(config_path)])

        assert result.exit_code == 2
        assert 'exponent' in result.output

    def test_invalid_config(self, runner, tmp_path):
        config_path = tmp_path / 'sweep.yaml'
        config_path.write_text(yaml.safe_dump({'run_name': 'bad'}))

        result = runner.invoke(cli, ['sweep', '-c', str(config_path)])

        assert result.exit_code == 2
        assert 'Invalid sweep config' in result.output
