"""
Command-line interface for percolation_threshold.

Commands:
    perc-threshold stats 200 100 --seed 42        - Estimate the threshold for one grid size
    perc-threshold replay input.txt               - Replay an open-site sequence
    perc-threshold render input.txt -o grid.png   - Render a replayed grid
    perc-threshold sweep --config sweep.yaml      - Sweep grid sizes and extrapolate
"""

import click
from pathlib import Path

from ..exceptions import InvalidArgumentError

MODELS = ['flags', 'virtual']


def _model_class(name):
    from ..percolation import Percolation, VirtualSitePercolation

    return VirtualSitePercolation if name == 'virtual' else Percolation


def _replay_or_fail(input_file, model):
    from ..percolation.replay import replay

    try:
        return replay(input_file, model_cls=_model_class(model))
    except InvalidArgumentError as e:
        raise click.UsageError(f"Invalid site in {input_file}: {e}")
    except ValueError as e:
        raise click.UsageError(str(e))


@click.group()
@click.version_option()
def cli():
    """Percolation Threshold - Monte Carlo estimation of the site percolation threshold."""
    pass


@cli.command('stats')
@click.argument('n', type=int)
@click.argument('trials', type=int)
@click.option('--seed', type=int, help='Random seed for reproducible trials')
@click.option('--workers', '-w', default=1, help='Number of worker processes')
def stats(n, trials, seed, workers):
    """Run TRIALS experiments on an N-by-N grid and print threshold statistics."""
    from ..stats.estimator import PercolationStats

    try:
        ps = PercolationStats(n, trials, seed=seed, workers=workers)
    except InvalidArgumentError as e:
        raise click.UsageError(str(e))

    click.echo(f"mean                    = {ps.mean()}")
    click.echo(f"stddev                  = {ps.stddev()}")
    click.echo(f"95% confidence interval = [{ps.confidence_lo()}, {ps.confidence_hi()}]")


@cli.command('replay')
@click.argument('input_file', type=click.Path(exists=True))
@click.option('--model', '-m', default='flags', type=click.Choice(MODELS),
              help='Connectivity model (virtual is subject to backwash)')
def replay_cmd(input_file, model):
    """Replay an open-site sequence file and report the final grid state."""
    perc = _replay_or_fail(input_file, model)

    n_full = int(perc.full_mask().sum())
    click.echo(f"Grid size:     {perc.n}x{perc.n}")
    click.echo(f"Open sites:    {perc.number_of_open_sites()}")
    click.echo(f"Full sites:    {n_full}")
    click.echo(f"Percolates:    {'yes' if perc.percolates() else 'no'}")


@cli.command('render')
@click.argument('input_file', type=click.Path(exists=True))
@click.option('--output', '-o', 'output_file', required=True, type=click.Path(),
              help='Output image file (.png, .pdf, .svg)')
@click.option('--model', '-m', default='flags', type=click.Choice(MODELS),
              help='Connectivity model (virtual is subject to backwash)')
@click.option('--title', help='Plot title')
def render(input_file, output_file, model, title):
    """Replay an open-site sequence file and render the grid."""
    from ..view.render import render_grid

    perc = _replay_or_fail(input_file, model)
    saved = render_grid(perc, output_file, title=title)
    click.echo(f"Saved grid image to {saved}")


@cli.command('sweep')
@click.option('--config', '-c', 'config_path', required=True, type=click.Path(exists=True),
              help='Sweep config YAML file')
@click.option('--output', '-o', 'output_file', type=click.Path(),
              help='Output CSV (default from config)')
def sweep(config_path, output_file):
    """Estimate thresholds over the grid sizes in a sweep config."""
    from ..run.config import SweepConfig
    from ..stats.sweep import run_sweep, extrapolate_threshold, save_sweep

    try:
        config = SweepConfig.from_yaml(config_path)
    except ValueError as e:
        raise click.UsageError(f"Invalid sweep config: {e}")

    click.echo(f"Run: {config.run_name}")
    if config.description:
        click.echo(f"  {config.description}")

    df = run_sweep(config.grid_sizes, config.trials, seed=config.seed, workers=config.workers)

    output_file = Path(output_file) if output_file else config.results_csv
    save_sweep(df, output_file)
    click.echo(f"Saved {len(df)} rows to {output_file}")

    if df['n'].nunique() >= 2:
        fit = extrapolate_threshold(df, exponent=config.exponent)
        click.echo(f"Extrapolated threshold pc(inf) = {fit['pc_inf']:.6f} "
                   f"(R^2 = {fit['r_squared']:.4f})")
    else:
        click.echo("Skipping extrapolation (needs at least two grid sizes)")


if __name__ == '__main__':
    cli()
