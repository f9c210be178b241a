"""
Command-line interface for percolation_threshold.

Commands:
    percolation-stats stats 200 100 --seed 42
    percolation-stats sweep --sizes 10,20,50 --trials 100 --output summary.csv
    percolation-stats run --config run.yaml
"""

import click
from pathlib import Path

from .. import __version__


def _parse_sizes(ctx, param, value):
    try:
        return [int(s) for s in value.split(',') if s.strip()]
    except ValueError:
        raise click.BadParameter(f"expected comma-separated integers, got '{value}'")


def _print_sweep(df):
    columns = ['n', 'trials', 'mean', 'stddev', 'confidence_lo', 'confidence_hi']
    click.echo(df[columns].to_string(index=False))


@click.group()
@click.version_option(version=__version__)
def cli():
    """Percolation Threshold - Monte Carlo estimation of the percolation threshold."""
    pass


@cli.command('stats')
@click.argument('n', type=int)
@click.argument('trials', type=int)
@click.option('--seed', type=int, help='Random seed (default: fresh entropy)')
def stats(n, trials, seed):
    """Run TRIALS experiments on an N-by-N grid and print summary statistics."""
    from ..percolation.stats import PercolationStats
    from ..percolation.grid_percolation import InvalidArgumentError
    from ..utils.timing import format_duration

    try:
        ps = PercolationStats(n, trials, seed=seed)
    except InvalidArgumentError as e:
        raise click.BadParameter(str(e))

    click.echo(f"mean                    = {ps.mean()}")
    click.echo(f"stddev                  = {ps.stddev()}")
    click.echo(f"95% confidence interval = [{ps.confidence_lo()}, {ps.confidence_hi()}]")
    click.echo(f"elapsed                 = {format_duration(ps.elapsed_seconds)}")


@cli.command('sweep')
@click.option('--sizes', '-s', required=True, callback=_parse_sizes,
              help='Comma-separated grid sizes (e.g. 10,20,50)')
@click.option('--trials', '-t', required=True, type=int, help='Trials per grid size')
@click.option('--seed', type=int, help='Root random seed')
@click.option('--output', '-o', type=click.Path(), help='Write summary table to CSV')
def sweep(sizes, trials, seed, output):
    """Estimate the threshold for several grid sizes."""
    from ..percolation.stats import sweep_grid_sizes
    from ..percolation.grid_percolation import InvalidArgumentError

    click.echo(f"Sweeping {len(sizes)} grid sizes with {trials} trials each")

    try:
        df = sweep_grid_sizes(sizes, trials, seed=seed, verbose=True)
    except InvalidArgumentError as e:
        raise click.BadParameter(str(e))

    _print_sweep(df)

    if output:
        output = Path(output)
        output.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output, index=False)
        click.echo(f"✓ Saved summary to {output}")


@cli.command('run')
@click.option('--config', '-c', 'config_path', required=True, type=click.Path(exists=True),
              help='Run configuration YAML')
def run(config_path):
    """Run a threshold sweep defined by a YAML config."""
    import yaml
    from ..run.config import RunConfig
    from ..percolation.stats import sweep_grid_sizes
    from ..percolation.grid_percolation import InvalidArgumentError
    from ..utils.timing import format_duration

    try:
        config = RunConfig.from_yaml(config_path)
    except (ValueError, yaml.YAMLError) as e:
        raise click.ClickException(f"Invalid run config: {e}")

    click.echo(f"Run: {config.run_name}")
    if config.description:
        click.echo(f"  {config.description}")
    click.echo(f"Grid sizes: {config.grid_sizes}, trials: {config.trials}, seed: {config.seed}")

    try:
        df = sweep_grid_sizes(config.grid_sizes, config.trials, seed=config.seed, verbose=True)
    except InvalidArgumentError as e:
        raise click.ClickException(f"Invalid run config: {e}")

    _print_sweep(df)
    click.echo(f"Total time: {format_duration(float(df['elapsed_seconds'].sum()))}")

    if config.summary_csv is not None:
        config.summary_csv.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(config.summary_csv, index=False)
        click.echo(f"✓ Saved summary to {config.summary_csv}")


if __name__ == '__main__':
    cli()
