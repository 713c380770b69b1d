"""
Command-line interface for site_percolation.

Commands:
    perc-grid replay --input sites.txt [--stop-on-percolation]
    perc-grid query  --input sites.txt --site 3 1
    perc-grid run    --config run.yaml

Site files hold the grid dimension followed by 1-based (row, col) pairs.
"""

import click


@click.group()
@click.version_option()
def cli():
    """Site percolation on an n-by-n grid."""
    pass


@cli.command('replay')
@click.option('--input', '-i', 'input_file', required=True, type=click.Path(exists=True),
              help='Site file (grid dimension followed by row/col pairs)')
@click.option('--stop-on-percolation', is_flag=True,
              help='Stop opening sites once the system percolates')
def replay(input_file, stop_on_percolation):
    """Open the sites listed in a file and report whether the grid percolates."""
    from ..percolation import process_site_file

    try:
        _, result = process_site_file(input_file, stop_on_percolation=stop_on_percolation)
    except ValueError as e:
        raise click.ClickException(str(e))

    click.echo(f"Grid: {result.n}x{result.n}")
    click.echo(f"Sites read: {result.sites_read}")
    click.echo(f"Open sites: {result.open_sites} ({result.open_fraction:.4f})")
    if result.percolates:
        click.echo(f"Percolates: yes (after site {result.percolated_after})")
    else:
        click.echo("Percolates: no")


@cli.command('query')
@click.option('--input', '-i', 'input_file', required=True, type=click.Path(exists=True),
              help='Site file (grid dimension followed by row/col pairs)')
@click.option('--site', '-s', required=True, nargs=2, type=int,
              help='1-based ROW COL to inspect after replay')
def query(input_file, site):
    """Replay a site file, then report the state of a single site."""
    from ..percolation import process_site_file

    row, col = site
    try:
        perc, _ = process_site_file(input_file)
        is_open = perc.is_open(row, col)
        is_full = perc.is_full(row, col)
    except ValueError as e:
        raise click.ClickException(str(e))

    click.echo(f"Site ({row}, {col}): open={'yes' if is_open else 'no'} "
               f"full={'yes' if is_full else 'no'}")
    click.echo(f"Percolates: {'yes' if perc.percolates() else 'no'}")


@cli.command('run')
@click.option('--config', '-c', 'config_path', required=True, type=click.Path(exists=True),
              help='Run config YAML file')
def run(config_path):
    """Replay every site file listed in a run config."""
    from ..percolation import process_site_file
    from ..run import RunConfig

    try:
        config = RunConfig.from_yaml(config_path)
    except ValueError as e:
        raise click.ClickException(str(e))

    site_files = config.site_files
    click.echo(f"Run: {config.run_name} ({len(site_files)} site files)")

    processed = 0
    for site_file in site_files:
        try:
            _, result = process_site_file(site_file, stop_on_percolation=config.stop_on_percolation)
        except (OSError, ValueError) as e:
            click.echo(f"  ERROR processing {site_file}: {e}", err=True)
            continue

        click.echo(f"  {site_file.name}: {result.summary()}")
        processed += 1

    click.echo(f"✓ Processed {processed}/{len(site_files)} files")


if __name__ == '__main__':
    cli()
