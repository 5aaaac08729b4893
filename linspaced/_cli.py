import click

from linspaced.linspaced import Linspaced
from linspaced._version import version


def run(values, separator):
    """Drains the iterator, echoing each value."""
    click.echo(separator.join(map(str, values)))


@click.command()
@click.argument('start', type=float)
@click.argument('end', type=float)
@click.argument('count', type=int)
@click.option(
        '--inclusive/--exclusive', default=False,
        help='Whether END is the last value printed.'
        )
@click.option(
        '--reverse', is_flag=True,
        help='Print the values in descending index order.'
        )
@click.option(
        '--separator', default='\n', show_default=repr('\n'),
        help='String placed between successive values.'
        )
@click.version_option(version=version)
def linspace(start, end, count, inclusive, reverse, separator):
    """Prints COUNT evenly spaced values from START towards END."""
    if count < 0:
        raise click.BadParameter(
                f'must be non-negative, got {count}.', param_hint='COUNT')
    values = Linspaced(start, end, count, inclusive).as_iter()
    if reverse:
        values = values.rev()
    run(values, separator)
