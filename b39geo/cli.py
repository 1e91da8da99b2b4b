#!/usr/bin/env python3
"""
b39geo - BIP-39 4-word geocoding.

Usage:
  b39geo encode <lat> <lon>
  b39geo decode <word1> <word2> <word3> <word4>
  b39geo size
  b39geo help

Examples:
  b39geo encode 37.7749 -122.4194
  b39geo decode zoo zoo zoo zoo
"""
import json
import logging
import sys
from typing import List, Optional

import click

from .codec import cell_size, decode, encode
from .dictionary import load_wordlist
from .errors import B39GeoError
from .quantizer import ROUNDING_MODES
from .utils import get_env_var, setup_logger

logger = setup_logger('b39geo')


def _wordlist():
    return load_wordlist(get_env_var('B39GEO_WORDLIST_LANGUAGE', 'english'))


@click.group(invoke_without_command=True)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.pass_context
def cli(ctx, verbose):
    """BIP-39 4-word geocoding.

    \b
    Examples:
      b39geo encode 37.7749 -122.4194
      b39geo decode zoo zoo zoo zoo
    """
    if verbose:
        logger.setLevel(logging.DEBUG)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Negative coordinates look like options to the parser
@cli.command(name='encode', context_settings={'ignore_unknown_options': True})
@click.argument('lat', type=float)
@click.argument('lon', type=float)
@click.option('--rounding', type=click.Choice(ROUNDING_MODES), default='nearest',
              show_default=True, help='Quantization rounding')
def encode_command(lat, lon, rounding):
    """Encode a latitude/longitude as four words."""
    try:
        words = encode(lat, lon, rounding, wordlist=_wordlist())
    except B39GeoError as e:
        raise click.ClickException(str(e))
    logger.debug(f"Encoded ({lat}, {lon}) as {words}")
    click.echo(' '.join(words))


@cli.command(name='decode', context_settings={'ignore_unknown_options': True})
@click.argument('words', nargs=-1, required=True)
@click.option('--corner', is_flag=True, help='Return the lower corner of the cell instead of its center')
def decode_command(words, corner):
    """Decode four words to a latitude/longitude."""
    try:
        coord = decode(list(words), center=not corner, wordlist=_wordlist())
    except B39GeoError as e:
        raise click.ClickException(str(e))
    click.echo(json.dumps(coord._asdict()))


@cli.command()
def size():
    """Print the size of one cell in degrees."""
    click.echo(json.dumps(cell_size()._asdict()))


@cli.command(name='help')
@click.pass_context
def help_command(ctx):
    """Show this message."""
    click.echo(ctx.parent.get_help())


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line tool.

    Returns:
        Exit code: 0 on success, 1 on malformed arguments or codec errors
    """
    try:
        result = cli.main(args=argv, prog_name='b39geo', standalone_mode=False)
    except click.exceptions.Abort:
        click.echo('Aborted!', err=True)
        return 1
    except click.ClickException as e:
        e.show()
        return 1
    return result if isinstance(result, int) else 0


if __name__ == '__main__':
    sys.exit(main())
