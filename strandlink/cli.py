#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command-line interface for StrandLink.

This module provides the main CLI entry point and all subcommands for
building contig overlap graphs.
"""

import sys
import click
from pathlib import Path
import yaml

from .version import __version__
from .config.schema import (
    apply_overrides,
    load_config,
    overlap_config_from,
    save_config_template,
    validate_config,
)
from .errors import ConfigError, StrandLinkError

PROGRAM = "strandlink"


@click.group()
@click.version_option(version=__version__)
@click.pass_context
def main(ctx):
    """
    StrandLink: find overlaps of exactly k-1 bases between contigs.

    Builds the bidirected overlap graph of a set of contigs, accounting for
    both strands, and writes it as an adjacency list, DOT, SAM or GFA.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)


# ============================================================================
# Overlap Graph Command
# ============================================================================

@main.command()
@click.argument('files', nargs=-1, type=click.Path(exists=True, allow_dash=True))
@click.option('--kmer', '-k', 'k', type=int, default=None,
              help='k-mer size; overlaps are exactly k-1 bases')
@click.option('--adj', 'output_format', flag_value='adj',
              help='Output the results in adj format [DEFAULT]')
@click.option('--dot', 'output_format', flag_value='dot',
              help='Output the results in dot format')
@click.option('--sam', 'output_format', flag_value='sam',
              help='Output the results in SAM format')
@click.option('--gfa', 'output_format', flag_value='gfa',
              help='Output the results in GFA format')
@click.option('--colour-space/--nucleotide', 'colour_space', default=None,
              help='Force the residue alphabet (default: detect from the first contig)')
@click.option('--output', '-o', type=click.Path(),
              help='Output graph file (default: standard output)')
@click.option('--stats', 'stats_file', type=click.Path(),
              help='Write graph statistics to this JSON file')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True),
              help='Configuration file (YAML)')
@click.option('--verbose', '-v', count=True, help='Display verbose output (repeat for debug)')
def build(files, k, output_format, colour_space, output, stats_file, config_file, verbose):
    """
    Find overlaps of exactly k-1 bases.

    Contigs are read from FILES or standard input. The graph is written to
    standard output unless --output is given.

    Examples:
        strandlink build -k 31 contigs.fa > contigs.adj

        strandlink build -k 31 --dot -o contigs.dot contigs.fa.gz
    """
    from .utils.pipeline import OverlapPipeline, setup_logging, verbosity_to_level

    command_line = ' '.join([PROGRAM] + sys.argv[1:])

    try:
        config = load_config(Path(config_file) if config_file else None)
        config = apply_overrides(config, {
            'overlap.k': k,
            'overlap.colour_space': colour_space,
            'output.format': output_format,
            'output.path': output,
            'output.stats_file': stats_file,
        })
        overlap_config = overlap_config_from(config)
        overlap_config.verbose = verbose
    except ConfigError as e:
        click.echo(f"{PROGRAM}: {e}", err=True)
        click.echo(f"Try `{PROGRAM} build --help' for more information.", err=True)
        sys.exit(1)

    logging_config = config['output']['logging']
    setup_logging(
        verbosity_to_level(verbose, logging_config['level']),
        logging_config.get('log_file')
    )

    pipeline = OverlapPipeline(
        overlap_config,
        output_format=config['output']['format'],
        stats_path=config['output']['stats_file']
    )

    try:
        out_path = config['output']['path']
        if out_path:
            from .io_utils.fasta_reader import read_fragments
            from .io_utils.graph_export import export_graph

            # Build first; the file is only created once the graph is complete
            result = pipeline.assemble(read_fragments(files))
            export_graph(result.graph, out_path, pipeline.output_format, PROGRAM, command_line)
        else:
            pipeline.run(files, sys.stdout, PROGRAM, command_line)
    except (StrandLinkError, OSError) as e:
        click.echo(f"{PROGRAM}: {e}", err=True)
        sys.exit(1)


# ============================================================================
# Configuration Management Commands
# ============================================================================

@main.group()
def config():
    """Configuration management commands."""
    pass


@config.command('init')
@click.option('--output', '-o', type=click.Path(), default='strandlink_config.yaml',
              help='Output configuration file path')
@click.option('--kmer', '-k', 'k', type=int, default=None,
              help='Pre-fill the k-mer size')
def config_init(output, k):
    """Generate a template configuration file with all available parameters."""
    click.echo(f"Generating configuration template: {output}")

    try:
        save_config_template(Path(output), k=k)
        click.echo(f"✓ Configuration file created: {output}")
    except OSError as e:
        click.echo(f"✗ Error creating configuration: {e}", err=True)
        sys.exit(1)


@config.command('validate')
@click.argument('config_file', type=click.Path(exists=True))
def config_validate(config_file):
    """Validate a configuration file."""
    click.echo(f"Validating configuration file: {config_file}")

    try:
        config = load_config(Path(config_file))
    except ConfigError as e:
        click.echo(f"✗ Error validating configuration: {e}", err=True)
        sys.exit(1)

    errors = validate_config(config)
    if errors:
        click.echo("\n✗ Configuration validation failed:")
        for error in errors:
            click.echo(f"  • {error}", err=True)
        sys.exit(1)

    click.echo("✓ Configuration is valid")
    click.echo(f"  k: {config['overlap']['k']} (overlap {config['overlap']['k'] - 1})")
    click.echo(f"  Format: {config['output']['format']}")


@config.command('show')
@click.argument('config_file', type=click.Path(exists=True))
@click.option('--format', '-f', type=click.Choice(['yaml', 'summary']), default='summary',
              help='Output format')
def config_show(config_file, format):
    """Display configuration settings."""
    try:
        config = load_config(Path(config_file))
    except ConfigError as e:
        click.echo(f"✗ Error reading configuration: {e}", err=True)
        sys.exit(1)

    if format == 'yaml':
        click.echo(yaml.dump(config, default_flow_style=False, sort_keys=False))
        return

    colour_space = config['overlap']['colour_space']
    alphabet = 'auto' if colour_space is None else ('colour-space' if colour_space else 'nucleotide')

    click.echo(f"Configuration from: {config_file}")
    click.echo("=" * 60)
    click.echo("\nOverlap:")
    click.echo(f"  k: {config['overlap']['k']}")
    click.echo(f"  Alphabet: {alphabet}")
    click.echo("\nOutput:")
    click.echo(f"  Format: {config['output']['format']}")
    click.echo(f"  Path: {config['output']['path'] or 'stdout'}")
    click.echo(f"  Statistics: {config['output']['stats_file'] or 'none'}")
    click.echo(f"  Log level: {config['output']['logging']['level']}")


if __name__ == '__main__':
    sys.exit(main())
