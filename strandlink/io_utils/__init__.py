"""
StrandLink v0.1.0

I/O Module for StrandLink.

1. fasta_reader.py - FASTA fragment loading (gzip and stdin aware)
2. graph_export.py - Overlap graph export (adj, DOT, SAM, GFA)
"""

from .fasta_reader import (
    FragmentRecord,
    FragmentSource,
    open_file,
    read_fasta,
    read_fragments,
)

from .graph_export import (
    GraphFormat,
    parse_graph_format,
    write_graph,
    export_graph,
)

__all__ = [
    # Fragment loading
    "FragmentRecord",
    "FragmentSource",
    "open_file",
    "read_fasta",
    "read_fragments",
    # Graph export
    "GraphFormat",
    "parse_graph_format",
    "write_graph",
    "export_graph",
]
