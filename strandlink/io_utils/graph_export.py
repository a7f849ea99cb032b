#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandLink v0.1.0

Graph Export — adjacency list, Graphviz DOT, SAM and GFA writers for the
overlap graph.

Author: StrandLink Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, TextIO

from strandlink.assembly_core.data_structures import Edge, OrientedVertex
from strandlink.assembly_core.overlap_graph_module import OverlapGraph
from strandlink.errors import ConfigError
from strandlink.version import __version__

logger = logging.getLogger(__name__)


class GraphFormat(Enum):
    """Output formats understood by write_graph."""
    ADJ = "adj"
    DOT = "dot"
    SAM = "sam"
    GFA = "gfa"


def parse_graph_format(value: str | GraphFormat) -> GraphFormat:
    """
    Parse a format name.

    Raises:
        ConfigError: If the name is not a known format
    """
    if isinstance(value, GraphFormat):
        return value
    try:
        return GraphFormat(str(value).lower())
    except ValueError:
        choices = ', '.join(f.value for f in GraphFormat)
        raise ConfigError(f"unknown graph format '{value}' (choose from {choices})")


def canonical_edges(graph: OverlapGraph) -> Iterator[Edge]:
    """One edge per complementary pair; the mirror of each is implied."""
    for edge in graph.edges():
        if edge.is_canonical():
            yield edge


# ============================================================================
#                       ADJACENCY LIST
# ============================================================================

def write_adj(graph: OverlapGraph, handle: TextIO, program: str, command_line: str) -> None:
    """
    Write the graph as an adjacency list.

    One line per fragment and nothing else:
    ``<name> <length> <coverage>\\t<successors of +> ;\\t<successors of -> ;``

    The format has no comment syntax, so the program and command line are
    only logged.
    """
    table = graph.fragments
    logger.debug(f"{program} k={graph.k} d={graph.distance}: {command_line}")
    for fragment in table:
        forward = OrientedVertex(fragment.id, False)
        handle.write(f"{fragment.identifier} {fragment.length} {fragment.coverage}\t")
        for vertex in (forward, forward.flip()):
            for target in graph.successors(vertex):
                handle.write(f"{table.name_of(target)} ")
            handle.write(";" if vertex.reverse else ";\t")
        handle.write("\n")


# ============================================================================
#                       GRAPHVIZ DOT
# ============================================================================

def write_dot(graph: OverlapGraph, handle: TextIO, program: str, command_line: str) -> None:
    """
    Write the graph in Graphviz DOT format.

    Vertex attributes are the fragment length ``l`` and coverage ``C``; the
    uniform edge distance is declared once as a default edge attribute.
    """
    table = graph.fragments
    handle.write(f"// {program}: {command_line}\n")
    handle.write("digraph adj {\n")
    handle.write(f"graph [k={graph.k}]\n")
    handle.write(f"edge [d={graph.distance}]\n")
    for vertex in graph.vertices():
        fragment = table[vertex.fragment_id]
        handle.write(f'"{table.name_of(vertex)}" [l={fragment.length} C={fragment.coverage}]\n')
    for edge in graph.edges():
        handle.write(f'"{table.name_of(edge.source)}" -> "{table.name_of(edge.target)}"\n')
    handle.write("}\n")


# ============================================================================
#                       SAM
# ============================================================================

@dataclass
class SAMRecord:
    """
    An overlap written as an alignment of the target fragment against the
    source fragment.
    """
    qname: str
    flag: int
    rname: str
    pos: int  # 1-based
    cigar: str
    mapq: int = 255

    def to_sam_line(self) -> str:
        return f"{self.qname}\t{self.flag}\t{self.rname}\t{self.pos}\t{self.mapq}\t{self.cigar}\t*\t0\t0\t*\t*"


def edge_to_sam_record(graph: OverlapGraph, edge: Edge) -> SAMRecord:
    """
    Describe ``edge`` as an alignment against the source's forward sequence.

    The k-1 overlap lies at the end of the source when the source is
    forward, at its start otherwise. The target is reported reverse
    complemented (flag 16) when its orientation differs from the source's.
    """
    table = graph.fragments
    overlap = graph.config.overlap
    source = table[edge.source.fragment_id]
    target = table[edge.target.fragment_id]
    clipped = target.length - overlap

    if not edge.source.reverse:
        pos = source.length - overlap + 1
        cigar = f"{overlap}M{clipped}S"
    else:
        pos = 1
        cigar = f"{clipped}S{overlap}M"

    return SAMRecord(
        qname=target.identifier,
        flag=16 if edge.source.reverse != edge.target.reverse else 0,
        rname=source.identifier,
        pos=pos,
        cigar=cigar
    )


def write_sam(graph: OverlapGraph, handle: TextIO, program: str, command_line: str) -> None:
    """Write the graph as SAM, one record per complementary edge pair."""
    handle.write("@HD\tVN:1.0\n")
    for fragment in graph.fragments:
        handle.write(f"@SQ\tSN:{fragment.identifier}\tLN:{fragment.length}\n")
    handle.write(f"@PG\tID:{program}\tPN:{program}\tVN:{__version__}\tCL:{command_line}\n")
    for edge in canonical_edges(graph):
        handle.write(edge_to_sam_record(graph, edge).to_sam_line() + "\n")


# ============================================================================
#                       GFA
# ============================================================================

@dataclass
class GFASegment:
    """Represents a GFA S-line (segment)."""
    name: str
    length: int
    coverage: int

    def to_gfa_line(self) -> str:
        """
        Convert to GFA S-line format.

        Format: S <name> * LN:i:<length> KC:i:<coverage>

        Only the fragment ends are kept in memory, so the sequence is '*'.
        """
        return f"S\t{self.name}\t*\tLN:i:{self.length}\tKC:i:{self.coverage}"


@dataclass
class GFALink:
    """Represents a GFA L-line (link/edge)."""
    from_name: str
    from_orient: str  # '+' or '-'
    to_name: str
    to_orient: str    # '+' or '-'
    overlap: str      # e.g. '3M'

    def to_gfa_line(self) -> str:
        """
        Convert to GFA L-line format.

        Format: L <from> <from_orient> <to> <to_orient> <overlap>
        """
        return f"L\t{self.from_name}\t{self.from_orient}\t{self.to_name}\t{self.to_orient}\t{self.overlap}"


def write_gfa(graph: OverlapGraph, handle: TextIO, program: str, command_line: str) -> None:
    """
    Write the graph in GFA 1.0.

    A GFA link stands for both an edge and its mirror, so one L-line is
    written per complementary pair.
    """
    table = graph.fragments
    handle.write("H\tVN:Z:1.0\n")
    for fragment in table:
        handle.write(GFASegment(fragment.identifier, fragment.length, fragment.coverage).to_gfa_line() + "\n")
    for edge in canonical_edges(graph):
        link = GFALink(
            from_name=table[edge.source.fragment_id].identifier,
            from_orient=edge.source.sense,
            to_name=table[edge.target.fragment_id].identifier,
            to_orient=edge.target.sense,
            overlap=f"{graph.config.overlap}M"
        )
        handle.write(link.to_gfa_line() + "\n")


_WRITERS = {
    GraphFormat.ADJ: write_adj,
    GraphFormat.DOT: write_dot,
    GraphFormat.SAM: write_sam,
    GraphFormat.GFA: write_gfa,
}


def write_graph(
    graph: OverlapGraph,
    handle: TextIO,
    fmt: str | GraphFormat = GraphFormat.ADJ,
    program: str = "strandlink",
    command_line: str = ""
) -> None:
    """
    Serialize the overlap graph.

    Args:
        graph: Frozen overlap graph
        handle: Writable text handle
        fmt: Output format
        program: Program name recorded in the output
        command_line: Invocation recorded in the output
    """
    fmt = parse_graph_format(fmt)
    logger.info(f"Writing {fmt.value} graph with {len(graph.fragments)} fragments "
                f"and {graph.num_edges} edges")
    _WRITERS[fmt](graph, handle, program, command_line)


def export_graph(
    graph: OverlapGraph,
    output_path: str | Path,
    fmt: str | GraphFormat = GraphFormat.ADJ,
    program: str = "strandlink",
    command_line: str = ""
) -> None:
    """Write the overlap graph to a file."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        write_graph(graph, f, fmt, program, command_line)
    logger.info(f"Graph export complete: {output_path}")
