#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandLink v0.1.0

Graph Statistics — descriptive aggregates of an overlap graph for
diagnostic output and JSON export. Computing statistics never modifies the
graph.

Author: StrandLink Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from __future__ import annotations
import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import numpy as np

from strandlink.assembly_core.overlap_graph_module import OverlapGraph

logger = logging.getLogger(__name__)


@dataclass
class GraphStats:
    """Summary of an overlap graph."""
    num_fragments: int
    num_vertices: int
    num_edges: int
    edges_per_vertex: float
    num_isolated: int  # oriented vertices with no in- or out-edges
    num_self_loops: int
    out_degree_histogram: list[int] = field(default_factory=list)
    total_length: int = 0
    min_length: int = 0
    max_length: int = 0
    mean_length: float = 0.0
    n50: int = 0
    k: int = 0
    distance: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def calculate_n50(lengths: np.ndarray) -> int:
    """
    Length of the shortest fragment among the longest ones covering half of
    the total length.

    Example:
        >>> calculate_n50(np.array([2, 3, 4, 5]))
        4
    """
    if lengths.size == 0:
        return 0
    ordered = np.sort(lengths)[::-1]
    cumulative = np.cumsum(ordered)
    return int(ordered[np.searchsorted(cumulative, cumulative[-1] / 2)])


def compute_graph_stats(graph: OverlapGraph) -> GraphStats:
    """
    Calculate vertex, edge, degree and length statistics.

    Args:
        graph: Overlap graph

    Returns:
        GraphStats
    """
    vertices = list(graph.vertices())
    out_degrees = np.array([graph.out_degree(v) for v in vertices], dtype=np.int64)
    in_degrees = np.array([graph.in_degree(v) for v in vertices], dtype=np.int64)
    lengths = np.array([fragment.length for fragment in graph.fragments], dtype=np.int64)

    num_vertices = graph.num_vertices
    num_self_loops = sum(1 for edge in graph.edges() if edge.source == edge.target)

    return GraphStats(
        num_fragments=len(graph.fragments),
        num_vertices=num_vertices,
        num_edges=graph.num_edges,
        edges_per_vertex=graph.num_edges / num_vertices if num_vertices else 0.0,
        num_isolated=int(np.count_nonzero((out_degrees == 0) & (in_degrees == 0))),
        num_self_loops=num_self_loops,
        out_degree_histogram=np.bincount(out_degrees).tolist() if out_degrees.size else [],
        total_length=int(lengths.sum()),
        min_length=int(lengths.min()) if lengths.size else 0,
        max_length=int(lengths.max()) if lengths.size else 0,
        mean_length=float(lengths.mean()) if lengths.size else 0.0,
        n50=calculate_n50(lengths),
        k=graph.k,
        distance=graph.distance,
    )


def format_graph_stats(stats: GraphStats) -> str:
    """
    Render statistics as a short multi-line report.

    The degree line lists, for each out-degree d = 0, 1, 2, ..., the number
    of oriented vertices with that out-degree.
    """
    lines = [
        f"Fragments: {stats.num_fragments:,}",
        f"V={stats.num_vertices} E={stats.num_edges} E/V={stats.edges_per_vertex:.4g}",
        f"Isolated vertices: {stats.num_isolated:,}",
        f"Self-loops: {stats.num_self_loops:,}",
        "Degree: " + ' '.join(str(count) for count in stats.out_degree_histogram),
        f"Total length: {stats.total_length:,} bp (N50 {stats.n50:,} bp)",
    ]
    return '\n'.join(lines)


def export_graph_stats(stats: GraphStats, output_path: str | Path) -> None:
    """
    Export statistics to JSON.

    Args:
        stats: Statistics from compute_graph_stats
        output_path: Path to output JSON file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        json.dump(stats.to_dict(), f, indent=2)

    logger.info(f"Graph statistics exported to {output_path}")
