"""
Assembly Core module for StrandLink.

This module provides the overlap graph construction:
- Fragment table and oriented vertex model
- Oriented end k-mer index
- Bidirected overlap graph and its builder
"""

from .data_structures import (
    OverlapConfig,
    Fragment,
    FragmentTable,
    OrientedVertex,
    Edge,
    parse_coverage,
)

from .kmer_index import (
    OrientedEndKmerIndex,
    detect_alphabet,
    check_alphabet,
)

from .overlap_graph_module import (
    OverlapGraph,
    OverlapGraphBuilder,
    build_overlap_graph,
)

__all__ = [
    # Data structures
    "OverlapConfig",
    "Fragment",
    "FragmentTable",
    "OrientedVertex",
    "Edge",
    "parse_coverage",
    # Indexing
    "OrientedEndKmerIndex",
    "detect_alphabet",
    "check_alphabet",
    # Graph construction
    "OverlapGraph",
    "OverlapGraphBuilder",
    "build_overlap_graph",
]
