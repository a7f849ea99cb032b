#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Overlap Graph Engine for StrandLink.

This module builds the bidirected overlap graph of a set of contigs: an edge
u -> v joins two oriented fragments when the last k-1 residues of u equal the
first k-1 residues of v.

Key features:
- Consumes a locked FragmentTable and its OrientedEndKmerIndex
- Edges are inserted only in complementary pairs, (u, v) with (~v, ~u)
- Every edge carries the same distance, -(k-1)
- Self-loops and edges to many fragments sharing an end are kept
"""

from collections import defaultdict
from typing import Dict, Iterator, List, Optional, Sequence, Tuple
import logging

from strandlink.errors import StateError
from .data_structures import Edge, FragmentTable, OrientedVertex, OverlapConfig
from .kmer_index import OrientedEndKmerIndex

logger = logging.getLogger(__name__)


class OverlapGraph:
    """
    Bidirected overlap graph over oriented fragments.

    The vertex set is the fragment table, both orientations of every
    fragment. Edges can only be added through ``insert_bidirected_edge`` so
    that (u, v) is present exactly when (~v, ~u) is.

    Attributes:
        fragments: The locked fragment table
        config: Run configuration
        distance: Distance annotation shared by every edge
    """

    def __init__(self, fragments: FragmentTable, config: OverlapConfig):
        self.fragments = fragments
        self.config = config
        self.distance = config.distance
        self._out_edges: Dict[OrientedVertex, List[Edge]] = defaultdict(list)
        self._in_edges: Dict[OrientedVertex, List[Edge]] = defaultdict(list)
        self._num_edges = 0
        self._frozen = False

    def insert_bidirected_edge(
        self,
        u: OrientedVertex,
        v: OrientedVertex
    ) -> Tuple[Edge, ...]:
        """
        Insert the edge (u, v) together with its mirror (~v, ~u).

        When the edge is its own mirror (v == ~u) it is stored once.

        Returns:
            The inserted edges

        Raises:
            StateError: If the graph is frozen
            KeyError: If either vertex is not in the fragment table
        """
        if self._frozen:
            raise StateError("overlap graph is frozen; edges can no longer be added")
        for vertex in (u, v):
            if vertex not in self.fragments:
                raise KeyError(f"vertex {vertex} is not in the fragment table")

        edge = Edge(u, v, self.distance)
        mirror = edge.mirror()
        self._add_edge(edge)
        if mirror == edge:
            return (edge,)
        self._add_edge(mirror)
        return (edge, mirror)

    def _add_edge(self, edge: Edge):
        self._out_edges[edge.source].append(edge)
        self._in_edges[edge.target].append(edge)
        self._num_edges += 1

    def freeze(self):
        """Forbid further edge insertion."""
        self._frozen = True

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    @property
    def k(self) -> int:
        return self.config.k

    @property
    def num_vertices(self) -> int:
        """Number of oriented vertices (two per fragment)."""
        return 2 * len(self.fragments)

    @property
    def num_edges(self) -> int:
        return self._num_edges

    def vertices(self) -> Iterator[OrientedVertex]:
        """All oriented vertices, by fragment id then orientation."""
        for fragment in self.fragments:
            yield OrientedVertex(fragment.id, False)
            yield OrientedVertex(fragment.id, True)

    def edges(self) -> Iterator[Edge]:
        """All edges, grouped by source vertex."""
        for vertex in self.vertices():
            yield from self._out_edges.get(vertex, ())

    def out_edges(self, vertex: OrientedVertex) -> Sequence[Edge]:
        return self._out_edges.get(vertex, ())

    def in_edges(self, vertex: OrientedVertex) -> Sequence[Edge]:
        return self._in_edges.get(vertex, ())

    def out_degree(self, vertex: OrientedVertex) -> int:
        return len(self._out_edges.get(vertex, ()))

    def in_degree(self, vertex: OrientedVertex) -> int:
        return len(self._in_edges.get(vertex, ()))

    def successors(self, vertex: OrientedVertex) -> List[OrientedVertex]:
        """Targets of the outgoing edges of ``vertex``."""
        return [edge.target for edge in self.out_edges(vertex)]

    def has_edge(self, u: OrientedVertex, v: OrientedVertex) -> bool:
        return any(edge.target == v for edge in self.out_edges(u))

    def __repr__(self) -> str:
        return (f"OverlapGraph(fragments={len(self.fragments)}, "
                f"edges={self._num_edges}, k={self.config.k})")


class OverlapGraphBuilder:
    """
    Builder for the overlap graph of a locked fragment table.

    Algorithm:
    1. Index the oriented ends of every fragment (OrientedEndKmerIndex)
    2. For each fragment, take the trailing region of its forward view (R)
       and of its reverse view (revcomp(L))
    3. Look up the vertices whose oriented leading region equals it
    4. Insert each complementary pair once, from its canonical member
    5. Freeze the graph
    """

    def __init__(self, config: OverlapConfig):
        """
        Initialize overlap graph builder.

        Args:
            config: Run configuration (k, alphabet override)
        """
        self.config = config

    def build(
        self,
        table: FragmentTable,
        index: Optional[OrientedEndKmerIndex] = None
    ) -> OverlapGraph:
        """
        Build the frozen overlap graph.

        Args:
            table: Locked fragment table
            index: Prebuilt end k-mer index (built here if None)

        Returns:
            Frozen OverlapGraph

        Raises:
            StateError: If the table is not locked
        """
        if not table.is_locked:
            raise StateError("fragment table must be locked before building the graph")
        if index is None:
            index = OrientedEndKmerIndex(self.config).build(table)
        elif not index.is_built:
            index.build(table)

        logger.info(f"Finding overlaps of exactly {self.config.overlap} residues")
        graph = OverlapGraph(table, self.config)

        for fragment in table:
            forward = OrientedVertex(fragment.id, False)
            reverse = forward.flip()
            for source, trailing in (
                (forward, fragment.trailing),
                (reverse, index.reverse_complement(fragment.leading)),
            ):
                for target in index.candidates_following(trailing):
                    # The mirror pair is found again from flip(target)
                    if Edge(source, target, graph.distance).is_canonical():
                        graph.insert_bidirected_edge(source, target)

        graph.freeze()
        logger.info(f"Built overlap graph: {graph.num_vertices} vertices, {graph.num_edges} edges")
        return graph


def build_overlap_graph(table: FragmentTable, config: OverlapConfig) -> OverlapGraph:
    """
    Convenience function: lock ``table`` if needed, index it and build the graph.

    Args:
        table: Fragment table with all fragments inserted
        config: Run configuration

    Returns:
        Frozen OverlapGraph
    """
    if not table.is_locked:
        table.lock()
    index = OrientedEndKmerIndex(config).build(table)
    return OverlapGraphBuilder(config).build(table, index)
