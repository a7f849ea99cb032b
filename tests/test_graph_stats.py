#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandLink v0.1.0

Tests for overlap graph statistics.

Author: StrandLink Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import json

import numpy as np

from strandlink.assembly_utils.graph_stats import (
    calculate_n50,
    compute_graph_stats,
    export_graph_stats,
    format_graph_stats,
)


class TestGraphStats:
    """Test descriptive aggregates."""

    def test_counts_scenario_a(self, graph_factory):
        graph = graph_factory(["AAATTTCCC", "CCCGGGTTT"], k=4)
        stats = compute_graph_stats(graph)

        assert stats.num_fragments == 2
        assert stats.num_vertices == 4
        assert stats.num_edges == 2
        assert stats.edges_per_vertex == 0.5
        assert stats.num_isolated == 0
        assert stats.num_self_loops == 0
        assert stats.out_degree_histogram == [2, 2]
        assert stats.k == 4
        assert stats.distance == -3

    def test_isolated_and_self_loops(self, graph_factory):
        graph = graph_factory(["AAAGGGAAA", "CGCATATGG"], k=4)
        stats = compute_graph_stats(graph)

        assert stats.num_self_loops == 2
        assert stats.num_isolated == 2  # both orientations of the second fragment

    def test_lengths(self, graph_factory):
        graph = graph_factory(["ACGTA", "ACGTACG", "ACGTACGTA"], k=3)
        stats = compute_graph_stats(graph)

        assert stats.total_length == 21
        assert stats.min_length == 5
        assert stats.max_length == 9
        assert stats.mean_length == 7.0
        assert stats.n50 == 7

    def test_stats_do_not_modify_graph(self, graph_factory):
        graph = graph_factory(["AAATTTCCC", "CCCGGGTTT"], k=4)
        before = [(e.source, e.target) for e in graph.edges()]
        compute_graph_stats(graph)
        assert [(e.source, e.target) for e in graph.edges()] == before


class TestN50:
    """Test N50 calculation."""

    def test_n50(self):
        assert calculate_n50(np.array([2, 3, 4, 5])) == 4

    def test_n50_single(self):
        assert calculate_n50(np.array([10])) == 10

    def test_n50_empty(self):
        assert calculate_n50(np.array([], dtype=np.int64)) == 0


class TestStatsReporting:
    """Test report rendering and JSON export."""

    def test_format(self, graph_factory):
        stats = compute_graph_stats(graph_factory(["AAATTTCCC", "CCCGGGTTT"], k=4))
        report = format_graph_stats(stats)
        assert "V=4 E=2" in report
        assert "Degree: 2 2" in report

    def test_export_json(self, graph_factory, temp_output_dir):
        stats = compute_graph_stats(graph_factory(["AAATTTCCC", "CCCGGGTTT"], k=4))
        path = temp_output_dir / "nested" / "stats.json"
        export_graph_stats(stats, path)

        with open(path) as f:
            data = json.load(f)
        assert data['num_edges'] == 2
        assert data['out_degree_histogram'] == [2, 2]

# StrandLink v0.1.0
# Any usage is subject to this software's license.
