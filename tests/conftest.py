#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandLink v0.1.0

Pytest configuration and shared fixtures.

Author: StrandLink Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import pytest
from pathlib import Path
import tempfile
import shutil

from strandlink.assembly_core import FragmentTable, OverlapConfig, build_overlap_graph


def make_graph(sequences, k, colour_space=None):
    """Build an overlap graph from a list of sequences named c0, c1, ..."""
    config = OverlapConfig(k=k, colour_space=colour_space)
    table = FragmentTable(config)
    for i, sequence in enumerate(sequences):
        table.add_sequence(f"c{i}", sequence)
    return build_overlap_graph(table, config)


@pytest.fixture
def graph_factory():
    """Factory building an overlap graph from raw sequences."""
    return make_graph


@pytest.fixture
def temp_output_dir():
    """Create temporary output directory for tests."""
    temp_dir = tempfile.mkdtemp(prefix="strandlink_test_")
    yield Path(temp_dir)
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def scenario_a_fasta():
    """Two contigs where the end of the first is the start of the second (k=4)."""
    return ">c0 9 12\nAAATTTCCC\n>c1 9 30\nCCCGGGTTT\n"


@pytest.fixture
def config_k4():
    return OverlapConfig(k=4)

# StrandLink v0.1.0
# Any usage is subject to this software's license.
