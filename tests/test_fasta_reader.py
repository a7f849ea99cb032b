#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandLink v0.1.0

Tests for FASTA fragment loading.

Author: StrandLink Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import gzip
import io
import sys

import pytest

from strandlink.io_utils.fasta_reader import (
    FragmentRecord,
    FragmentSource,
    is_gzipped,
    parse_fasta,
    read_fasta,
    read_fragments,
)


class TestParseFasta:

    def test_records(self, scenario_a_fasta):
        records = list(parse_fasta(io.StringIO(scenario_a_fasta)))
        assert records == [
            FragmentRecord("c0", "AAATTTCCC", "9 12"),
            FragmentRecord("c1", "CCCGGGTTT", "9 30"),
        ]

    def test_uppercase_and_multiline(self):
        records = list(parse_fasta(io.StringIO(">x\nacgt\nACGT\n")))
        assert records[0].sequence == "ACGTACGT"
        assert records[0].annotation == ""


class TestReadFasta:

    def test_plain_file(self, temp_output_dir, scenario_a_fasta):
        path = temp_output_dir / "contigs.fa"
        path.write_text(scenario_a_fasta)
        assert [r.identifier for r in read_fasta(path)] == ["c0", "c1"]

    def test_gzipped_file(self, temp_output_dir, scenario_a_fasta):
        path = temp_output_dir / "contigs.fa.gz"
        with gzip.open(path, 'wt') as f:
            f.write(scenario_a_fasta)
        assert is_gzipped(path)
        assert [r.sequence for r in read_fasta(path)] == ["AAATTTCCC", "CCCGGGTTT"]

    def test_missing_file(self, temp_output_dir):
        with pytest.raises(FileNotFoundError):
            list(read_fasta(temp_output_dir / "missing.fa"))

    def test_stdin(self, monkeypatch, scenario_a_fasta):
        monkeypatch.setattr(sys, 'stdin', io.StringIO(scenario_a_fasta))
        assert [r.identifier for r in read_fasta('-')] == ["c0", "c1"]


class TestReadFragments:

    def test_sources_concatenated_in_order(self, temp_output_dir):
        first = temp_output_dir / "a.fa"
        second = temp_output_dir / "b.fa"
        first.write_text(">a1\nACGTA\n>a2\nACGTC\n")
        second.write_text(">b1\nACGTG\n")
        ids = [r.identifier for r in read_fragments([first, second])]
        assert ids == ["a1", "a2", "b1"]

    def test_no_paths_reads_stdin(self, monkeypatch, scenario_a_fasta):
        monkeypatch.setattr(sys, 'stdin', io.StringIO(scenario_a_fasta))
        assert len(list(read_fragments([]))) == 2

    def test_source_is_restartable(self, temp_output_dir, scenario_a_fasta):
        path = temp_output_dir / "contigs.fa"
        path.write_text(scenario_a_fasta)
        source = FragmentSource([path])
        assert list(source) == list(source)

# StrandLink v0.1.0
# Any usage is subject to this software's license.
