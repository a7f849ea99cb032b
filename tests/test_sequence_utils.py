#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandLink v0.1.0

Tests for sequence manipulation utilities.

Author: StrandLink Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import pytest
from strandlink.utils.sequence_utils import (
    Alphabet,
    colour_reverse_complement,
    reverse_complement,
    reverse_complement_in,
    terminal_kmers,
)


class TestReverseComplement:
    """Test reverse complement functions."""

    def test_reverse_complement_basic(self):
        """Test basic reverse complement."""
        assert reverse_complement("ATCG") == "CGAT"

    def test_reverse_complement_palindrome(self):
        """Test reverse complement of palindromic sequence."""
        sequence = "GAATTC"  # EcoRI site
        assert reverse_complement(sequence) == sequence

    def test_double_reverse_complement(self):
        """Test that reverse complement twice gives original."""
        sequence = "ATCGATCGNRYKM"
        assert reverse_complement(reverse_complement(sequence)) == sequence

    def test_ambiguity_codes(self):
        assert reverse_complement("NRY") == "RYN"

    def test_colour_space_is_reversal(self):
        assert colour_reverse_complement("0123") == "3210"
        assert colour_reverse_complement("0.12") == "21.0"

    def test_dispatch_on_alphabet(self):
        assert reverse_complement_in("AAC", Alphabet.NUCLEOTIDE) == "GTT"
        assert reverse_complement_in("001", Alphabet.COLOUR_SPACE) == "100"


class TestTerminalKmers:
    """Test extraction of leading and trailing regions."""

    def test_terminal_kmers(self):
        assert terminal_kmers("AAATTTCCC", 3) == ("AAA", "CCC")

    def test_terminal_kmers_overlapping_ends(self):
        """Ends may share residues when the fragment is short."""
        assert terminal_kmers("ACGTA", 4) == ("ACGT", "CGTA")

# StrandLink v0.1.0
# Any usage is subject to this software's license.
