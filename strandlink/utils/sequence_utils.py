"""
StrandLink v0.1.0

Sequence utility functions for StrandLink.

Provides residue alphabets, reverse complements and terminal k-mer
extraction for nucleotide and colour-space fragments.
"""

from enum import Enum
from typing import Tuple


class Alphabet(Enum):
    """Residue alphabet of a run."""
    NUCLEOTIDE = "nucleotide"
    COLOUR_SPACE = "colour-space"


# IUPAC nucleotide codes; ambiguity codes map to their complementary code
NUCLEOTIDE_COMPLEMENT = {
    'A': 'T', 'T': 'A',
    'G': 'C', 'C': 'G',
    'U': 'A', 'N': 'N',
    'R': 'Y', 'Y': 'R',
    'S': 'S', 'W': 'W',
    'K': 'M', 'M': 'K',
    'B': 'V', 'V': 'B',
    'D': 'H', 'H': 'D',
    'a': 't', 't': 'a',
    'g': 'c', 'c': 'g',
    'u': 'a', 'n': 'n',
}

# A colour encodes a dinucleotide transition and the reverse complement of a
# dinucleotide has the same colour, so each digit is its own complement.
COLOUR_COMPLEMENT = {
    '0': '0', '1': '1', '2': '2', '3': '3', '.': '.',
}


def reverse_complement(sequence: str) -> str:
    """
    Generate reverse complement of DNA sequence.

    Args:
        sequence: DNA sequence string

    Returns:
        Reverse complement sequence

    Example:
        >>> reverse_complement("ATCG")
        'CGAT'
    """
    return ''.join(NUCLEOTIDE_COMPLEMENT.get(base, base) for base in reversed(sequence))


def colour_reverse_complement(sequence: str) -> str:
    """
    Generate reverse complement of a colour-space sequence.

    Example:
        >>> colour_reverse_complement("0123")
        '3210'
    """
    return ''.join(COLOUR_COMPLEMENT.get(colour, colour) for colour in reversed(sequence))


def reverse_complement_in(sequence: str, alphabet: Alphabet) -> str:
    """Reverse complement ``sequence`` using the rules of ``alphabet``."""
    if alphabet is Alphabet.COLOUR_SPACE:
        return colour_reverse_complement(sequence)
    return reverse_complement(sequence)


def terminal_kmers(sequence: str, overlap: int) -> Tuple[str, str]:
    """
    Extract the leading and trailing regions of length ``overlap``.

    Args:
        sequence: Fragment sequence
        overlap: Length of each terminal region (k - 1)

    Returns:
        Tuple of (leading, trailing) strings

    Example:
        >>> terminal_kmers("AAATTTCCC", 3)
        ('AAA', 'CCC')
    """
    return sequence[:overlap], sequence[len(sequence) - overlap:]


__all__ = [
    'Alphabet',
    'reverse_complement',
    'colour_reverse_complement',
    'reverse_complement_in',
    'terminal_kmers',
]
