"""
StrandLink v0.1.0

Oriented end k-mer index.

Every fragment contributes four entries: its forward ends and the reverse
complements of those ends, attached to the reverse-oriented vertex. After
one linear pass, the fragments whose oriented leading region equals a given
trailing region are found with a single dictionary lookup.

    index_by_suffix[R]          <- (i, +)
    index_by_prefix[L]          <- (i, +)
    index_by_suffix[revcomp(L)] <- (i, -)
    index_by_prefix[revcomp(R)] <- (i, -)

Author: StrandLink Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from typing import Dict, List, Optional, Sequence
import logging

from strandlink.errors import AlphabetError, StateError
from strandlink.utils.sequence_utils import Alphabet, reverse_complement_in
from .data_structures import Fragment, FragmentTable, OrientedVertex, OverlapConfig

logger = logging.getLogger(__name__)


def detect_alphabet(sequence: str) -> Alphabet:
    """
    Detect the alphabet of a run from its first fragment.

    A leading digit means colour-space; anything else is nucleotide.

    Raises:
        AlphabetError: If the sequence is empty
    """
    if not sequence:
        raise AlphabetError("cannot detect the alphabet of an empty sequence")
    return Alphabet.COLOUR_SPACE if sequence[0].isdigit() else Alphabet.NUCLEOTIDE


def check_alphabet(sequence: str, alphabet: Alphabet, identifier: str = "") -> None:
    """
    Check that a fragment uses the alphabet detected for the run.

    Raises:
        AlphabetError: If the first residue belongs to the other alphabet
    """
    if not sequence:
        raise AlphabetError(f"fragment '{identifier}' has an empty terminal region")

    first = sequence[0]
    if alphabet is Alphabet.COLOUR_SPACE:
        consistent = first.isdigit()
    else:
        consistent = first.isalpha()

    if not consistent:
        raise AlphabetError(
            f"fragment '{identifier}' starts with '{first}' but the run is {alphabet.value}; "
            f"nucleotide and colour-space fragments cannot be mixed"
        )


class OrientedEndKmerIndex:
    """
    Hash index from end k-mers to the oriented vertices that carry them.

    Attributes:
        index_by_suffix: k-mer -> vertices whose oriented trailing region is the k-mer
        index_by_prefix: k-mer -> vertices whose oriented leading region is the k-mer
        alphabet: Alphabet of the run, fixed by the first fragment
    """

    def __init__(self, config: OverlapConfig):
        """
        Initialize an empty index.

        Args:
            config: Run configuration; ``colour_space`` forces the alphabet
        """
        self.config = config
        self.index_by_suffix: Dict[str, List[OrientedVertex]] = {}
        self.index_by_prefix: Dict[str, List[OrientedVertex]] = {}
        self.alphabet: Optional[Alphabet] = None
        if config.colour_space is not None:
            self.alphabet = Alphabet.COLOUR_SPACE if config.colour_space else Alphabet.NUCLEOTIDE
        self._built = False

    def reverse_complement(self, kmer: str) -> str:
        """Reverse complement an end k-mer in the run's alphabet."""
        return reverse_complement_in(kmer, self.alphabet or Alphabet.NUCLEOTIDE)

    def build(self, table: FragmentTable) -> 'OrientedEndKmerIndex':
        """
        Index the ends of every fragment in one pass.

        Args:
            table: Locked fragment table

        Returns:
            self, for chaining

        Raises:
            StateError: If the table is not locked or the index was already built
            AlphabetError: If the fragments mix alphabets
        """
        if not table.is_locked:
            raise StateError("fragment table must be locked before indexing")
        if self._built:
            raise StateError("end k-mer index has already been built")

        logger.info(f"Indexing end k-mers of {len(table)} fragments (k-1 = {self.config.overlap})")

        for fragment in table:
            self._check_fragment(fragment)
            self._add(fragment)

        self._built = True
        logger.info(
            f"Indexed {len(self.index_by_prefix)} distinct leading and "
            f"{len(self.index_by_suffix)} distinct trailing k-mers"
        )
        return self

    def _check_fragment(self, fragment: Fragment):
        if self.alphabet is None:
            self.alphabet = detect_alphabet(fragment.leading)
            logger.debug(f"Detected {self.alphabet.value} fragments")
        check_alphabet(fragment.leading, self.alphabet, fragment.identifier)

    def _add(self, fragment: Fragment):
        u = OrientedVertex(fragment.id, False)
        ubar = u.flip()
        self.index_by_suffix.setdefault(fragment.trailing, []).append(u)
        self.index_by_prefix.setdefault(fragment.leading, []).append(u)
        self.index_by_suffix.setdefault(self.reverse_complement(fragment.leading), []).append(ubar)
        self.index_by_prefix.setdefault(self.reverse_complement(fragment.trailing), []).append(ubar)

    def candidates_following(self, kmer: str) -> Sequence[OrientedVertex]:
        """Vertices whose oriented leading region equals ``kmer``."""
        return self.index_by_prefix.get(kmer, ())

    def candidates_preceding(self, kmer: str) -> Sequence[OrientedVertex]:
        """Vertices whose oriented trailing region equals ``kmer``."""
        return self.index_by_suffix.get(kmer, ())

    @property
    def is_built(self) -> bool:
        return self._built

    def __len__(self) -> int:
        """Number of distinct leading k-mers."""
        return len(self.index_by_prefix)

    def __repr__(self) -> str:
        alphabet = self.alphabet.value if self.alphabet else 'undetected'
        return (f"OrientedEndKmerIndex(prefixes={len(self.index_by_prefix)}, "
                f"suffixes={len(self.index_by_suffix)}, alphabet={alphabet})")
