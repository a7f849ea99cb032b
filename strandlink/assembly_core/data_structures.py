"""
Overlap Graph Data Structures

This module holds the value types shared by the indexer, the graph builder and
the writers:

1. OverlapConfig - the explicit run configuration (k, alphabet override)
2. Fragment / FragmentTable - contigs with stable, insertion-ordered ids
3. OrientedVertex / Edge - the bidirected graph vocabulary

Author: StrandLink Development Team
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional
import logging
import re

from strandlink.errors import (
    ConfigError,
    DuplicateFragmentError,
    LengthError,
    StateError,
)
from strandlink.utils.sequence_utils import terminal_kmers

logger = logging.getLogger(__name__)

# Leading "<length> <coverage>" integers of a header annotation
_HEADER_NUMBERS = re.compile(r"\s*\d+\s+(\d+)")


# ============================================================================
# Part 1: Configuration
# ============================================================================

@dataclass
class OverlapConfig:
    """Configuration for overlap graph construction."""
    k: int  # Overlaps are exactly k-1 residues
    colour_space: Optional[bool] = None  # None = detect from first fragment
    verbose: int = 0

    def __post_init__(self):
        """Validate configuration."""
        if self.k is None:
            raise ConfigError("missing -k,--kmer option")
        if isinstance(self.k, bool) or not isinstance(self.k, int):
            raise ConfigError(f"k must be an integer, got {self.k!r}")
        if self.k < 2:
            raise ConfigError(f"k must be >= 2, got {self.k}")

    @property
    def overlap(self) -> int:
        """Length of the terminal regions that are matched."""
        return self.k - 1

    @property
    def distance(self) -> int:
        """Distance annotation carried by every edge."""
        return -(self.k - 1)


# ============================================================================
# Part 2: Fragments
# ============================================================================

def parse_coverage(annotation: str) -> int:
    """
    Parse the coverage depth from a FASTA header annotation.

    The annotation is ``<length> <coverage> ...``. Both numbers are read as
    integer prefixes, so ``"120 37.5"`` gives 37; when either cannot be read
    coverage is 0.

    Example:
        >>> parse_coverage("120 37")
        37
        >>> parse_coverage("120")
        0
    """
    match = _HEADER_NUMBERS.match(annotation)
    return int(match.group(1)) if match else 0


@dataclass(frozen=True)
class Fragment:
    """
    An assembled contig as seen by the overlap graph.

    Only the terminal regions are kept; the interior of the sequence is not
    needed once the ends are known.
    """
    id: int
    identifier: str
    length: int
    coverage: int
    leading: str  # L: first k-1 residues
    trailing: str  # R: last k-1 residues


@dataclass(frozen=True, order=True)
class OrientedVertex:
    """
    A fragment read on one strand.

    ``reverse`` is False for the original reading and True for the reverse
    complement. Ordering is by (fragment_id, reverse).
    """
    fragment_id: int
    reverse: bool = False

    def flip(self) -> 'OrientedVertex':
        """The same fragment read from the other strand."""
        return OrientedVertex(self.fragment_id, not self.reverse)

    @property
    def sense(self) -> str:
        return '-' if self.reverse else '+'

    def __str__(self) -> str:
        return f"{self.fragment_id}{self.sense}"


@dataclass(frozen=True)
class Edge:
    """A directed overlap between two oriented fragments."""
    source: OrientedVertex
    target: OrientedVertex
    distance: int

    def mirror(self) -> 'Edge':
        """The complementary edge (flip(target), flip(source))."""
        return Edge(self.target.flip(), self.source.flip(), self.distance)

    def is_canonical(self) -> bool:
        """True for the member of a mirror pair that sorts first."""
        return (self.source, self.target) <= (self.target.flip(), self.source.flip())


class FragmentTable:
    """
    Append-only table of fragments with sequential ids.

    Fragments are inserted while the inputs are read; ``lock()`` closes the
    table before indexing starts. Ids start at 0 and follow input order.
    """

    def __init__(self, config: OverlapConfig):
        """
        Initialize an empty fragment table.

        Args:
            config: Run configuration; its overlap length bounds fragment length
        """
        self.config = config
        self._fragments: List[Fragment] = []
        self._ids: Dict[str, int] = {}
        self._locked = False

    def insert(
        self,
        identifier: str,
        sequence_length: int,
        coverage: int,
        leading: str,
        trailing: str
    ) -> int:
        """
        Add a fragment and return its id.

        Raises:
            StateError: If the table is locked
            LengthError: If the fragment has no valid k-1 terminal region
            DuplicateFragmentError: If ``identifier`` was already inserted
        """
        if self._locked:
            raise StateError(f"cannot insert fragment '{identifier}': fragment table is locked")

        overlap = self.config.overlap
        if sequence_length <= overlap:
            raise LengthError(
                f"fragment '{identifier}' has length {sequence_length}; "
                f"it must be longer than k-1 = {overlap}"
            )
        if len(leading) != overlap or len(trailing) != overlap:
            raise LengthError(
                f"fragment '{identifier}' terminal regions must have length {overlap}"
            )
        if coverage < 0:
            raise ValueError(f"coverage must be >= 0, got {coverage}")
        if identifier in self._ids:
            raise DuplicateFragmentError(f"duplicate fragment identifier '{identifier}'")

        fragment_id = len(self._fragments)
        self._fragments.append(Fragment(
            id=fragment_id,
            identifier=identifier,
            length=sequence_length,
            coverage=coverage,
            leading=leading,
            trailing=trailing
        ))
        self._ids[identifier] = fragment_id
        return fragment_id

    def add_sequence(self, identifier: str, sequence: str, annotation: str = "") -> int:
        """Insert a fragment from its full sequence and header annotation."""
        leading, trailing = terminal_kmers(sequence, self.config.overlap)
        return self.insert(identifier, len(sequence), parse_coverage(annotation),
                           leading, trailing)

    def lock(self):
        """Forbid further insertion."""
        self._locked = True
        logger.debug(f"Fragment table locked with {len(self._fragments)} fragments")

    @property
    def is_locked(self) -> bool:
        return self._locked

    def id_of(self, identifier: str) -> int:
        """Return the id assigned to ``identifier``."""
        return self._ids[identifier]

    def name_of(self, vertex: OrientedVertex) -> str:
        """Oriented name such as ``contig7+``."""
        return f"{self._fragments[vertex.fragment_id].identifier}{vertex.sense}"

    def __getitem__(self, fragment_id: int) -> Fragment:
        return self._fragments[fragment_id]

    def __len__(self) -> int:
        return len(self._fragments)

    def __iter__(self) -> Iterator[Fragment]:
        return iter(self._fragments)

    def __contains__(self, vertex: OrientedVertex) -> bool:
        return 0 <= vertex.fragment_id < len(self._fragments)

    def __repr__(self) -> str:
        state = "locked" if self._locked else "open"
        return f"FragmentTable(fragments={len(self._fragments)}, {state})"
