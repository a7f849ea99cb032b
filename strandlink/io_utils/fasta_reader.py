#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Fragment loading for StrandLink.

Reads contigs from one or more FASTA sources, concatenated in the order
given. ``-`` stands for standard input and ``.gz`` sources are decompressed
transparently.
"""

import gzip
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, TextIO, Union

from Bio import SeqIO

logger = logging.getLogger(__name__)

STDIN = '-'


@dataclass(frozen=True)
class FragmentRecord:
    """
    A contig record as read from FASTA.

    Attributes:
        identifier: Record name (first word of the header)
        sequence: Residues, upper-cased
        annotation: Rest of the header after the name
    """
    identifier: str
    sequence: str
    annotation: str = ""


def is_gzipped(filepath: Union[str, Path]) -> bool:
    """
    Check if file is gzip compressed.

    Args:
        filepath: Path to file

    Returns:
        True if file is gzipped
    """
    filepath = Path(filepath)
    return filepath.suffix in ('.gz', '.gzip')


def open_file(filepath: Union[str, Path], mode: str = 'r') -> TextIO:
    """
    Open file with automatic gzip detection.

    Args:
        filepath: Path to file
        mode: File mode ('r' or 'w')

    Returns:
        File handle
    """
    filepath = Path(filepath)

    if is_gzipped(filepath):
        if 'r' in mode:
            return gzip.open(filepath, 'rt')
        else:
            return gzip.open(filepath, 'wt')
    else:
        return open(filepath, mode)


def _annotation(record) -> str:
    # Biopython keeps the name at the start of the description
    description = record.description
    if description.startswith(record.id):
        description = description[len(record.id):]
    return description.strip()


def parse_fasta(handle: TextIO) -> Iterator[FragmentRecord]:
    """
    Parse FASTA records from an open handle.

    Args:
        handle: Readable text handle

    Yields:
        FragmentRecord objects
    """
    for record in SeqIO.parse(handle, "fasta"):
        yield FragmentRecord(
            identifier=record.id,
            sequence=str(record.seq).upper(),
            annotation=_annotation(record)
        )


def read_fasta(filepath: Union[str, Path]) -> Iterator[FragmentRecord]:
    """
    Read a FASTA file and yield FragmentRecord objects.

    Args:
        filepath: Path to FASTA file (can be gzipped), or '-' for stdin

    Yields:
        FragmentRecord objects

    Raises:
        FileNotFoundError: If the file does not exist
    """
    if str(filepath) == STDIN:
        logger.info("Reading `-'...")
        yield from parse_fasta(sys.stdin)
        return

    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"FASTA file not found: {filepath}")

    logger.info(f"Reading `{filepath}'...")
    handle = open_file(filepath, 'r')
    try:
        yield from parse_fasta(handle)
    finally:
        handle.close()


def read_fragments(paths: Iterable[Union[str, Path]]) -> Iterator[FragmentRecord]:
    """
    Read records from several sources, one after the other.

    An empty ``paths`` reads standard input.
    """
    paths = list(paths) or [STDIN]
    for path in paths:
        yield from read_fasta(path)


class FragmentSource:
    """
    Restartable iterable over the records of a list of sources.

    Each iteration reopens the sources from the beginning. Standard input can
    only be consumed once.
    """

    def __init__(self, paths: Iterable[Union[str, Path]] = ()):
        self.paths: List[Union[str, Path]] = list(paths) or [STDIN]

    def __iter__(self) -> Iterator[FragmentRecord]:
        return read_fragments(self.paths)

    def __repr__(self) -> str:
        return f"FragmentSource(paths={self.paths!r})"
