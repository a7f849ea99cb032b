"""
StrandLink Pipeline Orchestrator.

Runs the overlap pipeline as strictly ordered stages:

    load -> lock -> index -> build -> report -> write

Key features:
- Single entry point used by the CLI and by library callers
- The fragment table is only appended to during `load` and only read after
  `lock`; nothing needs locking
- The graph is written only once it is complete, so a failed run emits no
  partial graph
- Logging configured once per run from the configuration
"""

from pathlib import Path
from typing import Iterable, Optional, TextIO, Union
import logging
import time
from dataclasses import dataclass

from ..assembly_core.data_structures import FragmentTable, OverlapConfig
from ..assembly_core.kmer_index import OrientedEndKmerIndex
from ..assembly_core.overlap_graph_module import OverlapGraph, OverlapGraphBuilder
from ..assembly_utils.graph_stats import (
    GraphStats,
    compute_graph_stats,
    export_graph_stats,
    format_graph_stats,
)
from ..io_utils.fasta_reader import FragmentRecord, read_fragments
from ..io_utils.graph_export import GraphFormat, parse_graph_format, write_graph

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)


def setup_logging(level: Union[str, int] = 'WARNING', log_file: Optional[Path] = None):
    """
    Configure the root logger for a run.

    Args:
        level: Logging level name or number
        log_file: Optional file receiving the same records as stderr
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


def verbosity_to_level(verbose: int, default: str = 'WARNING') -> str:
    """Map a -v count onto a logging level name."""
    if verbose >= 2:
        return 'DEBUG'
    if verbose == 1:
        return 'INFO'
    return default


@dataclass
class PipelineResult:
    """Everything produced by one run."""
    table: FragmentTable
    index: OrientedEndKmerIndex
    graph: OverlapGraph
    stats: GraphStats
    elapsed_seconds: float


class OverlapPipeline:
    """
    Orchestrator for one overlap-graph run.

    Args:
        config: Run configuration
        output_format: Graph format to write
        stats_path: Optional JSON file for the statistics
    """

    def __init__(
        self,
        config: OverlapConfig,
        output_format: Union[str, GraphFormat] = GraphFormat.ADJ,
        stats_path: Optional[Path] = None
    ):
        self.config = config
        self.output_format = parse_graph_format(output_format)
        self.stats_path = Path(stats_path) if stats_path else None

    def load(self, records: Iterable[FragmentRecord]) -> FragmentTable:
        """Stage 1-2: read every record into a fragment table, then lock it."""
        table = FragmentTable(self.config)
        for record in records:
            table.add_sequence(record.identifier, record.sequence, record.annotation)
        table.lock()
        logger.info(f"Read {len(table)} contigs")
        return table

    def assemble(self, records: Iterable[FragmentRecord]) -> PipelineResult:
        """
        Run every stage except writing.

        Args:
            records: Fragment records, consumed once

        Returns:
            PipelineResult
        """
        start = time.time()
        table = self.load(records)
        index = OrientedEndKmerIndex(self.config).build(table)
        graph = OverlapGraphBuilder(self.config).build(table, index)

        stats = compute_graph_stats(graph)
        if self.config.verbose > 0:
            for line in format_graph_stats(stats).splitlines():
                logger.info(line)
        if self.stats_path:
            export_graph_stats(stats, self.stats_path)

        return PipelineResult(
            table=table,
            index=index,
            graph=graph,
            stats=stats,
            elapsed_seconds=time.time() - start
        )

    def run(
        self,
        paths: Iterable[Union[str, Path]],
        handle: TextIO,
        program: str = "strandlink",
        command_line: str = ""
    ) -> PipelineResult:
        """
        Run the whole pipeline and write the graph to ``handle``.

        Args:
            paths: FASTA sources ('-' or empty = stdin)
            handle: Writable text handle for the graph
            program: Program name recorded in the output
            command_line: Invocation recorded in the output
        """
        result = self.assemble(read_fragments(paths))
        write_graph(result.graph, handle, self.output_format, program, command_line)
        logger.info(f"Pipeline finished in {result.elapsed_seconds:.2f}s")
        return result
