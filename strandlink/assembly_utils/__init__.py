"""
Assembly utilities for StrandLink: descriptive statistics of overlap graphs.
"""

from .graph_stats import (
    GraphStats,
    calculate_n50,
    compute_graph_stats,
    export_graph_stats,
    format_graph_stats,
)

__all__ = [
    "GraphStats",
    "calculate_n50",
    "compute_graph_stats",
    "export_graph_stats",
    "format_graph_stats",
]
