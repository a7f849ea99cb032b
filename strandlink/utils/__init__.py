"""
Utilities module for StrandLink.

- pipeline.py - Pipeline orchestration and logging setup
- sequence_utils.py - Alphabets, reverse complements, terminal k-mers

Submodules are imported directly (``from strandlink.utils.pipeline import
OverlapPipeline``); the assembly core depends on sequence_utils, so this
package does not import the pipeline eagerly.
"""
