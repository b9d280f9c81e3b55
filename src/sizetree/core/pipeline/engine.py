from __future__ import annotations

"""
Analysis Engine.

Runs a complete disk-usage analysis: reads and parses the transcript,
replays it into a TreeStore, then answers the bounded-sum and
minimum-above-threshold questions. Domain and I/O failures are turned
into a failed AnalysisResult instead of escaping to the interface.
"""

import logging
import time
from typing import Any, Dict

from sizetree.core.transcript.builder import build_tree
from sizetree.core.transcript.parser import read_transcript
from sizetree.core.tree.queries import (
    iter_directory_sizes,
    required_space_to_free,
    smallest_directory_at_least,
    sum_directories_at_most,
)
from sizetree.core.tree.renderer import render_tree_structure
from sizetree.core.tree.store import TreeStore
from sizetree.domain.analysis_models import (
    AnalysisResult,
    create_error_result,
    create_success_result,
)
from sizetree.domain.errors import SizeTreeError, format_path

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def run_analysis(config: Dict[str, Any]) -> AnalysisResult:
    """
    Execute an analysis with a validated configuration.

    Args:
        config: Output of validate_config().

    Returns:
        AnalysisResult: Success or failure with diagnostics.
    """
    input_path = config.get("input_path", "")
    started = time.perf_counter()
    logger.info(f"Analysing transcript: {input_path}")

    try:
        store = build_tree(read_transcript(input_path))
    except (OSError, SizeTreeError) as e:
        logger.error(f"Analysis failed for '{input_path}': {e}")
        return create_error_result(str(e), input_path)

    result = analyse_store(store, config)
    elapsed = time.perf_counter() - started
    logger.info(f"Analysis completed in {elapsed:.3f}s ({result.node_count} nodes)")
    return result


def analyse_store(store: TreeStore, config: Dict[str, Any]) -> AnalysisResult:
    """Answer both aggregate queries over an already built tree."""
    use_cache = bool(config.get("use_size_cache", False))
    threshold = int(config.get("size_threshold", 0))

    total = store.total_size()
    directory_count = sum(1 for _ in iter_directory_sizes(store, use_cache=True))
    small_total = sum_directories_at_most(store, threshold, use_cache=use_cache)

    to_free = required_space_to_free(
        total,
        disk_capacity=int(config.get("disk_capacity", 0)),
        required_free=int(config.get("required_free_space", 0)),
    )
    candidate = None
    if to_free > 0:
        candidate = smallest_directory_at_least(store, to_free, use_cache=use_cache)
        if candidate is None:
            logger.warning(f"No directory frees at least {to_free} bytes.")
    else:
        logger.info("Enough free space already; no deletion needed.")

    tree_lines = render_tree_structure(store.root) if config.get("print_tree") else []

    return create_success_result(
        config,
        input_path=config.get("input_path", ""),
        total_size=total,
        node_count=store.node_count(),
        directory_count=directory_count,
        small_directories_total=small_total,
        space_to_free=to_free,
        deletion_candidate=format_path(candidate.path) if candidate else None,
        deletion_candidate_size=candidate.size if candidate else None,
        tree_lines=tree_lines,
        summary_extra={"size_cache": use_cache},
    )
