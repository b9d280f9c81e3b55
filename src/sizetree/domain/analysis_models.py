from __future__ import annotations

"""
Analysis Domain Data Models.

Defines the result object passed from the analysis engine to the
interface layer, and the factories building its success and failure
variants.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AnalysisResult:
    """
    Unified result of one disk-usage analysis.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        input_path: Transcript that was analysed.
        total_size: Total size of the root directory.
        node_count: Number of nodes, the root included.
        directory_count: Number of directories, the root included.
        size_threshold: Threshold of the bounded-sum query.
        small_directories_total: Sum of directory totals at most size_threshold.
        space_to_free: Bytes that must be released to reach the required free space.
        deletion_candidate: Path of the smallest directory that frees enough space.
        deletion_candidate_size: Total size of that directory.
        tree_lines: Rendered tree when requested.
        summary: Extra execution metadata.
    """
    ok: bool
    error: str
    input_path: str

    total_size: int = 0
    node_count: int = 0
    directory_count: int = 0

    size_threshold: int = 0
    small_directories_total: int = 0

    space_to_free: int = 0
    deletion_candidate: Optional[str] = None
    deletion_candidate_size: Optional[int] = None

    tree_lines: List[str] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        input_path: str,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> AnalysisResult:
    """Create a failed analysis result."""
    return AnalysisResult(
        ok=False,
        error=error,
        input_path=input_path,
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        input_path: str,
        total_size: int,
        node_count: int,
        directory_count: int,
        small_directories_total: int,
        space_to_free: int,
        deletion_candidate: Optional[str] = None,
        deletion_candidate_size: Optional[int] = None,
        tree_lines: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> AnalysisResult:
    """
    Create a successful analysis result.

    Args:
        cfg: Validated configuration used for the run.
        input_path: Transcript that was analysed.
        total_size: Root total.
        node_count: Number of nodes.
        directory_count: Number of directories.
        small_directories_total: Bounded-sum query answer.
        space_to_free: Threshold of the minimum-above-threshold query.
        deletion_candidate: Path of the selected directory.
        deletion_candidate_size: Its total size.
        tree_lines: Rendered tree.
        summary_extra: Execution metadata.
    """
    return AnalysisResult(
        ok=True,
        error="",
        input_path=input_path,
        total_size=total_size,
        node_count=node_count,
        directory_count=directory_count,
        size_threshold=cfg.get("size_threshold", 0),
        small_directories_total=small_directories_total,
        space_to_free=space_to_free,
        deletion_candidate=deletion_candidate,
        deletion_candidate_size=deletion_candidate_size,
        tree_lines=tree_lines or [],
        summary=summary_extra or {},
    )
