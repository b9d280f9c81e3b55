from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration
resolution (defaults, stored file, command-line overrides), analysis
execution and result rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from sizetree.core.pipeline.engine import run_analysis
from sizetree.core.pipeline.validator import validate_config
from sizetree.domain.analysis_models import AnalysisResult
from sizetree.domain.config import get_default_config, load_config, save_config
from sizetree.infra.logging import LoggingConfig, configure_logging, get_logger
from sizetree.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments, sys.argv[1:] when None.

    Returns:
        int: Process exit code (0 success, 1 failed analysis, 2 missing
             input, 130 interrupted).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    base_conf = get_default_config() if args.use_defaults else load_config()
    overrides = cli_args.args_to_overrides(args)
    clean_conf, warnings = validate_config(_merge_config(base_conf, overrides))

    configure_logging(LoggingConfig.from_app_config(clean_conf), force=True)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    if args.save_config:
        save_config(clean_conf)

    input_path = clean_conf["input_path"]
    if not input_path or not os.path.isfile(input_path):
        msg = f"Transcript file does not exist: '{input_path}'"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    try:
        result = run_analysis(clean_conf)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130

    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge known, non-None override values into the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: AnalysisResult) -> None:
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if result.tree_lines:
        print("\n".join(result.tree_lines))
        print()

    print(f"Total used: {result.total_size}")
    print(f"Nodes: {result.node_count} ({result.directory_count} directories)")
    print(f"Directories at most {result.size_threshold}: {result.small_directories_total}")
    print(f"Space to free: {result.space_to_free}")
    if result.deletion_candidate is None:
        print("Deletion candidate: none")
    else:
        print(f"Deletion candidate: {result.deletion_candidate} ({result.deletion_candidate_size})")


if __name__ == "__main__":
    sys.exit(main())
