from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of the analyzer and translates the parsed
namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the sizetree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="sizetree",
        description="Rebuild a directory tree from a cd/ls transcript and report disk usage.",
    )

    # --- Input ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Transcript file containing '$ cd' / '$ ls' commands and their output.",
    )

    # --- Queries ---
    p.add_argument(
        "--threshold",
        dest="size_threshold",
        type=int,
        default=None,
        help="Sum every directory whose total size is at most this value.",
    )
    p.add_argument(
        "--capacity",
        dest="disk_capacity",
        type=int,
        default=None,
        help="Total disk capacity in bytes.",
    )
    p.add_argument(
        "--required",
        dest="required_free_space",
        type=int,
        default=None,
        help="Free space in bytes that must be available after a deletion.",
    )
    p.add_argument(
        "--cache-sizes",
        action="store_true",
        help="Compute every directory total in one pass instead of per directory.",
    )

    # --- Output ---
    p.add_argument("--print-tree", action="store_true", help="Print the rebuilt tree.")
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the result as JSON.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the stored configuration file.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Store the effective configuration as the new defaults.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument("--log-file", dest="log_file", default=None, help="Also write logs to this file.")
    p.add_argument("--debug", action="store_true", help="Elevate logging verbosity to DEBUG.")

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Values left at None are not applied by the merge step.
    """
    overrides: Dict[str, Any] = {
        "input_path": args.input_path,
        "size_threshold": args.size_threshold,
        "disk_capacity": args.disk_capacity,
        "required_free_space": args.required_free_space,
        "log_file": args.log_file,
    }

    if args.cache_sizes:
        overrides["use_size_cache"] = True
    if args.print_tree:
        overrides["print_tree"] = True
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
