from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Routes execution to the CLI controller and traps any exception that
escapes it, so a crash is logged and reported with a non-zero exit code.
"""

import logging
import os
import sys
import traceback
from typing import Any

# Make the package importable when this file is run as a script
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.dirname(BASE_DIR)
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Log an unhandled exception and print its trace to stderr.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))

    logger = logging.getLogger("sizetree.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {value}")

    print("\n" + "=" * 80, file=sys.stderr)
    print("CRITICAL ERROR (SIZETREE)", file=sys.stderr)
    print("=" * 80, file=sys.stderr)
    print(stack_trace, file=sys.stderr)


# -----------------------------------------------------------------------------
# EXECUTION ROUTING
# -----------------------------------------------------------------------------

def main() -> int:
    """
    Run the CLI and convert unexpected crashes into exit code 1.

    Returns:
        int: Process exit code.
    """
    try:
        from sizetree.interface.cli.app import main as cli_main
        return cli_main()
    except Exception as e:
        global_exception_handler(type(e), e, e.__traceback__)
        return 1


if __name__ == "__main__":
    sys.exit(main())
