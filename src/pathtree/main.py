from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Builds the path tree for the bundled sample paths and prints it. Uncaught
exceptions are logged and reported on stderr before exiting with status 1.
"""

import logging
import sys
import traceback
from typing import Any, Iterable, Optional

from pathtree.core.path_tree import PathTree
from pathtree.domain.constants import SAMPLE_PATHS
from pathtree.infra.logging import LoggingConfig, configure_logging, get_logger

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Log an unhandled exception with its stack trace and terminate.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))
    logging.getLogger("pathtree.supervisor").critical(
        f"FATAL EXCEPTION DETECTED: {value}\n{stack_trace}"
    )
    print(stack_trace, file=sys.stderr)
    sys.exit(1)


# -----------------------------------------------------------------------------
# EXECUTION
# -----------------------------------------------------------------------------

def main(paths: Optional[Iterable[str]] = None) -> int:
    """
    Insert the paths (the bundled samples by default) and print the tree.

    Returns:
        int: Process exit code (0: Success).
    """
    sys.excepthook = global_exception_handler
    configure_logging(LoggingConfig())

    tree = PathTree.from_paths(SAMPLE_PATHS if paths is None else paths)
    tree.print_tree()
    return 0


if __name__ == "__main__":
    sys.exit(main())
