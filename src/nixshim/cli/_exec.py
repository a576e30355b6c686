from __future__ import annotations

import argparse
import logging

from nixshim.core.exceptions import MalformedArgumentsError, NixShimError
from nixshim.core.launch import Wrapped, exec_launch

from ._output import OutputFormatter
from ._utils import launch_for

logger = logging.getLogger(__name__)

EXIT_MALFORMED = 2


def run_wrapped(args: argparse.Namespace, wrapped: Wrapped) -> int:
    """Rewrite the arguments for ``wrapped`` and exec it.

    Only returns on failure: 2 for malformed arguments, 1 otherwise.
    """
    formatter = OutputFormatter(json_mode=False)
    try:
        launch = launch_for(args, wrapped)
    except MalformedArgumentsError as e:
        formatter.error(e, message=f"Malformed arguments: {e}", error_code="malformed_arguments")
        return EXIT_MALFORMED
    except NixShimError as e:
        formatter.error(e, error_code="launch_error")
        return 1

    if launch.subcommand:
        logger.debug("detected `%s` subcommand", launch.subcommand)
    logger.debug("launching %s", wrapped.value)

    try:
        exec_launch(launch)
    except NixShimError as e:
        formatter.error(e, error_code="launch_error")
        return 1
    # Reached only when exec is stubbed out.
    return 0
