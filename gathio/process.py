import logging
import sys
from typing import NoReturn


logger = logging.getLogger(__name__)


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Report a fatal, operator-facing error and stop the process."""
    logger.critical(message)
    sys.stderr.write(f"{message}\n")
    sys.stderr.flush()
    raise SystemExit(exit_code)
