"""
Shared logging configuration for fontsplit.
"""

import logging

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
    handlers=[logging.StreamHandler()],
)

logger = logging.getLogger("fontsplit")


def set_verbose(verbose: bool) -> None:
    """Switch the fontsplit logger between INFO and DEBUG."""
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
