import os
import sys
import logging

from . import (
    const,
    demo,
    vt100,
)
from .const import NO_INDEX, VERSION_STR  # noqa: F401
from .opts import Option, ParseAllocationFailure, matchOpt, scan, trim  # noqa: F401


class logger:
    @staticmethod
    def verbose() -> bool:
        return os.environ.get(const.VERBOSE_ENV, "") not in ("", "0")

    @staticmethod
    def setup(verbose: bool):
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            logging.basicConfig(
                level=logging.WARNING,
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )


def argv() -> list[str]:
    """Returns the process arguments with the extra arguments from the environment spliced in."""
    extra = os.environ.get(const.EXTRA_ARGS_ENV, None)
    argv0 = sys.argv[0] if sys.argv else const.ARGV0
    return [argv0] + (extra.split(" ") if extra else []) + sys.argv[1:]


def main() -> int:
    try:
        logger.setup(logger.verbose())
        return demo.report(argv())

    except KeyboardInterrupt:
        print()
        return 1
