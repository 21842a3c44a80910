import logging

from optlist import const, opts, vt100

_logger = logging.getLogger(__name__)

OPTIONS = const.DEMO_OPTIONS

HELP = [
    ("a", "option expecting argument."),
    ("b", "option without arguments."),
    ("c", "option without arguments."),
    ("d", "option expecting argument."),
    ("e", "option without arguments."),
    ("f", "option without arguments."),
    ("?", "print out command line options."),
]


def usage(argv0: str):
    """Prints the usage message of the sample program."""
    print(f"Usage: {opts.trim(argv0)} <options>", end="\n\n")
    vt100.subtitle("options")
    for letter, description in HELP:
        print(vt100.indent(f"-{letter} : {description}"))
    print()


def report(argv: list[str]) -> int:
    """
    Parses `argv` with the sample option list and prints every option found.

    Returns the process exit code.
    """
    try:
        found = opts.scan(argv, OPTIONS)
    except opts.ParseAllocationFailure as e:
        _logger.debug("Scan failed", exc_info=e)
        vt100.error("parse error.")
        return 1

    _logger.info(f"Found {len(found)} option(s)")
    # no options is a normal run here, not a parse error
    for opt in found:
        if opt.letter == "?":
            usage(argv[0])
            return 0

        print(f"found option {opt.letter}")

        if opt.hasValue():
            print(f"\tfound argument {opt.value} at index {opt.index}")
        else:
            print("\tno argument for this option")

    return 0
