import sys


RED = "\033[31m"
CYAN = "\033[36m"
YELLOW = "\033[33m"

BOLD = "\033[1m"
RESET = "\033[0m"


def indent(text: str, indent: int = 2) -> str:
    return " " * indent + text.replace("\n", "\n" + " " * indent)


def subtitle(text: str):
    print(f"{BOLD}{text}{RESET}:")


def error(msg: str) -> None:
    print(f"{RED}Error:{RESET} {msg}\n", file=sys.stderr)
