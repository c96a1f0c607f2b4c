"""Command-line entry point."""

from __future__ import annotations

import enum
import sys
from typing import List, Optional, Sequence, Tuple


class Command(enum.IntEnum):
    """The commands the program understands."""

    HELP = 0x0000
    INSTALL = 0x0001
    REMOVE = 0x0002
    UPDATE = 0x0003
    LISTDB = 0x0004
    LIST = 0x0005
    SEARCH = 0x0006


_WORDS = {
    "install": Command.INSTALL,
    "i": Command.INSTALL,
    "list": Command.LIST,
    "l": Command.LIST,
    "remove": Command.REMOVE,
    "r": Command.REMOVE,
    "update": Command.UPDATE,
    "u": Command.UPDATE,
    "listdb": Command.LISTDB,
    "ld": Command.LISTDB,
    "search": Command.SEARCH,
    "s": Command.SEARCH,
}

_HELP_WORDS = frozenset({"help", "h"})

HELP_TEXT = (
    "help or h: Shows this message\n"
    "install <PKGS> or i <PKGS>: install a package from the repository\n"
    "remove <PKGS> or r <PKGS>: remove a package from the system\n"
    "update or u: update all packages in the system\n"
    "listdb or ld: packages from all repositories in the database\n"
    "list or l: list all installed packages\n"
    "search <PKG> or s <PKG>: search for a package in the system\n"
)


def parse_command(argv: Sequence[str]) -> Tuple[Command, List[str]]:
    """Return the selected command and the remaining operands.

    The last command word wins; ``help`` stops the scan.
    """
    command = Command.HELP
    operands: List[str] = []
    for arg in argv:
        if arg in _HELP_WORDS:
            break
        if arg in _WORDS:
            command = _WORDS[arg]
        else:
            operands.append(arg)
    return command, operands


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program and return its exit status."""
    if argv is None:
        argv = sys.argv[1:]
    command, _operands = parse_command(argv)
    if command is Command.HELP:
        sys.stdout.write(HELP_TEXT)
    return 0


if __name__ == "__main__":
    sys.exit(main())