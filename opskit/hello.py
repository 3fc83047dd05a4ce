"""Greeting command that echoes the arguments it was started with."""

from __future__ import annotations

import sys
from typing import Optional, Sequence


def _as_list(items: Sequence[str]) -> str:
    return "[" + " ".join(items) + "]"


def greeting(args: Sequence[str]) -> str:
    """Return the greeting for a full argument list, program name first.

    With no arguments after the program name the plain greeting is returned;
    otherwise the argument list and the arguments proper are shown as well.
    """
    args = list(args)
    if len(args) < 2:
        return "hello world!"
    return (
        "hello world!\n"
        f"os.Args: {_as_list(args)}\n"
        f"Arguments: {_as_list(args[1:])}\n"
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the greeting; returns the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    program = sys.argv[0] if sys.argv and sys.argv[0] else "hello-world"
    print(greeting([program, *argv]), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())