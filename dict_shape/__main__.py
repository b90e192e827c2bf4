"""Interface for ``python -m dict_shape``."""

from __future__ import annotations

import json
import sys
from argparse import ArgumentParser
from typing import TYPE_CHECKING

from .key_mapping import flatten, unflatten


if TYPE_CHECKING:
    from collections.abc import Sequence

from ._version import version


__all__ = ["main"]

_COMMANDS = {"flatten": flatten, "unflatten": unflatten}


def main(args: Sequence[str] | None = None) -> None:
    """Argument parser for the CLI.

    ``flatten`` and ``unflatten`` read a JSON object from stdin and write the
    transformed object to stdout as JSON.
    """
    parser = ArgumentParser(prog="dict_shape")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    subparsers = parser.add_subparsers(dest="command")
    for name in _COMMANDS:
        command = subparsers.add_parser(name, help=f"{name} a JSON object read from stdin")
        _ = command.add_argument("--sep", default=".", help="path separator (default: %(default)r)")
    namespace = parser.parse_args(args)

    if namespace.command is None:
        parser.print_help()
        return
    if not namespace.sep:
        parser.error("--sep must not be empty")

    try:
        document = json.load(sys.stdin)
    except json.JSONDecodeError as exc:
        parser.error(f"invalid JSON on stdin: {exc}")
    if not isinstance(document, dict):
        parser.error("stdin must hold a JSON object")

    result = _COMMANDS[namespace.command](document, sep=namespace.sep)
    _ = sys.stdout.write(json.dumps(result) + "\n")


if __name__ == "__main__":
    main()
