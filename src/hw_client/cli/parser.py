"""Command-line parsing built from the :data:`~hw_client.core.options.OPTIONS` table.

Flags and positional tokens may be freely interleaved.  Every flag
occurrence records its transformation in argument order; the positional
tokens are returned untouched for the command dispatcher.

Parsing never exits the process: argparse errors are turned into
:class:`~hw_client.exceptions.ArgumentParseError` so the CLI layer can
print the diagnostics followed by the full usage text.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, NoReturn

from hw_client.core.grammar import command_help_lines
from hw_client.core.options import OPTIONS, OptionSpec, Transform
from hw_client.exceptions import ArgumentParseError

PROG = "hw"

USAGE = "%(prog)s [<options>] <command> [<args>]"

WARNING_MSG = "!!! This software is experimental. Use only small amounts of Bitcoins. !!!"


@dataclass(frozen=True, slots=True)
class ParsedArguments:
    """Successful parse: ordered transformations plus positional tokens."""

    transforms: tuple[Transform, ...]
    commands: tuple[str, ...]


class _ClientArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise ArgumentParseError([message])


class _TransformAction(argparse.Action):
    """Append the transformation of one flag occurrence to ``transforms``."""

    def __init__(self, option_strings: Sequence[str], dest: str, *, spec: OptionSpec, **kwargs: Any) -> None:
        self.spec = spec
        nargs = None if spec.takes_value else 0
        super().__init__(option_strings, dest, nargs=nargs, **kwargs)

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        raw = values if self.spec.takes_value else None
        try:
            transform = self.spec.transform(raw)
        except argparse.ArgumentTypeError as exc:
            raise argparse.ArgumentError(self, str(exc)) from None
        items = list(getattr(namespace, self.dest, None) or [])
        items.append(transform)
        setattr(namespace, self.dest, items)


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = _ClientArgumentParser(
        prog=PROG,
        usage=USAGE,
        description=WARNING_MSG,
        epilog="\n".join(command_help_lines()),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    for spec in OPTIONS:
        parser.add_argument(
            spec.short,
            spec.long,
            action=_TransformAction,
            spec=spec,
            dest="transforms",
            default=[],
            metavar=spec.metavar,
            help=spec.help,
        )
    parser.add_argument("commands", nargs="*", help=argparse.SUPPRESS)
    return parser


_VALUE_OPTIONS: dict[str, OptionSpec] = {
    name: spec for spec in OPTIONS if spec.takes_value for name in (spec.short, spec.long)
}


def _attach_option_values(argv: Sequence[str]) -> list[str]:
    """Rewrite ``-p VALUE`` and ``--pass VALUE`` as ``--pass=VALUE``.

    argparse refuses a separate value that starts with ``-``.  String
    flags take their value verbatim, so the value is bound to its flag
    before parsing.  A flag with no following token is left alone and
    reported as missing its value.
    """
    tokens = list(argv)
    result: list[str] = []
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if token == "--":
            result.extend(tokens[index:])
            break
        spec = _VALUE_OPTIONS.get(token)
        if spec is not None and index + 1 < len(tokens):
            result.append(f"{spec.long}={tokens[index + 1]}")
            index += 2
            continue
        result.append(token)
        index += 1
    return result


def usage_text() -> str:
    """Return the full usage text: warning, options and command listing."""
    return build_parser().format_help().rstrip("\n")


def parse_arguments(argv: Sequence[str]) -> ParsedArguments:
    """Split *argv* into flag transformations and positional tokens.

    Raises
    ------
    ArgumentParseError
        On an unknown flag, a missing value or a malformed number.
    """
    namespace = build_parser().parse_intermixed_args(_attach_option_values(argv))
    return ParsedArguments(
        transforms=tuple(namespace.transforms),
        commands=tuple(namespace.commands),
    )
