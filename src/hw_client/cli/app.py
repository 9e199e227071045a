"""CLI application entry point for ``hw``.

Flow of one invocation::

    argv -> parse_arguments -> ConfigResolver -> init_workdir -> CommandDispatcher

:func:`cli` is the **sole error boundary**.  It catches
:class:`~hw_client.exceptions.HwClientError`, ``KeyboardInterrupt`` and
any unexpected ``Exception``, renders a short message and picks the
process exit code.  :func:`main` returns exit codes for the outcomes it
handles itself and lets everything else propagate.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from hw_client.cli import exit_codes
from hw_client.cli.console import console, out
from hw_client.cli.logging_setup import configure_logging
from hw_client.cli.output import render
from hw_client.cli.parser import parse_arguments, usage_text
from hw_client.core.config_resolver import ConfigResolver
from hw_client.core.dispatcher import CommandDispatcher, DispatchStatus
from hw_client.core.models import Config
from hw_client.core.options import apply_transforms
from hw_client.core.protocols import ConfigSource, WalletCommands
from hw_client.exceptions import ArgumentParseError, HwClientError
from hw_client.infra.platform_dirs import default_app_dir
from hw_client.infra.workdir import init_workdir
from hw_client.infra.yaml_source import YamlConfigSource

logger = logging.getLogger(__name__)


def _print_usage() -> None:
    out.text(usage_text())


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    commands: WalletCommands | None = None,
    source: ConfigSource | None = None,
) -> int:
    """Run the hw CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    commands:
        Wallet backend receiving dispatched commands.  Defaults to
        :class:`~hw_client.infra.backend.UnconfiguredCommands`.
    source:
        Configuration file reader.  Defaults to YAML.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    ConfigFileError
        If the configuration file cannot be decoded.
    WorkdirError
        If the working directory cannot be prepared.
    """
    if argv is None:
        argv = sys.argv[1:]
    if commands is None:
        from hw_client.infra.backend import UnconfiguredCommands

        commands = UnconfiguredCommands()

    try:
        parsed = parse_arguments(argv)
    except ArgumentParseError as exc:
        for line in exc.diagnostics:
            console.text(line)
        _print_usage()
        return exit_codes.USAGE_ERROR

    verbose = apply_transforms(Config(), parsed.transforms).verbose
    configure_logging(verbose)

    resolver = ConfigResolver(source or YamlConfigSource(), default_app_dir)
    resolved = resolver.resolve(parsed.transforms)
    config = resolved.config
    if config.verbose != verbose:
        # The configuration file switched verbosity.
        configure_logging(config.verbose)
    logger.debug(
        "Configuration resolved (file %s, %s)",
        resolved.config_file,
        "loaded" if resolved.loaded_file else "absent",
    )

    init_workdir(resolved.network_dir)

    result = CommandDispatcher(commands).dispatch(config, parsed.commands)
    if result.status is DispatchStatus.HELP:
        _print_usage()
    elif result.status is DispatchStatus.INVALID:
        out.text("Invalid command")
        _print_usage()
    else:
        text = render(result.output, config.output_format)
        if text is not None:
            out.text(text)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except HwClientError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
