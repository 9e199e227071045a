"""CLI console helpers with optional Rich support.

Rich is imported lazily so that usage text and command output still
work when it is not installed.  Two proxies are exported: ``console``
writes diagnostics to stderr, ``out`` writes command output and usage
text to stdout.
"""

from __future__ import annotations

import sys
from typing import Any

from hw_client.exceptions import HwClientError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``HwClientError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise HwClientError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console instance targeting stderr or stdout."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object, **options: Any) -> None:
        """Render with Rich when available, else plain print."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except HwClientError:
            print(*objects, file=sys.stderr if self._stderr else sys.stdout)
            return
        rich_console.print(*objects, **options)

    def text(self, text: str) -> None:
        """Print *text* literally, without markup, emoji or highlighting."""
        self.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


console = _ConsoleProxy(stderr=True)
out = _ConsoleProxy(stderr=False)
