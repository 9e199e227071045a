"""Allow ``python -m hw_client`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m hw_client`` behaves identically to the ``hw`` console script.
"""

from __future__ import annotations

from hw_client.cli.app import cli

if __name__ == "__main__":
    cli()
