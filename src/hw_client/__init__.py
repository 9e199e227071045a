"""hw-client: command-line launcher for the hw wallet.

Resolves a layered configuration, prepares the wallet working directory
and dispatches commands to a pluggable wallet backend.
"""

from hw_client.version import __version__

__all__: list[str] = ["__version__"]
