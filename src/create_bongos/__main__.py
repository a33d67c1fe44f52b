"""Allow ``python -m create_bongos`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m create_bongos`` behaves identically to the ``create-bongos``
console script.
"""

from __future__ import annotations

from create_bongos.cli.app import cli

if __name__ == "__main__":
    cli()
