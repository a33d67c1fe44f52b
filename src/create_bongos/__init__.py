"""create-bongos — scaffold a new Bongos Base project from its template.

Fetches the remote template, writes it to a new directory, and renames
the project in its ``package.json``.
"""

from create_bongos.version import __version__

__all__: list[str] = ["__version__"]
