"""Infrastructure layer — external system integration.

This layer wraps all interaction with GitHub and the archive format.
Every raw third-party exception must be caught here and re-raised as a
:class:`~create_bongos.exceptions.CreateBongosError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from create_bongos.infra.github_fetcher import GitHubTemplateFetcher

__all__: list[str] = [
    "GitHubTemplateFetcher",
]
