"""Domain models for create-bongos.

All models are **frozen** dataclasses: immutable value objects built
through validating constructors.  They carry zero I/O and no
dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass

from create_bongos.core.validation import validate_project_name
from create_bongos.utils.constants import ARCHIVE_URL_PATTERN, DEFAULT_REF


# ---------------------------------------------------------------------------
# Project request
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ProjectRequest:
    """A validated request to scaffold one project."""

    name: str
    """Project name; also the directory name and the manifest ``name``."""

    @classmethod
    def from_name(cls, name: str) -> ProjectRequest:
        """Validate *name* and wrap it.

        Raises
        ------
        InvalidNameError
            If *name* is not made of ASCII letters, digits, ``-`` and ``_``.
        """
        return cls(name=validate_project_name(name))


# ---------------------------------------------------------------------------
# Template reference
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TemplateSource:
    """A remote repository used as the project template."""

    owner: str
    repo: str
    ref: str = DEFAULT_REF

    @classmethod
    def parse(cls, reference: str) -> TemplateSource:
        """Parse a degit-style ``owner/repo`` or ``owner/repo#ref`` string."""
        path, _, ref = reference.partition("#")
        owner, sep, repo = path.partition("/")
        if not sep or not owner or not repo or "/" in repo:
            raise ValueError(
                f"invalid template reference {reference!r}; expected 'owner/repo[#ref]'"
            )
        return cls(owner=owner, repo=repo, ref=ref or DEFAULT_REF)

    @property
    def archive_url(self) -> str:
        """HTTPS URL of the gzipped tarball for this source."""
        return ARCHIVE_URL_PATTERN.format(owner=self.owner, repo=self.repo, ref=self.ref)

    def __str__(self) -> str:
        base = f"{self.owner}/{self.repo}"
        return base if self.ref == DEFAULT_REF else f"{base}#{self.ref}"
