"""Custom exception hierarchy for create-bongos.

All exceptions that cross layer boundaries must inherit from
:class:`CreateBongosError`.  Raw third-party exceptions (httpx, tarfile,
json) must NEVER propagate beyond the infrastructure layer; they are
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
CreateBongosError
├── InvalidNameError
├── DestinationExistsError
├── FetchFailureError
├── ManifestMissingError
├── PatchFailureError
└── EnvironmentError

A cancelled prompt is not an error and has no exception.
"""

from __future__ import annotations


class CreateBongosError(Exception):
    """Base exception for all create-bongos errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input -----------------------------------------------------------------

class InvalidNameError(CreateBongosError):
    """Raised when a project name fails the name predicate."""


# --- Destination -----------------------------------------------------------

class DestinationExistsError(CreateBongosError):
    """Raised when the target directory is already occupied."""

    def __init__(self, path: str, *, hint: str | None = None) -> None:
        super().__init__(
            f'Directory "{path}" already exists. Please choose a different name.',
            hint=hint,
        )
        self.path: str = path


# --- Template acquisition --------------------------------------------------

class FetchFailureError(CreateBongosError):
    """Raised when the remote template cannot be downloaded or unpacked."""


# --- Manifest --------------------------------------------------------------

class ManifestMissingError(CreateBongosError):
    """Raised when the fetched template has no manifest file."""


class PatchFailureError(CreateBongosError):
    """Raised when the manifest cannot be read, parsed, or written."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CreateBongosError):
    """Raised when a required runtime dependency is not available."""


FETCH_HINT: str = "Make sure you have an internet connection and can access GitHub."
"""Remediation shown with every :class:`FetchFailureError`."""
