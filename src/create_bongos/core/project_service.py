"""Core project service — orchestrates the scaffolding pipeline.

The service delegates template acquisition to a
:class:`~create_bongos.core.protocols.TemplateFetcher` injected at
construction time.  It is responsible for:

* Claiming the destination directory.
* Delegating the fetch.
* Renaming the project in the fetched manifest.
* Ensuring only :class:`~create_bongos.exceptions.CreateBongosError`
  subclasses escape.

Guarantees
----------
* No network access and no user-facing output.
* Filesystem access limited to the destination directory.
* First failure wins: no retries and no cleanup of partial state.
"""

from __future__ import annotations

import logging
from contextlib import nullcontext
from pathlib import Path

from create_bongos.core.manifest import rename_manifest
from create_bongos.core.models import ProjectRequest
from create_bongos.core.protocols import StepObserver, TemplateFetcher
from create_bongos.exceptions import (
    FETCH_HINT,
    CreateBongosError,
    DestinationExistsError,
    FetchFailureError,
    ManifestMissingError,
    PatchFailureError,
)
from create_bongos.utils.constants import MANIFEST_FILENAME

logger = logging.getLogger(__name__)

STEP_FETCH: str = "fetch"
STEP_PATCH: str = "patch"


class _SilentObserver:
    """Observer that shows nothing."""

    def step(self, name: str) -> nullcontext[None]:
        return nullcontext()


class ProjectService:
    """Stateless service that drives one project creation.

    Parameters
    ----------
    fetcher:
        Any object satisfying the :class:`TemplateFetcher` protocol.
    """

    def __init__(self, fetcher: TemplateFetcher) -> None:
        self._fetcher: TemplateFetcher = fetcher

    # ------------------------------------------------------------------
    # Pipeline steps
    # ------------------------------------------------------------------

    @staticmethod
    def destination_for(name: str, cwd: Path | None = None) -> Path:
        """Return the absolute directory a project called *name* lives in."""
        base = Path.cwd() if cwd is None else Path(cwd).resolve()
        return base / name

    def claim_destination(self, name: str, cwd: Path | None = None) -> Path:
        """Atomically create the project directory.

        The exclusive ``mkdir`` is the existence check: whatever occupies
        the path (file, directory, dangling symlink) makes it fail.

        Raises
        ------
        DestinationExistsError
            If the path already exists.
        FetchFailureError
            If the directory cannot be created for another reason.
        """
        destination = self.destination_for(name, cwd)
        try:
            destination.mkdir()
        except FileExistsError as exc:
            raise DestinationExistsError(str(destination)) from exc
        except OSError as exc:
            raise FetchFailureError(
                f"Could not create {destination}: {exc}",
            ) from exc
        logger.debug("Claimed destination %s", destination)
        return destination

    def fetch_template(self, destination: Path) -> None:
        """Populate *destination* through the injected fetcher.

        Raises
        ------
        FetchFailureError
            When the fetcher fails for any reason.
        """
        logger.debug("Fetching template into %s", destination)
        try:
            self._fetcher.fetch(destination)
        except CreateBongosError:
            raise
        except Exception as exc:
            raise FetchFailureError(
                f"Unexpected fetch error: {exc}",
                hint=FETCH_HINT,
            ) from exc

    def patch_manifest(self, destination: Path, name: str) -> Path:
        """Set the manifest's ``name`` to *name* and write it back.

        Returns the manifest path.

        Raises
        ------
        ManifestMissingError
            If the template has no manifest; nothing is written.
        PatchFailureError
            If the manifest cannot be read, parsed, or written.
        """
        manifest_path = destination / MANIFEST_FILENAME
        if not manifest_path.exists():
            raise ManifestMissingError(
                f"The template does not contain a {MANIFEST_FILENAME} file.",
            )

        try:
            original = manifest_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise PatchFailureError(f"Could not read {manifest_path}: {exc}") from exc

        patched = rename_manifest(original, name)

        try:
            manifest_path.write_text(patched, encoding="utf-8")
        except OSError as exc:
            raise PatchFailureError(f"Could not write {manifest_path}: {exc}") from exc

        logger.debug("Renamed project in %s to %r", manifest_path, name)
        return manifest_path

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def create(
        self,
        request: ProjectRequest,
        cwd: Path | None = None,
        *,
        observer: StepObserver | None = None,
    ) -> Path:
        """Run guard, fetch and patch for *request*; return the project path.

        The fetch and patch steps each run inside ``observer.step(...)``
        so a caller can display progress.  The guard is instant and is
        not observed.
        """
        if observer is None:
            observer = _SilentObserver()

        destination = self.claim_destination(request.name, cwd)
        with observer.step(STEP_FETCH):
            self.fetch_template(destination)
        with observer.step(STEP_PATCH):
            self.patch_manifest(destination, request.name)
        return destination
