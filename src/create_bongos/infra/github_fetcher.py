"""GitHub-tarball implementation of :class:`~create_bongos.core.protocols.TemplateFetcher`.

This module is the **only** place in the codebase that imports ``httpx``.
The template is downloaded as a repository tarball, never as a clone, so
the result carries no version-control history.  All httpx and tarfile
exceptions are caught here and re-raised as
:class:`~create_bongos.exceptions.FetchFailureError`.
"""

from __future__ import annotations

import logging
import platform
import tarfile
import tempfile
from collections.abc import Iterable, Iterator
from pathlib import Path, PurePosixPath
from typing import IO, Any

from create_bongos.core.models import TemplateSource
from create_bongos.exceptions import FETCH_HINT, EnvironmentError, FetchFailureError
from create_bongos.utils.constants import (
    CONNECT_TIMEOUT_SECONDS,
    DOWNLOAD_CHUNK_SIZE,
    TEMPLATE_REFERENCE,
    USER_AGENT,
    VCS_METADATA_NAMES,
)

logger = logging.getLogger(__name__)


def _import_httpx() -> Any:
    """Import httpx lazily so ``--help`` works without it."""
    try:
        import httpx
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "httpx is not installed. Install with: pip install httpx",
        ) from exc
    return httpx


def _require_extraction_filter() -> None:
    """Fail early on interpreters whose tarfile predates extraction filters."""
    if not hasattr(tarfile, "data_filter"):
        raise EnvironmentError(
            "This Python has no tarfile extraction filters; "
            f"create-bongos needs 3.10.12+, 3.11.4+ or 3.12+ (running {platform.python_version()}).",
            hint="Upgrade Python and reinstall create-bongos.",
        )


class GitHubTemplateFetcher:
    """Concrete :class:`TemplateFetcher` backed by GitHub's tarball endpoint.

    Usage::

        fetcher = GitHubTemplateFetcher()
        fetcher.fetch(Path("my-app"))

    Parameters
    ----------
    source:
        Template to fetch, as a :class:`TemplateSource` or a degit-style
        ``owner/repo[#ref]`` string.
    client:
        Optional ``httpx.Client``.  When omitted a client is created per
        fetch and closed afterwards; an injected client is left open.
    """

    def __init__(
        self,
        source: TemplateSource | str = TEMPLATE_REFERENCE,
        *,
        client: Any | None = None,
    ) -> None:
        if isinstance(source, str):
            source = TemplateSource.parse(source)
        self._source: TemplateSource = source
        self._client: Any | None = client

    @property
    def source(self) -> TemplateSource:
        return self._source

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def fetch(self, destination: Path) -> None:
        """Download the template and unpack it into *destination*.

        Raises
        ------
        EnvironmentError
            If httpx is missing or the interpreter lacks tarfile
            extraction filters.
        FetchFailureError
            For HTTP errors, unreachable hosts, corrupt archives, or
            filesystem errors while writing.
        """
        httpx = _import_httpx()
        _require_extraction_filter()
        destination = Path(destination)

        with tempfile.TemporaryFile() as archive:
            self._download(httpx, archive)
            archive.seek(0)
            self._extract(archive, destination)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _download(self, httpx: Any, archive: IO[bytes]) -> None:
        url = self._source.archive_url
        client = self._client
        owns_client = client is None
        if owns_client:
            client = httpx.Client(
                timeout=httpx.Timeout(None, connect=CONNECT_TIMEOUT_SECONDS),
                headers={"User-Agent": USER_AGENT},
            )

        logger.debug("Downloading %s", url)
        received = 0
        try:
            with client.stream(
                "GET",
                url,
                follow_redirects=True,
                headers={"Cache-Control": "no-cache"},
            ) as response:
                response.raise_for_status()
                for chunk in response.iter_bytes(chunk_size=DOWNLOAD_CHUNK_SIZE):
                    archive.write(chunk)
                    received += len(chunk)
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            if status == 404:
                message = f"Could not find repository {self._source}"
            else:
                message = f"Downloading {self._source} failed with HTTP {status}"
            raise FetchFailureError(message, hint=FETCH_HINT) from exc
        except httpx.HTTPError as exc:
            raise FetchFailureError(
                f"Could not download {self._source}: {exc}",
                hint=FETCH_HINT,
            ) from exc
        except OSError as exc:
            raise FetchFailureError(
                f"Could not buffer template archive: {exc}",
            ) from exc
        finally:
            if owns_client:
                client.close()

        logger.debug("Downloaded %d bytes", received)

    def _extract(self, archive: IO[bytes], destination: Path) -> None:
        try:
            destination.mkdir(parents=True, exist_ok=True)
            with tarfile.open(fileobj=archive, mode="r:gz") as tar:
                members = list(_strip_archive_root(tar.getmembers()))
                if not members:
                    raise FetchFailureError(f"Template {self._source} is empty.")
                tar.extractall(destination, members=members, filter="data")
        except tarfile.TarError as exc:
            raise FetchFailureError(
                f"Template archive for {self._source} is unreadable: {exc}",
                hint=FETCH_HINT,
            ) from exc
        except OSError as exc:
            raise FetchFailureError(
                f"Could not write template into {destination}: {exc}",
            ) from exc

        logger.debug("Extracted %d entries into %s", len(members), destination)


# ---------------------------------------------------------------------------
# Archive layout
# ---------------------------------------------------------------------------

def _strip_archive_root(members: Iterable[tarfile.TarInfo]) -> Iterator[tarfile.TarInfo]:
    """Drop the ``<repo>-<sha>/`` prefix and any VCS metadata.

    Entries are renamed in place; the root directory entry itself is
    skipped.
    """
    for member in members:
        parts = PurePosixPath(member.name).parts
        if len(parts) < 2:
            continue
        relative = parts[1:]
        if relative[0] in VCS_METADATA_NAMES:
            continue
        member.name = "/".join(relative)
        if member.islnk():
            member.linkname = "/".join(PurePosixPath(member.linkname).parts[1:])
        yield member
