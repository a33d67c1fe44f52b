"""Fixed values used across the scaffolding workflow.

Nothing here is read from the environment or a config file; the
template and manifest location are part of the tool's contract.
"""

from __future__ import annotations

TEMPLATE_REFERENCE: str = "sammrosen/bongos-base"
"""Degit-style ``owner/repo[#ref]`` reference of the project template."""

DEFAULT_PROJECT_NAME: str = "my-bongos-app"
"""Suggestion shown by the interactive name prompt."""

MANIFEST_FILENAME: str = "package.json"
"""Manifest file expected at the root of the fetched template."""

ARCHIVE_URL_PATTERN: str = "https://codeload.github.com/{owner}/{repo}/tar.gz/{ref}"
"""Tarball endpoint for a repository at a given ref."""

DEFAULT_REF: str = "HEAD"

CONNECT_TIMEOUT_SECONDS: float = 30.0
"""Connection timeout for the template download.  Reads never time out."""

DOWNLOAD_CHUNK_SIZE: int = 64 * 1024

USER_AGENT: str = "create-bongos"

VCS_METADATA_NAMES: frozenset[str] = frozenset({".git"})
"""Top-level entries stripped from the extracted template."""
