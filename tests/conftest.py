"""Shared pytest fixtures and configuration for the create-bongos test suite.

Guidelines
----------
* No internet access in any test.
* httpx is exercised through ``httpx.MockTransport`` only.
* Every filesystem effect lands under ``tmp_path``.
* The prompt and the fetcher are replaced by the fakes below.
"""

from __future__ import annotations

import io
import json
import tarfile
from collections.abc import Callable, Mapping
from pathlib import Path

import pytest

from create_bongos.exceptions import FetchFailureError


# ---------------------------------------------------------------------------
# Fakes for the core protocols
# ---------------------------------------------------------------------------

class FakePrompter:
    """Returns a canned answer and records the suggested default."""

    def __init__(self, answer: str | None) -> None:
        self.answer = answer
        self.defaults: list[str] = []

    def ask_project_name(self, default: str) -> str | None:
        self.defaults.append(default)
        return self.answer


class FakeFetcher:
    """Writes *files* into the destination, or raises *error*."""

    def __init__(
        self,
        files: Mapping[str, str] | None = None,
        *,
        error: BaseException | None = None,
    ) -> None:
        self.files = dict(files or {})
        self.error = error
        self.calls: list[Path] = []

    def fetch(self, destination: Path) -> None:
        self.calls.append(destination)
        if self.error is not None:
            raise self.error
        for relative, content in self.files.items():
            target = destination / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")


# ---------------------------------------------------------------------------
# Archive builder
# ---------------------------------------------------------------------------

def build_tarball(files: Mapping[str, str], *, root: str = "bongos-base-abc123") -> bytes:
    """Return a gzipped tarball laid out like a GitHub archive."""
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as tar:
        root_info = tarfile.TarInfo(root)
        root_info.type = tarfile.DIRTYPE
        root_info.mode = 0o755
        tar.addfile(root_info)
        for relative, content in files.items():
            data = content.encode("utf-8")
            info = tarfile.TarInfo(f"{root}/{relative}")
            info.size = len(data)
            info.mode = 0o644
            tar.addfile(info, io.BytesIO(data))
    return buffer.getvalue()


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

TEMPLATE_MANIFEST: dict[str, object] = {
    "name": "template",
    "version": "1.0.0",
}


@pytest.fixture()
def template_files() -> dict[str, str]:
    return {
        "package.json": json.dumps(TEMPLATE_MANIFEST),
        "src/index.ts": "console.log('bongos');\n",
        ".env.example": "DATABASE_URL=\n",
    }


@pytest.fixture()
def fake_fetcher(template_files: dict[str, str]) -> FakeFetcher:
    return FakeFetcher(template_files)


@pytest.fixture()
def failing_fetcher() -> FakeFetcher:
    return FakeFetcher(error=FetchFailureError("could not find repository"))


@pytest.fixture()
def make_prompter() -> Callable[[str | None], FakePrompter]:
    return FakePrompter


@pytest.fixture()
def make_fetcher() -> type[FakeFetcher]:
    return FakeFetcher


@pytest.fixture()
def make_tarball() -> Callable[..., bytes]:
    return build_tarball


@pytest.fixture(autouse=True)
def _wide_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep Rich from wrapping long paths in captured output."""
    monkeypatch.setenv("COLUMNS", "400")
