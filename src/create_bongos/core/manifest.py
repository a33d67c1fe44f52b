"""Pure manifest transform: rename a ``package.json`` document."""

from __future__ import annotations

import json
from typing import Any

from create_bongos.exceptions import PatchFailureError


def rename_manifest(text: str, name: str) -> str:
    """Return *text* with its top-level ``name`` set to *name*.

    Every other field keeps its value and position; a missing ``name``
    key is appended.  The result is indented with two spaces and ends
    with exactly one newline.

    Raises
    ------
    PatchFailureError
        If *text* is not JSON or its top-level value is not an object.
    """
    try:
        document: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise PatchFailureError(f"package.json is not valid JSON: {exc}") from exc

    if not isinstance(document, dict):
        raise PatchFailureError(
            f"package.json must contain a JSON object, found {type(document).__name__}."
        )

    document["name"] = name
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"
