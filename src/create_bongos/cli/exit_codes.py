"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Project created, or the user cancelled the name prompt."""

GENERAL_ERROR: int = 1
"""Any validation, conflict, fetch, patch, or unexpected failure."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C outside the prompt.  POSIX convention (128 + SIGINT=2)."""
