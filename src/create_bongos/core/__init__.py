"""Core / service layer — the project-creation workflow.

Rules
-----
* No ``print()`` calls.
* No network I/O; filesystem access only inside the destination.
* No imports from ``cli`` or ``infra``.
* Collaborators (prompt, fetch, progress) arrive through protocols.
"""

from create_bongos.core.input_resolver import resolve_project_request
from create_bongos.core.manifest import rename_manifest
from create_bongos.core.models import ProjectRequest, TemplateSource
from create_bongos.core.project_service import ProjectService
from create_bongos.core.protocols import NamePrompter, StepObserver, TemplateFetcher
from create_bongos.core.validation import is_valid_project_name, validate_project_name

__all__: list[str] = [
    "NamePrompter",
    "ProjectRequest",
    "ProjectService",
    "StepObserver",
    "TemplateFetcher",
    "TemplateSource",
    "is_valid_project_name",
    "rename_manifest",
    "resolve_project_request",
    "validate_project_name",
]
