"""Documentation run exports."""

from .documentation_run_use_case import (
    DocumentationRunError,
    InputNotFoundError,
    execute_documentation_run,
    select_documented_records,
)
from .run_contracts import GenerationOutcome, GenerationRequest

__all__ = [
    "GenerationRequest",
    "GenerationOutcome",
    "DocumentationRunError",
    "InputNotFoundError",
    "execute_documentation_run",
    "select_documented_records",
]
