"""Form Structure Validation - minimal shape check before a form is persisted.

Invariants:
    - validate_form_structure is total: it returns a StructureCheck for ANY input
      (None, primitives, lists, malformed documents) and never raises
    - Only the top-level shape is checked: an object with a `questions` array
    - Question contents are not inspected
"""

from collections.abc import Mapping
from dataclasses import dataclass

NOT_AN_OBJECT = "Form structure must be an object"
MISSING_QUESTIONS = "Form structure must have a questions array"


@dataclass(frozen=True)
class StructureCheck:
    """Discriminated validation result: error is set iff valid is False."""
    valid: bool
    error: str | None = None


def validate_form_structure(candidate: object) -> StructureCheck:
    if candidate is None or not isinstance(candidate, Mapping):
        return StructureCheck(valid=False, error=NOT_AN_OBJECT)
    questions = candidate.get("questions")
    if not isinstance(questions, (list, tuple)):
        return StructureCheck(valid=False, error=MISSING_QUESTIONS)
    return StructureCheck(valid=True)
