from .application import (
    SKILL_NAMES,
    Application,
    FieldError,
    Role,
    Skills,
    ValidationOutcome,
    validate_application,
)
from .form import FieldSpec, FormState, FormView, SubmissionView, SubmitResult

__all__ = [
    "SKILL_NAMES",
    "Application",
    "FieldError",
    "Role",
    "Skills",
    "ValidationOutcome",
    "validate_application",
    "FieldSpec",
    "FormState",
    "FormView",
    "SubmissionView",
    "SubmitResult",
]
