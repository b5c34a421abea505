"""Form controller: holds one page's form state and mediates input, validation and display."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from jobform.config import settings
from jobform.models.application import (
    APPLICATION_VARIANTS,
    SKILL_NAMES,
    Role,
    validate_application,
)
from jobform.models.form import FieldSpec, FormState, FormView, SubmissionView, SubmitResult
from jobform.services.display_service import render_submission

logger = logging.getLogger(__name__)

# Text inputs in page order; the role's schema variant decides which are shown
INPUT_FIELDS = (
    "name",
    "email",
    "phoneNumber",
    "experienceYears",
    "portfolioUrl",
    "managementExperience",
)

INTERVIEW_TIME_FIELD = "preferredInterviewTime"


class FormError(Exception):
    """Invalid use of the form controller (not a validation failure)."""


class UnknownFieldError(FormError):
    pass


class FieldHiddenError(FormError):
    pass


def field_specs(role: Role) -> list[FieldSpec]:
    """Input fields shown for ``role``, taken from that role's schema variant."""
    model = APPLICATION_VARIANTS[role]
    by_wire_name = {info.alias or name: info for name, info in model.model_fields.items()}
    return [
        FieldSpec(
            name=name,
            label=by_wire_name[name].title or name,
            required=by_wire_name[name].is_required(),
        )
        for name in INPUT_FIELDS
        if name in by_wire_name
    ]


class FormController:
    def __init__(self, role: Role | str | None = None) -> None:
        self._state = FormState(role=Role(role or settings.default_role))
        self._mirror_interview_time()

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def role(self) -> Role:
        return self._state.role

    def visible_fields(self) -> list[FieldSpec]:
        return field_specs(self._state.role)

    def required_fields(self) -> list[str]:
        return [spec.name for spec in self.visible_fields() if spec.required]

    def _visible_names(self) -> set[str]:
        return {spec.name for spec in self.visible_fields()}

    def select_role(self, role: Role | str) -> None:
        """Switch role. Entered values are kept; errors of now-hidden inputs are dropped."""
        self._state.role = Role(role)
        hidden = set(INPUT_FIELDS) - self._visible_names()
        self._state.errors = {
            path: msg for path, msg in self._state.errors.items() if path not in hidden
        }
        logger.debug("Role changed to %s", self._state.role.value)

    def set_field(self, name: str, value: Any) -> None:
        if name not in INPUT_FIELDS:
            raise UnknownFieldError(f"Unknown field: {name}")
        if name not in self._visible_names():
            raise FieldHiddenError(
                f"Field {name} is not shown for role {self._state.role.value}"
            )
        self._state.values[name] = value

    def set_skill(self, skill: str, checked: bool) -> None:
        if skill not in SKILL_NAMES:
            raise UnknownFieldError(f"Unknown skill: {skill}")
        self._state.skills[skill] = checked

    def select_interview_time(self, value: datetime | None) -> None:
        self._state.interview_time = value
        self._mirror_interview_time()

    def _mirror_interview_time(self) -> None:
        # A cleared picker leaves the value absent, not null
        if self._state.interview_time is None:
            self._state.values.pop(INTERVIEW_TIME_FIELD, None)
        else:
            self._state.values[INTERVIEW_TIME_FIELD] = self._state.interview_time

    def candidate(self) -> dict[str, Any]:
        """Assemble what submit validates: visible inputs, skills and interview time."""
        visible = self._visible_names()
        data = {
            name: value for name, value in self._state.values.items() if name in visible
        }
        data["skills"] = dict(self._state.skills)
        if INTERVIEW_TIME_FIELD in self._state.values:
            data[INTERVIEW_TIME_FIELD] = self._state.values[INTERVIEW_TIME_FIELD]
        return data

    def submit(self) -> SubmitResult:
        outcome = validate_application(self.candidate(), self._state.role)
        if not outcome.ok:
            self._state.errors = outcome.error_map()
            logger.info(
                "Submission rejected (%s): %s",
                self._state.role.value,
                ", ".join(self._state.errors),
            )
            return SubmitResult(accepted=False, errors=outcome.errors)

        self._state.submitted = outcome.application
        self._state.errors = {}
        self._state.modal_open = True
        logger.info("Submission accepted for %s", self._state.role.value)
        return SubmitResult(accepted=True, application=outcome.application)

    def close_modal(self) -> None:
        self._state.modal_open = False

    def display(self) -> SubmissionView | None:
        if self._state.submitted is None:
            return None
        return render_submission(self._state.submitted)

    def reset(self) -> None:
        self._state = FormState(role=Role(settings.default_role))
        self._mirror_interview_time()

    def view(self) -> FormView:
        s = self._state
        return FormView(
            role=s.role,
            fields=self.visible_fields(),
            values=dict(s.values),
            skills=dict(s.skills),
            interview_time=s.interview_time,
            errors=dict(s.errors),
            modal_open=s.modal_open,
            has_submission=s.submitted is not None,
        )


form_controller = FormController()
