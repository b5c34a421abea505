from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from .application import SKILL_NAMES, Application, FieldError, Role


class FieldSpec(BaseModel):
    name: str = Field(description="Wire name, e.g. 'experienceYears'")
    label: str = Field(description="Human-readable label text")
    required: bool = False


class FormState(BaseModel):
    """Everything one open form page holds in memory."""

    role: Role = Role.DEVELOPER
    values: dict[str, Any] = Field(
        default_factory=dict, description="Raw input values keyed by wire name"
    )
    skills: dict[str, bool] = Field(default_factory=lambda: dict.fromkeys(SKILL_NAMES, False))
    interview_time: Optional[datetime] = Field(default_factory=datetime.now)
    errors: dict[str, str] = Field(
        default_factory=dict, description="Messages shown next to each input"
    )
    submitted: Optional[Application] = None
    modal_open: bool = False


class FormView(BaseModel):
    """What a renderer needs to draw the form."""

    role: Role
    fields: list[FieldSpec]
    values: dict[str, Any]
    skills: dict[str, bool]
    interview_time: Optional[datetime]
    errors: dict[str, str]
    modal_open: bool
    has_submission: bool


class SubmitResult(BaseModel):
    accepted: bool
    errors: list[FieldError] = []
    application: Optional[Application] = None


class DisplayLine(BaseModel):
    label: str
    value: str


class SubmissionView(BaseModel):
    """Read-only rendering of the last accepted submission."""

    title: str = "Submitted Data"
    lines: list[DisplayLine] = []

    def to_text(self) -> str:
        return "\n".join(f"{line.label}: {line.value}" for line in self.lines)


class RoleSelection(BaseModel):
    role: Role


class FieldInput(BaseModel):
    value: Any = None


class SkillInput(BaseModel):
    checked: bool


class InterviewTimeSelection(BaseModel):
    value: Optional[datetime] = None
