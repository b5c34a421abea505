"""Validation schema for a job application, one variant per role."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from email_validator import EmailNotValidError, validate_email
from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic_core import PydanticCustomError

logger = logging.getLogger(__name__)

_PHONE_RE = re.compile(r"[0-9]{10}")
_URL_ADAPTER = TypeAdapter(AnyUrl)

MISSING_MESSAGE = "Required"


class Role(str, Enum):
    DEVELOPER = "Developer"
    MANAGER = "Manager"
    DESIGNER = "Designer"


def _check_email(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise PydanticCustomError("invalid_email", "Invalid email format")
    return value


def _check_name(value: str) -> str:
    if len(value) < 3:
        raise PydanticCustomError("name_too_short", "Enter at least 3 characters")
    if len(value) > 20:
        raise PydanticCustomError("name_too_long", "Too long")
    return value


def _check_phone(value: str) -> str:
    # Too short, too long and non-digit input all share one message
    if not _PHONE_RE.fullmatch(value):
        raise PydanticCustomError("invalid_phone", "Enter 10 digits")
    return value


def _check_url(value: str) -> str:
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError:
        raise PydanticCustomError("invalid_url", "Invalid URL")
    return value


def _check_positive(value: float) -> float:
    if not value > 0:
        raise PydanticCustomError("not_positive", "Must be greater than 0")
    return value


def _check_not_empty(value: str) -> str:
    if not value:
        raise PydanticCustomError("empty", MISSING_MESSAGE)
    return value


Email = Annotated[str, AfterValidator(_check_email)]
FullName = Annotated[str, AfterValidator(_check_name)]
PhoneNumber = Annotated[str, AfterValidator(_check_phone)]
PortfolioUrl = Annotated[str, AfterValidator(_check_url)]
YearsOfExperience = Annotated[
    float, Field(strict=True, allow_inf_nan=False), AfterValidator(_check_positive)
]
ManagementExperience = Annotated[str, AfterValidator(_check_not_empty)]


class Skills(BaseModel):
    """Checkbox group; at least one box must be ticked."""

    Java: bool = False
    Python: bool = False
    JavaScript: bool = False
    CSS: bool = False

    @model_validator(mode="after")
    def _at_least_one(self) -> Skills:
        if not any(self.model_dump().values()):
            raise PydanticCustomError("no_skill_selected", "Select at least one skill")
        return self

    def selected(self) -> list[str]:
        """Names of the ticked skills, in declaration order."""
        return [name for name, checked in self.model_dump().items() if checked]


SKILL_NAMES: tuple[str, ...] = tuple(Skills.model_fields)


class ApplicationBase(BaseModel):
    """Fields every applicant fills in, whatever the role."""

    email: Email = Field(title="Your email")
    name: FullName = Field(title="Your full name")
    phone_number: PhoneNumber = Field(alias="phoneNumber", title="Your Phone Number")
    skills: Skills = Field(title="Additional Skills")
    # Absent passes; an explicit null does not. A cleared picker leaves it absent.
    preferred_interview_time: Optional[datetime] = Field(
        None, alias="preferredInterviewTime", title="Preferred Interview Time"
    )

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @field_validator("preferred_interview_time", mode="before")
    @classmethod
    def _interview_time_given(cls, value: Any) -> Any:
        if value is None:
            raise PydanticCustomError(
                "interview_time_required", "Preferred interview time is required"
            )
        return value


class DeveloperApplication(ApplicationBase):
    role: Literal[Role.DEVELOPER] = Role.DEVELOPER
    experience_years: YearsOfExperience = Field(
        alias="experienceYears", title="Relevant Experience (years)"
    )


class ManagerApplication(ApplicationBase):
    role: Literal[Role.MANAGER] = Role.MANAGER
    management_experience: ManagementExperience = Field(
        alias="managementExperience", title="Management Experience"
    )


class DesignerApplication(ApplicationBase):
    role: Literal[Role.DESIGNER] = Role.DESIGNER
    experience_years: YearsOfExperience = Field(
        alias="experienceYears", title="Relevant Experience (years)"
    )
    portfolio_url: PortfolioUrl = Field(alias="portfolioUrl", title="Portfolio URL")


Application = Annotated[
    Union[DeveloperApplication, ManagerApplication, DesignerApplication],
    Field(discriminator="role"),
]

APPLICATION_VARIANTS: dict[Role, type[ApplicationBase]] = {
    Role.DEVELOPER: DeveloperApplication,
    Role.MANAGER: ManagerApplication,
    Role.DESIGNER: DesignerApplication,
}


class FieldError(BaseModel):
    path: str = Field(description="Wire name of the offending field, e.g. 'phoneNumber'")
    message: str


class ValidationOutcome(BaseModel):
    """Either a validated application or the list of field errors, never both."""

    application: Optional[Application] = None
    errors: list[FieldError] = []

    @property
    def ok(self) -> bool:
        return self.application is not None

    def error_map(self) -> dict[str, str]:
        return {e.path: e.message for e in self.errors}


def _field_errors(exc: ValidationError) -> list[FieldError]:
    """Flatten pydantic errors to one message per field path."""
    errors: list[FieldError] = []
    seen: set[str] = set()
    for err in exc.errors():
        path = ".".join(str(part) for part in err["loc"])
        if path in seen:
            continue
        seen.add(path)
        message = MISSING_MESSAGE if err["type"] == "missing" else err["msg"]
        errors.append(FieldError(path=path, message=message))
    return errors


def validate_application(candidate: Mapping[str, Any], role: Role | str) -> ValidationOutcome:
    """Validate a candidate application against the variant for ``role``.

    The candidate uses wire names (``phoneNumber``, ``experienceYears`` ...).
    Fields that the role's variant does not declare are ignored.
    """
    role = Role(role)
    model = APPLICATION_VARIANTS[role]
    try:
        application = model.model_validate({**candidate, "role": role})
    except ValidationError as e:
        errors = _field_errors(e)
        logger.debug("Validation failed for %s: %s", role.value, [err.path for err in errors])
        return ValidationOutcome(errors=errors)
    return ValidationOutcome(application=application)
