"""Read-only rendering of an accepted submission (the confirmation modal)."""

from __future__ import annotations

from datetime import datetime

from jobform.models.application import (
    ApplicationBase,
    DesignerApplication,
    DeveloperApplication,
    ManagerApplication,
)
from jobform.models.form import DisplayLine, SubmissionView


def format_interview_time(value: datetime | None) -> str:
    """Format as 'January 5, 2026 3:07 PM'; 'N/A' when unset."""
    if value is None:
        return "N/A"
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{value:%B} {value.day}, {value.year} {hour}:{value:%M} {meridiem}"


def format_years(value: float) -> str:
    return f"{value:g} years"


def render_submission(application: ApplicationBase) -> SubmissionView:
    """Build display lines for a validated application, skipping absent fields."""
    lines = [
        DisplayLine(label="Name", value=application.name),
        DisplayLine(label="Email", value=application.email),
        DisplayLine(label="Phone Number", value=application.phone_number),
        DisplayLine(label="Position", value=application.role.value),
    ]
    if isinstance(application, (DeveloperApplication, DesignerApplication)):
        lines.append(DisplayLine(label="Experience", value=format_years(application.experience_years)))
    if isinstance(application, DesignerApplication) and application.portfolio_url:
        lines.append(DisplayLine(label="Portfolio URL", value=application.portfolio_url))
    if isinstance(application, ManagerApplication) and application.management_experience:
        lines.append(
            DisplayLine(label="Management Experience", value=application.management_experience)
        )
    lines.append(DisplayLine(label="Skills", value=", ".join(application.skills.selected())))
    lines.append(
        DisplayLine(
            label="Preferred Interview Time",
            value=format_interview_time(application.preferred_interview_time),
        )
    )
    return SubmissionView(lines=lines)
