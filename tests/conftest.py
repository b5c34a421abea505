from __future__ import annotations

from datetime import datetime

import pytest

from jobform.models.application import Role
from jobform.services.form_controller import FormController

INTERVIEW_TIME = datetime(2026, 1, 5, 15, 7)


def make_candidate(**overrides) -> dict:
    data = {
        "name": "Alice Smith",
        "email": "alice@x.com",
        "phoneNumber": "1234567890",
        "experienceYears": 5,
        "portfolioUrl": "https://a.dev",
        "managementExperience": "Led a team of six",
        "skills": {"Java": True, "Python": False, "JavaScript": False, "CSS": False},
        "preferredInterviewTime": INTERVIEW_TIME,
    }
    data.update(overrides)
    return data


@pytest.fixture
def candidate() -> dict:
    return make_candidate()


def fill(controller: FormController, **overrides) -> FormController:
    """Type a valid application into whatever inputs the current role shows."""
    data = make_candidate(**overrides)
    for spec in controller.visible_fields():
        controller.set_field(spec.name, data[spec.name])
    for skill, checked in data["skills"].items():
        controller.set_skill(skill, checked)
    controller.select_interview_time(data["preferredInterviewTime"])
    return controller


@pytest.fixture
def designer_form() -> FormController:
    return fill(FormController(role=Role.DESIGNER))
