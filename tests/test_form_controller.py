from __future__ import annotations

from datetime import datetime

import pytest

from jobform.models.application import Role
from jobform.services.form_controller import (
    FieldHiddenError,
    FormController,
    UnknownFieldError,
)

from conftest import INTERVIEW_TIME, fill


def names(specs):
    return [spec.name for spec in specs]


@pytest.mark.parametrize(
    "role, conditional",
    [
        (Role.DEVELOPER, ["experienceYears"]),
        (Role.DESIGNER, ["experienceYears", "portfolioUrl"]),
        (Role.MANAGER, ["managementExperience"]),
    ],
)
def test_visible_fields_follow_role(role, conditional):
    controller = FormController(role=role)
    assert names(controller.visible_fields()) == ["name", "email", "phoneNumber", *conditional]
    assert controller.required_fields() == names(controller.visible_fields())


def test_field_labels():
    labels = {spec.name: spec.label for spec in FormController(role=Role.DESIGNER).visible_fields()}
    assert labels["portfolioUrl"] == "Portfolio URL"
    assert labels["experienceYears"] == "Relevant Experience (years)"


def test_default_role_and_interview_time_mirrored():
    controller = FormController()
    assert controller.role is Role.DEVELOPER
    assert controller.state.interview_time is not None
    assert controller.candidate()["preferredInterviewTime"] == controller.state.interview_time


def test_designer_end_to_end(designer_form):
    result = designer_form.submit()
    assert result.accepted
    assert designer_form.state.modal_open
    assert designer_form.state.errors == {}
    view = designer_form.display()
    assert dict((line.label, line.value) for line in view.lines)["Skills"] == "Java"


def test_hidden_field_cannot_be_edited():
    controller = FormController(role=Role.DEVELOPER)
    with pytest.raises(FieldHiddenError):
        controller.set_field("managementExperience", "Ten years")


def test_unknown_field_and_skill():
    controller = FormController()
    with pytest.raises(UnknownFieldError):
        controller.set_field("favouriteColour", "blue")
    with pytest.raises(UnknownFieldError):
        controller.set_skill("Rust", True)


def test_role_change_keeps_values():
    controller = FormController(role=Role.MANAGER)
    controller.set_field("managementExperience", "Ran a studio")
    controller.select_role(Role.DEVELOPER)
    controller.select_role(Role.MANAGER)
    assert controller.state.values["managementExperience"] == "Ran a studio"


def test_manager_without_management_experience_fails():
    controller = fill(FormController(role=Role.MANAGER), managementExperience="")
    result = controller.submit()
    assert not result.accepted
    assert controller.state.errors == {"managementExperience": "Required"}
    assert not controller.state.modal_open
    assert controller.display() is None


def test_developer_ignores_empty_management_experience():
    controller = fill(FormController(role=Role.MANAGER), managementExperience="")
    controller.select_role(Role.DEVELOPER)
    controller.set_field("experienceYears", 3)
    assert controller.submit().accepted
    assert "managementExperience" not in controller.candidate()


def test_hidden_field_errors_dropped_on_role_change():
    controller = fill(FormController(role=Role.MANAGER), managementExperience="")
    controller.submit()
    controller.select_role(Role.DEVELOPER)
    assert "managementExperience" not in controller.state.errors


def test_failure_keeps_previous_snapshot(designer_form):
    designer_form.submit()
    snapshot = designer_form.state.submitted
    designer_form.close_modal()

    designer_form.set_field("name", "Al")
    result = designer_form.submit()

    assert not result.accepted
    assert designer_form.state.errors == {"name": "Enter at least 3 characters"}
    assert designer_form.state.submitted is snapshot
    assert not designer_form.state.modal_open


def test_errors_cleared_after_successful_submit():
    controller = fill(FormController(), phoneNumber="12345")
    controller.submit()
    assert controller.state.errors == {"phoneNumber": "Enter 10 digits"}
    controller.set_field("phoneNumber", "1234567890")
    assert controller.submit().accepted
    assert controller.state.errors == {}


def test_close_modal_keeps_snapshot(designer_form):
    designer_form.submit()
    designer_form.close_modal()
    assert not designer_form.state.modal_open
    assert designer_form.display() is not None


def test_submitting_twice_gives_same_snapshot(designer_form):
    first = designer_form.submit()
    second = designer_form.submit()
    assert first.application == second.application
    assert designer_form.display() == designer_form.display()


def test_interview_time_change_seen_by_next_submit(designer_form):
    later = datetime(2026, 2, 1, 9, 15)
    designer_form.select_interview_time(later)
    designer_form.submit()
    assert designer_form.state.submitted.preferred_interview_time == later
    assert "February 1, 2026 9:15 AM" in designer_form.display().to_text()


def test_cleared_interview_time_is_accepted(designer_form):
    designer_form.select_interview_time(None)
    assert "preferredInterviewTime" not in designer_form.candidate()
    result = designer_form.submit()
    assert result.accepted
    assert designer_form.state.errors == {}
    assert designer_form.display().to_text().endswith("Preferred Interview Time: N/A")


def test_reselected_interview_time_is_mirrored_again(designer_form):
    designer_form.select_interview_time(None)
    designer_form.select_interview_time(INTERVIEW_TIME)
    assert designer_form.candidate()["preferredInterviewTime"] == INTERVIEW_TIME


def test_reset_returns_fresh_state(designer_form):
    designer_form.submit()
    designer_form.reset()
    assert designer_form.role is Role.DEVELOPER
    assert designer_form.display() is None
    assert designer_form.state.values.keys() == {"preferredInterviewTime"}
    assert designer_form.state.interview_time != INTERVIEW_TIME
