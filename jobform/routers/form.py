"""Form REST endpoints: one request per UI action on the page-level controller."""
from __future__ import annotations

from fastapi import APIRouter, HTTPException

from jobform.models.application import SKILL_NAMES
from jobform.models.form import (
    FieldInput,
    FormView,
    InterviewTimeSelection,
    RoleSelection,
    SkillInput,
    SubmissionView,
    SubmitResult,
)
from jobform.services.form_controller import (
    FieldHiddenError,
    UnknownFieldError,
    form_controller,
)

router = APIRouter(prefix="/api/form", tags=["form"])


@router.get("/state", response_model=FormView)
async def get_state() -> FormView:
    return form_controller.view()


@router.get("/skills")
async def list_skills() -> list[str]:
    return list(SKILL_NAMES)


@router.put("/role", response_model=FormView)
async def select_role(selection: RoleSelection) -> FormView:
    """Switch role; changes which conditional fields are shown and required."""
    form_controller.select_role(selection.role)
    return form_controller.view()


@router.put("/fields/{name}", response_model=FormView)
async def set_field(name: str, body: FieldInput) -> FormView:
    try:
        form_controller.set_field(name, body.value)
    except UnknownFieldError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except FieldHiddenError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return form_controller.view()


@router.put("/skills/{skill}", response_model=FormView)
async def set_skill(skill: str, body: SkillInput) -> FormView:
    try:
        form_controller.set_skill(skill, body.checked)
    except UnknownFieldError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return form_controller.view()


@router.put("/interview-time", response_model=FormView)
async def select_interview_time(selection: InterviewTimeSelection) -> FormView:
    form_controller.select_interview_time(selection.value)
    return form_controller.view()


@router.post("/submit", response_model=SubmitResult)
async def submit() -> SubmitResult:
    """Validate the current form. A rejected submission is a normal 200 response."""
    return form_controller.submit()


@router.post("/modal/close", response_model=FormView)
async def close_modal() -> FormView:
    form_controller.close_modal()
    return form_controller.view()


@router.get("/submission", response_model=SubmissionView)
async def get_submission() -> SubmissionView:
    view = form_controller.display()
    if view is None:
        raise HTTPException(status_code=404, detail="Nothing has been submitted yet")
    return view


@router.post("/reset", response_model=FormView)
async def reset() -> FormView:
    form_controller.reset()
    return form_controller.view()
