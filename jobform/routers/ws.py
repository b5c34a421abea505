"""WebSocket endpoint: one form page per connection, one message per UI event."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from jobform.models.form import (
    FieldInput,
    InterviewTimeSelection,
    RoleSelection,
    SkillInput,
)
from jobform.services.form_controller import FormController, FormError

logger = logging.getLogger(__name__)
router = APIRouter()


async def _send(ws: WebSocket, data: dict) -> None:
    await ws.send_text(json.dumps(data))


def _state_message(controller: FormController) -> dict:
    return {"type": "state", "data": controller.view().model_dump(mode="json")}


def _handle(controller: FormController, message: dict) -> dict:
    """Apply one UI event to the controller and build the reply."""
    if not isinstance(message, dict):
        raise ValueError("Message must be a JSON object")
    msg_type = message.get("type", "")
    data = message.get("data") or {}
    if not isinstance(data, dict):
        raise ValueError("Message data must be a JSON object")

    if msg_type == "ping":
        return {"type": "pong"}

    elif msg_type == "state":
        return _state_message(controller)

    elif msg_type == "select_role":
        controller.select_role(RoleSelection.model_validate(data).role)
        return _state_message(controller)

    elif msg_type == "set_field":
        controller.set_field(data.get("name", ""), FieldInput.model_validate(data).value)
        return _state_message(controller)

    elif msg_type == "set_skill":
        controller.set_skill(data.get("skill", ""), SkillInput.model_validate(data).checked)
        return _state_message(controller)

    elif msg_type == "select_interview_time":
        controller.select_interview_time(InterviewTimeSelection.model_validate(data).value)
        return _state_message(controller)

    elif msg_type == "submit":
        result = controller.submit()
        reply = {"type": "submit_result", "data": result.model_dump(mode="json", by_alias=True)}
        if result.accepted:
            reply["display"] = controller.display().model_dump(mode="json")
        return reply

    elif msg_type == "close_modal":
        controller.close_modal()
        return _state_message(controller)

    elif msg_type == "reset":
        controller.reset()
        return _state_message(controller)

    logger.warning("Unknown message type: %s", msg_type)
    return {"type": "error", "message": f"Unknown message type: {msg_type}"}


@router.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    await websocket.accept()
    controller = FormController()
    logger.info("Form page connected")
    await _send(websocket, _state_message(controller))

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                message = json.loads(raw)
                reply = _handle(controller, message)
            except (FormError, ValidationError, ValueError) as e:
                reply = {"type": "error", "message": str(e)}
            await _send(websocket, reply)
    except WebSocketDisconnect:
        logger.info("Form page disconnected")
    except Exception as e:
        logger.error("WebSocket error: %s", e)
