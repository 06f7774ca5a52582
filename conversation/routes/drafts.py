"""Draft routes: body text, key presses, formatting and staged attachments."""

import logging

from fastapi import APIRouter, HTTPException, Request

from conversation.composer import UnknownFormatCommand
from conversation.models import DraftBody, FileHandle, FormatRequest, KeyPress
from conversation.responses import safe_json_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/draft")


@router.put("")
def set_draft(payload: DraftBody, request: Request):
    view = request.app.state.view
    with view.lock:
        view.composer.set_body(payload.body)
        state = view.render()
    return safe_json_response(state)


@router.post("/keys")
def press_key(payload: KeyPress, request: Request):
    view = request.app.state.view
    with view.lock:
        view.composer.handle_key(payload.key, shift=payload.shift)
        state = view.render()
    return safe_json_response(state)


@router.post("/send")
def send_draft(request: Request):
    view = request.app.state.view
    with view.lock:
        view.composer.submit()
        state = view.render()
    return safe_json_response(state)


@router.post("/format")
def apply_format(payload: FormatRequest, request: Request):
    try:
        command = request.app.state.view.composer.apply_format(payload.command)
    except UnknownFormatCommand as e:
        logger.debug("Rejected format command %r", payload.command)
        raise HTTPException(status_code=400, detail=str(e))
    return safe_json_response({"command": command})


@router.post("/attachments")
def stage_attachments(files: list[FileHandle], request: Request):
    view = request.app.state.view
    with view.lock:
        view.composer.stage_files(files)
        state = view.render()
    return safe_json_response(state)


@router.delete("/attachments/{index}")
def unstage_attachment(index: int, request: Request):
    view = request.app.state.view
    with view.lock:
        view.composer.unstage_file(index)
        state = view.render()
    return safe_json_response(state)
