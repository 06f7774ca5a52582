"""Conversation routes: render state and reply selection.

Routes run in the threadpool; each one holds the view lock so a change and
the render that reports it are not interleaved with another request.
"""

from fastapi import APIRouter, Request

from conversation.models import SelectionDescription
from conversation.responses import safe_json_response

router = APIRouter()


@router.get("/conversation")
def get_conversation(request: Request):
    return safe_json_response(request.app.state.view.render())


@router.post("/messages/{message_id}/select")
def select_message(message_id: int, request: Request):
    view = request.app.state.view
    with view.lock:
        view.store.select_for_reply(message_id)
        state = view.render()
    return safe_json_response(state)


@router.get("/selection")
def get_selection(request: Request):
    label, content = request.app.state.view.store.describe_selection()
    return safe_json_response(SelectionDescription(label=label, content=content))


@router.delete("/selection")
def clear_selection(request: Request):
    view = request.app.state.view
    with view.lock:
        view.store.clear_selection()
        state = view.render()
    return safe_json_response(state)
