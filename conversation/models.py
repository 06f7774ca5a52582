"""Pydantic models for messages, draft state and API payloads."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

Variant = Literal["standard", "highlighted", "reply"]


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    role: str


class Attachment(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    size: str  # human formatted, e.g. "1.2 MB" or "3.4 KB"


class Reply(BaseModel):
    """Snapshot of the replied-to message, copied at send time."""

    model_config = ConfigDict(frozen=True)

    sender_name: str
    content: str


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    user: User
    content: tuple[str, ...]
    timestamp: str  # display string, not parsed
    variant: Variant = "standard"
    attachments: tuple[Attachment, ...] = ()
    reply_to: Reply | None = None

    @model_validator(mode="after")
    def _reply_to_matches_variant(self):
        if (self.variant == "reply") != (self.reply_to is not None):
            raise ValueError("reply_to must be set exactly when variant is 'reply'")
        return self


class FileHandle(BaseModel):
    """A file picked by the user: name and byte size only."""

    name: str
    size: int = Field(ge=0)


# --- Rendering payloads ---


class MessageView(BaseModel):
    message: Message
    is_sent: bool
    is_selected: bool


class StagedFileView(BaseModel):
    index: int
    name: str
    size: str


class SelectionDescription(BaseModel):
    label: str
    content: str


class ViewState(BaseModel):
    messages: list[MessageView]
    selected_id: int | None
    placeholder: str
    reply_label: str
    reply_content: str
    draft_body: str
    staged_files: list[StagedFileView]
    scroll_to_latest: bool


# --- Request bodies ---


class DraftBody(BaseModel):
    body: str


class KeyPress(BaseModel):
    key: str
    shift: bool = False


class FormatRequest(BaseModel):
    command: str
