"""Typed row shapes for the chat application tables.

Each record mirrors one ORM table and is built from a loaded row with
``Record.model_validate(row)``.
"""

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

from backend.app.models.common import DocumentKind, Visibility


class Record(BaseModel):
    """Base for read-only row shapes."""

    model_config = ConfigDict(from_attributes=True, frozen=True)


class UserRecord(Record):
    id: str
    email: str
    first_name: str = ""
    last_name: str = ""
    image_url: str = ""


class OrganizationRecord(Record):
    id: str
    domain: str
    slug: str
    name: str


class ChatRecord(Record):
    id: uuid.UUID
    created_at: datetime
    title: str
    user_id: str | None = None
    organization_id: str
    is_admin: bool = False
    visibility: Visibility = Visibility.private


class MessageRecord(Record):
    """Content is the structured payload exactly as stored."""

    id: uuid.UUID
    chat_id: uuid.UUID
    role: str
    content: Any
    created_at: datetime


class VoteRecord(Record):
    chat_id: uuid.UUID
    message_id: uuid.UUID
    is_upvoted: bool


class DocumentRecord(Record):
    id: uuid.UUID
    created_at: datetime
    title: str
    content: str | None = None
    kind: DocumentKind = DocumentKind.text
    user_id: str


class SuggestionRecord(Record):
    id: uuid.UUID
    document_id: uuid.UUID
    document_created_at: datetime
    original_text: str
    suggested_text: str
    description: str | None = None
    is_resolved: bool = False
    user_id: str
    created_at: datetime
