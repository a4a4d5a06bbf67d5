"""SQLAlchemy ORM models for the chat application.

Table and column names are the shared database contract and keep their
original camelCase spelling; Python attributes are snake_case.
"""

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    Enum,
    ForeignKey,
    ForeignKeyConstraint,
    PrimaryKeyConstraint,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship
from sqlalchemy.sql.expression import false

from backend.app.models.common import DocumentKind, Visibility


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class User(Base):
    """User table - identity mirrored from the auth provider."""

    __tablename__ = "User"

    id: Mapped[str] = mapped_column("id", Text, primary_key=True)
    email: Mapped[str] = mapped_column("email", Text, unique=True, nullable=False)
    first_name: Mapped[str] = mapped_column(
        "firstName", Text, default="", server_default="", nullable=False
    )
    last_name: Mapped[str] = mapped_column(
        "lastName", Text, default="", server_default="", nullable=False
    )
    image_url: Mapped[str] = mapped_column(
        "imageUrl", Text, default="", server_default="", nullable=False
    )

    # Relationships
    chats: Mapped[list["Chat"]] = relationship("Chat", back_populates="user")
    documents: Mapped[list["Document"]] = relationship("Document", back_populates="user")
    suggestions: Mapped[list["Suggestion"]] = relationship("Suggestion", back_populates="user")


class Organization(Base):
    """Organization table - every chat belongs to one."""

    __tablename__ = "Organization"

    id: Mapped[str] = mapped_column("id", Text, primary_key=True)
    domain: Mapped[str] = mapped_column("domain", Text, nullable=False)
    slug: Mapped[str] = mapped_column("slug", Text, unique=True, nullable=False)
    name: Mapped[str] = mapped_column("name", Text, nullable=False)

    # Relationships
    chats: Mapped[list["Chat"]] = relationship("Chat", back_populates="organization")


class Chat(Base):
    """Chat table - a conversation owned by an organization."""

    __tablename__ = "Chat"

    id: Mapped[uuid.UUID] = mapped_column("id", Uuid, primary_key=True, default=uuid.uuid4)
    created_at: Mapped[datetime] = mapped_column("createdAt", DateTime, nullable=False)
    title: Mapped[str] = mapped_column("title", Text, nullable=False)
    user_id: Mapped[str | None] = mapped_column(
        "userId", Text, ForeignKey("User.id"), nullable=True
    )
    organization_id: Mapped[str] = mapped_column(
        "organizationId", Text, ForeignKey("Organization.id"), nullable=False
    )
    is_admin: Mapped[bool] = mapped_column(
        "isAdmin", Boolean, default=False, server_default=false(), nullable=False
    )
    visibility: Mapped[Visibility] = mapped_column(
        "visibility",
        Enum(Visibility, native_enum=False, create_constraint=True, name="chat_visibility"),
        default=Visibility.private,
        server_default=Visibility.private.value,
        nullable=False,
    )

    # Relationships
    user: Mapped["User | None"] = relationship("User", back_populates="chats")
    organization: Mapped["Organization"] = relationship("Organization", back_populates="chats")
    messages: Mapped[list["Message"]] = relationship("Message", back_populates="chat")
    votes: Mapped[list["Vote"]] = relationship("Vote", back_populates="chat")


class Message(Base):
    """Message table - one turn of a chat with a structured payload."""

    __tablename__ = "Message"

    id: Mapped[uuid.UUID] = mapped_column("id", Uuid, primary_key=True, default=uuid.uuid4)
    chat_id: Mapped[uuid.UUID] = mapped_column(
        "chatId", Uuid, ForeignKey("Chat.id"), nullable=False
    )
    role: Mapped[str] = mapped_column("role", String, nullable=False)
    content: Mapped[Any] = mapped_column("content", JSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column("createdAt", DateTime, nullable=False)

    # Relationships
    chat: Mapped["Chat"] = relationship("Chat", back_populates="messages")
    votes: Mapped[list["Vote"]] = relationship("Vote", back_populates="message")


class Vote(Base):
    """Vote table - at most one per (chat, message)."""

    __tablename__ = "Vote"
    __table_args__ = (PrimaryKeyConstraint("chatId", "messageId", name="Vote_chatId_messageId_pk"),)

    chat_id: Mapped[uuid.UUID] = mapped_column(
        "chatId", Uuid, ForeignKey("Chat.id"), nullable=False
    )
    message_id: Mapped[uuid.UUID] = mapped_column(
        "messageId", Uuid, ForeignKey("Message.id"), nullable=False
    )
    is_upvoted: Mapped[bool] = mapped_column("isUpvoted", Boolean, nullable=False)

    # Relationships
    chat: Mapped["Chat"] = relationship("Chat", back_populates="votes")
    message: Mapped["Message"] = relationship("Message", back_populates="votes")


class Document(Base):
    """Document table - versioned by creation time."""

    __tablename__ = "Document"
    __table_args__ = (PrimaryKeyConstraint("id", "createdAt", name="Document_id_createdAt_pk"),)

    id: Mapped[uuid.UUID] = mapped_column("id", Uuid, default=uuid.uuid4, nullable=False)
    created_at: Mapped[datetime] = mapped_column("createdAt", DateTime, nullable=False)
    title: Mapped[str] = mapped_column("title", Text, nullable=False)
    content: Mapped[str | None] = mapped_column("content", Text, nullable=True)
    # Column is named "text" in the deployed schema.
    kind: Mapped[DocumentKind] = mapped_column(
        "text",
        Enum(DocumentKind, native_enum=False, create_constraint=True, name="document_kind"),
        default=DocumentKind.text,
        server_default=DocumentKind.text.value,
        nullable=False,
    )
    user_id: Mapped[str] = mapped_column("userId", Text, ForeignKey("User.id"), nullable=False)

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="documents")
    suggestions: Mapped[list["Suggestion"]] = relationship(
        "Suggestion", back_populates="document"
    )


class Suggestion(Base):
    """Suggestion table - proposed edit against one document version."""

    __tablename__ = "Suggestion"
    __table_args__ = (
        ForeignKeyConstraint(
            ["documentId", "documentCreatedAt"],
            ["Document.id", "Document.createdAt"],
            name="Suggestion_documentId_documentCreatedAt_Document_id_createdAt_fk",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column("id", Uuid, primary_key=True, default=uuid.uuid4)
    document_id: Mapped[uuid.UUID] = mapped_column("documentId", Uuid, nullable=False)
    document_created_at: Mapped[datetime] = mapped_column(
        "documentCreatedAt", DateTime, nullable=False
    )
    original_text: Mapped[str] = mapped_column("originalText", Text, nullable=False)
    suggested_text: Mapped[str] = mapped_column("suggestedText", Text, nullable=False)
    description: Mapped[str | None] = mapped_column("description", Text, nullable=True)
    is_resolved: Mapped[bool] = mapped_column(
        "isResolved", Boolean, default=False, server_default=false(), nullable=False
    )
    user_id: Mapped[str] = mapped_column("userId", Text, ForeignKey("User.id"), nullable=False)
    created_at: Mapped[datetime] = mapped_column("createdAt", DateTime, nullable=False)

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="suggestions")
    document: Mapped["Document"] = relationship("Document", back_populates="suggestions")
