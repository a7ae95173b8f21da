"""
User database model.

One row per account. The nested sub-sequences are JSON columns, so each row
is a self-contained user document.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List
from uuid import uuid4

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field, SQLModel


def new_user_id() -> str:
    return uuid4().hex


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class User(SQLModel, table=True):
    """
    User account with its profile sub-documents.

    Records are never physically removed: ``deleted`` marks a soft-deleted
    account.
    """
    __tablename__ = "users"

    id: str = Field(default_factory=new_user_id, primary_key=True, max_length=32)
    first_name: str = Field(nullable=False, max_length=255)
    last_name: str = Field(nullable=False, max_length=255)
    username: str = Field(unique=True, index=True, max_length=255, nullable=False)
    user_password: str = Field(nullable=False)
    deleted: bool = Field(default=False, index=True, nullable=False)

    # Sub-documents
    profile: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    education: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    work_experience: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    skills: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    portfolio: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False))
