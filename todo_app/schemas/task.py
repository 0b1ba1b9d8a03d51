# todo_app/schemas/task.py
from datetime import date
from typing import Optional

from pydantic import BaseModel, field_validator


class TaskForm(BaseModel):
    """Fields submitted by the add and edit forms."""

    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    contact: Optional[str] = None
    status: Optional[str] = None
    due: Optional[date] = None

    @field_validator("due", mode="before")
    @classmethod
    def _blank_due_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v
