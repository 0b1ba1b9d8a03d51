# todo_app/models/task.py
from datetime import date
from typing import Optional

from sqlmodel import Field, SQLModel


class Task(SQLModel, table=True):
    __tablename__ = "tasks"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    contact: Optional[str] = None
    status: Optional[str] = None
    due: Optional[date] = None

    # nullable before the ownership migration, required after it
    user_id: int = Field(foreign_key="users.id", index=True)
