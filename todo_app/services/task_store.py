# todo_app/services/task_store.py
"""
Owner-scoped task queries.

Every statement filters on ``user_id`` so a task is only ever visible to,
or changed by, the user that owns it.
"""
import logging
from typing import List, Optional

from sqlalchemy import delete, update
from sqlmodel import Session, select

from todo_app.core.errors import InvalidInputError, NotFoundError
from todo_app.models.task import Task
from todo_app.schemas.task import TaskForm

logger = logging.getLogger(__name__)

DEFAULT_SORT = "due"

SORT_COLUMNS = {
    "due": Task.due,
    "title": Task.title,
    "category": Task.category,
    "status": Task.status,
    "contact": Task.contact,
    "id": Task.id,
}


def resolve_sort(sort_by: Optional[str]):
    key = sort_by or DEFAULT_SORT
    column = SORT_COLUMNS.get(key)
    if column is None:
        raise InvalidInputError(f"Cannot sort by {key!r}")
    return column


def list_tasks(db: Session, user_id: Optional[int], sort_by: Optional[str] = None) -> List[Task]:
    column = resolve_sort(sort_by)
    if user_id is None:
        return []
    stmt = (
        select(Task)
        .where(Task.user_id == user_id)
        .order_by(column.asc(), Task.id.asc())
    )
    return list(db.exec(stmt).all())


def get_task(db: Session, task_id: int, user_id: Optional[int]) -> Task:
    task = db.exec(
        select(Task).where(Task.id == task_id, Task.user_id == user_id).limit(1)
    ).first()
    if task is None:
        raise NotFoundError("Task not found")
    return task


def create_task(db: Session, form: TaskForm, user_id: int) -> Task:
    task = Task(**form.model_dump(), user_id=user_id)
    db.add(task)
    db.commit()
    db.refresh(task)
    logger.info("Task created | id=%s user_id=%s", task.id, user_id)
    return task


def update_task(db: Session, task_id: int, form: TaskForm, user_id: int) -> None:
    result = db.exec(
        update(Task)
        .where(Task.id == task_id, Task.user_id == user_id)
        .values(**form.model_dump())
    )
    if result.rowcount == 0:
        db.rollback()
        raise NotFoundError("Task not found")
    db.commit()


def delete_task(db: Session, task_id: int, user_id: int) -> None:
    result = db.exec(delete(Task).where(Task.id == task_id, Task.user_id == user_id))
    if result.rowcount == 0:
        db.rollback()
        raise NotFoundError("Task not found")
    db.commit()
    logger.info("Task deleted | id=%s user_id=%s", task_id, user_id)
