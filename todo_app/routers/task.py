from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from pydantic import ValidationError
from sqlmodel import Session

from todo_app.core.errors import InvalidInputError
from todo_app.core.views import render
from todo_app.db.session import get_session
from todo_app.dependencies.auth import get_identity, require_identity
from todo_app.schemas.identity import Identity
from todo_app.schemas.task import TaskForm
from todo_app.services import task_store

router = APIRouter(tags=["Tasks"])


def task_form(
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    contact: Optional[str] = Form(None),
    status: Optional[str] = Form(None),
    due: Optional[str] = Form(None),
) -> TaskForm:
    try:
        return TaskForm(
            title=title,
            description=description,
            category=category,
            contact=contact,
            status=status,
            due=due,
        )
    except ValidationError:
        raise InvalidInputError("Due date must look like YYYY-MM-DD")


@router.get("/")
def get_tasks(
    request: Request,
    sort_by: Optional[str] = None,
    db: Session = Depends(get_session),
    identity: Identity = Depends(get_identity),
):
    tasks = task_store.list_tasks(db, identity.id, sort_by)
    return render(request, "index.html", {"tasks": tasks, "sort_by": sort_by or task_store.DEFAULT_SORT})


@router.get("/add")
def show_add_task_form(request: Request, identity: Identity = Depends(require_identity)):
    return render(request, "pages/add-view.html")


@router.post("/add")
def add_task(
    form: TaskForm = Depends(task_form),
    db: Session = Depends(get_session),
    identity: Identity = Depends(require_identity),
):
    task = task_store.create_task(db, form, identity.id)
    # POST - REDIRECT - GET
    return RedirectResponse(f"/tasks/{task.id}", status_code=303)


@router.get("/tasks/{task_id}")
def get_one_task(
    request: Request,
    task_id: int,
    db: Session = Depends(get_session),
    identity: Identity = Depends(require_identity),
):
    task = task_store.get_task(db, task_id, identity.id)
    return render(request, "pages/detail-view.html", {"task": task})


@router.get("/tasks/{task_id}/edit")
def edit_one_task(
    request: Request,
    task_id: int,
    db: Session = Depends(get_session),
    identity: Identity = Depends(require_identity),
):
    task = task_store.get_task(db, task_id, identity.id)
    return render(request, "pages/edit-view.html", {"task": task})


@router.put("/tasks/{task_id}")
def update_one_task(
    task_id: int,
    form: TaskForm = Depends(task_form),
    db: Session = Depends(get_session),
    identity: Identity = Depends(require_identity),
):
    task_store.update_task(db, task_id, form, identity.id)
    return RedirectResponse(f"/tasks/{task_id}", status_code=303)


@router.delete("/tasks/{task_id}")
def delete_one_task(
    task_id: int,
    db: Session = Depends(get_session),
    identity: Identity = Depends(require_identity),
):
    task_store.delete_task(db, task_id, identity.id)
    return RedirectResponse("/", status_code=303)
