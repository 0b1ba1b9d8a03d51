from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from sqlmodel import Session

from todo_app.core.config import COOKIE_SAMESITE, COOKIE_SECURE, IDENTITY_COOKIE_NAME
from todo_app.core.errors import InvalidInputError
from todo_app.core.identity import encode_identity
from todo_app.core.views import render
from todo_app.db.session import get_session
from todo_app.models.user import User
from todo_app.services import accounts

auth_router = APIRouter(tags=["auth"])


def _redirect_with_identity(user: User) -> RedirectResponse:
    response = RedirectResponse("/", status_code=303)
    response.set_cookie(
        key=IDENTITY_COOKIE_NAME,
        value=encode_identity(user.id, user.username),
        httponly=True,
        secure=COOKIE_SECURE,
        samesite=COOKIE_SAMESITE,
        path="/",
    )
    return response


@auth_router.get("/register")
def show_register(request: Request):
    return render(request, "pages/register.html")


@auth_router.post("/register")
def create_user(username: str = Form(...), db: Session = Depends(get_session)):
    user = accounts.register_user(db, username)
    return _redirect_with_identity(user)


@auth_router.get("/login")
def show_login(request: Request):
    return render(request, "pages/login.html")


@auth_router.post("/login")
def do_login(username: str = Form(...), db: Session = Depends(get_session)):
    user = accounts.find_user_by_username(db, username)
    if user is None:
        raise InvalidInputError("User not found!")
    return _redirect_with_identity(user)


@auth_router.post("/logout")
def do_logout():
    response = RedirectResponse("/", status_code=303)
    response.delete_cookie(IDENTITY_COOKIE_NAME, path="/")
    return response
