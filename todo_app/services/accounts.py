# todo_app/services/accounts.py
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from todo_app.core.errors import ConflictError
from todo_app.models.user import User

logger = logging.getLogger(__name__)


def register_user(db: Session, username: str) -> User:
    user = User(username=username)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info("Registration rejected, username taken | %s", username)
        raise ConflictError("Username already exists")
    db.refresh(user)
    logger.info("User registered | id=%s", user.id)
    return user


def find_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.exec(select(User).where(User.username == username)).first()
