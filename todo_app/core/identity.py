# todo_app/core/identity.py
import logging
from typing import Optional

import jwt
from pydantic import ValidationError

from todo_app.core.config import JWT_ALGORITHM, JWT_SECRET_KEY
from todo_app.schemas.identity import ANONYMOUS, Identity

logger = logging.getLogger(__name__)


def encode_identity(user_id: int, username: str) -> str:
    """Signed cookie value carrying the ``{id, username}`` pair."""
    payload = {"sub": str(user_id), "id": user_id, "username": username}
    return jwt.encode(payload, JWT_SECRET_KEY, algorithm=JWT_ALGORITHM)


def decode_identity(token: Optional[str]) -> Identity:
    """
    Resolve a cookie value to an Identity.

    Missing cookies are anonymous. Tampered or malformed cookies are
    anonymous too, with a warning; they never fail the request.
    """
    if not token:
        return ANONYMOUS

    try:
        payload = jwt.decode(token, JWT_SECRET_KEY, algorithms=[JWT_ALGORITHM])
    except jwt.InvalidTokenError as e:
        logger.warning("Identity cookie rejected | %s", e)
        return ANONYMOUS

    try:
        identity = Identity(id=payload.get("id"), username=payload.get("username"))
    except ValidationError as e:
        logger.warning("Identity cookie has bad claims | %s", e.errors())
        return ANONYMOUS

    if identity.id is None or not identity.username or payload.get("sub") != str(identity.id):
        logger.warning("Identity cookie is incomplete | keys=%s", sorted(payload))
        return ANONYMOUS
    return identity
