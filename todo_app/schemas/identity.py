# todo_app/schemas/identity.py
from typing import Optional

from pydantic import BaseModel


class Identity(BaseModel):
    """The requester, as resolved from the identity cookie."""

    id: Optional[int] = None
    username: Optional[str] = None

    @property
    def is_anonymous(self) -> bool:
        return self.id is None


ANONYMOUS = Identity()
