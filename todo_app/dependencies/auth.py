from fastapi import Depends, Request

from todo_app.core.errors import NotAuthenticatedError
from todo_app.schemas.identity import ANONYMOUS, Identity


# Resolved once per request by the identity middleware in todo_app.main
def get_identity(request: Request) -> Identity:
    return getattr(request.state, "identity", ANONYMOUS)


def require_identity(identity: Identity = Depends(get_identity)) -> Identity:
    if identity.is_anonymous:
        raise NotAuthenticatedError()
    return identity
