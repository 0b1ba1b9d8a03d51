# todo_app/core/errors.py
"""
Error taxonomy shared by services and routers.

Every error carries a public message and the HTTP status it maps to.
Exception handlers in ``todo_app.main`` render them through the error view.
"""


class TodoAppError(Exception):
    status_code = 500
    default_message = "Something went wrong"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(TodoAppError):
    status_code = 400
    default_message = "Invalid request"


class NotAuthenticatedError(TodoAppError):
    status_code = 401
    default_message = "Login required"


class NotFoundError(TodoAppError):
    status_code = 404
    default_message = "Not found"


class ConflictError(TodoAppError):
    status_code = 409
    default_message = "Conflict"