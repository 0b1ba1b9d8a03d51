import logging

from fastapi import APIRouter, HTTPException
from sqlalchemy.exc import SQLAlchemyError

from todo_app.db.session import check_connection

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/db")
def health_db():
    try:
        check_connection()
        return {"ok": True}
    except SQLAlchemyError:
        # details stay in the log
        logger.exception("Database health check failed")
        raise HTTPException(status_code=500, detail="Database connection failed")
