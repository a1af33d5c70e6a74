import logging

from flask import Blueprint
from sqlalchemy.exc import SQLAlchemyError

from api.deps import get_storage

bp = Blueprint("health", __name__)

logger = logging.getLogger(__name__)


@bp.get("/health")
def health():
    """
    Health check: the process is up and the database answers.
    200 -> {"status": "ok", "database": "ok"}; 503 when the database is unreachable.
    """
    try:
        get_storage().ping()
    except SQLAlchemyError:
        logger.exception("Health check: database unavailable")
        return {"status": "degraded", "database": "unavailable"}, 503
    return {"status": "ok", "database": "ok"}, 200
