"""Reusable decorators for controllers/services."""

from __future__ import annotations

import logging
from functools import wraps
from typing import Callable, TypeVar

from sqlalchemy.exc import DBAPIError, OperationalError

from moodjournal.core.errors import StoreUnavailable
from moodjournal.extensions import db

F = TypeVar("F", bound=Callable)

logger = logging.getLogger(__name__)


def translate_store_errors(fn: F) -> F:
    """Surface connection-level database failures as ``StoreUnavailable``.

    The session is rolled back so the next request starts clean. Integrity
    and programming errors are left alone; they indicate bugs, not outages.
    """

    @wraps(fn)
    def wrapper(*args, **kwargs):  # type: ignore[misc]
        try:
            return fn(*args, **kwargs)
        except OperationalError as exc:
            _rollback_quietly()
            logger.error("Store unavailable in %s: %s", fn.__qualname__, exc)
            raise StoreUnavailable("store_unavailable") from exc
        except DBAPIError as exc:
            if not exc.connection_invalidated:
                raise
            _rollback_quietly()
            logger.error("Store connection lost in %s: %s", fn.__qualname__, exc)
            raise StoreUnavailable("store_unavailable") from exc

    return wrapper  # type: ignore[return-value]


def _rollback_quietly() -> None:
    try:
        db.session.rollback()
    except Exception:
        logger.exception("Rollback failed after store error")
