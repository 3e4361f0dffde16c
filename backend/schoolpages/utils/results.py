from dataclasses import dataclass, field
from functools import wraps
from typing import Any, Dict, Optional

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from schoolpages.domain.exceptions import DomainError, PersistenceFailure
from schoolpages.extensions import db


@dataclass
class Result:
    """
    Outcome of a persistence operation: either ``value`` or ``error``, never both.

    ``kind`` names the error category (see domain.exceptions) and
    ``details`` carries extra fields such as the applied count of a
    partial reorder.
    """

    value: Any = None
    error: Optional[str] = None
    kind: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value=None) -> "Result":
        return cls(value=value)

    @classmethod
    def fail(cls, exc: DomainError) -> "Result":
        details = {}
        if hasattr(exc, "applied"):
            details = {"applied": exc.applied, "total": exc.total}
        return cls(error=str(exc), kind=exc.kind, details=details)


def returns_result(failure_message: str):
    """
    Run a persistence operation and wrap its outcome in a Result.

    Domain errors keep their own message. Database errors roll the session
    back and are reported as a PersistenceFailure with ``failure_message``.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                return Result.success(fn(*args, **kwargs))
            except DomainError as exc:
                db.session.rollback()
                current_app.logger.warning(f"{fn.__name__}: {exc}")
                return Result.fail(exc)
            except SQLAlchemyError as exc:
                db.session.rollback()
                current_app.logger.error(f"{fn.__name__}: {failure_message}: {exc}")
                return Result.fail(PersistenceFailure(failure_message))
        return wrapper
    return decorator
