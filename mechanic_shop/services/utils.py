from __future__ import annotations

# mechanic_shop/services/utils.py
import sys

from sqlalchemy.exc import SQLAlchemyError

from ..errors import RecordNotFound
from ..logs import LogContext


def error_message(e: Exception) -> str:
    # prefer the driver's own message over SQLAlchemy's wrapped text
    if isinstance(e, SQLAlchemyError) and getattr(e, "orig", None) is not None:
        return str(e.orig).strip()
    return str(e)


def report_failure(e: Exception, log: LogContext):
    """Print a handler failure the way the menu expects and record it."""
    msg = error_message(e)
    print(msg, file=sys.stderr)
    if isinstance(e, RecordNotFound) and e.hint:
        print(e.hint)
    log.write("ERROR", msg)
