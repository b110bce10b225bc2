from __future__ import annotations

# mechanic_shop/db.py
import logging
import os
from typing import Any, Mapping, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

Params = Optional[Mapping[str, Any]]


def get_db_url(dbname: str, port: int, user: str, cfg: dict) -> URL | str:
    """
    Connection URL resolution:
    1) environment variable SHOP_DB_URL (highest priority)
    2) <db_driver>://<user>:<db_password>@<db_host>:<port>/<dbname> from config
    """
    env_url = os.environ.get("SHOP_DB_URL")
    if env_url:
        return env_url
    return URL.create(
        cfg.get("db_driver") or "postgresql+psycopg2",
        username=user,
        password=cfg.get("db_password") or None,
        host=cfg.get("db_host") or "localhost",
        port=int(port),
        database=dbname,
    )


def _as_text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


class Gateway:
    """
    Owns the single database connection of an interactive session.

    Every call runs one fresh statement and closes its result before returning.
    The connection is in autocommit mode, so each statement commits on its own.
    Operator values travel as bound parameters (`:name` placeholders).
    """

    def __init__(self, conn: Connection, engine: Engine | None = None, operator: str = "operator"):
        self._conn = conn
        self._engine = engine
        self.operator = operator

    @classmethod
    def connect(cls, url: URL | str, operator: str = "operator") -> "Gateway":
        engine = create_engine(url, isolation_level="AUTOCOMMIT")
        conn = engine.connect()
        if engine.dialect.name == "sqlite":
            conn.exec_driver_sql("PRAGMA foreign_keys = ON;")
        return cls(conn, engine, operator)

    @property
    def connection(self) -> Connection:
        return self._conn

    def __enter__(self) -> "Gateway":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.cleanup()

    def _execute(self, sql: str, params: Params = None):
        logger.debug("sql=%s params=%s", sql, params)
        return self._conn.execute(text(sql), dict(params or {}))

    def _fetch(self, sql: str, params: Params = None) -> tuple[list[str], list[tuple]]:
        result = self._execute(sql, params)
        try:
            columns = list(result.keys())
            rows = [tuple(r) for r in result.fetchall()]
        finally:
            result.close()
        return columns, rows

    def execute_update(self, sql: str, params: Params = None) -> None:
        """Run INSERT/UPDATE/DELETE/DDL. Errors propagate as SQLAlchemyError."""
        result = self._execute(sql, params)
        result.close()

    def execute_query_and_print_result(self, sql: str, params: Params = None) -> int:
        """
        Run a query and print it to stdout: a header of column names (only when
        rows exist) and one line per row, every field followed by a tab.
        Returns the number of rows.
        """
        columns, rows = self._fetch(sql, params)
        if rows:
            print("".join(f"{c}\t" for c in columns))
        for row in rows:
            print("".join("null\t" if v is None else f"{v}\t" for v in row))
        return len(rows)

    def execute_query_and_return_result(self, sql: str, params: Params = None) -> list[list[Optional[str]]]:
        """Run a query and return its rows as lists of strings (NULL stays None)."""
        _, rows = self._fetch(sql, params)
        return [[_as_text(v) for v in row] for row in rows]

    def execute_query(self, sql: str, params: Params = None) -> int:
        """Existence check: 1 when the query yields at least one row, else 0."""
        result = self._execute(sql, params)
        try:
            return 1 if result.fetchone() is not None else 0
        finally:
            result.close()

    def get_curr_seq_val(self, sequence: str) -> int:
        """Current value of a database sequence, or -1 when it is unavailable."""
        try:
            _, rows = self._fetch("SELECT currval(:sequence)", {"sequence": sequence})
        except SQLAlchemyError as e:
            logger.warning("currval(%s) unavailable: %s", sequence, e)
            return -1
        if not rows or rows[0][0] is None:
            return -1
        return int(rows[0][0])

    def cleanup(self):
        """Close the physical connection; failures are logged and ignored."""
        try:
            self._conn.close()
        except SQLAlchemyError as e:
            logger.debug("ignored error on close: %s", e)
        if self._engine is not None:
            self._engine.dispose()
