from __future__ import annotations

# mechanic_shop/services/export_svc.py
import datetime as dt
import os

import pandas as pd
from sqlalchemy import text

from ..db import Gateway, Params


def export_report(db: Gateway, name: str, sql: str, params: Params, export_dir: str) -> str:
    """Re-run a report statement into a DataFrame and write it as CSV. Returns the file path."""
    df = pd.read_sql_query(text(sql), db.connection, params=dict(params or {}))
    os.makedirs(export_dir, exist_ok=True)
    path = os.path.join(export_dir, f"{name}_{dt.datetime.now().strftime('%Y%m%d')}.csv")
    df.to_csv(path, index=False, encoding="utf-8-sig")
    return path
