from __future__ import annotations

# mechanic_shop/config.py
import os
import yaml

# Config path resolution order:
# 1) explicit path (--config)
# 2) environment variable SHOP_CONFIG
# 3) ./config.yaml in the working directory (optional; defaults when missing)
DEFAULTS = {
    "db_driver": "postgresql+psycopg2",
    "db_host": "localhost",
    "db_password": "",
    "log_level": "WARNING",
    "log_file": None,
    "export_dir": None,
    "operator": "operator",
}


def _read_config_yaml(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"config file {path} must contain a mapping")
    return cfg


def get_config_path(explicit: str | None = None) -> str | None:
    if explicit:
        return explicit
    env_path = os.environ.get("SHOP_CONFIG")
    if env_path:
        return env_path
    local = os.path.join(os.getcwd(), "config.yaml")
    return local if os.path.exists(local) else None


def read_config(path: str | None = None) -> dict:
    """
    Load settings from YAML and fill in defaults.
    Empty strings for the optional paths are treated as unset.
    """
    cfg_path = get_config_path(path)
    raw = _read_config_yaml(cfg_path) if cfg_path else {}

    out = dict(DEFAULTS)
    for k in DEFAULTS:
        v = raw.get(k)
        if isinstance(v, str):
            v = v.strip()
        if v is None:
            continue
        out[k] = v

    for k in ("log_file", "export_dir"):
        if not out[k]:
            out[k] = None
    out["db_password"] = str(out["db_password"] or "")
    out["log_level"] = str(out["log_level"]).upper()
    return out
