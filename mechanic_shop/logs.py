import json, logging, time, uuid, datetime as dt
from typing import Optional

OPLOG = logging.getLogger("mechanic_shop.oplog")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(cfg: dict):
    """Configure the root logger from the `log_level` / `log_file` settings."""
    log_file = cfg.get("log_file")
    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    logging.basicConfig(
        level=cfg.get("log_level") or "WARNING",
        format=LOG_FORMAT,
        handlers=[handler],
        force=True,
    )


class LogContext:
    def __init__(self, action: str, user: str = "operator"):
        self.action = action
        self.user = user
        self.request_id = str(uuid.uuid4())
        self.start = time.perf_counter()
        self.payload = None
        self.entity_type = None
        self.entity_id = None

    def set_entity(self, etype: str, eid: str):
        self.entity_type = etype
        self.entity_id = eid

    def set_payload(self, obj): self.payload = obj

    def record(self, result: str = "OK", err: Optional[str] = None) -> dict:
        elapsed_ms = int((time.perf_counter() - self.start) * 1000)
        return {
            "ts": dt.datetime.now().astimezone().isoformat(),
            "user": self.user,
            "action": self.action,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "request_id": self.request_id,
            "payload_json": json.dumps(self.payload, ensure_ascii=False, default=str) if self.payload is not None else None,
            "result": result,
            "err_msg": err,
            "latency_ms": elapsed_ms,
        }

    def write(self, result: str = "OK", err: Optional[str] = None):
        OPLOG.info(json.dumps(self.record(result, err), ensure_ascii=False))
