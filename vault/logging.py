# vault/logging.py
import logging
import os
import re
from typing import Any, Dict

PII_RE = re.compile(r"([\w\.-]+)@([\w\.-]+)")  # naive email redaction

# Arguments carrying file bodies; logged by size only
BODY_KEYS = {"content"}


def configure_logging(level: str | None = None):
    logging.basicConfig(
        level=(level or os.getenv("LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def redact_str(s: str) -> str:
    return PII_RE.sub("[redacted-email]", s)


def redact_args(args: Dict[str, Any]) -> Dict[str, Any]:
    safe: Dict[str, Any] = {}
    for k, v in args.items():
        if v is None:
            continue
        if k in BODY_KEYS and isinstance(v, str):
            safe[k] = f"<{len(v)} chars>"
        elif isinstance(v, str):
            safe[k] = redact_str(v)
        elif isinstance(v, dict):
            safe[k] = sorted(v)  # variable names only
        else:
            safe[k] = v
    return safe


def log_file_op(logger: logging.Logger, name: str, args: Dict[str, Any]):
    logger.info("file_op %s %s", name, redact_args(args))
