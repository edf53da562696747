# vault/services/files.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from vault.logging import log_file_op
from vault.services.paths import PathConfiner
from vault.services.templates import TemplateEngine

logger = logging.getLogger(__name__)

MISSING_BODY_MSG = "Either content or templatePath is required"


class FailureReason(str, Enum):
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    INVALID_REQUEST = "invalid_request"
    UNKNOWN = "unknown"


@dataclass
class OpResult:
    """
    Outcome of one file operation: a payload on success, or a tagged
    failure with a caller-facing message (OS detail is only logged).
    """
    ok: bool
    payload: Dict[str, Any] = field(default_factory=dict)
    reason: Optional[FailureReason] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, message: str) -> "OpResult":
        return cls(ok=True, payload={"success": True, "message": message})

    @classmethod
    def failure(cls, reason: FailureReason, error: str) -> "OpResult":
        return cls(ok=False, reason=reason, error=error)


def classify_error(exc: Exception) -> FailureReason:
    if isinstance(exc, (FileNotFoundError, NotADirectoryError)):
        return FailureReason.NOT_FOUND
    if isinstance(exc, PermissionError):
        return FailureReason.PERMISSION_DENIED
    if isinstance(exc, ValueError):
        # e.g. "embedded null byte" from the OS layer
        return FailureReason.INVALID_REQUEST
    return FailureReason.UNKNOWN


class FileService:
    """
    Read, write, move and delete files inside the vault root.

    Every user path goes through the confiner first; the real location is
    then checked so a symlink inside the root cannot lead outside it.
    I/O errors never escape: each call returns an OpResult.
    """

    def __init__(self, confiner: PathConfiner, templates: TemplateEngine):
        self.confiner = confiner
        self.templates = templates

    @property
    def root(self) -> Path:
        return self.confiner.root

    # ---------- Public API ----------

    def read(self, file_path: str) -> OpResult:
        log_file_op(logger, "read", {"filePath": file_path})
        try:
            p = self._target(file_path)
            content = self._read(p)
        except (OSError, ValueError) as e:
            return self._failed("read", file_path, e, "Failed to read file")
        return OpResult(
            ok=True,
            payload={"content": content, "variables": self.templates.find_variables(content)},
        )

    def write(
        self,
        file_path: str,
        content: Optional[str] = None,
        template_path: Optional[str] = None,
        append: bool = False,
        variables: Optional[Mapping[str, str]] = None,
    ) -> OpResult:
        log_file_op(
            logger,
            "write",
            {
                "filePath": file_path,
                "content": content,
                "templatePath": template_path,
                "append": append,
                "variables": dict(variables) if variables else None,
            },
        )
        # Empty strings count as absent
        if not content and not template_path:
            return OpResult.failure(FailureReason.INVALID_REQUEST, MISSING_BODY_MSG)

        try:
            p = self._target(file_path)
            is_markdown = p.suffix.lower() == ".md"
            p.parent.mkdir(parents=True, exist_ok=True)

            if template_path:
                text = self._read(self._target(template_path))
                text = self.templates.substitute(text, variables)
                self._put(p, text, append, is_markdown)
                if content:
                    # Template output is already on disk; content always follows it
                    self._append(p, f"\n{content}" if is_markdown and append else content)
            else:
                self._put(p, content, append, is_markdown)
        except (OSError, ValueError) as e:
            return self._failed("write", file_path, e, "Failed to write file")
        return OpResult.success("File written successfully")

    def move(self, source_path: str, destination_path: str) -> OpResult:
        log_file_op(logger, "move", {"sourcePath": source_path, "destinationPath": destination_path})
        try:
            src = self._target(source_path, follow_final=False)
            dst = self._target(destination_path, follow_final=False)
            dst.parent.mkdir(parents=True, exist_ok=True)
            src.rename(dst)
        except (OSError, ValueError) as e:
            return self._failed("move", source_path, e, "Failed to move file")
        return OpResult.success("File moved successfully")

    def delete(self, file_path: str) -> OpResult:
        log_file_op(logger, "delete", {"filePath": file_path})
        try:
            p = self._target(file_path, follow_final=False)
            p.unlink()
            folder = p.parent
            # One level only, and never the vault root itself
            if folder != self.root and not any(folder.iterdir()):
                folder.rmdir()
                return OpResult.success("File and empty folder deleted successfully")
        except (OSError, ValueError) as e:
            return self._failed("delete", file_path, e, "Failed to delete file")
        return OpResult.success("File deleted successfully")

    # ---------- Internals ----------

    def _target(self, user_path: str, follow_final: bool = True) -> Path:
        p = self.confiner.resolve(user_path)
        # rename/unlink act on a link itself, so only its directory must stay inside
        check = p if follow_final else p.parent
        if not self.confiner.is_within_root(check):
            raise PermissionError(f"Path escapes vault root: {user_path!r}")
        return p

    def _put(self, p: Path, text: str, append: bool, is_markdown: bool):
        if append:
            self._append(p, f"\n{text}" if is_markdown else text)
        else:
            with p.open("w", encoding="utf-8", newline="") as f:
                f.write(text)

    def _append(self, p: Path, text: str):
        with p.open("a", encoding="utf-8", newline="") as f:
            f.write(text)

    def _read(self, p: Path) -> str:
        # Line endings kept as on disk; undecodable bytes become U+FFFD
        with p.open(encoding="utf-8", errors="replace", newline="") as f:
            return f.read()

    def _failed(self, op: str, user_path: str, exc: Exception, message: str) -> OpResult:
        reason = classify_error(exc)
        logger.warning("file_op %s failed for %r (%s): %s", op, user_path, reason.value, exc)
        return OpResult.failure(reason, message)
