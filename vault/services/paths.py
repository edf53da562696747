# vault/services/paths.py
import posixpath
import re
from pathlib import Path

# One or more leading ".." segments, each followed by a separator or the end
_LEADING_TRAVERSAL = re.compile(r"^(\.\.(/|\\|$))+")


def confine(user_path: str) -> str:
    """
    Turn an untrusted path into a root-relative one that cannot climb out of
    the root. Total: never raises, hostile input degrades to a harmless path.

    Returns a POSIX-style relative path without a leading separator;
    "" means the root itself.
    """
    p = user_path.replace("\\", "/")
    p = posixpath.normpath(p)
    p = _LEADING_TRAVERSAL.sub("", p)
    # Re-anchor at "/" so any leftover "." or "/" prefix collapses
    anchored = posixpath.normpath(posixpath.join("/", p))
    return anchored.lstrip("/")


class PathConfiner:
    """
    Bind confine() to a fixed root directory.
    """

    def __init__(self, root: Path):
        self.root = Path(root).resolve()

    def confine(self, user_path: str) -> str:
        return confine(user_path)

    def resolve(self, user_path: str) -> Path:
        rel = confine(user_path)
        return self.root / rel if rel else self.root

    def is_within_root(self, p: Path) -> bool:
        # Symlinks followed; anything landing outside the root is rejected
        real = p.resolve()
        try:
            real.relative_to(self.root)
        except ValueError:
            return False
        return True
