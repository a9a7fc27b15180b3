"""Path confinement for caller-supplied relative paths.

Security-critical: every filesystem read or mutation goes through
PathGuard.resolve before touching disk.
"""

import logging
import os
from pathlib import Path

from .errors import AccessDeniedError
from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class PathGuard:
    """Resolve relative paths against a fixed root and reject escapes.

    The root is resolved once at construction and never changes.

    Example:
        >>> guard = PathGuard(Path("/srv/files"))
        >>> guard.resolve("docs/readme.md")
        PosixPath('/srv/files/docs/readme.md')
        >>> guard.resolve("")
        PosixPath('/srv/files')
    """

    def __init__(self, root: Path) -> None:
        self.root = Path(root).expanduser().resolve()

    def resolve(self, raw_path: str | None) -> Path:
        """Validate and resolve a relative path (security-critical).

        Args:
            raw_path: Path relative to root; None or "" means the root itself

        Returns:
            Absolute path within root, with '.' and '..' collapsed. Symlinks
            are not substituted, so operations act on a link itself.

        Raises:
            InvalidArgumentError: If the path contains a NUL byte
            AccessDeniedError: If the path escapes root, lexically or through a symlink

        Security Requirements:
            1. Leading separators are dropped, so absolute paths are read as root-relative
            2. '.' and '..' segments are collapsed before the containment check
            3. Symlinks are resolved and the target checked for containment
        """
        if not raw_path:
            return self.root

        if "\x00" in raw_path:
            raise InvalidArgumentError("Path contains a NUL byte", raw_path)

        relative = raw_path.replace("\\", "/").lstrip("/")
        candidate = Path(os.path.normpath(self.root / relative))

        if not self.contains(candidate):
            logger.warning(f"Rejected path outside root: {raw_path}")
            raise AccessDeniedError(f"Access denied: {raw_path}", raw_path)

        # strict=False: the target may not exist yet (write, mkdir, copy destination)
        if not self.contains(candidate.resolve()):
            logger.warning(f"Rejected path escaping root through a symlink: {raw_path}")
            raise AccessDeniedError(f"Access denied: {raw_path}", raw_path)

        return candidate

    def contains(self, path: Path) -> bool:
        """Return True when path is the root or lies under it."""
        return path == self.root or self.root in path.parents

    def is_root(self, path: Path) -> bool:
        return path == self.root

    def relative(self, path: Path) -> str:
        """Convert an absolute path under root to a root-relative POSIX string.

        Returns:
            "" for the root itself, otherwise e.g. "src/main.py"
        """
        if path == self.root:
            return ""
        return path.relative_to(self.root).as_posix()

    def parent_of(self, path: Path) -> str | None:
        """Root-relative parent of path, None when path is the root."""
        if path == self.root:
            return None
        return self.relative(path.parent)
