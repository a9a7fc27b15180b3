"""Directory listing, tree building and directory create/delete."""

import asyncio
import logging
import os
import shutil
from datetime import UTC
from datetime import datetime
from pathlib import Path

from filebridge_library.models.files import DirectoryEntry
from filebridge_library.models.files import DirectoryListing
from filebridge_library.models.files import DirectoryTree
from filebridge_library.models.files import EntryKind
from filebridge_library.models.files import TreeNode

from .classifier import classify
from .errors import AccessDeniedError
from .errors import InvalidArgumentError
from .errors import NotDirectoryError
from .errors import NotEmptyError
from .errors import NotFoundError
from .errors import translate_os_error
from .guard import PathGuard
from .tasks import gather_all

logger = logging.getLogger(__name__)


def modified_time(stat_result: os.stat_result) -> datetime:
    """Modification time of a stat result as an aware UTC datetime."""
    return datetime.fromtimestamp(stat_result.st_mtime, tz=UTC)


def scan_visible(dir_path: Path) -> list[tuple[str, Path, bool, bool]]:
    """List non-hidden children of a directory, sorted by name.

    Symlinks are not followed when deciding whether a child is a directory,
    so recursive walks cannot loop through them.

    Returns:
        (name, path, is_dir, is_symlink) tuples
    """
    with os.scandir(dir_path) as it:
        children = [
            (entry.name, Path(entry.path), entry.is_dir(follow_symlinks=False), entry.is_symlink())
            for entry in it
            if not entry.name.startswith(".")
        ]
    children.sort(key=lambda child: child[0])
    return children


class DirectoryService:
    """Directory operations confined to the guard's root."""

    def __init__(self, guard: PathGuard) -> None:
        self.guard = guard

    def _existing_directory(self, relative_path: str | None) -> Path:
        dir_path = self.guard.resolve(relative_path)
        label = self.guard.relative(dir_path)

        if not dir_path.exists():
            raise NotFoundError(f"Path not found: {label}", label)
        if not dir_path.is_dir():
            raise NotDirectoryError(f"Path is not a directory: {label}", label)

        return dir_path

    def list_directory(self, relative_path: str | None = "") -> DirectoryListing:
        """List the immediate children of a directory.

        Args:
            relative_path: Directory relative to root ("" or None for root)

        Returns:
            DirectoryListing with directories first, then files, each by name

        Raises:
            AccessDeniedError: Path escapes root
            NotFoundError: Path doesn't exist
            NotDirectoryError: Path is a file
        """
        dir_path = self._existing_directory(relative_path)
        current = self.guard.relative(dir_path)

        try:
            with os.scandir(dir_path) as it:
                entries = [self._entry(entry) for entry in it]
        except OSError as e:
            raise translate_os_error(e, current) from e

        entries.sort(key=lambda e: (e.kind != EntryKind.DIRECTORY, e.name.casefold(), e.name))

        return DirectoryListing(
            current_path=current,
            parent_path=self.guard.parent_of(dir_path),
            entries=entries,
        )

    def _entry(self, entry: os.DirEntry) -> DirectoryEntry:
        try:
            is_dir = entry.is_dir()
        except OSError:
            is_dir = False

        size = 0
        modified = None
        try:
            stat_result = entry.stat()
            size = stat_result.st_size
            modified = modified_time(stat_result)
        except OSError:
            # Dangling symlink or vanished entry
            pass

        return DirectoryEntry(
            name=entry.name,
            kind=EntryKind.DIRECTORY if is_dir else EntryKind.FILE,
            relative_path=self.guard.relative(Path(entry.path)),
            language_tag=None if is_dir else classify(entry.name),
            size_bytes=size,
            modified_at=modified,
            is_hidden=entry.name.startswith("."),
        )

    def create_directory(self, relative_path: str | None, recursive: bool = True) -> str:
        """Create a directory.

        Args:
            relative_path: Directory to create
            recursive: Create missing ancestors and accept an existing directory (mkdir -p)

        Returns:
            Root-relative path of the directory

        Raises:
            InvalidArgumentError: No path given
            AlreadyExistsError: Target exists and recursive is False, or target is a file
            NotFoundError: Parent missing and recursive is False
        """
        if not relative_path:
            raise InvalidArgumentError("Directory path is required")

        dir_path = self.guard.resolve(relative_path)
        label = self.guard.relative(dir_path)

        try:
            dir_path.mkdir(parents=recursive, exist_ok=recursive)
        except OSError as e:
            raise translate_os_error(e, label) from e

        logger.info(f"Created directory: {label}")
        return label

    def delete_directory(self, relative_path: str | None, recursive: bool = False) -> None:
        """Delete a directory.

        Recursive deletion removes the whole subtree and cannot be undone.

        Raises:
            AccessDeniedError: Path escapes root or is the root itself
            NotFoundError: Path doesn't exist
            NotDirectoryError: Path is a file or a symlink
            NotEmptyError: Directory has children and recursive is False
        """
        dir_path = self.guard.resolve(relative_path)
        label = self.guard.relative(dir_path)

        if self.guard.is_root(dir_path):
            raise AccessDeniedError("The root directory cannot be deleted", label)
        if not dir_path.exists() and not dir_path.is_symlink():
            raise NotFoundError(f"Path not found: {label}", label)
        if dir_path.is_symlink() or not dir_path.is_dir():
            raise NotDirectoryError(f"Path is not a directory: {label}", label)

        try:
            if recursive:
                shutil.rmtree(dir_path)
            else:
                if any(dir_path.iterdir()):
                    raise NotEmptyError(f"Directory not empty: {label}", label)
                dir_path.rmdir()
        except OSError as e:
            raise translate_os_error(e, label) from e

        logger.info(f"Deleted directory: {label} (recursive={recursive})")

    async def build_tree(self, relative_path: str | None = "", max_depth: int = 3) -> DirectoryTree:
        """Build a directory tree at most max_depth levels deep.

        Hidden entries are skipped. Directories above the depth bound carry
        a children list; directories at the bound carry none.

        Args:
            relative_path: Directory to start from
            max_depth: Number of levels to include (>= 1)

        Returns:
            DirectoryTree with nodes ordered by name
        """
        if max_depth < 1:
            raise InvalidArgumentError(f"maxDepth must be at least 1, got {max_depth}")

        tree_path = await asyncio.to_thread(self._existing_directory, relative_path)
        label = self.guard.relative(tree_path)

        try:
            tree = await self._build_level(tree_path, 0, max_depth)
        except OSError as e:
            raise translate_os_error(e, label) from e

        return DirectoryTree(path=label, max_depth=max_depth, tree=tree)

    async def _build_level(self, dir_path: Path, depth: int, max_depth: int) -> list[TreeNode]:
        children = await asyncio.to_thread(scan_visible, dir_path)

        nodes: list[TreeNode] = []
        expand: list[tuple[TreeNode, Path]] = []
        for name, path, is_dir, _ in children:
            relative = self.guard.relative(path)
            if is_dir:
                node = TreeNode(name=name, relative_path=relative, kind=EntryKind.DIRECTORY)
                if depth < max_depth - 1:
                    expand.append((node, path))
            else:
                node = TreeNode(
                    name=name,
                    relative_path=relative,
                    kind=EntryKind.FILE,
                    language_tag=classify(name),
                )
            nodes.append(node)

        subtrees = await gather_all(
            *(self._build_level(path, depth + 1, max_depth) for _, path in expand)
        )
        for (node, _), subtree in zip(expand, subtrees, strict=True):
            node.children = subtree

        return nodes
