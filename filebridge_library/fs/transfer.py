"""Rename, copy and move.

None of these are transactional. In particular a failed copy can leave a
partial tree at the destination; callers must treat a failed result as
"destination state unknown" and clean up if needed.
"""

import asyncio
import errno
import logging
import os
import shutil
from pathlib import Path

from .errors import AccessDeniedError
from .errors import InvalidArgumentError
from .errors import NotFoundError
from .errors import translate_os_error
from .guard import PathGuard
from .tasks import gather_all

logger = logging.getLogger(__name__)


def _copy_file(src: Path, dest: Path) -> None:
    shutil.copyfile(src, dest)
    shutil.copymode(src, dest)


def _copy_link(src: Path, dest: Path) -> None:
    os.symlink(os.readlink(src), dest)


class TransferService:
    """Multi-path operations confined to the guard's root."""

    def __init__(self, guard: PathGuard) -> None:
        self.guard = guard

    def _resolve_pair(self, source: str | None, destination: str | None) -> tuple[Path, Path]:
        if not source or not destination:
            raise InvalidArgumentError("Source and destination paths are required")

        src = self.guard.resolve(source)
        dest = self.guard.resolve(destination)

        if self.guard.is_root(src) or self.guard.is_root(dest):
            raise AccessDeniedError("The root directory cannot be copied, moved or replaced", source)

        label = self.guard.relative(src)
        if not src.exists() and not src.is_symlink():
            raise NotFoundError(f"Path not found: {label}", label)

        return src, dest

    def rename(self, old_relative_path: str | None, new_name: str | None) -> str:
        """Rename a file or directory within its parent directory.

        The destination is not checked first: an existing file with the
        new name may be silently replaced (os.rename semantics).

        Args:
            old_relative_path: Entry to rename
            new_name: New final path segment

        Returns:
            Root-relative path after the rename
        """
        if not old_relative_path or not new_name:
            raise InvalidArgumentError("Old path and new name are required")

        old_path = self.guard.resolve(old_relative_path)
        if self.guard.is_root(old_path):
            raise AccessDeniedError("The root directory cannot be renamed", old_relative_path)

        parent = self.guard.relative(old_path.parent)
        new_path = self.guard.resolve(f"{parent}/{new_name}" if parent else new_name)
        if self.guard.is_root(new_path):
            raise AccessDeniedError("Cannot rename onto the root directory", new_name)

        old_label = self.guard.relative(old_path)
        new_label = self.guard.relative(new_path)

        if not old_path.exists() and not old_path.is_symlink():
            raise NotFoundError(f"Path not found: {old_label}", old_label)

        try:
            old_path.rename(new_path)
        except OSError as e:
            raise translate_os_error(e, new_label) from e

        logger.info(f"Renamed {old_label} -> {new_label}")
        return new_label

    async def copy(self, source: str | None, destination: str | None) -> None:
        """Recursively copy a file or directory.

        Directory children are copied concurrently. Every sibling copy is
        awaited before an error is reported, so when this raises, some
        children may already exist at the destination.

        Raises:
            InvalidArgumentError: Missing path, or copying a directory into itself
            AccessDeniedError: Either path escapes root
            NotFoundError: Source doesn't exist
        """
        src, dest = await asyncio.to_thread(self._resolve_pair, source, destination)
        src_label = self.guard.relative(src)
        dest_label = self.guard.relative(dest)

        if dest == src or src in dest.parents:
            raise InvalidArgumentError(f"Cannot copy {src_label} into itself", dest_label)

        try:
            await self._copy_recursive(src, dest)
        except OSError as e:
            logger.warning(f"Copy {src_label} -> {dest_label} failed, destination may be partial: {e}")
            raise translate_os_error(e, dest_label) from e

        logger.info(f"Copied {src_label} -> {dest_label}")

    async def _copy_recursive(self, src: Path, dest: Path) -> None:
        # Links are recreated, never descended into
        if src.is_symlink():
            if not self.guard.contains(await asyncio.to_thread(src.resolve)):
                label = self.guard.relative(src)
                raise AccessDeniedError(f"Symlink points outside root: {label}", label)
            await asyncio.to_thread(_copy_link, src, dest)
            return

        if await asyncio.to_thread(src.is_dir):
            await asyncio.to_thread(dest.mkdir, parents=True, exist_ok=True)
            names = await asyncio.to_thread(os.listdir, src)
            await gather_all(*(self._copy_recursive(src / name, dest / name) for name in names))
        else:
            await asyncio.to_thread(_copy_file, src, dest)

    def move(self, source: str | None, destination: str | None) -> None:
        """Move a file or directory.

        Atomic when source and destination are on the same filesystem.
        Across filesystems this degrades to copy-then-delete, which is not.
        """
        src, dest = self._resolve_pair(source, destination)
        src_label = self.guard.relative(src)
        dest_label = self.guard.relative(dest)

        if dest == src:
            return
        if src in dest.parents:
            raise InvalidArgumentError(f"Cannot move {src_label} into itself", dest_label)

        try:
            try:
                os.rename(src, dest)
            except OSError as e:
                if e.errno != errno.EXDEV:
                    raise
                logger.warning(f"Moving {src_label} across filesystems, falling back to copy and delete")
                shutil.move(src, dest)
        except OSError as e:
            raise translate_os_error(e, dest_label) from e

        logger.info(f"Moved {src_label} -> {dest_label}")
