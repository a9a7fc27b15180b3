"""Recursive filename and content search.

The query is a caller-supplied regular expression; it is neither escaped
nor time-boxed. Callers wanting a literal search escape metacharacters
themselves.
"""

import asyncio
import logging
import re
import stat
from collections.abc import Iterable
from pathlib import Path

from filebridge_library.models.files import EntryKind
from filebridge_library.models.files import SearchHit
from filebridge_library.models.files import SearchMatch
from filebridge_library.models.files import SearchResults

from .classifier import classify
from .directories import scan_visible
from .errors import InvalidArgumentError
from .errors import NotDirectoryError
from .errors import NotFoundError
from .errors import translate_os_error
from .guard import PathGuard
from .tasks import gather_all

logger = logging.getLogger(__name__)


class SearchEngine:
    """Search names and contents below a directory.

    Hidden entries (names starting with '.') are skipped. Sibling entries
    are searched concurrently; results come back in sorted pre-order
    regardless of completion order.

    Attributes:
        max_results: Results returned per search (total_results still counts all hits)
        max_matches_per_file: Content matches kept per file
        max_file_bytes: Larger files are matched by name only
    """

    def __init__(
        self,
        guard: PathGuard,
        max_results: int = 100,
        max_matches_per_file: int = 10,
        max_file_bytes: int = 10 * 1024 * 1024,
    ) -> None:
        self.guard = guard
        self.max_results = max_results
        self.max_matches_per_file = max_matches_per_file
        self.max_file_bytes = max_file_bytes

    async def search(
        self,
        query: str | None,
        search_path: str | None = "",
        file_types: Iterable[str] | None = None,
        case_sensitive: bool = False,
    ) -> SearchResults:
        """Search for a regular expression below search_path.

        Args:
            query: Regular expression matched against names and lines
            search_path: Directory to search from ("" for root)
            file_types: Language tags to restrict files to; empty means all
            case_sensitive: Match case exactly (default: ignore case)

        Returns:
            SearchResults truncated to max_results

        Raises:
            InvalidArgumentError: Empty query or invalid pattern
            AccessDeniedError: search_path escapes root
            NotFoundError / NotDirectoryError: search_path is not a directory
        """
        if not query:
            raise InvalidArgumentError("Search query is required")

        try:
            pattern = re.compile(query, 0 if case_sensitive else re.IGNORECASE)
        except re.error as e:
            raise InvalidArgumentError(f"Invalid search pattern: {e}") from e

        start = self.guard.resolve(search_path)
        label = self.guard.relative(start)
        type_filter = frozenset(tag for tag in (file_types or ()) if tag)

        try:
            children = await asyncio.to_thread(scan_visible, start)
        except FileNotFoundError as e:
            raise NotFoundError(f"Path not found: {label}", label) from e
        except NotADirectoryError as e:
            raise NotDirectoryError(f"Path is not a directory: {label}", label) from e
        except OSError as e:
            raise translate_os_error(e, label) from e

        hits = await self._search_children(children, pattern, type_filter)

        logger.info(f"Search {query!r} in /{label}: {len(hits)} results")

        return SearchResults(
            query=query,
            search_path=label,
            total_results=len(hits),
            results=hits[: self.max_results],
        )

    async def _search_children(
        self,
        children: list[tuple[str, Path, bool, bool]],
        pattern: re.Pattern[str],
        type_filter: frozenset[str],
    ) -> list[SearchHit]:
        groups = await gather_all(*(self._search_entry(child, pattern, type_filter) for child in children))
        return [hit for group in groups for hit in group]

    async def _search_entry(
        self,
        child: tuple[str, Path, bool, bool],
        pattern: re.Pattern[str],
        type_filter: frozenset[str],
    ) -> list[SearchHit]:
        name, path, is_dir, is_symlink = child
        relative = self.guard.relative(path)

        if is_dir:
            hits = []
            if pattern.search(name):
                hits.append(
                    SearchHit(
                        kind=EntryKind.DIRECTORY,
                        name=name,
                        relative_path=relative,
                        filename_matched=True,
                    )
                )
            try:
                grandchildren = await asyncio.to_thread(scan_visible, path)
            except OSError as e:
                logger.debug(f"Skipping unreadable directory {relative}: {e}")
                return hits
            hits.extend(await self._search_children(grandchildren, pattern, type_filter))
            return hits

        language = classify(name)
        if type_filter and language not in type_filter:
            return []

        if is_symlink and not self.guard.contains(await asyncio.to_thread(path.resolve)):
            return []

        filename_matched = pattern.search(name) is not None
        content_matches = await asyncio.to_thread(self._scan_content, path, pattern)

        if not filename_matched and not content_matches:
            return []

        return [
            SearchHit(
                kind=EntryKind.FILE,
                name=name,
                relative_path=relative,
                language_tag=language,
                filename_matched=filename_matched,
                content_matches=content_matches,
            )
        ]

    def _scan_content(self, path: Path, pattern: re.Pattern[str]) -> list[SearchMatch]:
        """Collect up to max_matches_per_file matching lines.

        Only regular files are read. Unreadable or oversized files yield no
        matches; undecodable bytes become U+FFFD, so binary files are matched
        like any other text.
        """
        try:
            stat_result = path.stat()
            if not stat.S_ISREG(stat_result.st_mode) or stat_result.st_size > self.max_file_bytes:
                return []
            text = path.read_bytes().decode("utf-8", errors="replace")
        except OSError as e:
            logger.debug(f"Skipping content of {path}: {e}")
            return []

        matches: list[SearchMatch] = []
        for line_number, line in enumerate(text.split("\n"), start=1):
            found = pattern.search(line)
            if found is None:
                continue
            matches.append(
                SearchMatch(
                    line_number=line_number,
                    line_text=line.strip(),
                    matched_substring=found.group(0),
                )
            )
            if len(matches) >= self.max_matches_per_file:
                break

        return matches
