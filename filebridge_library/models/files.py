"""Filesystem models produced by the filebridge core.

Every model here is derived on demand from the filesystem under the root;
none of them are persisted.
"""

from datetime import datetime
from enum import Enum

from pydantic import Field

from filebridge_library.models.base import CamelCaseModel


class EntryKind(str, Enum):
    """Kind of a filesystem entry."""

    FILE = "file"
    DIRECTORY = "directory"


class DirectoryEntry(CamelCaseModel):
    """A single child of a listed directory."""

    name: str = Field(description="Entry name")
    kind: EntryKind = Field(description="file or directory")
    relative_path: str = Field(description="Path relative to the root")
    language_tag: str | None = Field(default=None, description="Language tag, null for directories")
    size_bytes: int = Field(default=0, description="Size in bytes (0 when unknown)")
    modified_at: datetime | None = Field(default=None, description="Last modification time")
    is_hidden: bool = Field(default=False, description="True when the name starts with '.'")


class DirectoryListing(CamelCaseModel):
    """Immediate children of a directory.

    Contract:
    - current_path: Relative path of the listed directory ("" for the root)
    - parent_path: Relative path of its parent, null at the root
    - entries: Directories first, then files, each group ordered by name
    """

    current_path: str = Field(description="Listed directory relative to the root")
    parent_path: str | None = Field(default=None, description="Parent directory, null at the root")
    entries: list[DirectoryEntry] = Field(default_factory=list, description="Directory children")


class FileRecord(CamelCaseModel):
    """A file as returned by a read."""

    relative_path: str = Field(description="Path relative to the root")
    name: str = Field(description="File name")
    language_tag: str = Field(description="Language tag derived from the extension")
    size_bytes: int = Field(description="Size in bytes")
    modified_at: datetime = Field(description="Last modification time")
    is_binary: bool = Field(description="True when the content sniffer flagged the file")
    content: str | None = Field(default=None, description="UTF-8 text, null for binary files")


class WriteResult(CamelCaseModel):
    """Outcome of a successful write."""

    relative_path: str = Field(description="Path relative to the root")
    size_bytes: int = Field(description="Size after the write")
    modified_at: datetime = Field(description="Modification time after the write")


class UploadedFile(CamelCaseModel):
    """A file stored by an upload."""

    original_name: str = Field(description="File name as sent by the client")
    file_name: str = Field(description="File name as stored")
    size_bytes: int = Field(description="Stored size in bytes")
    relative_path: str = Field(description="Stored location relative to the root")


class SearchMatch(CamelCaseModel):
    """A matching line inside a file."""

    line_number: int = Field(description="1-based line number")
    line_text: str = Field(description="Line with surrounding whitespace stripped")
    matched_substring: str = Field(description="First substring of the line matching the query")


class SearchHit(CamelCaseModel):
    """A file or directory matched by a search."""

    kind: EntryKind = Field(description="file or directory")
    name: str = Field(description="Entry name")
    relative_path: str = Field(description="Path relative to the root")
    language_tag: str | None = Field(default=None, description="Language tag, files only")
    filename_matched: bool = Field(description="True when the query matched the name")
    content_matches: list[SearchMatch] | None = Field(
        default=None, description="Matching lines (capped per file), null for directories"
    )


class SearchResults(CamelCaseModel):
    """Search response; total_results counts hits before truncation."""

    query: str
    search_path: str
    total_results: int
    results: list[SearchHit] = Field(default_factory=list)


class TreeNode(CamelCaseModel):
    """A node of a directory tree.

    children is None for files and for directories at the depth bound.
    """

    name: str
    relative_path: str
    kind: EntryKind
    language_tag: str | None = None
    children: list["TreeNode"] | None = None


class DirectoryTree(CamelCaseModel):
    """Tree rooted at a directory, bounded by max_depth levels."""

    path: str
    max_depth: int
    tree: list[TreeNode] = Field(default_factory=list)
