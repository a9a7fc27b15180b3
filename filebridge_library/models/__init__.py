"""Models for filebridge library."""

from .base import CamelCaseModel
from .files import DirectoryEntry
from .files import DirectoryListing
from .files import DirectoryTree
from .files import EntryKind
from .files import FileRecord
from .files import SearchHit
from .files import SearchMatch
from .files import SearchResults
from .files import TreeNode
from .files import UploadedFile
from .files import WriteResult

__all__ = [
    "CamelCaseModel",
    "DirectoryEntry",
    "DirectoryListing",
    "DirectoryTree",
    "EntryKind",
    "FileRecord",
    "SearchHit",
    "SearchMatch",
    "SearchResults",
    "TreeNode",
    "UploadedFile",
    "WriteResult",
]
