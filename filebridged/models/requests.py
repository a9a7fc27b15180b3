"""Request models for filebridged API.

Path fields default to "" so a missing path reaches the core and is
reported as invalid_argument (400) rather than a schema error.
"""

from pydantic import Field

from filebridge_library.models.base import CamelCaseModel


class WriteFileRequest(CamelCaseModel):
    """Create or overwrite a text file."""

    path: str = Field(default="", description="File path relative to the root")
    content: str = Field(default="", description="UTF-8 text to store")
    create_directories: bool = Field(default=False, description="Create missing parent directories")


class CreateDirectoryRequest(CamelCaseModel):
    """Create a directory."""

    path: str = Field(default="", description="Directory path relative to the root")
    recursive: bool = Field(default=True, description="Create missing parents, accept an existing directory")


class RenameRequest(CamelCaseModel):
    """Rename an entry within its directory."""

    old_path: str = Field(default="", description="Entry to rename, relative to the root")
    new_name: str = Field(default="", description="New final path segment")


class TransferRequest(CamelCaseModel):
    """Copy or move an entry."""

    source_path: str = Field(default="", description="Source relative to the root")
    destination_path: str = Field(default="", description="Destination relative to the root")
