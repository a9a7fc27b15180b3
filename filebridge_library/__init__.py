"""filebridge library layer.

This is the business logic layer behind filebridged (transport): it owns
path confinement and every filesystem operation a remote client can request.

Public Interface:
    Modules:
    - fs: Path-confined filesystem core
    - config: Configuration loading
    - models: Shared data structures
    - storage: Config and log locations
"""

from .fs import FileSystemCore
from .fs import OperationKind
from .fs import OperationRequest
from .fs import OperationResult

__all__ = [
    "FileSystemCore",
    "OperationKind",
    "OperationRequest",
    "OperationResult",
]
