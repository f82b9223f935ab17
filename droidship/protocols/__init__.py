"""Protocol definitions for Droidship adapters and collaborators.

These protocols use Python's typing.Protocol system with the
@runtime_checkable decorator to enable both static type checking and
runtime isinstance() checks, so tests can substitute fakes for any
collaborator.
"""

from .file_adapter_protocol import FileAdapterProtocol
from .tool_protocols import (
    BundletoolProtocol,
    ProjectEnvironmentProtocol,
    ToolCacheProtocol,
    UnzipFn,
)


__all__ = [
    "BundletoolProtocol",
    "FileAdapterProtocol",
    "ProjectEnvironmentProtocol",
    "ToolCacheProtocol",
    "UnzipFn",
]
