"""Adapters package for external system interfaces."""

from droidship.protocols import BundletoolProtocol, FileAdapterProtocol

from .bundletool_adapter import BundletoolAdapter, create_bundletool_adapter
from .file_adapter import FileSystemAdapter, create_file_adapter
from .zip_adapter import unzip


__all__ = [
    "BundletoolAdapter",
    "BundletoolProtocol",
    "create_bundletool_adapter",
    "FileAdapterProtocol",
    "FileSystemAdapter",
    "create_file_adapter",
    "unzip",
]
