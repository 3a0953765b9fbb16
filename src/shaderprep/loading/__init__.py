from shaderprep.loading.loaders import LocalFileLoader, MemoryLoader, UrlLoader, load_local_file
from shaderprep.loading.registry import ProtocolRegistry
from shaderprep.loading.resolver import IncludeResolver

__all__ = [
    'IncludeResolver',
    'LocalFileLoader',
    'MemoryLoader',
    'ProtocolRegistry',
    'UrlLoader',
    'load_local_file',
]
