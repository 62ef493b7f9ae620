"""Output format compilers."""

from .base import BaseCompiler
from .factory import OUTPUT_FORMATS, create_compiler
from .json_compiler import JsonCompiler
from .namespaced_json_compiler import NamespacedJsonCompiler
from .po_compiler import PoCompiler

__all__ = [
    "BaseCompiler",
    "JsonCompiler",
    "NamespacedJsonCompiler",
    "OUTPUT_FORMATS",
    "PoCompiler",
    "create_compiler",
]
