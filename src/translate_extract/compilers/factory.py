"""Create compilers by output format name."""

from __future__ import annotations

import logging

from ..utils.core.exceptions import CompilerError
from .base import DEFAULT_INDENTATION, BaseCompiler
from .json_compiler import JsonCompiler
from .namespaced_json_compiler import NamespacedJsonCompiler
from .po_compiler import PoCompiler

logger = logging.getLogger(__name__)

COMPILERS: dict[str, type[BaseCompiler]] = {
    "json": JsonCompiler,
    "namespaced-json": NamespacedJsonCompiler,
    "pot": PoCompiler,
}

OUTPUT_FORMATS = tuple(COMPILERS)


def create_compiler(format_name: str, indentation: str = DEFAULT_INDENTATION) -> BaseCompiler:
    """
    Create the compiler for an output format.

    Args:
        format_name: One of "json", "namespaced-json" or "pot"
        indentation: Indentation string for formats that indent

    Returns:
        Compiler instance

    Raises:
        CompilerError: If the format is unknown
    """
    compiler_class = COMPILERS.get(format_name)
    if compiler_class is None:
        raise CompilerError(
            f"Unknown format '{format_name}', expected one of: {', '.join(OUTPUT_FORMATS)}"
        )
    logger.debug(f"Using {compiler_class.__name__} for format '{format_name}'")
    return compiler_class(indentation=indentation)
