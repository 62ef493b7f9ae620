"""
Extraction strategies.

``create_default_parsers`` returns the strategies in the order the extraction
task runs them; a fixed order keeps the merged output deterministic.
"""

from .base import BaseParser
from .directive_parser import DirectiveParser
from .marker_parser import MarkerParser
from .pipe_parser import PipeParser
from .service_parser import ServiceParser


def create_default_parsers() -> list[BaseParser]:
    """Return one instance of every strategy in run order."""
    return [PipeParser(), DirectiveParser(), ServiceParser(), MarkerParser()]


__all__ = [
    "BaseParser",
    "DirectiveParser",
    "MarkerParser",
    "PipeParser",
    "ServiceParser",
    "create_default_parsers",
]
