"""
Extraction task.

Resolves the input files, runs every parser over each file, merges the
results, applies the post-processors and writes the compiled collection to
each output path.

Usage Examples:
    Extract from a source tree into a JSON file:
        >>> task = ExtractTask([Path("src")], [Path("i18n/en.json")], ExtractTaskOptions())
        >>> task.set_parsers(create_default_parsers())
        >>> task.set_compiler(create_compiler("json"))
        >>> task.execute()
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import NamedTuple

from ..compilers.base import BaseCompiler
from ..parsers.base import BaseParser
from ..post_processors.base import BasePostProcessor
from ..utils.core.exceptions import ConfigurationError, ParseError
from ..utils.translation_collection import TranslationCollection

logger = logging.getLogger(__name__)

DEFAULT_PATTERNS = ("/**/*.html", "/**/*.ts")
DEFAULT_OUTPUT_FILENAME = "strings"


class ExtractTaskOptions(NamedTuple):
    """Options controlling file resolution and output merging."""

    replace: bool = False
    patterns: Sequence[str] = DEFAULT_PATTERNS
    service_name: str | None = None
    method_name: str | None = None


class ExtractTask:
    """Run the parsers over the input files and write the merged result."""

    def __init__(
        self,
        inputs: Sequence[Path],
        outputs: Sequence[Path],
        options: ExtractTaskOptions | None = None,
    ) -> None:
        self.inputs: list[Path] = list(inputs)
        self.outputs: list[Path] = list(outputs)
        self.options: ExtractTaskOptions = options or ExtractTaskOptions()
        self.parsers: list[BaseParser] = []
        self.post_processors: list[BasePostProcessor] = []
        self.compiler: BaseCompiler | None = None

    def set_parsers(self, parsers: Sequence[BaseParser]) -> ExtractTask:
        self.parsers = list(parsers)
        return self

    def set_post_processors(self, post_processors: Sequence[BasePostProcessor]) -> ExtractTask:
        self.post_processors = list(post_processors)
        return self

    def set_compiler(self, compiler: BaseCompiler) -> ExtractTask:
        self.compiler = compiler
        return self

    def execute(self) -> dict[Path, TranslationCollection]:
        """
        Extract, post-process and write every output.

        All outputs are compiled before any of them is written, so a failure
        leaves existing output files untouched.

        Returns:
            Mapping of written output path to the collection written there

        Raises:
            ConfigurationError: If no parsers or no compiler are configured
            ParseError: If an input or existing output file cannot be parsed
        """
        if not self.parsers:
            raise ConfigurationError("No parsers configured")
        if self.compiler is None:
            raise ConfigurationError("No compiler configured")

        extracted = self.extract()
        logger.info(f"Found {len(extracted)} strings")

        results: dict[Path, TranslationCollection] = {}
        pending: list[tuple[Path, str]] = []
        for output in self.outputs:
            output_path = self.get_output_path(output, self.compiler)
            existing = self._load_existing(output_path, self.compiler)
            final = self.process(extracted, existing)
            results[output_path] = final
            pending.append((output_path, self.compiler.compile(final)))

        for output_path, contents in pending:
            self.save(output_path, contents)
            logger.info(f"Saved {len(results[output_path])} strings to {output_path}")

        return results

    def resolve_files(self) -> list[Path]:
        """
        Expand the configured patterns against every input directory.

        Files are returned in input order, then pattern order, then sorted
        path order, with duplicates removed.
        """
        files: dict[Path, None] = {}
        for input_dir in self.inputs:
            found = 0
            for pattern in self.options.patterns:
                for path in sorted(input_dir.glob(pattern.lstrip("/"))):
                    if path.is_file() and path not in files:
                        files[path] = None
                        found += 1
            logger.info(f"Found {found} files in {input_dir}")
        return list(files)

    def extract(self) -> TranslationCollection:
        """Run every parser over every resolved file and merge the results."""
        collection = TranslationCollection()
        for file_path in self.resolve_files():
            source = self._read_file(file_path)
            file_collection = self.extract_source(source, file_path)
            logger.debug(f"Extracted {len(file_collection)} strings from {file_path}")
            collection = collection.merge(file_collection)
        return collection

    def extract_source(self, source: str, file_path: Path) -> TranslationCollection:
        """Run the parsers over one file's contents in registration order."""
        collection = TranslationCollection()
        for parser in self.parsers:
            result = parser.extract(
                source,
                file_path,
                self.options.service_name,
                self.options.method_name,
            )
            if result is None:
                logger.debug(f"{parser.name} parser does not apply to {file_path}")
                continue
            collection = collection.merge(result)
        return collection

    def process(
        self, extracted: TranslationCollection, existing: TranslationCollection
    ) -> TranslationCollection:
        """Merge with the existing output and apply post-processors in order."""
        draft = extracted.merge(existing)
        for post_processor in self.post_processors:
            logger.debug(f"Applying {post_processor.name} post-processor")
            draft = post_processor.process(draft, extracted, existing)
        return draft

    @staticmethod
    def get_output_path(output: Path, compiler: BaseCompiler) -> Path:
        """Place ``strings.<extension>`` inside directory outputs."""
        if output.is_dir():
            return output / f"{DEFAULT_OUTPUT_FILENAME}.{compiler.extension}"
        if not output.exists() and not output.suffix:
            output_path = output / f"{DEFAULT_OUTPUT_FILENAME}.{compiler.extension}"
            logger.info(f"Output {output} has no file extension, treating it as a directory: {output_path}")
            return output_path
        return output

    def _load_existing(self, output_path: Path, compiler: BaseCompiler) -> TranslationCollection:
        if self.options.replace or not output_path.is_file():
            return TranslationCollection()
        existing = compiler.parse(self._read_file(output_path), output_path)
        logger.info(f"Merging with {len(existing)} existing strings in {output_path}")
        return existing

    @staticmethod
    def _read_file(file_path: Path) -> str:
        try:
            return file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ParseError(f"Unable to read file: {e}", file_path) from e

    @staticmethod
    def save(output_path: Path, contents: str) -> None:
        """Write ``contents`` through a temporary file in the target directory."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_name = tempfile.mkstemp(
            prefix=f".{output_path.name}.", suffix=".tmp", dir=output_path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as temp_file:
                _ = temp_file.write(contents)
            os.replace(temp_name, output_path)
        except OSError:
            Path(temp_name).unlink(missing_ok=True)
            raise
