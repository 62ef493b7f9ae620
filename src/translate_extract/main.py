"""
Command-line entry point for translate-extract.

Wires the configured parsers, post-processors and compiler into an
ExtractTask and runs it.
"""

from __future__ import annotations

import logging

from .cli.args import parse_arguments
from .compilers.factory import create_compiler
from .config.schema import ExtractConfig
from .parsers import create_default_parsers
from .post_processors import (
    BasePostProcessor,
    KeyAsDefaultValuePostProcessor,
    NullAsDefaultValuePostProcessor,
    PurgeObsoleteKeysPostProcessor,
    SortByKeyPostProcessor,
)
from .tasks.extract_task import ExtractTask
from .utils.core.exceptions import TranslateExtractError

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """
    Set up logging configuration.

    Args:
        verbose: Enable verbose logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_post_processors(config: ExtractConfig) -> list[BasePostProcessor]:
    """Return the post-processors requested by ``config`` in run order."""
    post_processors: list[BasePostProcessor] = []
    if config.clean:
        post_processors.append(PurgeObsoleteKeysPostProcessor())
    if config.key_as_default_value:
        post_processors.append(KeyAsDefaultValuePostProcessor())
    elif config.null_as_default_value:
        post_processors.append(NullAsDefaultValuePostProcessor())
    if config.sort:
        post_processors.append(SortByKeyPostProcessor())
    return post_processors


def create_task(config: ExtractConfig) -> ExtractTask:
    task = ExtractTask(config.input, config.output, config.to_task_options())
    _ = task.set_parsers(create_default_parsers())
    _ = task.set_post_processors(create_post_processors(config))
    _ = task.set_compiler(create_compiler(config.format, config.format_indentation))
    return task


def run(args: list[str] | None = None) -> int:
    """
    Parse arguments and run the extraction.

    Args:
        args: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        config = parse_arguments(args)
    except TranslateExtractError as e:
        setup_logging()
        logger.error(e.user_message)
        return 1

    setup_logging(config.verbose)

    try:
        _ = create_task(config).execute()
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        return 1
    except TranslateExtractError as e:
        logger.error(f"String extraction failed: {e.user_message}")
        if config.verbose:
            logger.exception("Full traceback:")
        return 1
    except OSError as e:
        logger.error(f"Unable to write output: {e}")
        return 1

    logger.info("String extraction completed successfully!")
    return 0
