"""
Command-line argument parsing for translate-extract.

This module builds the argument parser and turns the parsed arguments into
a validated ExtractConfig.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from pydantic import ValidationError

from ..compilers.factory import OUTPUT_FORMATS
from ..config.schema import ExtractConfig
from ..tasks.extract_task import DEFAULT_PATTERNS
from ..utils.core.exceptions import ConfigurationError
from ..utils.core.version import get_version


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for translate-extract.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="translate-extract",
        description="Extract strings from files for translation.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  translate-extract -i src -o src/assets/i18n/en.json
    Extract from src/ and merge into en.json

  translate-extract -i src -o src/assets/i18n/ --clean --sort --format namespaced-json
    Write a sorted, nested strings.json without obsolete strings

  translate-extract -i src -o messages.pot -f pot --replace
    Overwrite a gettext template
""",
    )

    _ = parser.add_argument(
        "--input",
        "-i",
        nargs="+",
        type=Path,
        default=None,
        help=(
            "Paths you would like to extract strings from "
            "(default: current directory). Multiple paths are allowed."
        ),
        metavar="PATH",
    )
    _ = parser.add_argument(
        "--patterns",
        "-p",
        nargs="+",
        default=list(DEFAULT_PATTERNS),
        help="Extract strings from the following file patterns (default: %(default)s)",
        metavar="PATTERN",
    )
    _ = parser.add_argument(
        "--output",
        "-o",
        nargs="+",
        type=Path,
        required=True,
        help="Paths where you would like to save extracted strings",
        metavar="PATH",
    )
    _ = parser.add_argument(
        "--format",
        "-f",
        choices=OUTPUT_FORMATS,
        default="json",
        help="Output format (default: %(default)s)",
    )
    _ = parser.add_argument(
        "--format-indentation",
        "-fi",
        default="\t",
        help="Output format indentation (default: tab)",
        metavar="STRING",
    )
    _ = parser.add_argument(
        "--replace",
        "-r",
        action="store_true",
        help="Replace the contents of output file if it exists (merges by default)",
    )
    _ = parser.add_argument(
        "--sort",
        "-s",
        action="store_true",
        help="Sort strings in alphabetical order when saving",
    )
    _ = parser.add_argument(
        "--clean",
        "-c",
        action="store_true",
        help="Remove obsolete strings when merging",
    )

    default_values = parser.add_mutually_exclusive_group()
    _ = default_values.add_argument(
        "--key-as-default-value",
        "-k",
        action="store_true",
        help="Use key as default value for translations",
    )
    _ = default_values.add_argument(
        "--null-as-default-value",
        "-n",
        action="store_true",
        help="Use null as default value for translations",
    )

    _ = parser.add_argument(
        "--servicename",
        "-sn",
        default=None,
        help="Translate service name to be used",
        metavar="NAME",
    )
    _ = parser.add_argument(
        "--methodname",
        "-mn",
        default=None,
        help="Translate function name to be used",
        metavar="NAME",
    )
    _ = parser.add_argument(
        "--verbose",
        "-V",
        action="store_true",
        help="Enable verbose logging",
    )
    _ = parser.add_argument(
        "--version", "-v", action="version", version=f"%(prog)s {get_version()}"
    )

    return parser


def build_config(parsed: argparse.Namespace) -> ExtractConfig:
    """
    Validate parsed arguments into an ExtractConfig.

    Raises:
        ConfigurationError: If validation fails
    """
    values: dict[str, object] = {
        "output": parsed.output,
        "patterns": parsed.patterns,
        "format": parsed.format,
        "format_indentation": parsed.format_indentation,
        "replace": parsed.replace,
        "sort": parsed.sort,
        "clean": parsed.clean,
        "key_as_default_value": parsed.key_as_default_value,
        "null_as_default_value": parsed.null_as_default_value,
        "service_name": parsed.servicename,
        "method_name": parsed.methodname,
        "verbose": parsed.verbose,
    }
    if parsed.input is not None:
        values["input"] = parsed.input

    try:
        return ExtractConfig.model_validate(values)
    except ValidationError as e:
        messages = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc']) or 'config'}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigurationError(f"Invalid options: {messages}") from e


def parse_arguments(args: list[str] | None = None) -> ExtractConfig:
    """
    Parse command-line arguments.

    Args:
        args: List of arguments to parse (defaults to sys.argv[1:])

    Returns:
        Validated configuration

    Raises:
        SystemExit: If argument parsing fails or --help is requested
        ConfigurationError: If the options are invalid
    """
    parser = create_argument_parser()
    parsed = parser.parse_args(args)
    return build_config(parsed)
