"""Command-line interface for translate-extract."""

from .args import build_config, create_argument_parser, parse_arguments

__all__ = ["build_config", "create_argument_parser", "parse_arguments"]
