"""Configuration schema for translate-extract using Pydantic."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, Literal, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..tasks.extract_task import DEFAULT_PATTERNS, ExtractTaskOptions

OutputFormat = Literal["json", "namespaced-json", "pot"]


class ExtractConfig(BaseModel):
    """Validated options for one extraction run."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    input: list[Path] = Field(
        default_factory=lambda: [Path.cwd()],
        description="Directories to extract strings from",
        min_length=1,
    )
    output: list[Path] = Field(
        ...,
        description="Files or directories to save extracted strings to",
        min_length=1,
    )
    patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PATTERNS),
        description="Glob patterns, relative to each input directory",
        min_length=1,
    )
    format: OutputFormat = Field(
        default="json",
        description="Output format",
    )
    format_indentation: str = Field(
        default="\t",
        description="Indentation used by the output format",
    )
    replace: bool = Field(
        default=False,
        description="Replace the contents of existing output files instead of merging",
    )
    sort: bool = Field(default=False, description="Sort strings by key")
    clean: bool = Field(default=False, description="Remove obsolete strings when merging")
    key_as_default_value: bool = Field(
        default=False,
        description="Use the key as default value for unset strings",
    )
    null_as_default_value: bool = Field(
        default=False,
        description="Use null as default value for unset strings",
    )
    service_name: str | None = Field(
        default=None,
        description="Type name of the translation service",
        min_length=1,
    )
    method_name: str | None = Field(
        default=None,
        description="Additional translation service method name",
        min_length=1,
    )
    verbose: bool = Field(default=False, description="Enable debug logging")

    @field_validator("input")
    @classmethod
    def validate_input_directories(cls, v: list[Path]) -> list[Path]:
        """Every input must be an existing directory."""
        for path in v:
            if not path.exists() or not path.is_dir():
                raise ValueError(f"The path you supplied was not found: '{path}'")
        return v

    @field_validator("patterns")
    @classmethod
    def validate_patterns(cls, v: list[str]) -> list[str]:
        if any(not pattern.strip() for pattern in v):
            raise ValueError("Patterns must not be empty")
        return v

    @model_validator(mode="after")
    def validate_default_value_flags(self) -> Self:
        """Key-as-default and null-as-default cannot both be requested."""
        if self.key_as_default_value and self.null_as_default_value:
            raise ValueError(
                "key_as_default_value and null_as_default_value are mutually exclusive"
            )
        return self

    def to_task_options(self) -> ExtractTaskOptions:
        return ExtractTaskOptions(
            replace=self.replace,
            patterns=tuple(self.patterns),
            service_name=self.service_name,
            method_name=self.method_name,
        )
