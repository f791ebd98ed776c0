import re
from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from entrypoint_lister.components.content_types import ContentTypeRule, build_rules
from entrypoint_lister.components.manifest import DEFAULT_OUTPUT_FILENAME
from entrypoint_lister.components.variants import DEFAULT_VARIANTS
from entrypoint_lister.core.entities import IDENTITY_VARIANT

# Accepted names per field; fileTypes/additionalFileTypes are the webpack plugin's names
CONTENT_TYPES_NAMES = ("contentTypes", "fileTypes", "content_types")
ADDITIONAL_CONTENT_TYPES_NAMES = (
    "additionalContentTypes",
    "additionalFileTypes",
    "contentTypePatterns",
    "additional_content_types",
)


class SuffixPattern(BaseModel):
    suffix: str = Field(min_length=1)

    model_config = ConfigDict(extra="forbid", frozen=True)


ContentTypePattern = str | SuffixPattern


class ListerOptions(BaseModel):
    """
    Options accepted by the entrypoint lister.

    Field names follow Python style; the camelCase names used by the
    webpack plugin are accepted as aliases.
    """

    output_dir: str | None = Field(default=None, alias="outputDir")
    output_filename: str = Field(
        default=DEFAULT_OUTPUT_FILENAME, alias="outputFilename", min_length=1
    )
    content_types: dict[str, ContentTypePattern] | None = Field(
        default=None, validation_alias=AliasChoices(*CONTENT_TYPES_NAMES)
    )
    additional_content_types: dict[str, ContentTypePattern] = Field(
        default_factory=dict,
        validation_alias=AliasChoices(*ADDITIONAL_CONTENT_TYPES_NAMES),
    )
    variants: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_VARIANTS))

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def check_single_name(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            for names in (CONTENT_TYPES_NAMES, ADDITIONAL_CONTENT_TYPES_NAMES):
                given = [name for name in names if name in data]
                if len(given) > 1:
                    raise ValueError(f"use only one of {', '.join(given)}")
        return data

    @field_validator("content_types", "additional_content_types")
    @classmethod
    def check_patterns(
        cls, value: dict[str, ContentTypePattern] | None
    ) -> dict[str, ContentTypePattern] | None:
        for content_type, pattern in (value or {}).items():
            if isinstance(pattern, str):
                try:
                    re.compile(pattern)
                except re.error as e:
                    raise ValueError(f"invalid pattern for {content_type!r}: {e}") from e
        return value

    @field_validator("variants")
    @classmethod
    def check_variants(cls, value: dict[str, str]) -> dict[str, str]:
        for name, suffix in value.items():
            if name == IDENTITY_VARIANT:
                raise ValueError(f"{IDENTITY_VARIANT!r} is reserved for the uncompressed file")
            if not suffix:
                raise ValueError(f"variant {name!r} needs a non-empty suffix")
        return value

    def content_type_rules(self) -> list[ContentTypeRule]:
        return build_rules(self.content_types, self.additional_content_types)
