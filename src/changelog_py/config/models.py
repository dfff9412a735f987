"""Configuration models.

Settings live under [tool.changelog-py] in pyproject.toml. Every field has
a default, so a project without the table still gets a working config.
"""

from __future__ import annotations

import codecs
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ChangelogConfig(BaseModel):
    """Settings for locating, reading and writing the changelog file."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    path: Path = Field(
        default=Path("CHANGELOG.md"),
        description="Changelog location relative to the project root",
    )
    encoding: str = Field(default="utf-8", description="File encoding")
    trailing_newline: bool = Field(
        default=True,
        alias="trailing-newline",
        description="Terminate the saved file with a newline",
    )

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value}") from e
        return value
