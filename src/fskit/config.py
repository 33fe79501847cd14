"""Configuration for fskit operations."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

# Defaults for newly created directories and files
DEFAULT_DIR_PERMS = 0o755
DEFAULT_FILE_PERMS = 0o644


def parse_perms(value: str) -> int:
    """Parse an octal permission string such as "755" or "0o755".

    Args:
        value: Octal digits, optionally prefixed with "0o".

    Returns:
        Permission bits as an integer.

    Raises:
        ValueError: If value is not a valid octal number.
    """
    text = value.strip().lower()
    if text.startswith("0o"):
        text = text[2:]
    return int(text, 8)


class FsConfig(BaseModel):
    """Immutable settings passed to fskit operations.

    Attributes:
        dir_perms: Permission bits for directories created by helpers.
        file_perms: Permission bits for files created by helpers.
        link_files: Whether tree and file copies try a hard link first.
        editor: Editor command; falls back to $VISUAL / $EDITOR when None.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    dir_perms: int = Field(default=DEFAULT_DIR_PERMS, alias="dirPerms")
    file_perms: int = Field(default=DEFAULT_FILE_PERMS, alias="filePerms")
    link_files: bool = Field(default=True, alias="linkFiles")
    editor: str | None = None

    @field_validator("dir_perms", "file_perms", mode="before")
    @classmethod
    def _coerce_perms(cls, value: object) -> object:
        # JSON has no octal literals, so "755" strings are accepted too.
        if isinstance(value, str):
            return parse_perms(value)
        return value

    @field_validator("dir_perms", "file_perms")
    @classmethod
    def _check_perms(cls, value: int) -> int:
        if not 0 <= value <= 0o7777:
            raise ValueError(f"permission bits out of range: {oct(value)}")
        return value

    @classmethod
    def default(cls) -> FsConfig:
        """Create a configuration with all defaults."""
        return cls()

    @classmethod
    def from_file(cls, path: Path) -> FsConfig:
        """Load configuration from a JSON file.

        Args:
            path: Path to the JSON file.

        Returns:
            Parsed FsConfig.

        Raises:
            FileNotFoundError: If file doesn't exist.
            ValueError: If the JSON is invalid or fails validation.
        """
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            data = json.loads(path.read_text())
            return cls.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as e:
            raise ValueError(f"Invalid config file {path}: {e}") from e
