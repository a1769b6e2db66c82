"""User settings for filekit.

Settings are read from the ``[storage]`` table of the TOML file returned
by :func:`filekit.core.paths.get_settings_path`. Every field is optional;
a missing file yields the defaults.
"""

import codecs
import logging
import tomllib
from pathlib import Path
from typing import Annotated, Any, cast

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from filekit.core.paths import get_settings_path

logger = logging.getLogger(__name__)


class FilekitSettings(BaseModel):
    """Settings consumed by storage backends.

    Attributes:
        hidden_prefix: Leading marker identifying hidden entries.
        encoding: Default text encoding for string reads and writes.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    hidden_prefix: Annotated[
        str,
        Field(min_length=1, description="Leading marker of hidden entries"),
    ] = "."
    encoding: Annotated[str, Field(description="Default text encoding")] = "utf-8"

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Validate that the encoding names a codec Python knows."""
        try:
            codecs.lookup(v)
        except LookupError:
            msg = f"unknown encoding '{v}'"
            raise ValueError(msg) from None
        return v


def _load_toml_table(path: Path) -> dict[str, Any] | None:
    """Load the storage table from a TOML file.

    Args:
        path: Path to the TOML file.

    Returns:
        The ``[storage]`` table, or None if the file is missing or unusable.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return None
    except tomllib.TOMLDecodeError as e:
        logger.warning("Failed to parse TOML file %s: %s", path, e)
        return None
    except OSError as e:
        logger.warning("Failed to read settings file %s: %s", path, e)
        return None

    table: object = data.get("storage", {})
    if not isinstance(table, dict):
        logger.warning("Invalid 'storage' section in %s", path)
        return None
    return cast(dict[str, Any], table)


def load_settings(path: Path | None = None) -> FilekitSettings:
    """Load settings with user override support.

    Args:
        path: Settings file to read. Defaults to the XDG settings path.

    Returns:
        Validated settings, or the defaults if the file is absent or invalid.
    """
    settings_path = path if path is not None else get_settings_path()
    table = _load_toml_table(settings_path)
    if table is None:
        return FilekitSettings()

    try:
        settings = FilekitSettings(**table)
    except ValidationError as e:
        logger.warning("Settings validation failed, using defaults: %s", e)
        return FilekitSettings()

    logger.debug("Loaded settings from %s", settings_path)
    return settings
