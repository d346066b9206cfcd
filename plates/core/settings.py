"""Settings read from ``PLATES_*`` environment variables."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

EchoMode = Literal["always", "on_error", "never"]


class PlatesSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PLATES_", case_sensitive=False)

    templates_dir: Path = Field(default_factory=lambda: Path.home() / ".plates")
    extension: str = ".plate"
    verbose: bool = True
    echo_output: EchoMode = "on_error"
    file_mode: int = 0o644

    @field_validator("file_mode", mode="before")
    @classmethod
    def _parse_octal_mode(cls, value: Any) -> Any:
        # Modes given as text are octal, as for chmod.
        if isinstance(value, str):
            try:
                return int(value.strip(), 8)
            except ValueError as e:
                raise ValueError(f"Invalid octal mode: {value!r}") from e
        return value
