"""Validated screen settings."""

from __future__ import annotations

import os
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tw_common.config.env import parse_int_env
from tw_common.errors import ConfigurationError, wrap_error


class ScreenSettings(BaseModel):
    """Dimensions and fill character of the host screen."""

    columns: int = Field(default=80, ge=1)
    rows: int = Field(default=24, ge=1)
    fill_char: str = Field(default=" ", min_length=1, max_length=1)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def build(cls, **values: object) -> "ScreenSettings":
        """Validate values, raising ConfigurationError instead of ValidationError."""
        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            raise wrap_error(
                ConfigurationError,
                "Invalid screen settings",
                context={"values": values, "errors": exc.errors(include_url=False)},
                cause=exc,
            ) from exc

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ScreenSettings":
        """Read TW_SCREEN_COLUMNS / TW_SCREEN_ROWS, falling back to defaults."""
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        for key, name in (("columns", "TW_SCREEN_COLUMNS"), ("rows", "TW_SCREEN_ROWS")):
            raw = env.get(name)
            if raw is None:
                continue
            parsed = parse_int_env(raw)
            if parsed is None:
                raise ConfigurationError(
                    f"{name} must be an integer", context={name: raw}
                )
            values[key] = parsed
        return cls.build(**values)
