"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, digitgroup.toml only contains
overrides. A ``[presets.<name>]`` table lists just the fields it changes.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import (
    BaseModel,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
    model_validator,
)

from digitgroup.domain.errors import InvalidConfig

SIGN_CHARS = frozenset("+-")


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic ValidationError into ``field: message`` pairs."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "config"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


class GroupingConfig(BaseModel):
    """How to group one numeral. Frozen; invalid values raise InvalidConfig.

    Attributes:
        decimal_mark: Emitted between the integer and fractional groups.
        delimiter: Emitted between groups on either side.
        int_group_size: Integer digits per group, counted from the units digit.
        frac_group_size: Fractional digits per group, counted from the mark.
        compact_remainder: Merge a short remainder group into its neighbour.
        group_fraction: Group the fractional digits at all.
        int_first_group_size: Size of the integer group next to the mark
            (Indian grouping uses 3 here with ``int_group_size=2``).
    """

    model_config = {"frozen": True, "extra": "forbid", "strict": True}

    decimal_mark: str = Field(default=".", min_length=1, max_length=1)
    delimiter: str = Field(default=",", min_length=1, max_length=1)
    int_group_size: int = Field(default=3, ge=1)
    frac_group_size: int = Field(default=3, ge=1)
    compact_remainder: bool = False
    group_fraction: bool = True
    int_first_group_size: int | None = Field(default=None, ge=1)

    @field_validator("decimal_mark", "delimiter")
    @classmethod
    def _not_digit_or_sign(cls, value: str) -> str:
        if value.isdigit() or value in SIGN_CHARS:
            msg = f"must not be a digit or sign character, got {value!r}"
            raise ValueError(msg)
        return value

    @model_validator(mode="wrap")
    @classmethod
    def _raise_invalid_config(
        cls, data: Any, handler: ValidatorFunctionWrapHandler
    ) -> GroupingConfig:
        try:
            config = handler(data)
        except ValidationError as exc:
            raise InvalidConfig(describe_validation_error(exc)) from exc
        if config.decimal_mark == config.delimiter:
            msg = f"decimal_mark and delimiter must differ, both are {config.delimiter!r}"
            raise InvalidConfig(msg)
        return config


BUILTIN_PRESETS: Mapping[str, GroupingConfig] = MappingProxyType(
    {
        "commas": GroupingConfig(group_fraction=False),
        "si": GroupingConfig(delimiter=" "),
        "india": GroupingConfig(int_group_size=2, int_first_group_size=3, group_fraction=False),
        "china": GroupingConfig(int_group_size=4, group_fraction=False),
        "europe": GroupingConfig(decimal_mark=",", delimiter=".", group_fraction=False),
    }
)


class PresetsConfig(BaseModel):
    """Root configuration: named presets, built-ins merged with file overrides."""

    model_config = {"frozen": True}

    presets: Mapping[str, GroupingConfig] = Field(default_factory=lambda: BUILTIN_PRESETS)

    @field_validator("presets")
    @classmethod
    def _read_only(cls, value: Mapping[str, GroupingConfig]) -> Mapping[str, GroupingConfig]:
        return MappingProxyType(dict(value))

    @property
    def names(self) -> list[str]:
        return sorted(self.presets)

    def get(self, name: str) -> GroupingConfig:
        """Look up a preset by name, raising InvalidConfig if it is unknown."""
        try:
            return self.presets[name]
        except KeyError:
            known = ", ".join(self.names)
            msg = f"Unknown preset {name!r} (known: {known})"
            raise InvalidConfig(msg) from None
