"""Merge behaviour settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import StrEnum

from .errors import ConfigurationError

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class SplitIdentity(StrEnum):
    """How records cut out of an existing price get their id."""

    REUSE = "reuse"
    FRESH = "fresh"


@dataclass(frozen=True, slots=True)
class MergeConfig:
    split_identity: SplitIdentity = SplitIdentity.REUSE
    validate: bool = True


def get_merge_config() -> MergeConfig:
    split_identity = _split_identity_from_env(os.getenv("PRICEMERGE_SPLIT_IDENTITY"))
    validate = _flag_from_env("PRICEMERGE_VALIDATE", os.getenv("PRICEMERGE_VALIDATE"), True)
    return MergeConfig(split_identity=split_identity, validate=validate)


def _split_identity_from_env(value: str | None) -> SplitIdentity:
    if value is None or not value.strip():
        return SplitIdentity.REUSE
    try:
        return SplitIdentity(value.strip().lower())
    except ValueError as exc:
        choices = ", ".join(member.value for member in SplitIdentity)
        raise ConfigurationError(
            f"Invalid PRICEMERGE_SPLIT_IDENTITY {value!r}; expected one of: {choices}"
        ) from exc


def _flag_from_env(name: str, value: str | None, default: bool) -> bool:
    if value is None or not value.strip():
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean for {name}: {value!r}")
