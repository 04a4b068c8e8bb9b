"""Hasher configuration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
    model_validator,
)

from stringhasher.core.types import DigestAlgorithm
from stringhasher.exceptions import (
    HashLengthInvalid,
    IterationsTooLow,
    SaltExceedsHalfOfHash,
    SaltLengthInvalid,
    SaltLengthOdd,
    SaltPlusSignatureExceedsTwoThirds,
    UnsupportedAlgorithm,
)

MIN_ITERATIONS = 1000


class HasherConfig(BaseModel):
    """Immutable, validated settings for a :class:`~stringhasher.StringHasher`.

    Lengths are counted in characters of the encoded string, so a salt of
    ``salt_length`` characters holds ``salt_length // 2`` random bytes.

    >>> HasherConfig(signature="hash512").derived_length
    89
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    signature: str = ""
    algorithm: DigestAlgorithm = Field(
        default=DigestAlgorithm.sha512,
        validation_alias=AliasChoices("algorithm", "algorythm"),
    )
    salt_length: int = Field(
        default=32,
        validation_alias=AliasChoices("salt_length", "saltLength"),
    )
    hash_length: int = Field(
        default=128,
        validation_alias=AliasChoices("hash_length", "hashLength"),
    )
    iterations: int = 100_000

    @field_validator("signature", mode="before")
    @classmethod
    def _trim_signature(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("algorithm", mode="before")
    @classmethod
    def _resolve_algorithm(cls, value: Any) -> DigestAlgorithm:
        if isinstance(value, DigestAlgorithm):
            return value
        resolved = DigestAlgorithm.parse(value) if isinstance(value, str) else None
        if resolved is None:
            raise UnsupportedAlgorithm(value, [a.value for a in DigestAlgorithm])
        return resolved

    @model_validator(mode="after")
    def _check_lengths(self) -> HasherConfig:
        # Order matters: callers see only the first violation.
        if self.salt_length <= 0:
            raise SaltLengthInvalid(self.salt_length)
        if self.hash_length <= 0:
            raise HashLengthInvalid(self.hash_length)
        if self.iterations < MIN_ITERATIONS:
            raise IterationsTooLow(self.iterations, MIN_ITERATIONS)
        if self.hash_length / 2 < self.salt_length:
            raise SaltExceedsHalfOfHash(self.salt_length, self.hash_length)
        if self.hash_length * 2 / 3 < self.salt_length + len(self.signature):
            raise SaltPlusSignatureExceedsTwoThirds(
                self.salt_length, len(self.signature), self.hash_length
            )
        if self.salt_length % 2:
            raise SaltLengthOdd(self.salt_length)
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def derived_length(self) -> int:
        """Characters left for the derived key between signature and salt."""
        return self.hash_length - self.salt_length - len(self.signature)


def validate_config(raw_options: Mapping[str, Any] | None = None, **overrides: Any) -> HasherConfig:
    """Build a :class:`HasherConfig` from raw options.

    Keyword *overrides* win over *raw_options*; ``None`` values are treated
    as absent so the defaults apply. Raises a single
    :class:`~stringhasher.exceptions.ConfigError` subclass on the first
    violated constraint.
    """
    options = _by_field_name(raw_options or {})
    options.update(_by_field_name(overrides))
    return HasherConfig.model_validate(options)


def _by_field_name(options: Mapping[str, Any]) -> dict[str, Any]:
    """Rename alias keys (``saltLength``, ``algorythm``, ...) to field names."""
    names: dict[str, str] = {}
    for name, info in HasherConfig.model_fields.items():
        for choice in getattr(info.validation_alias, "choices", ()):
            names[choice] = name
    return {names.get(key, key): value for key, value in options.items() if value is not None}
