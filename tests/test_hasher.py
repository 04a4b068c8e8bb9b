"""Tests for StringHasher (generate / validate)."""

import logging

import pytest

from stringhasher import (
    DerivationFailed,
    DigestAlgorithm,
    HasherConfig,
    IterationsTooLow,
    SaltGenerationFailed,
    StringHasher,
)
from stringhasher.core import codec


class BrokenSaltSource:
    def token(self, nbytes: int) -> bytes:
        raise OSError("entropy pool unavailable")


class FixedSaltSource:
    def __init__(self, salt: bytes):
        self.salt = salt

    def token(self, nbytes: int) -> bytes:
        return self.salt[:nbytes]


class BrokenKDF:
    def derive(self, value, salt, *, iterations, algorithm, length):
        raise RuntimeError("kdf exploded")


PASSWORD = "qwe123asd456!@#"


# ------------------------------------------------------------------
# Construction
# ------------------------------------------------------------------

class TestConstruction:
    def test_from_options(self):
        hasher = StringHasher(signature="x", iterations=2000)
        assert hasher.signature == "x"
        assert hasher.iterations == 2000
        assert hasher.algorithm is DigestAlgorithm.sha512

    def test_from_mapping(self):
        hasher = StringHasher({"saltLength": 16, "hashLength": 64, "iterations": 1000})
        assert hasher.salt_length == 16
        assert hasher.hash_length == 64
        assert hasher.derived_length == 48

    def test_from_config(self, config: HasherConfig):
        hasher = StringHasher(config)
        assert hasher.config is config

    def test_config_with_overrides_revalidates(self, config: HasherConfig):
        hasher = StringHasher(config, iterations=5000)
        assert hasher.iterations == 5000
        assert hasher.signature == "hash512"
        with pytest.raises(IterationsTooLow):
            StringHasher(config, iterations=10)

    def test_config_with_alias_overrides(self):
        hasher = StringHasher(HasherConfig(iterations=1000), hashLength=64, saltLength=16)
        assert hasher.hash_length == 64
        assert hasher.salt_length == 16
        assert len(hasher.generate("pw")) == 64

    def test_invalid_config_prevents_hasher(self):
        with pytest.raises(IterationsTooLow):
            StringHasher(iterations=999)


# ------------------------------------------------------------------
# Generate
# ------------------------------------------------------------------

class TestGenerate:
    def test_length_and_prefix(self, hasher: StringHasher):
        h = hasher.generate(PASSWORD)
        assert len(h) == 128
        assert h.startswith("hash512")

    def test_lowercase_hex_body(self, hasher: StringHasher):
        body = hasher.generate(PASSWORD)[7:]
        assert all(c in "0123456789abcdef" for c in body)

    def test_different_salts(self, hasher: StringHasher):
        h1 = hasher.generate(PASSWORD)
        h2 = hasher.generate(PASSWORD)
        assert h1 != h2
        assert hasher.validate(PASSWORD, h1)
        assert hasher.validate(PASSWORD, h2)

    def test_deterministic_with_fixed_salt(self, config: HasherConfig):
        salt = bytes(range(16))
        hasher = StringHasher(config, salt_source=FixedSaltSource(salt))
        h1 = hasher.generate(PASSWORD)
        assert h1 == hasher.generate(PASSWORD)
        assert h1.endswith(salt.hex())

    def test_salt_failure_wraps_cause(self, config: HasherConfig):
        hasher = StringHasher(config, salt_source=BrokenSaltSource())
        with pytest.raises(SaltGenerationFailed) as exc:
            hasher.generate(PASSWORD)
        assert isinstance(exc.value.inner, OSError)
        assert exc.value.__cause__ is exc.value.inner

    def test_derivation_failure_wraps_cause(self, config: HasherConfig):
        hasher = StringHasher(config, kdf=BrokenKDF())
        with pytest.raises(DerivationFailed) as exc:
            hasher.generate(PASSWORD)
        assert isinstance(exc.value.inner, RuntimeError)

    def test_failure_is_logged(self, config: HasherConfig, caplog):
        hasher = StringHasher(config, salt_source=BrokenSaltSource())
        with caplog.at_level(logging.WARNING, logger="stringhasher.hasher"):
            with pytest.raises(SaltGenerationFailed):
                hasher.generate(PASSWORD)
        assert "Salt generation failed" in caplog.text


# ------------------------------------------------------------------
# Validate
# ------------------------------------------------------------------

class TestValidate:
    def test_roundtrip(self, hasher: StringHasher):
        assert hasher.validate(PASSWORD, hasher.generate(PASSWORD))

    def test_wrong_value(self, hasher: StringHasher):
        assert not hasher.validate("wrong", hasher.generate(PASSWORD))

    def test_empty_value(self, hasher: StringHasher):
        assert not hasher.validate("", hasher.generate(PASSWORD))

    def test_wrong_length(self, hasher: StringHasher):
        h = hasher.generate(PASSWORD)
        assert not hasher.validate(PASSWORD, h[:-1])
        assert not hasher.validate(PASSWORD, h + "0")

    def test_signature_mismatch(self, hasher: StringHasher):
        h = hasher.generate(PASSWORD)
        assert not hasher.validate(PASSWORD, "HASH512" + h[7:])

    def test_non_hex_is_false(self, hasher: StringHasher):
        h = hasher.generate(PASSWORD)
        assert not hasher.validate(PASSWORD, h[:-2] + "zz")
        assert not hasher.validate(PASSWORD, h[:7] + "g" + h[8:])

    def test_whitespace_in_hash_is_false(self, hasher: StringHasher):
        h = hasher.generate(PASSWORD)
        assert not hasher.validate(PASSWORD, h[:-2] + " 0")
        assert not hasher.validate(PASSWORD, h[:7] + " " + h[8:])

    def test_uppercase_hex_still_matches(self, hasher: StringHasher):
        h = hasher.generate(PASSWORD)
        assert hasher.validate(PASSWORD, h[:7] + h[7:].upper())

    def test_tampered_last_nibble(self, hasher: StringHasher):
        h = hasher.generate(PASSWORD)
        end = 128 - 32 - 1
        flipped = "1" if h[end] == "0" else "0"
        assert not hasher.validate(PASSWORD, h[:end] + flipped + h[end + 1:])

    def test_fast_reject_skips_kdf(self, config: HasherConfig):
        hasher = StringHasher(config, kdf=BrokenKDF())
        assert not hasher.validate(PASSWORD, "short")
        assert not hasher.validate("", "x" * 128)
        assert not hasher.validate(PASSWORD, "y" * 128)

    def test_kdf_failure_raises(self, hasher: StringHasher, config: HasherConfig):
        h = hasher.generate(PASSWORD)
        broken = StringHasher(config, kdf=BrokenKDF())
        with pytest.raises(DerivationFailed):
            broken.validate(PASSWORD, h)

    def test_other_config_rejects(self, hasher: StringHasher):
        h = hasher.generate(PASSWORD)
        other = StringHasher(signature="hash512", iterations=2000)
        assert not other.validate(PASSWORD, h)

    def test_unicode_value(self, hasher: StringHasher):
        h = hasher.generate("pässwörd ✓")
        assert hasher.validate("pässwörd ✓", h)
        assert not hasher.validate("passwörd ✓", h)


# ------------------------------------------------------------------
# Algorithms & layouts
# ------------------------------------------------------------------

class TestConfigurations:
    @pytest.mark.parametrize("algorithm", list(DigestAlgorithm))
    def test_each_algorithm(self, algorithm: DigestAlgorithm):
        hasher = StringHasher(algorithm=algorithm, iterations=1000)
        h = hasher.generate(PASSWORD)
        assert hasher.validate(PASSWORD, h)
        assert not hasher.validate(PASSWORD + "x", h)

    @pytest.mark.parametrize(
        "options",
        [
            {"salt_length": 2, "hash_length": 4},
            {"salt_length": 16, "hash_length": 33, "signature": "ab"},
            {"salt_length": 64, "hash_length": 128},
            {"salt_length": 32, "hash_length": 512, "signature": "$pbkdf2$"},
        ],
    )
    def test_layouts(self, options):
        hasher = StringHasher(iterations=1000, **options)
        h = hasher.generate(PASSWORD)
        assert len(h) == options["hash_length"]
        assert hasher.validate(PASSWORD, h)

    def test_documented_scenario(self):
        hasher = StringHasher(
            signature="hash512",
            algorithm="sha512",
            salt_length=32,
            hash_length=128,
            iterations=100_000,
        )
        assert hasher.derived_length == 89
        h = hasher.generate(PASSWORD)
        assert len(h) == 128
        assert h.startswith("hash512")
        assert hasher.validate(PASSWORD, h)

    def test_encoded_segments_match_kdf(self, config: HasherConfig):
        salt = bytes(range(16))
        hasher = StringHasher(config, salt_source=FixedSaltSource(salt))
        h = hasher.generate(PASSWORD)
        decoded = codec.decode(config, h)
        assert decoded is not None
        assert decoded.salt_hex == salt.hex()
        assert len(decoded.derived_hex) == 89
