"""Tests for the flag table (core/options.py).

Every entry is exercised on its own: it must change exactly its field,
be idempotent under double application and reject malformed numbers.
"""

from __future__ import annotations

import argparse
from dataclasses import fields

import pytest

from hw_client.core.models import AddressType, Config, OutputFormat
from hw_client.core.options import OPTIONS, OptionSpec, apply_transforms, non_negative_int

OPTION_BY_LONG: dict[str, OptionSpec] = {spec.long: spec for spec in OPTIONS}

# (long flag, raw value, field, expected value)
FLAG_EFFECTS: list[tuple[str, str | None, str, object]] = [
    ("--keyring", "savings", "keyring", "savings"),
    ("--count", "12", "count", 12),
    ("--minconf", "6", "min_conf", 6),
    ("--fee", "2500", "fee", 2500),
    ("--rcptfee", None, "rcpt_fee", True),
    ("--nosig", None, "sign_tx", False),
    ("--internal", None, "addr_type", AddressType.INTERNAL),
    ("--offline", None, "offline", True),
    ("--revpage", None, "reverse_paging", True),
    ("--pass", "correct horse", "passphrase", "correct horse"),
    ("--json", None, "output_format", OutputFormat.JSON),
    ("--yaml", None, "output_format", OutputFormat.YAML),
    ("--socket", "tcp://10.0.0.2:4000", "connect", "tcp://10.0.0.2:4000"),
    ("--detach", None, "detach", True),
    ("--testnet", None, "testnet", True),
    ("--config", "other.yml", "config_file", "other.yml"),
    ("--workdir", "/srv/wallet", "work_dir", "/srv/wallet"),
    ("--verbose", None, "verbose", True),
]


# ---------------------------------------------------------------------------
# Table shape
# ---------------------------------------------------------------------------

class TestOptionTable:
    def test_effects_cover_every_option(self) -> None:
        assert {case[0] for case in FLAG_EFFECTS} == set(OPTION_BY_LONG)

    def test_short_names_are_unique(self) -> None:
        shorts = [spec.short for spec in OPTIONS]
        assert len(set(shorts)) == len(shorts)

    def test_fields_exist_on_config(self) -> None:
        names = {fld.name for fld in fields(Config)}
        assert all(spec.field in names for spec in OPTIONS)

    def test_value_flags_have_metavar(self) -> None:
        value_flags = {spec.long for spec in OPTIONS if spec.takes_value}
        assert value_flags == {
            "--keyring", "--count", "--minconf", "--fee", "--pass",
            "--socket", "--config", "--workdir",
        }

    def test_help_mentions_defaults(self) -> None:
        assert OPTION_BY_LONG["--count"].help == "Items per page. Default: 5"
        assert OPTION_BY_LONG["--fee"].help == "Fee per kilobyte. Default: 10000"
        assert OPTION_BY_LONG["--nosig"].help == "Do not sign. Default: False"


# ---------------------------------------------------------------------------
# Individual transformations
# ---------------------------------------------------------------------------

class TestTransforms:
    @pytest.mark.parametrize(("flag", "raw", "field", "expected"), FLAG_EFFECTS)
    def test_sets_only_its_field(
        self, flag: str, raw: str | None, field: str, expected: object,
    ) -> None:
        before = Config()
        after = OPTION_BY_LONG[flag].transform(raw)(before)
        assert getattr(after, field) == expected
        assert after.with_changes(**{field: getattr(before, field)}) == before

    @pytest.mark.parametrize(("flag", "raw", "field", "expected"), FLAG_EFFECTS)
    def test_idempotent(
        self, flag: str, raw: str | None, field: str, expected: object,
    ) -> None:
        transform = OPTION_BY_LONG[flag].transform(raw)
        once = transform(Config())
        assert transform(once) == once

    def test_value_flag_without_value_raises(self) -> None:
        with pytest.raises(ValueError, match="--keyring"):
            OPTION_BY_LONG["--keyring"].transform()

    def test_string_values_are_copied_verbatim(self) -> None:
        cfg = OPTION_BY_LONG["--socket"].transform("  not a uri ")(Config())
        assert cfg.connect == "  not a uri "

    def test_numeric_flag_rejects_text(self) -> None:
        with pytest.raises(argparse.ArgumentTypeError, match="invalid integer"):
            OPTION_BY_LONG["--count"].transform("ten")


class TestApplyTransforms:
    def test_empty_list_is_identity(self) -> None:
        assert apply_transforms(Config(), []) == Config()

    def test_applied_in_order(self) -> None:
        transforms = [
            OPTION_BY_LONG["--json"].transform(),
            OPTION_BY_LONG["--yaml"].transform(),
        ]
        assert apply_transforms(Config(), transforms).output_format is OutputFormat.YAML
        transforms.reverse()
        assert apply_transforms(Config(), transforms).output_format is OutputFormat.JSON

    def test_later_value_wins(self) -> None:
        transforms = [
            OPTION_BY_LONG["--count"].transform("1"),
            OPTION_BY_LONG["--count"].transform("2"),
        ]
        assert apply_transforms(Config(), transforms).count == 2


# ---------------------------------------------------------------------------
# non_negative_int
# ---------------------------------------------------------------------------

class TestNonNegativeInt:
    @pytest.mark.parametrize(("raw", "expected"), [("0", 0), ("42", 42), (" 7 ", 7)])
    def test_valid(self, raw: str, expected: int) -> None:
        assert non_negative_int(raw) == expected

    @pytest.mark.parametrize("raw", ["", "abc", "1.5", "0x10"])
    def test_not_a_number(self, raw: str) -> None:
        with pytest.raises(argparse.ArgumentTypeError, match="invalid integer"):
            non_negative_int(raw)

    def test_negative(self) -> None:
        with pytest.raises(argparse.ArgumentTypeError, match="negative"):
            non_negative_int("-3")
